"""Logging for jira-agile.

Library code only asks for loggers under the ``jira_agile`` tree and stays
silent until the application opts in with ``setup_logging()``, which attaches a
rotating log file and optionally the console to that tree.
"""

from __future__ import annotations

import logging
import os
import re
from logging.handlers import RotatingFileHandler
from pathlib import Path

ROOT_LOGGER = "jira_agile"

LOG_DIR_ENV = "JIRA_AGILE_LOG_DIR"
LOG_LEVEL_ENV = "JIRA_AGILE_LOG_LEVEL"

DEFAULT_LOG_DIR = "logs"
DEFAULT_LOG_FILE = "jira_agile.log"
DEFAULT_MAX_BYTES = 10 * 1024 * 1024  # 10MB
DEFAULT_BACKUP_COUNT = 5
DEFAULT_LOG_LEVEL = "INFO"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Credentials that can show up in request URLs, headers or error bodies
_REDACTIONS = [
    (re.compile(r"ATATT[A-Za-z0-9_\-=]+"), "[ATLASSIAN_TOKEN]"),
    (re.compile(r"Basic [A-Za-z0-9+/=]+"), "Basic [REDACTED]"),
    (re.compile(r"Bearer [a-zA-Z0-9._-]+"), "Bearer [REDACTED]"),
    (re.compile(r"token=[a-zA-Z0-9._-]+"), "token=[REDACTED]"),
    (re.compile(r"os_password=[^&\s]+"), "os_password=[REDACTED]"),
]

logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Get the logger of a package component.

    Args:
        name: Component name ('agile', 'transport'); the ``jira_agile.``
              prefix is added unless already present.
    """
    if not name.startswith(f"{ROOT_LOGGER}."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def _resolve_level(level: str | None) -> tuple[str, int]:
    name = level or os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    return name, getattr(logging, name.upper(), logging.INFO)


def _build_handlers(
    log_path: Path, max_bytes: int, backup_count: int, console: bool
) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [
        RotatingFileHandler(
            log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
        )
    ]
    if console:
        handlers.append(logging.StreamHandler())

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(
    log_dir: str | Path | None = None,
    log_file: str = DEFAULT_LOG_FILE,
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
    level: str | None = None,
    console: bool = True,
) -> logging.Logger:
    """Send jira_agile log records to a rotating file (and the console).

    Calling it again replaces the handlers installed by the previous call.

    Args:
        log_dir: Directory for the log file; JIRA_AGILE_LOG_DIR or 'logs' when None.
        log_file: Log file name.
        max_bytes: File size that triggers rotation.
        backup_count: Rotated files to keep.
        level: DEBUG, INFO, WARNING or ERROR; JIRA_AGILE_LOG_LEVEL or INFO when None.
        console: Also write to stderr.

    Returns:
        The ``jira_agile`` logger.
    """
    directory = Path(log_dir or os.environ.get(LOG_DIR_ENV, DEFAULT_LOG_DIR))
    directory.mkdir(parents=True, exist_ok=True)
    level_name, log_level = _resolve_level(level)

    root = logging.getLogger(ROOT_LOGGER)
    for handler in list(root.handlers):
        handler.close()
        root.removeHandler(handler)

    log_path = directory / log_file
    for handler in _build_handlers(log_path, max_bytes, backup_count, console):
        handler.setLevel(log_level)
        root.addHandler(handler)
    root.setLevel(log_level)

    root.info("jira-agile logging initialized (level=%s, file=%s)", level_name, log_path)
    return root


def truncate_output(output: str, max_length: int = 5000) -> str:
    """Cut ``output`` to ``max_length`` characters, noting how much was dropped."""
    if len(output) <= max_length:
        return output
    return output[:max_length] + f"\n... [truncated, {len(output) - max_length} more chars]"


def sanitize_for_log(text: str) -> str:
    """Mask tracker credentials (API tokens, Basic/Bearer auth, password params) in ``text``."""
    for pattern, replacement in _REDACTIONS:
        text = pattern.sub(replacement, text)
    return text
