"""Transport - HTTP collaborator used by the Agile query layer."""

from jira_agile.transport.client import HttpClient, HttpxClient
from jira_agile.transport.exceptions import TransportError
from jira_agile.transport.models import HttpResponse

__all__ = [
    "HttpClient",
    "HttpResponse",
    "HttpxClient",
    "TransportError",
]
