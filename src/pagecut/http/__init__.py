"""HTTP fetching for pagecut."""

from .client import DEFAULT_USER_AGENT, RequestsHttpClient
from .protocols import HttpClient, HttpResponse

__all__ = [
    "DEFAULT_USER_AGENT",
    "HttpClient",
    "HttpResponse",
    "RequestsHttpClient",
]
