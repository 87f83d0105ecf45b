"""Single-endpoint HTTP fetcher with an injectable transport."""
from __future__ import annotations

from postfetch.clients.http_client import FuncTransport, HttpClient, Response, Transport
from postfetch.exceptions.custom_exceptions import (
    BodyReadError,
    PostFetchError,
    TransportError,
    UnexpectedStatusError,
)
from postfetch.services.fetch_service import fetch_data
from postfetch.utils.constants import ENDPOINT

__all__ = [
    "ENDPOINT",
    "BodyReadError",
    "FuncTransport",
    "HttpClient",
    "PostFetchError",
    "Response",
    "Transport",
    "TransportError",
    "UnexpectedStatusError",
    "fetch_data",
]
