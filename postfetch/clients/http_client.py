"""Transport layer: a one-method GET capability and its implementations."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import IO, Callable, Protocol
import requests

@dataclass
class Response:
    """Status code plus a once-consumable body stream the caller must close."""
    status_code: int
    body: IO[bytes]

class Transport(Protocol):
    """Anything that can GET a URL and hand back a Response."""

    def get(self, url: str) -> Response:
        ...

@dataclass
class HttpClient:
    """Real transport backed by requests with default settings."""
    session: requests.Session = field(default_factory=requests.Session)

    def get(self, url: str) -> Response:
        """GET a URL without reading the body; raises requests exceptions on failure."""
        resp = self.session.get(url, stream=True)
        # Undo gzip/deflate so readers see the same bytes as resp.content would.
        resp.raw.decode_content = True
        return Response(status_code=resp.status_code, body=resp.raw)

@dataclass
class FuncTransport:
    """Transport that delegates to a caller-supplied function (canned responses in tests)."""
    func: Callable[[str], Response]

    def get(self, url: str) -> Response:
        return self.func(url)
