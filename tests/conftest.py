"""Shared fixtures: canned responses with body streams that record their use."""
from __future__ import annotations
import io

import pytest

from postfetch.clients.http_client import FuncTransport, Response


class TrackingBody(io.BytesIO):
    """BytesIO that counts reads and closes."""

    def __init__(self, data: bytes = b""):
        super().__init__(data)
        self.reads = 0
        self.closes = 0

    def read(self, *args):
        self.reads += 1
        return super().read(*args)

    def close(self):
        self.closes += 1
        super().close()


class FailingBody(TrackingBody):
    """Body whose read always fails partway."""

    def read(self, *args):
        self.reads += 1
        raise OSError("read error")


@pytest.fixture
def canned():
    """Build a FuncTransport returning a fixed status and body; records requested URLs."""

    def _make(status_code: int, body: TrackingBody):
        urls = []

        def _get(url: str) -> Response:
            urls.append(url)
            return Response(status_code=status_code, body=body)

        transport = FuncTransport(_get)
        transport.urls = urls
        return transport

    return _make
