"""Fetch service: one GET against the endpoint, status gate, raw body out."""
from __future__ import annotations
from postfetch.clients.http_client import Transport
from postfetch.exceptions.custom_exceptions import BodyReadError, TransportError, UnexpectedStatusError
from postfetch.utils.constants import ENDPOINT, STATUS_OK
from postfetch.utils.logger import get_logger

log = get_logger(__name__)

def fetch_data(transport: Transport) -> bytes:
    """Fetch the endpoint through `transport` and return the body bytes untouched.

    Raises TransportError, UnexpectedStatusError or BodyReadError. Nothing is
    retried; the body stream is closed on every path once a response exists.
    """
    log.debug("GET %s", ENDPOINT)
    try:
        resp = transport.get(ENDPOINT)
    except Exception as e:
        raise TransportError(e) from e

    try:
        if resp.status_code != STATUS_OK:
            raise UnexpectedStatusError(resp.status_code)

        try:
            body = resp.body.read()
        except Exception as e:
            raise BodyReadError(e) from e
    finally:
        resp.body.close()

    log.debug("Fetched %d bytes from %s", len(body), ENDPOINT)
    return body
