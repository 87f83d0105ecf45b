"""Command-line entry point: fetch the endpoint and dump the body to stdout."""
from __future__ import annotations
import sys

from postfetch.clients.http_client import HttpClient
from postfetch.config.settings import Settings
from postfetch.exceptions.custom_exceptions import PostFetchError
from postfetch.services.fetch_service import fetch_data
from postfetch.utils.constants import ERROR_FETCH, FETCHED_OK
from postfetch.utils.logger import configure_logging, get_logger

log = get_logger(__name__)

def main() -> int:
    """Run one fetch with the real transport. Returns the process exit code."""
    settings = Settings.from_env()
    configure_logging(settings)

    try:
        data = fetch_data(HttpClient())
    except PostFetchError as e:
        log.error("%s: %s", ERROR_FETCH, e)
        return 1

    out = sys.stdout.buffer
    out.write(FETCHED_OK.encode() + b"\n")
    out.write(data + b"\n")
    out.flush()
    return 0

if __name__ == "__main__":
    sys.exit(main())
