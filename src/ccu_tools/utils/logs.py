"""Diagnostic logging."""
import logging

import httpx
from rich.console import Console
from rich.logging import RichHandler

from ccu_tools.models.settings import env

log = logging.getLogger("ccu_tools")


def setup_logging(debug: bool | None = None) -> None:
    debug = env.debug if debug is None else debug
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=env.verbose, show_path=False)],
        force=True,
    )


def _log_request(request: httpx.Request) -> None:
    log.debug("> %s %s", request.method, request.url)
    for name, value in request.headers.items():
        if name.lower() == "authorization":
            value = "********"
        log.debug("> %s: %s", name, value)
    if request.content:
        log.debug("> %s", request.content.decode("utf-8", errors="replace"))


def _log_response(response: httpx.Response) -> None:
    log.debug("< %s %s", response.status_code, response.reason_phrase)
    for name, value in response.headers.items():
        log.debug("< %s: %s", name, value)


def http_event_hooks() -> dict[str, list]:
    """httpx event hooks that trace requests when debug is on."""
    if not env.debug:
        return {}
    return {"request": [_log_request], "response": [_log_response]}
