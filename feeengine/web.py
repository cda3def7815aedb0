"""WSGI application exposing the service health endpoint."""

from __future__ import annotations

import json
from typing import Callable, Iterable

_HEALTH_BODY = json.dumps({"status": "ok", "version": "v1"}, separators=(",", ":")).encode()
_ALLOWED = "GET,HEAD"

StartResponse = Callable[..., object]
WsgiApp = Callable[[dict, StartResponse], Iterable[bytes]]


def _health(environ: dict, start_response: StartResponse) -> Iterable[bytes]:
    method = environ.get("REQUEST_METHOD", "GET").upper()
    if method not in ("GET", "HEAD"):
        start_response(
            "405 Method Not Allowed",
            [("Allow", _ALLOWED), ("Content-Length", "0")],
        )
        return [b""]
    start_response(
        "200 OK",
        [
            ("Content-Type", "application/json"),
            ("Content-Length", str(len(_HEALTH_BODY))),
        ],
    )
    return [b""] if method == "HEAD" else [_HEALTH_BODY]


def app() -> WsgiApp:
    """Build the WSGI application with its routes."""
    routes = {"/health": _health}

    def application(environ: dict, start_response: StartResponse) -> Iterable[bytes]:
        handler = routes.get(environ.get("PATH_INFO", "/") or "/")
        if handler is None:
            start_response("404 Not Found", [("Content-Length", "0")])
            return [b""]
        return handler(environ, start_response)

    return application