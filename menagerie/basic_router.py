"""A minimal URL router that maps exact paths to callbacks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict


@dataclass
class Request:
    """An HTTP request as seen by the router."""

    url: str
    method: str = "GET"
    headers: Dict[str, str] = field(default_factory=dict)
    body: bytes = b""


@dataclass
class Response:
    """An HTTP response produced by a route callback."""

    code: int
    headers: Dict[str, str] = field(default_factory=dict)
    body: bytes = b""


Callback = Callable[[Request], Response]


def not_found_response() -> Response:
    """The response given for a URL with no route."""
    return Response(404, {}, b"<h1>Page not found</h1>")


class BasicRouter:
    """Dispatch requests to callbacks registered by exact URL."""

    def __init__(self) -> None:
        self.routes: Dict[str, Callback] = {}

    def add_route(self, url: str, callback: Callback) -> None:
        """Register ``callback`` for ``url``, replacing any earlier route."""
        self.routes[url] = callback

    def handle_request(self, request: Request) -> Response:
        """Run the callback for the request's URL, or answer 404."""
        callback = self.routes.get(request.url)
        if callback is None:
            return not_found_response()
        return callback(request)