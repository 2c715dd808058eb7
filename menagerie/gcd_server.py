"""A small web application that computes greatest common divisors from a form."""

from __future__ import annotations

import sys
from functools import reduce
from typing import Callable, Iterable, Sequence
from urllib.parse import parse_qs

from .basic_router import Response
from .gcd import _parse_u64, gcd

HTML = "text/html; charset=utf-8"
TEXT = "text/plain; charset=utf-8"

_FORM = """
        <title>GCD Calculator</title>
        <form action="/gcd" method="post">
          <input type="text" name="n"/>
          <input type="text" name="n"/>
          <button type="submit">Compute GCD</button>
        </form>
    """

_REASONS = {
    200: "OK",
    400: "Bad Request",
    404: "Not Found",
    500: "Internal Server Error",
}


def _reply(code: int, content_type: str, text: str) -> Response:
    return Response(code, {"Content-Type": content_type}, text.encode("utf-8"))


def _debug_str(text: str) -> str:
    escaped = (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


def handle_get_form() -> Response:
    """Return the page holding the input form."""
    return _reply(200, HTML, _FORM)


def handle_post_gcd(body: bytes | str) -> Response:
    """Compute the GCD of the ``n`` fields of a URL-encoded form body."""
    if isinstance(body, str):
        text = body
    else:
        try:
            text = bytes(body).decode("utf-8")
        except UnicodeDecodeError as exc:
            return _reply(400, TEXT, f"Error parsing form data: {exc}\n")
    if not text:
        return _reply(400, TEXT, "Error parsing form data: EmptyQuery\n")

    form = parse_qs(text, keep_blank_values=True)
    unparsed_numbers = form.get("n")
    if not unparsed_numbers:
        return _reply(400, TEXT, "form data has no 'n' parameter\n")

    numbers = []
    for unparsed in unparsed_numbers:
        try:
            numbers.append(_parse_u64(unparsed))
        except ValueError:
            return _reply(
                400,
                TEXT,
                f"Value for 'n' parameter not a number: {_debug_str(unparsed)}\n",
            )

    try:
        divisor = reduce(gcd, numbers)
    except ValueError:
        return _reply(500, TEXT, "Internal server error\n")

    return _reply(
        200,
        HTML,
        f"The greatest common divisor of the numbers {numbers} is <b>{divisor}</b>\n",
    )


def _read_body(environ: dict) -> bytes:
    try:
        length = int(environ.get("CONTENT_LENGTH") or 0)
    except ValueError:
        length = 0
    if length <= 0:
        return b""
    return environ["wsgi.input"].read(length)


def application(environ: dict, start_response: Callable) -> Iterable[bytes]:
    """WSGI entry point: ``GET /`` serves the form, ``POST /gcd`` answers it."""
    method = environ.get("REQUEST_METHOD", "GET").upper()
    path = environ.get("PATH_INFO") or "/"

    if path == "/" and method == "GET":
        response = handle_get_form()
    elif path == "/gcd" and method == "POST":
        response = handle_post_gcd(_read_body(environ))
    else:
        response = _reply(404, TEXT, "Not Found\n")

    status = f"{response.code} {_REASONS.get(response.code, '')}".rstrip()
    headers = list(response.headers.items())
    headers.append(("Content-Length", str(len(response.body))))
    start_response(status, headers)
    return [response.body]


def main(argv: Sequence[str] | None = None) -> int:
    """Serve the application on localhost port 3000 until interrupted."""
    from wsgiref.simple_server import make_server

    with make_server("localhost", 3000, application) as server:
        print("Serving on http://localhost:3000...")
        server.serve_forever()
    return 0


if __name__ == "__main__":
    sys.exit(main())