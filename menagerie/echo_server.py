"""A TCP server that echoes back everything each client sends."""

from __future__ import annotations

import socket
import socketserver
import sys
from typing import Sequence, Tuple

DEFAULT_ADDRESS = "127.0.0.1:17007"
_CHUNK = 8192


def _format_addr(host: str, port: int) -> str:
    return f"[{host}]:{port}" if ":" in host else f"{host}:{port}"


class EchoHandler(socketserver.BaseRequestHandler):
    """Send every byte received from the client straight back to it."""

    def handle(self) -> None:
        host, port = self.client_address[:2]
        print(f"connection received from {_format_addr(host, port)}")
        while True:
            data = self.request.recv(_CHUNK)
            if not data:
                break
            self.request.sendall(data)
        print("connection closed")


class _EchoServer(socketserver.ThreadingTCPServer):
    allow_reuse_address = True
    daemon_threads = True


class _EchoServer6(_EchoServer):
    address_family = socket.AF_INET6


def _parse_addr(addr: str) -> Tuple[str, int, bool]:
    host, sep, port_text = addr.rpartition(":")
    if not sep or not host or not port_text.isdigit():
        raise ValueError(f"invalid socket address: {addr!r}")
    port = int(port_text)
    if port > 65535:
        raise ValueError(f"invalid port in socket address: {addr!r}")
    ipv6 = host.startswith("[") and host.endswith("]")
    if ipv6:
        host = host[1:-1]
    return host, port, ipv6


def make_server(addr: str) -> socketserver.ThreadingTCPServer:
    """Bind an echo server to ``addr``, given as ``host:port``."""
    host, port, ipv6 = _parse_addr(addr)
    server_class = _EchoServer6 if ipv6 else _EchoServer
    return server_class((host, port), EchoHandler)


def echo_main(addr: str) -> None:
    """Accept connections forever, handling each one on its own thread."""
    with make_server(addr) as server:
        print(f"listening on {addr}")
        server.serve_forever()


def main(argv: Sequence[str] | None = None) -> int:
    """Serve on 127.0.0.1 port 17007 until interrupted."""
    try:
        echo_main(DEFAULT_ADDRESS)
    except OSError as err:
        print(f"error: {err}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())