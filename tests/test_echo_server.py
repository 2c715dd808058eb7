import socket
import threading

import pytest

from menagerie.echo_server import make_server


@pytest.fixture
def server():
    srv = make_server("127.0.0.1:0")
    thread = threading.Thread(target=srv.serve_forever, daemon=True)
    thread.start()
    yield srv
    srv.shutdown()
    srv.server_close()
    thread.join(timeout=5)


def _exchange(address, payload):
    with socket.create_connection(address, timeout=5) as conn:
        conn.sendall(payload)
        conn.shutdown(socket.SHUT_WR)
        chunks = []
        while True:
            chunk = conn.recv(1024)
            if not chunk:
                break
            chunks.append(chunk)
    return b"".join(chunks)


def test_echoes_bytes(server):
    payload = b"hello, echo"
    assert _exchange(server.server_address[:2], payload) == payload


def test_echoes_large_payload(server):
    payload = bytes(range(256)) * 200
    assert _exchange(server.server_address[:2], payload) == payload


def test_serves_clients_concurrently(server):
    address = server.server_address[:2]
    with socket.create_connection(address, timeout=5) as first:
        first.sendall(b"one")
        assert _exchange(address, b"two") == b"two"
        assert first.recv(16) == b"one"


def test_invalid_address():
    with pytest.raises(ValueError):
        make_server("no-port-here")