import io
import threading
import urllib.error
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from menagerie.http_get import http_get, main

BODY = b"fiddlehead ferns\n" * 100


class _Handler(BaseHTTPRequestHandler):
    def do_GET(self):
        if self.path == "/hello":
            self.send_response(200)
            self.send_header("Content-Length", str(len(BODY)))
            self.end_headers()
            self.wfile.write(BODY)
        else:
            self.send_error(404)

    def log_message(self, format, *args):
        pass


@pytest.fixture
def base_url():
    server = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    host, port = server.server_address[:2]
    yield f"http://{host}:{port}"
    server.shutdown()
    server.server_close()
    thread.join(timeout=5)


def test_http_get_copies_body(base_url):
    out = io.BytesIO()
    http_get(f"{base_url}/hello", out)
    assert out.getvalue() == BODY


def test_http_get_failure_status(base_url):
    with pytest.raises(urllib.error.HTTPError) as info:
        http_get(f"{base_url}/missing", io.BytesIO())
    assert info.value.code == 404


def test_main_writes_body(base_url, capsysbinary):
    assert main([f"{base_url}/hello"]) == 0
    assert capsysbinary.readouterr().out == BODY


def test_main_reports_status(base_url, capsysbinary):
    assert main([f"{base_url}/missing"]) == 1
    assert b"404" in capsysbinary.readouterr().err


def test_main_usage(capsys):
    assert main([]) == 1
    assert "usage: http-get URL" in capsys.readouterr().err


def test_main_bad_url(capsys):
    assert main(["not a url"]) == 1
    assert capsys.readouterr().err.startswith("error: ")