import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from dotplan.atoms.http import Download

PAYLOAD = b"\x89PNG fake image bytes"


class _Handler(BaseHTTPRequestHandler):
    def do_GET(self):
        if self.path == "/missing":
            status, body = 404, b"not found"
        else:
            status, body = 200, PAYLOAD
        self.send_response(status)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args):
        pass


@pytest.fixture
def server_url():
    server = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{server.server_address[1]}"
    finally:
        server.shutdown()
        server.server_close()


def test_it_can(tmp_path, server_url):
    to_file = tmp_path / "download"
    atom = Download(url=f"{server_url}/logo.png", to=to_file)

    assert atom.plan().should_run is True
    atom.execute()
    assert atom.plan().should_run is False
    assert to_file.read_bytes() == PAYLOAD


def test_error_status_body_is_saved(tmp_path, server_url):
    to_file = tmp_path / "download"
    Download(url=f"{server_url}/missing", to=to_file).execute()
    assert to_file.read_bytes() == b"not found"


def test_unreachable_url_raises(tmp_path):
    with pytest.raises(OSError):
        Download(url="http://127.0.0.1:1/nothing", to=tmp_path / "x").execute()


def test_display(tmp_path):
    atom = Download(url="http://example.com/a", to=tmp_path / "a")
    assert str(atom) == f"HttpDownload from http://example.com/a to {tmp_path / 'a'}"