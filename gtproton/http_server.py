"""HTTPS endpoint that tells clients where the game server lives."""

from __future__ import annotations

import ssl
import threading
from collections.abc import Mapping, Sequence
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import parse_qsl, urlsplit

from gtproton.text_scanner import TextScanner

SERVER_DATA_PATH = "/growtopia/server_data.php"
REQUIRED_AGENT = "UbiServices_SDK"
GAME_PORT = 17091
_MAINTENANCE = (
    "Server is under maintenance. We will be back online shortly. "
    "Thank you for your patience!"
)
_META = "DIKHEAD"


def build_server_data(address: str, port: int = GAME_PORT) -> str:
    """Build the server_data response body."""
    scanner = (
        TextScanner()
        .add("server", address)
        .add("port", port)
        .add("type", 1)
        .add("#maint", _MAINTENANCE)
        .add("meta", _META)
    )
    return f"{scanner.raw()}\nRTENDMARKERBS1001\n\n"


def is_authorized(
    params: Mapping[str, str] | Sequence[tuple[str, str]], user_agent: str | None
) -> bool:
    """A request needs parameters and the client SDK's user agent."""
    return bool(params) and REQUIRED_AGENT in (user_agent or "")


def _make_handler(game_address: str) -> type[BaseHTTPRequestHandler]:
    class _Handler(BaseHTTPRequestHandler):
        def _reply(self, status: int, body: bytes = b"") -> None:
            self.send_response(status)
            if body:
                self.send_header("Content-Type", "text/html")
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            self.wfile.write(body)

        def do_POST(self) -> None:  # noqa: N802
            url = urlsplit(self.path)
            length = int(self.headers.get("Content-Length") or 0)
            body = self.rfile.read(length) if length > 0 else b""
            if url.path != SERVER_DATA_PATH:
                self._reply(404)
                return
            params = parse_qsl(url.query, keep_blank_values=True)
            content_type = self.headers.get("Content-Type") or ""
            if content_type.startswith("application/x-www-form-urlencoded"):
                params += parse_qsl(
                    body.decode("utf-8", errors="replace"), keep_blank_values=True
                )
            if not is_authorized(params, self.headers.get("User-Agent")):
                self._reply(403)
                return
            self._reply(200, build_server_data(game_address).encode("utf-8"))

        def log_message(self, format: str, *args: object) -> None:
            pass

    return _Handler


class HTTPServer:
    """Serves server_data over HTTPS (or plain HTTP when no certificate is given)."""

    def __init__(
        self,
        host: str,
        port: int,
        *,
        game_address: str = "127.0.0.1",
        certfile: str | None = "./cache/cert.pem",
        keyfile: str | None = "./cache/key.pem",
    ) -> None:
        self.host = host
        self.requested_port = port
        self.game_address = game_address
        self.certfile = certfile
        self.keyfile = keyfile
        self._server: ThreadingHTTPServer | None = None
        self._thread: threading.Thread | None = None

    @property
    def port(self) -> int:
        """The port actually bound, or the requested one before listening."""
        if self._server is None:
            return self.requested_port
        return self._server.server_address[1]

    @property
    def is_running(self) -> bool:
        return self._server is not None

    def listen(self) -> bool:
        """Bind and serve in a background thread; False if binding fails."""
        if self._server is not None:
            raise RuntimeError("server is already listening")
        print("starting HTTPServer, binding ports.")
        try:
            server = ThreadingHTTPServer(
                (self.host, self.requested_port), _make_handler(self.game_address)
            )
        except OSError:
            print(f" - failed to bind HTTPServer's port with {self.requested_port}.")
            return False
        if self.certfile:
            try:
                context = ssl.SSLContext(ssl.PROTOCOL_TLS_SERVER)
                context.load_cert_chain(self.certfile, self.keyfile)
                server.socket = context.wrap_socket(server.socket, server_side=True)
            except (OSError, ssl.SSLError):
                server.server_close()
                raise
        server.daemon_threads = True
        self._server = server
        self._thread = threading.Thread(target=server.serve_forever, daemon=True)
        self._thread.start()
        return True

    def stop(self) -> None:
        """Stop serving and release the port."""
        if self._server is None:
            return
        self._server.shutdown()
        self._server.server_close()
        if self._thread is not None:
            self._thread.join()
        self._server = None
        self._thread = None

    def __enter__(self) -> HTTPServer:
        if not self.listen():
            raise OSError(f"failed to bind port {self.requested_port}")
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()