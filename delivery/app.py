"""HTTP entry point for the delivery service."""

from __future__ import annotations

import argparse
import logging
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import urlsplit

from delivery.config import CompositionRoot, Config, ConfigError

_log = logging.getLogger(__name__)

_NOT_FOUND_BODY = b'{"message":"Not Found"}\n'


class HealthHandler(BaseHTTPRequestHandler):
    """Serves the health endpoint."""

    server_version = "delivery"

    def do_GET(self) -> None:
        if urlsplit(self.path).path == "/health":
            self._send(HTTPStatus.OK, "text/plain; charset=UTF-8", b"Healthy")
        else:
            self._send(HTTPStatus.NOT_FOUND, "application/json", _NOT_FOUND_BODY)

    def log_message(self, format: str, *args) -> None:
        _log.debug("%s - %s", self.address_string(), format % args)

    def _send(self, status: HTTPStatus, content_type: str, body: bytes) -> None:
        self.send_response(status)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)


def make_server(
    root: CompositionRoot, port: int | str, host: str = "0.0.0.0"
) -> ThreadingHTTPServer:
    """Create an HTTP server bound to ``host``:``port``."""
    try:
        port_number = int(port)
    except (TypeError, ValueError):
        raise ValueError(f"invalid HTTP port: {port!r}") from None
    server = ThreadingHTTPServer((host, port_number), HealthHandler)
    server.root = root
    return server


def main(argv: list[str] | None = None) -> int:
    """Load configuration from .env and serve HTTP until interrupted."""
    parser = argparse.ArgumentParser(
        prog="delivery", description="Run the delivery service."
    )
    parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)

    try:
        config = Config.from_env()
    except ConfigError as exc:
        _log.error("%s", exc)
        return 1

    root = CompositionRoot(config)
    try:
        server = make_server(root, config.http_port)
    except (ValueError, OSError) as exc:
        _log.error("cannot start server: %s", exc)
        return 1

    with server:
        host, port = server.server_address[:2]
        _log.info("listening on %s:%s", host, port)
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())