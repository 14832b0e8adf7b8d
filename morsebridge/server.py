"""WSGI server that routes requests to the conversion handlers."""

from __future__ import annotations

import argparse
import logging
import sys
import threading
from collections.abc import Iterable
from datetime import timedelta

from werkzeug.serving import WSGIRequestHandler, make_server
from werkzeug.wrappers import Request

from .handlers import Handlers
from .service import Service

DEFAULT_ADDRESS = ":8080"
READ_TIMEOUT = timedelta(seconds=5)
WRITE_TIMEOUT = timedelta(seconds=10)
IDLE_TIMEOUT = timedelta(seconds=15)


class _RequestHandler(WSGIRequestHandler):
    # Connections that stay silent longer than the idle timeout are dropped.
    timeout = IDLE_TIMEOUT.total_seconds()


def _split_address(address: str) -> tuple[str, int]:
    host, sep, port = address.rpartition(":")
    if not sep:
        raise ValueError(f"missing port in address {address!r}")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    try:
        number = int(port)
    except ValueError:
        raise ValueError(f"invalid port in address {address!r}") from None
    if not 0 <= number <= 65535:
        raise ValueError(f"invalid port in address {address!r}")
    return host or "0.0.0.0", number


class Server:
    """Routes "/upload" to the upload handler and everything else to the index."""

    def __init__(
        self,
        logger: logging.Logger,
        handlers: Handlers,
        address: str = DEFAULT_ADDRESS,
    ) -> None:
        self.logger = logger
        self.handlers = handlers
        self.address = address
        self.read_timeout = READ_TIMEOUT
        self.write_timeout = WRITE_TIMEOUT
        self.idle_timeout = IDLE_TIMEOUT
        self.bound_port: int | None = None
        self._lock = threading.Lock()
        self._server = None
        self._closed = False

    def __call__(self, environ, start_response) -> Iterable[bytes]:
        request = Request(environ)
        if request.path == "/upload":
            response = self.handlers.upload(request)
        else:
            response = self.handlers.root(request)
        return response(environ, start_response)

    def run(self) -> None:
        """Listen on the address and serve until closed."""
        host, port = _split_address(self.address)
        self.logger.info("Server is listening on %s", self.address)
        with self._lock:
            if self._closed:
                return
            self._server = make_server(
                host, port, self, threaded=True, request_handler=_RequestHandler
            )
            self.bound_port = self._server.server_port
        try:
            self._server.serve_forever()
        finally:
            self._server.server_close()

    def close(self) -> None:
        """Stop serving; a later or pending run returns at once."""
        with self._lock:
            self._closed = True
            server = self._server
        if server is not None:
            server.shutdown()


def _make_logger() -> logging.Logger:
    logger = logging.getLogger("morsebridge")
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(
                "INFO: %(asctime)s %(filename)s:%(lineno)d: %(message)s",
                datefmt="%Y/%m/%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    return logger


def main(argv: list[str] | None = None) -> int:
    """Start the conversion server and serve until interrupted."""
    parser = argparse.ArgumentParser(description="Morse conversion web server.")
    parser.add_argument("--addr", default=DEFAULT_ADDRESS, help="listen address")
    parser.add_argument("--index", default="index.html", help="index page path")
    parser.add_argument("--output-dir", default=".", help="where results are kept")
    args = parser.parse_args(argv)

    logger = _make_logger()
    handlers = Handlers(Service(), index_path=args.index, output_dir=args.output_dir)
    server = Server(logger, handlers, args.addr)
    try:
        server.run()
    except KeyboardInterrupt:
        server.close()
    except (OSError, ValueError) as exc:
        logger.critical("server stopped with error: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())