"""HTTP handlers that serve the upload page and convert uploaded files."""

from __future__ import annotations

import os
from contextlib import closing
from datetime import datetime, timezone

from werkzeug.exceptions import HTTPException
from werkzeug.wrappers import Request, Response

from .service import Service

_TEXT_PLAIN = "text/plain"


def _error(message: str, status: int) -> Response:
    response = Response(message + "\n", status=status, mimetype=_TEXT_PLAIN)
    response.headers["X-Content-Type-Options"] = "nosniff"
    return response


def _extension(filename: str) -> str:
    """Return the extension of the last path element, dot included."""
    base = filename.rsplit("/", 1)[-1]
    dot = base.rfind(".")
    return base[dot:] if dot >= 0 else ""


def _timestamp_name(now: datetime) -> str:
    """Name a file after a UTC moment, with colons made safe for file systems."""
    fraction = f"{now.microsecond:06d}".rstrip("0")
    stamp = now.strftime("%Y-%m-%d %H:%M:%S")
    if fraction:
        stamp += f".{fraction}"
    stamp += " +0000 UTC"
    return stamp.replace(":", "_")


class Handlers:
    """Request handlers for the index page and the conversion upload."""

    def __init__(
        self,
        service: Service,
        index_path: str | os.PathLike[str] = "index.html",
        output_dir: str | os.PathLike[str] = ".",
    ) -> None:
        self.service = service
        self.index_path = index_path
        self.output_dir = output_dir

    def root(self, request: Request) -> Response:
        """Serve the index page for GET requests."""
        if request.method != "GET":
            return _error("Only GET method is allowed", 405)
        try:
            with open(self.index_path, "rb") as page:
                content = page.read()
        except (FileNotFoundError, NotADirectoryError, IsADirectoryError):
            return _error("404 page not found", 404)
        except OSError as exc:
            return _error(str(exc), 500)
        return Response(content, status=200, mimetype="text/html")

    def upload(self, request: Request) -> Response:
        """Convert the uploaded file, store the result and return it."""
        if request.method != "POST":
            return _error("Only POST method is allowed", 405)

        if request.mimetype != "multipart/form-data":
            return _error("request Content-Type isn't multipart/form-data", 500)

        try:
            upload = request.files.get("myFile")
        except (ValueError, HTTPException) as exc:
            return _error(str(exc), 500)
        if upload is None:
            return _error("http: no such file", 500)

        try:
            with closing(upload):
                data = upload.read()
        except OSError as exc:
            return _error(str(exc), 500)

        try:
            converted = self.service.convert(data.decode("utf-8", errors="replace"))
        except Exception as exc:  # the service reports failures by raising
            return _error(str(exc), 500)

        name = _timestamp_name(datetime.now(timezone.utc)) + _extension(
            upload.filename or ""
        )
        path = os.path.join(self.output_dir, name)
        try:
            with open(path, "w", encoding="utf-8", newline="") as target:
                target.write(converted)
        except OSError as exc:
            return _error(str(exc), 500)

        return Response(converted, status=200, mimetype=_TEXT_PLAIN)