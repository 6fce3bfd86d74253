"""Static file server for the LetterPlay public assets."""

from __future__ import annotations

import errno
import logging
from pathlib import Path, PurePosixPath
from typing import Optional

from flask import Flask, Response
from werkzeug.security import safe_join

from letterplay.config import Settings, configure_logging

logger = logging.getLogger(__name__)

DEFAULT_DOCUMENT = "index.html"
DEFAULT_CONTENT_TYPE = "text/plain"
CONTENT_TYPES = {
    ".html": "text/html",
    ".js": "text/javascript",
    ".css": "text/css",
    ".wav": "audio/wav",
    ".json": "application/json",
    ".png": "image/png",
    ".svg": "image/svg+xml",
    ".ico": "image/x-icon",
}


def content_type_for(filename: str) -> str:
    """Content type from the file extension, plain text when unknown."""
    return CONTENT_TYPES.get(PurePosixPath(filename).suffix.lower(), DEFAULT_CONTENT_TYPE)


def create_app(public_root: Optional[Path] = None) -> Flask:
    """Build the Flask app serving files under ``public_root``."""
    if public_root is None:
        public_root = Settings.from_env().public_root
    root = Path(public_root).resolve()

    app = Flask(__name__, static_folder=None)
    app.config["PUBLIC_ROOT"] = root

    @app.route("/", defaults={"filename": DEFAULT_DOCUMENT})
    @app.route("/<path:filename>")
    def serve_file(filename: str) -> Response:
        """Serve a file from the public root."""
        return _file_response(root, filename)

    return app


def _file_response(root: Path, filename: str) -> Response:
    joined = safe_join(str(root), filename)
    if joined is None:
        logger.info("Rejected path outside public root: %s", filename)
        return _not_found()

    try:
        content = Path(joined).read_bytes()
    except FileNotFoundError:
        return _not_found()
    except OSError as e:
        code = errno.errorcode.get(e.errno, "UNKNOWN") if e.errno else "UNKNOWN"
        logger.error("Could not read %s: %s", joined, e)
        return _server_error(code)
    except ValueError as e:
        # e.g. an embedded NUL byte in the requested name
        logger.error("Could not read %r: %s", joined, e)
        return _server_error("EINVAL")

    return Response(content, status=200, content_type=content_type_for(filename))


def _not_found() -> Response:
    return Response("File not found", status=404, mimetype="text/plain")


def _server_error(code: str) -> Response:
    return Response(f"Server error: {code}", status=500, mimetype="text/plain")


def main() -> None:
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    app = create_app(settings.public_root)
    logger.info("Server running at http://%s:%d/", settings.host, settings.port)
    app.run(host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
