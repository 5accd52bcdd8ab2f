import logging
import os
import sys
from typing import Any, Dict

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from api_docs import Config, Spec, Url, mount
from openapi_spec import OPENAPI_SPEC

# --- Tunables ---
PORT              = int(os.getenv("PORT", "8080"))
DOCS_PREFIX       = os.getenv("DOCS_PREFIX", "/docs")
SPEC_URL          = os.getenv("SPEC_URL", "")
SPEC_FILE         = os.getenv("SPEC_FILE", "")
DOCS_DEEP_LINKING = os.getenv("DOCS_DEEP_LINKING", "0").lower() in ("1","true","yes")
LOG_LEVEL         = os.getenv("LOG_LEVEL", "INFO").upper()

logger = logging.getLogger(__name__)


def configure_logging(level: str = LOG_LEVEL) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        '[%(name)s - %(asctime)s] - [%(levelname)s] %(message)s', datefmt='%Y-%m-%d %H:%M:%S'))
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)


def _error(code: str, message: str, http=400, details: Dict[str, Any] | None = None):
    payload = {"error": {"code": code, "message": message}}
    if details: payload["error"]["details"] = details
    return jsonify(payload), http


def docs_source():
    # A remote URL wins over a local file; the built-in spec is the fallback.
    if SPEC_URL:
        return Url(SPEC_URL)
    if SPEC_FILE:
        return Spec.from_file(SPEC_FILE)
    return Spec.from_dict(OPENAPI_SPEC)


def create_app(spec=None, config: Config | None = None, prefix: str = DOCS_PREFIX) -> Flask:
    app = Flask(__name__)

    @app.get("/health")
    def health(): return jsonify({"ok": True})

    @app.errorhandler(405)
    def method_not_allowed(e: HTTPException):
        return _error("METHOD_NOT_ALLOWED", e.description, 405)

    @app.errorhandler(500)
    def internal_error(e: HTTPException):
        logger.error(f"Unhandled error: {e}")
        return _error("INTERNAL", "Internal server error", 500)

    mount(app, prefix, spec if spec is not None else docs_source(),
          config or Config(deep_linking=DOCS_DEEP_LINKING))
    return app


if __name__ == "__main__":
    configure_logging()
    create_app().run(host="0.0.0.0", port=PORT, debug=False)
