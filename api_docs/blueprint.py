# blueprint.py
# Flask glue: mounts the docs viewer under any URL prefix.
import logging
from typing import Any, Optional

from flask import Blueprint, Flask, Response, request
from werkzeug.urls import iri_to_uri

from .config import Config
from .resolver import DocsResponse, redirect_index, resolve
from .spec_source import Spec, as_spec_or_url

logger = logging.getLogger(__name__)


def _to_response(result: DocsResponse) -> Response:
    response = Response(result.body, status=result.status)
    if result.content_type:
        response.headers["Content-Type"] = result.content_type
    else:
        del response.headers["Content-Type"]
    if result.location:
        response.headers["Location"] = result.location
    return response


def _original_path() -> str:
    # Percent-encoded again, as the client sent it.
    return iri_to_uri(request.script_root + request.path)


def swagger_ui_blueprint(spec: Any, config: Optional[Config] = None, name: str = "swagger_ui") -> Blueprint:
    """Blueprint serving the viewer, its config and (inline mode) the spec.

    `spec` is a Spec, a Url, a URL string or a spec dict. Register it with a
    url_prefix, or use mount().
    """
    spec = as_spec_or_url(spec)
    config = config or Config()
    bp = Blueprint(name, __name__)
    kind = f"inline spec {spec.name}" if isinstance(spec, Spec) else f"spec url {spec}"
    logger.debug(f"Docs blueprint {name} serves {kind}")

    @bp.get("/", strict_slashes=False)
    def index():
        query = request.query_string.decode("utf-8", "replace")
        return _to_response(redirect_index(_original_path(), query))

    @bp.get("/<path:path>")
    def docs_path(path: str):
        return _to_response(resolve(path, _original_path(), spec, config))

    return bp


def mount(app: Flask, prefix: str, spec: Any, config: Optional[Config] = None, name: str = "swagger_ui") -> Blueprint:
    """Register the docs viewer on `app` under `prefix` (e.g. "/docs")."""
    bp = swagger_ui_blueprint(spec, config, name=name)
    app.register_blueprint(bp, url_prefix=prefix)
    logger.info(f"API docs mounted at {prefix} ({bp.name})")
    return bp
