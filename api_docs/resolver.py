# resolver.py
# Decides what a request under the docs mount point gets back.
import json
import logging
from dataclasses import dataclass
from typing import Mapping, Optional

from .assets import ASSETS, content_type
from .config import Config
from .spec_source import Spec, SpecOrUrl, Url

logger = logging.getLogger(__name__)

CONFIG_FILE = "swagger-ui-config.json"
JSON = "application/json"


@dataclass(frozen=True)
class DocsResponse:
    status: int
    body: bytes = b""
    content_type: Optional[str] = None
    location: Optional[str] = None


NOT_FOUND = DocsResponse(404)


def redirect_index(original_path: str, query: str = "") -> DocsResponse:
    """Permanent redirect from the bare mount root to its index.html.

    The viewer's relative asset links only resolve from a path ending in
    /index.html, so the root never serves content itself.
    """
    target = original_path.rstrip("/") + "/index.html"
    if query:
        target = f"{target}?{query}"
    return DocsResponse(308, location=target)


def config_url(original_path: str, spec: SpecOrUrl) -> str:
    if isinstance(spec, Url):
        return spec.value
    head, sep, _ = original_path.rpartition(CONFIG_FILE)
    if not sep:
        return spec.name
    return head + spec.name.lstrip("/")


def resolve(
    path: str,
    original_path: str,
    spec: SpecOrUrl,
    config: Config,
    assets: Mapping[str, bytes] = ASSETS,
) -> DocsResponse:
    """Classify `path` (relative to the mount) and build its response.

    Checked in order: bundled asset, generated config, inline spec document.
    Anything else is a 404 with an empty body.
    """
    path = path.lstrip("/")

    asset = assets.get(path)
    if asset is not None:
        return DocsResponse(200, asset, content_type(path))

    if path == CONFIG_FILE:
        resolved = config.with_url(config_url(original_path, spec))
        body = json.dumps(resolved.to_dict(), separators=(",", ":"))
        return DocsResponse(200, body.encode("utf-8"), JSON)

    if isinstance(spec, Spec) and path == spec.name.lstrip("/"):
        return DocsResponse(200, spec.content, JSON)

    logger.debug(f"No docs content for {original_path}")
    return NOT_FOUND
