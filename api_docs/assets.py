# assets.py
# Viewer files shipped with the package, read once into memory.
import logging
import mimetypes
import os
from types import MappingProxyType
from typing import Mapping

logger = logging.getLogger(__name__)

# swagger-ui-dist release the bundled index.html loads from the CDN
SWAGGER_UI_VERSION = "5.17.14"

STATIC_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "static")

OCTET_STREAM = "application/octet-stream"


def load_bundle(directory: str) -> Mapping[str, bytes]:
    """Read every file under `directory` into a read-only mapping.

    Keys are `/`-separated paths relative to `directory`, without a leading slash.
    """
    files = {}
    for root, _dirs, names in os.walk(directory):
        for filename in names:
            full = os.path.join(root, filename)
            key = os.path.relpath(full, directory).replace(os.sep, "/")
            with open(full, "rb") as f:
                files[key] = f.read()
    logger.debug(f"Loaded {len(files)} viewer assets from {directory}")
    return MappingProxyType(files)


def content_type(path: str) -> str:
    # Only the text after the last "." counts; no "." means no extension.
    ext = path.rsplit(".", 1)[-1] if "." in path else ""
    if not ext:
        return OCTET_STREAM
    mime, _ = mimetypes.guess_type("asset." + ext)
    return mime or OCTET_STREAM


ASSETS = load_bundle(STATIC_DIR)
