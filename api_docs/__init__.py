# api_docs
# Swagger UI viewer for Flask apps, mountable at any path prefix.
from .assets import ASSETS, SWAGGER_UI_VERSION, content_type, load_bundle
from .blueprint import mount, swagger_ui_blueprint
from .config import Config
from .resolver import CONFIG_FILE, DocsResponse, redirect_index, resolve
from .spec_source import Spec, SpecOrUrl, SpecSourceError, Url, as_spec_or_url

__version__ = "0.1.0"

__all__ = [
    "ASSETS",
    "CONFIG_FILE",
    "Config",
    "DocsResponse",
    "SWAGGER_UI_VERSION",
    "Spec",
    "SpecOrUrl",
    "SpecSourceError",
    "Url",
    "as_spec_or_url",
    "content_type",
    "load_bundle",
    "mount",
    "redirect_index",
    "resolve",
    "swagger_ui_blueprint",
]
