# config.py
# Swagger UI display options, served as swagger-ui-config.json.
from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, Optional


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


@dataclass(frozen=True)
class Config:
    """Viewer options. `url` is rewritten per request before serving.

    Frozen but unhashable, since `extra` is a plain dict.
    """

    __hash__ = None

    url: str = ""
    deep_linking: bool = False
    display_operation_id: bool = False
    default_models_expand_depth: int = 1
    default_model_expand_depth: int = 1
    default_model_rendering: str = "example"  # "example" or "model"
    display_request_duration: bool = False
    doc_expansion: str = "list"  # "list", "full" or "none"
    filter: bool = False
    max_displayed_tags: Optional[int] = None
    show_extensions: bool = False
    show_common_extensions: bool = False
    persist_authorization: bool = False
    with_credentials: bool = False
    extra: Dict[str, Any] = field(default_factory=dict)

    def with_url(self, url: str) -> "Config":
        return replace(self, url=url)

    def to_dict(self) -> Dict[str, Any]:
        """camelCase JSON object as the viewer expects it; None options are omitted."""
        out: Dict[str, Any] = {}
        for f in fields(self):
            if f.name == "extra":
                continue
            value = getattr(self, f.name)
            if value is not None:
                out[_camel(f.name)] = value
        out.update(self.extra)
        out["url"] = self.url
        return out

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        known = {_camel(f.name): f.name for f in fields(cls) if f.name != "extra"}
        kwargs: Dict[str, Any] = {}
        extra: Dict[str, Any] = {}
        for key, value in data.items():
            if key in known:
                kwargs[known[key]] = value
            else:
                extra[key] = value
        return cls(extra=extra, **kwargs)
