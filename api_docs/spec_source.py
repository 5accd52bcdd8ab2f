# spec_source.py
# The two ways a mount can point the viewer at an API spec.
import json
import os
from dataclasses import dataclass
from typing import Any, Optional, Union


class SpecSourceError(ValueError):
    """Raised when a spec source cannot be built from the given input."""


@dataclass(frozen=True)
class Spec:
    """An inline spec served from the mount itself.

    `name` is the path segment the document is served under (and the value
    written into the viewer config); `content` is returned byte-for-byte.
    """

    name: str
    content: bytes

    def __post_init__(self):
        if not self.name or not self.name.strip("/"):
            raise SpecSourceError("Spec name must be a non-empty path segment")

    @classmethod
    def from_file(cls, path: Union[str, os.PathLike], name: Optional[str] = None) -> "Spec":
        with open(path, "rb") as f:
            content = f.read()
        return cls(name=name or os.path.basename(os.fspath(path)), content=content)

    @classmethod
    def from_dict(cls, obj: dict, name: str = "openapi.json") -> "Spec":
        return cls(name=name, content=json.dumps(obj).encode("utf-8"))


@dataclass(frozen=True)
class Url:
    """A spec hosted elsewhere; only handed to the viewer, never fetched."""

    value: str

    def __str__(self) -> str:
        return self.value


SpecOrUrl = Union[Spec, Url]


def as_spec_or_url(value: Any) -> SpecOrUrl:
    if isinstance(value, (Spec, Url)):
        return value
    if isinstance(value, str):
        return Url(value)
    if isinstance(value, dict):
        return Spec.from_dict(value)
    raise SpecSourceError(f"Unsupported spec source: {type(value).__name__}")
