"""Tests for spec_source.py."""

import json

import pytest

from api_docs import Spec, SpecSourceError, Url, as_spec_or_url


class TestSpec:

    def test_from_file(self, tmp_path):
        path = tmp_path / "petstore.json"
        path.write_bytes(b'{"openapi": "3.0.0"}')
        spec = Spec.from_file(path)
        assert spec.name == "petstore.json"
        assert spec.content == b'{"openapi": "3.0.0"}'

    def test_from_file_with_name(self, tmp_path):
        path = tmp_path / "spec.json"
        path.write_bytes(b"{}")
        assert Spec.from_file(str(path), name="openapi.json").name == "openapi.json"

    def test_from_dict(self):
        spec = Spec.from_dict({"openapi": "3.0.3"})
        assert spec.name == "openapi.json"
        assert json.loads(spec.content) == {"openapi": "3.0.3"}

    @pytest.mark.parametrize("name", ["", "/"])
    def test_empty_name_rejected(self, name):
        with pytest.raises(SpecSourceError):
            Spec(name=name, content=b"{}")


class TestAsSpecOrUrl:

    def test_passthrough(self):
        spec = Spec("openapi.json", b"{}")
        url = Url("https://example.com/spec.json")
        assert as_spec_or_url(spec) is spec
        assert as_spec_or_url(url) is url

    def test_string_is_url(self):
        assert as_spec_or_url("https://example.com/spec.json") == Url("https://example.com/spec.json")

    def test_dict_is_inline_spec(self):
        assert isinstance(as_spec_or_url({"openapi": "3.0.3"}), Spec)

    def test_unsupported(self):
        with pytest.raises(SpecSourceError, match="bytes"):
            as_spec_or_url(b"{}")

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            as_spec_or_url(42)
