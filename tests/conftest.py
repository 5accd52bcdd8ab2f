"""Shared fixtures: a host app with the docs viewer mounted at /docs."""

import pytest
from flask import Flask

from api_docs import Config, Spec, Url, mount

SPEC_BYTES = b'{"openapi": "3.0.3", "info": {"title": "Test", "version": "1"}, "paths": {}}'
REMOTE_SPEC = "https://example.com/spec.json"


@pytest.fixture
def inline_spec():
    return Spec(name="openapi.json", content=SPEC_BYTES)


def _host(spec, config=None, prefix="/docs"):
    app = Flask(__name__)
    mount(app, prefix, spec, config)
    return app


@pytest.fixture
def client(inline_spec):
    return _host(inline_spec).test_client()


@pytest.fixture
def remote_client():
    return _host(Url(REMOTE_SPEC)).test_client()


@pytest.fixture
def make_client():
    def factory(spec, config=None, prefix="/docs"):
        return _host(spec, config, prefix).test_client()
    return factory


@pytest.fixture
def config():
    return Config(deep_linking=True, extra={"tryItOutEnabled": True})
