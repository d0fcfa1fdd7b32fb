"""Shared fixtures for the test suite."""

import pytest
from unittest.mock import MagicMock, patch

from requests.structures import CaseInsensitiveDict


@pytest.fixture
def api_key(monkeypatch):
    """DART_API_KEY set to a known test value."""
    monkeypatch.setenv("DART_API_KEY", "test-key")
    return "test-key"


@pytest.fixture
def no_api_key(monkeypatch):
    """DART_API_KEY removed from the environment."""
    monkeypatch.delenv("DART_API_KEY", raising=False)


@pytest.fixture
def mock_session_cls():
    """Patch RequestSession inside the DART client; .return_value.get is the network spy."""
    with patch("sources.dart.client.RequestSession") as cls:
        yield cls


@pytest.fixture
def upstream_response():
    """Factory for mock upstream requests.Response objects."""
    def _make(status_code=200, content=b"", content_type=None, chunks=None, json_data=None):
        resp = MagicMock()
        resp.status_code = status_code
        resp.headers = CaseInsensitiveDict()
        if content_type is not None:
            resp.headers["Content-Type"] = content_type
        resp.content = content
        resp.iter_content.side_effect = lambda chunk_size=1: iter(chunks if chunks is not None else [content])
        resp.json.return_value = json_data
        return resp
    return _make


@pytest.fixture
def client():
    """TestClient for the proxy app."""
    from fastapi.testclient import TestClient
    from api.main import app
    return TestClient(app)
