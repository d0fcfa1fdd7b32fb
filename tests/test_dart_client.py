"""Tests for DartClient with mocked HTTP."""

import pytest
import requests
from unittest.mock import patch, MagicMock

from sources.dart.base import ConfigurationError, TransportError


def _make_client(api_key="test-key"):
    """Create a DartClient with mocked RequestSession."""
    with patch("sources.dart.client.RequestSession"):
        from sources.dart.client import DartClient
        return DartClient(api_key=api_key)


# ---------------------------------------------------------------------------
# __init__
# ---------------------------------------------------------------------------

class TestInit:
    def test_missing_key_raises(self, no_api_key):
        with patch("sources.dart.client.RequestSession") as session_cls:
            from sources.dart.client import DartClient
            with pytest.raises(ConfigurationError, match="DART_API_KEY"):
                DartClient(api_key="")
            session_cls.assert_not_called()

    def test_reads_env_key(self, api_key):
        with patch("sources.dart.client.RequestSession"):
            from sources.dart.client import DartClient
            assert DartClient().api_key == "test-key"

    def test_timeout_passed_to_session(self):
        with patch("sources.dart.client.RequestSession") as session_cls:
            from sources.dart.client import DartClient
            DartClient(api_key="k", timeout=5)
            session_cls.assert_called_once_with(timeout=5)


# ---------------------------------------------------------------------------
# URL construction
# ---------------------------------------------------------------------------

class TestUrls:
    def test_corp_code_url(self):
        client = _make_client()
        assert client.corp_code_url() == "https://opendart.fss.or.kr/api/corpCode.xml?crtfc_key=test-key"

    def test_financials_url_appends_key(self):
        client = _make_client()
        url = client.financials_url("corp_code=00126380&bsns_year=2023")
        assert url == (
            "https://opendart.fss.or.kr/api/fnlttSinglAcntAll.json"
            "?corp_code=00126380&bsns_year=2023&crtfc_key=test-key"
        )

    def test_financials_url_keeps_percent_encoding(self):
        client = _make_client()
        query = "corp_name=%EC%82%BC%EC%84%B1&note=a%2Bb%20c"
        assert f"?{query}&crtfc_key=" in client.financials_url(query)

    def test_custom_base_url(self):
        with patch("sources.dart.client.RequestSession"):
            from sources.dart.client import DartClient
            client = DartClient(api_key="k", base_url="http://localhost:9000/api/")
        assert client.corp_code_url() == "http://localhost:9000/api/corpCode.xml?crtfc_key=k"


# ---------------------------------------------------------------------------
# open_corp_codes
# ---------------------------------------------------------------------------

class TestOpenCorpCodes:
    def test_streams_request(self):
        client = _make_client()
        resp = MagicMock()
        client.session.get.return_value = resp
        assert client.open_corp_codes() is resp
        args, kwargs = client.session.get.call_args
        assert "corpCode.xml" in args[0]
        assert kwargs["stream"] is True

    def test_network_error_raises_transport_error(self):
        client = _make_client()
        client.session.get.side_effect = requests.ConnectionError("dns failure")
        with pytest.raises(TransportError):
            client.open_corp_codes()


# ---------------------------------------------------------------------------
# get_financial_statements
# ---------------------------------------------------------------------------

class TestGetFinancialStatements:
    def test_returns_status_and_body(self):
        client = _make_client()
        resp = MagicMock(status_code=200)
        resp.json.return_value = {"status": "000", "list": []}
        client.session.get_raw.return_value = resp
        assert client.get_financial_statements("corp_code=1") == (200, {"status": "000", "list": []})

    def test_sends_accept_json(self):
        client = _make_client()
        client.session.get_raw.return_value = MagicMock(status_code=200)
        client.get_financial_statements("corp_code=1")
        _, kwargs = client.session.get_raw.call_args
        assert kwargs["headers"]["Accept"] == "application/json"

    def test_error_status_still_parsed(self):
        client = _make_client()
        resp = MagicMock(status_code=400)
        resp.json.return_value = {"status": "100", "message": "Bad field"}
        client.session.get_raw.return_value = resp
        assert client.get_financial_statements("x=1") == (400, {"status": "100", "message": "Bad field"})

    def test_invalid_json_raises_transport_error(self):
        client = _make_client()
        resp = MagicMock(status_code=502)
        resp.json.side_effect = ValueError("Expecting value")
        client.session.get_raw.return_value = resp
        with pytest.raises(TransportError):
            client.get_financial_statements("x=1")

    def test_timeout_raises_transport_error(self):
        client = _make_client()
        client.session.get_raw.side_effect = requests.Timeout("read timed out")
        with pytest.raises(TransportError):
            client.get_financial_statements("x=1")
