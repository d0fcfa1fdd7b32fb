"""
DART OpenAPI client used by the proxy routes.

Only two endpoints are supported:
    corpCode.xml            ZIP archive of every corporate identifier code
    fnlttSinglAcntAll.json  full financial statements of a single company

https://opendart.fss.or.kr/guide/main.do
"""

import logging
import os
from typing import Any, Optional, Tuple

import requests

from utils.session import RequestSession, redact_url
from .base import ConfigurationError, TransportError

logger = logging.getLogger(__name__)

BASE_URL = "https://opendart.fss.or.kr/api"
CORP_CODE_PATH = "corpCode.xml"
FINANCIALS_PATH = "fnlttSinglAcntAll.json"
API_KEY_ENV = "DART_API_KEY"


class DartClient:
    """
    Builds upstream URLs with the injected API key and performs the calls.

    The key is validated on construction, so a missing key fails before
    any network activity.
    """

    def __init__(self, api_key: Optional[str] = None, timeout: float = 30, base_url: str = BASE_URL):
        self.api_key = api_key or os.getenv(API_KEY_ENV, "")
        if not self.api_key:
            raise ConfigurationError(
                f"DART API key is not configured on the server. Set the {API_KEY_ENV} environment variable."
            )
        self.base_url = base_url.rstrip("/")
        self.session = RequestSession(timeout=timeout)
        self.name = "DART"

    def corp_code_url(self) -> str:
        return f"{self.base_url}/{CORP_CODE_PATH}?crtfc_key={self.api_key}"

    def financials_url(self, query_string: str) -> str:
        """Append the caller's raw query string unchanged, then the key."""
        return f"{self.base_url}/{FINANCIALS_PATH}?{query_string}&crtfc_key={self.api_key}"

    def open_corp_codes(self) -> requests.Response:
        """
        Start the corpCode.xml download.

        The response is opened with stream=True: only status and headers
        have been read when this returns. Caller owns the response and
        must close it.
        """
        url = self.corp_code_url()
        try:
            return self.session.get(url, stream=True)
        except requests.RequestException as e:
            logger.error(f"DART corpCode request failed ({redact_url(url)}): {e}")
            raise TransportError("The server failed while requesting data from the DART API.") from e

    def get_financial_statements(self, query_string: str) -> Tuple[int, Any]:
        """
        Forward a fnlttSinglAcntAll.json query.

        DART answers this endpoint with JSON for business errors too, so
        the body is parsed whatever the status code.

        Returns:
            (upstream status code, parsed JSON body)
        """
        url = self.financials_url(query_string)
        try:
            resp = self.session.get_raw(url, headers={"Accept": "application/json"})
            data = resp.json()
        except (requests.RequestException, ValueError) as e:
            logger.error(f"DART financials request failed ({redact_url(url)}): {e}")
            raise TransportError("The server failed while requesting data from the DART API.") from e
        return resp.status_code, data

    def close(self) -> None:
        self.session.close()
