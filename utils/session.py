"""
Thin wrapper around requests.Session shared by all upstream clients.
"""

import logging
import re
from typing import Optional

import requests
from fake_useragent import UserAgent

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30
USER_AGENTS = UserAgent()
SECRET_PARAMS = re.compile(r"((?:crtfc_key|api_key|apiKey)=)[^&#]*")


def redact_url(url: str) -> str:
    """Mask credential query parameters so URLs are safe to log."""
    return SECRET_PARAMS.sub(r"\1***", url)


class RequestSession:
    """
    requests.Session with a browser User-Agent and a default timeout.

    Exceptions from requests are not caught here; callers decide how a
    transport failure maps onto their own error types.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, user_agent: Optional[str] = None):
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({"User-Agent": user_agent or USER_AGENTS.chrome})

    def get(self, url: str, **kwargs) -> requests.Response:
        kwargs.setdefault("timeout", self.timeout)
        logger.debug(f"GET {redact_url(url)}")
        resp = self.session.get(url, **kwargs)
        logger.debug(f"{resp.status_code} <- {redact_url(url)}")
        return resp

    def get_raw(self, url: str, headers: Optional[dict] = None, **kwargs) -> requests.Response:
        """
        GET with the URL sent exactly as given.

        requests normally re-quotes the URL while preparing it (decoding
        unreserved escapes, encoding characters such as "|"); here the
        prepared URL is replaced so a forwarded query keeps its bytes.
        """
        kwargs.setdefault("timeout", self.timeout)
        prep = self.session.prepare_request(requests.Request("GET", url, headers=headers))
        prep.url = url
        for key, value in self.session.merge_environment_settings(url, {}, None, None, None).items():
            kwargs.setdefault(key, value)
        logger.debug(f"GET {redact_url(url)}")
        resp = self.session.send(prep, **kwargs)
        logger.debug(f"{resp.status_code} <- {redact_url(url)}")
        return resp

    def close(self) -> None:
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False
