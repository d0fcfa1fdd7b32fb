"""
Financial statement JSON proxy.

Forwards the browser's query string to fnlttSinglAcntAll.json with the
server's API key appended and relays DART's answer untouched.
"""

import logging

from fastapi.responses import JSONResponse

from sources.dart.base import ClientInputError
from sources.dart.client import DartClient

logger = logging.getLogger(__name__)


def proxy_financial_statements(client: DartClient, query_string: str, cache_control: str) -> JSONResponse:
    """
    Relay one financial statement query.

    Args:
        client: DartClient holding the API key
        query_string: raw, still percent-encoded query of the inbound URL
        cache_control: Cache-Control value for shared caches

    Returns:
        JSONResponse with DART's status code and body
    """
    try:
        if not query_string:
            raise ClientInputError("Required query parameters are missing.")
        status_code, data = client.get_financial_statements(query_string)
    finally:
        client.close()

    if isinstance(data, dict) and data.get("status") not in (None, "000"):
        logger.info(f"DART answered {status_code} with status={data.get('status')}: {data.get('message', '')}")

    return JSONResponse(
        content=data,
        status_code=status_code,
        headers={"Cache-Control": cache_control},
    )
