"""
Corporate code ZIP relay.

Downloads corpCode.xml from DART and streams the archive to the browser
chunk by chunk. DART reports some failures with an error status and others
with HTTP 200 plus an XML error document, so both the status code and the
content type are checked before any byte is relayed.
"""

import logging
from typing import Callable, Iterator, Optional

import requests
from fastapi.responses import StreamingResponse

from sources.dart.base import TransportError, UpstreamBusinessError, parse_error_document
from sources.dart.client import DartClient

logger = logging.getLogger(__name__)

ZIP_CONTENT_TYPE = "application/zip"


def _read_error_text(resp: requests.Response) -> str:
    try:
        return resp.content.decode("utf-8", errors="replace")
    except requests.RequestException as e:
        raise TransportError("The server failed while requesting data from the DART API.") from e


def check_zip_payload(resp: requests.Response) -> None:
    """
    Raise UpstreamBusinessError unless resp is a successful ZIP download.

    An error document carrying both <status> and <message> is forwarded as
    a 400 with DART's own code. Anything else falls back to a generic message:
    at the upstream status for a failure status, at 500 for a wrong payload.
    """
    if not 200 <= resp.status_code < 300:
        text = _read_error_text(resp)
        logger.error(f"DART API error ({resp.status_code}): {text}")
        found = parse_error_document(text)
        if found:
            raise UpstreamBusinessError(found["message"], status=found["status"])
        raise UpstreamBusinessError(
            "Failed to fetch the ZIP file from the DART API.",
            status=str(resp.status_code),
            status_code=resp.status_code,
        )

    content_type = resp.headers.get("Content-Type") or ""
    if ZIP_CONTENT_TYPE not in content_type:
        text = _read_error_text(resp)
        logger.error(f"DART API did not return a ZIP file ({content_type or 'no content type'}): {text}")
        found = parse_error_document(text)
        if found:
            raise UpstreamBusinessError(found["message"], status=found["status"])
        raise UpstreamBusinessError(
            "The DART API did not return the expected ZIP file (the API key may be invalid).",
            status="500",
            status_code=500,
        )


def stream_chunks(
    resp: requests.Response,
    chunk_size: int,
    on_close: Optional[Callable[[], None]] = None,
) -> Iterator[bytes]:
    """
    Yield the upstream body one chunk at a time.

    Headers are already on the wire once the first chunk is requested, so
    a failure here only ends the body. The upstream response is closed
    exactly once, including when the client goes away mid-download.
    """
    sent = 0
    try:
        for chunk in resp.iter_content(chunk_size=chunk_size):
            if not chunk:
                continue
            sent += len(chunk)
            yield chunk
        logger.info(f"Relayed corpCode archive ({sent} bytes)")
    except requests.RequestException as e:
        logger.error(f"corpCode stream aborted after {sent} bytes: {e}")
    finally:
        resp.close()
        if on_close is not None:
            on_close()


def relay_corp_codes(client: DartClient, chunk_size: int, filename: str) -> StreamingResponse:
    """Open the upstream download, validate it, and hand back a streaming response."""
    resp = client.open_corp_codes()
    try:
        check_zip_payload(resp)
    except Exception:
        resp.close()
        client.close()
        raise

    return StreamingResponse(
        stream_chunks(resp, chunk_size, on_close=client.close),
        media_type=ZIP_CONTENT_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
