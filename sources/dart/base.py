"""
Error taxonomy and error-document parsing for the DART proxy.

Every error carries the HTTP status to send back and the envelope
fields (status, message) the browser client expects.
"""

import re
from typing import Dict, Optional

STATUS_PATTERN = re.compile(r"<status>(\d+)</status>")
MESSAGE_PATTERN = re.compile(r"<message>(.*?)</message>")


class DartProxyError(Exception):
    """Base exception for all proxy errors rendered as an error envelope."""

    status_code = 500

    def __init__(self, message: str, status: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.status = status if status is not None else str(self.status_code)

    def to_envelope(self) -> Dict[str, str]:
        return {"status": self.status, "message": self.message}


class ConfigurationError(DartProxyError):
    """Raised when the DART API key is not configured."""
    status_code = 500


class ClientInputError(DartProxyError):
    """Raised when the caller omits required query parameters."""
    status_code = 400


class UpstreamBusinessError(DartProxyError):
    """Raised when DART is reachable but reports a failure."""
    status_code = 400


class TransportError(DartProxyError):
    """Raised on network failures, timeouts and malformed upstream bodies."""
    status_code = 500


def parse_error_document(text: str) -> Optional[Dict[str, str]]:
    """
    Extract status/message from a DART XML error document.

    DART answers key errors and empty results with a small XML body such as
    ``<result><status>013</status><message>No data</message></result>``,
    sometimes with HTTP 200.

    Returns:
        Dict with keys status, message, or None if either tag is missing.
    """
    if not text:
        return None
    status_match = STATUS_PATTERN.search(text)
    message_match = MESSAGE_PATTERN.search(text)
    if not (status_match and message_match):
        return None
    return {"status": status_match.group(1), "message": message_match.group(1)}
