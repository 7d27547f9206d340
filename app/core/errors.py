"""
Error taxonomy for the analysis proxy.

Every failure raised by the gateway is a ``ProxyError``; the HTTP layer maps
each subclass to a status code and body shape.
"""
from typing import Any, Optional


class ProxyError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(ProxyError):
    """Blank text, unknown provider or a malformed payload"""
    status_code = 400


class MissingCredential(ProxyError):
    """The selected provider has no API key configured"""

    def __init__(self, provider: str, message: str):
        super().__init__(message)
        self.provider = provider


class UpstreamError(ProxyError):
    """The provider answered with a non-success status or could not be reached"""

    def __init__(self, provider: str, message: str, status: Optional[int] = None, body: Any = None):
        super().__init__(message)
        self.provider = provider
        self.status = status
        self.body = body
