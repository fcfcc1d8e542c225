"""
Exceptions raised by httpchain.

Transport failures are not wrapped: they surface as the transport's own
``httpx.TransportError`` subclasses, re-exported here as ``TransportError``.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import httpx

from httpchain.constants import Header, Status


TransportError = httpx.TransportError


class HTTPChainError(Exception):
    """Base exception for httpchain errors."""
    pass


class ConfigError(HTTPChainError):
    """Invalid client configuration value."""
    pass


class RequestAlreadySentError(HTTPChainError):
    """A request builder was executed more than once."""

    def __init__(self, method: str, url: str):
        self.method = method
        self.url = url
        super().__init__(f"request already sent, cannot execute {method} {url} again")


class UnsupportedFormatError(HTTPChainError):
    """Content type is neither JSON nor XML."""

    def __init__(self, content_type: str | None, message: str | None = None):
        self.content_type = content_type
        super().__init__(message or f"format '{content_type}' is not supported")


class MissingContentTypeError(UnsupportedFormatError):
    """No Content-Type where one is needed to pick a codec."""

    def __init__(self, message: str | None = None):
        super().__init__(None, message or f"header '{Header.CONTENT_TYPE}' is not set")


class HTTPStatusError(HTTPChainError):
    """Response status outside the 2xx range."""

    def __init__(self, status: int):
        self.status = Status(status)
        super().__init__(f"http request failed, got status: {self.status}")

    @property
    def code(self) -> int:
        return self.status.code

    @property
    def reason(self) -> str:
        return self.status.reason


class DecodeError(HTTPChainError):
    """Response body could not be decoded into the output."""
    pass
