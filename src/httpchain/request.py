"""
Fluent request builder.

Collects headers, query and path parameters and a body, then performs a
single round trip through a Client and decodes the response.

    payload = {"name": "widget"}
    created = (
        get_default_client().request()
        .set_header(Header.CONTENT_TYPE, MIME.APPLICATION_JSON)
        .set_bearer_token(token)
        .set_path_param(":id", "42")
        .set_body(payload)
        .post("https://api.example.com/items/:id", dict)
    )

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import base64
import logging
import time
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote, urlencode

import httpx

from httpchain.client import Client, get_default_client
from httpchain.codecs import codec_for
from httpchain.constants import Format, Header, Method, Status
from httpchain.errors import (
    HTTPStatusError,
    MissingContentTypeError,
    RequestAlreadySentError,
    UnsupportedFormatError,
)

logger = logging.getLogger(__name__)


class Request:
    """
    Per-call request builder.

    Configuration methods return the builder itself. A builder is meant for
    a single owner and is single use: once execute() (or a verb shortcut)
    has been called, calling it again raises RequestAlreadySentError.
    """

    def __init__(self, client: Client | None = None):
        self.client = client or get_default_client()
        self.headers = httpx.Headers()
        self.query_params: dict[str, str] = {}
        self.path_params: dict[str, str] = {}
        self.body: Any = None
        self.timeout: float | httpx.Timeout | None = None
        self._sent = False

    @property
    def sent(self) -> bool:
        return self._sent

    # ================================================================
    # Configuration
    # ================================================================

    def set_query_param(self, name: str, value: str) -> "Request":
        self.query_params[name] = value
        return self

    def set_query_params(self, params: Mapping[str, str]) -> "Request":
        for name, value in params.items():
            self.set_query_param(name, value)
        return self

    def set_path_param(self, name: str, value: str) -> "Request":
        """
        Replace every occurrence of ``name`` in the URL with the encoded value.

        This is a plain substring replacement over the whole URL, query
        string included, so a name that also appears elsewhere in the URL is
        replaced there too. Prefer distinctive names such as ``:id`` or
        ``{id}``.
        """
        if not name:
            raise ValueError("path parameter name must not be empty")
        self.path_params[name] = value
        return self

    def set_path_params(self, params: Mapping[str, str]) -> "Request":
        for name, value in params.items():
            self.set_path_param(name, value)
        return self

    def set_header(self, name: Header | str, value: str) -> "Request":
        # Header names are case-insensitive, the last write wins
        self.headers[str(name)] = str(value)
        return self

    def set_headers(self, headers: Mapping[Header | str, str]) -> "Request":
        for name, value in headers.items():
            self.set_header(name, value)
        return self

    def set_bearer_token(self, token: str) -> "Request":
        return self.set_header(Header.AUTHORIZATION, f"Bearer {token.strip(' ')}")

    def set_basic_auth(self, username: str, password: str) -> "Request":
        credentials = base64.b64encode(f"{username}:{password}".encode()).decode()
        return self.set_header(Header.AUTHORIZATION, f"Basic {credentials}")

    def set_body(self, body: Any) -> "Request":
        self.body = body
        return self

    def set_timeout(self, timeout: float | httpx.Timeout | None) -> "Request":
        """Bound the round trip; None keeps the client's configured timeout."""
        self.timeout = timeout
        return self

    # ================================================================
    # Execution
    # ================================================================

    def marshal(self) -> bytes:
        """Encode the body according to the Content-Type header."""
        if self.body is None:
            return b""

        content_type = self.headers.get(Header.CONTENT_TYPE.value)
        if content_type is None:
            raise MissingContentTypeError()

        fmt = Format.from_content_type(content_type)
        if fmt is None:
            raise UnsupportedFormatError(
                content_type, f"serializing format '{content_type}' is not supported"
            )
        return codec_for(fmt).encode(self.body)

    def build_url(self, url: str) -> str:
        """Append the query string, then substitute path parameters."""
        if self.query_params:
            separator = "&" if "?" in url else "?"
            url = url + separator + urlencode(self.query_params)

        for name, value in self.path_params.items():
            url = url.replace(name, quote(str(value), safe=""))
        return url

    def execute(self, method: Method | str, url: str, out: Any = None) -> Any:
        """
        Perform the request.

        Args:
            method: HTTP method
            url: Target URL, possibly containing path parameter names
            out: Output sink for the decoded response body: a dict, list or
                dataclass instance filled in place, or a dataclass, dict or
                list type to build. None skips decoding.

        Returns:
            The filled sink, or None when ``out`` is None

        Raises:
            RequestAlreadySentError: The builder was already executed
            MissingContentTypeError: Body without a Content-Type, or a
                response to decode without one
            UnsupportedFormatError: Content type is neither JSON nor XML
            HTTPStatusError: Response status outside 2xx
            DecodeError: Response body could not be decoded into ``out``
            httpx.TransportError: Network, DNS or TLS failure
        """
        method = str(method).upper()
        if self._sent:
            raise RequestAlreadySentError(method, url)
        self._sent = True

        body = self.marshal()
        final_url = self.build_url(url)
        self.set_header(Header.CONTENT_LENGTH, str(len(body)))

        request = self.client.prepare(
            method,
            final_url,
            content=body,
            headers=self.headers,
            timeout=self.timeout,
        )

        logger.debug(f"-> {method} {final_url}")
        start_time = time.time()

        response = self.client.execute(request)
        try:
            response.read()
        finally:
            response.close()

        elapsed_ms = (time.time() - start_time) * 1000
        status = Status(response.status_code)
        logger.debug(f"<- {status} ({elapsed_ms:.0f}ms)")

        if not status.is_success:
            logger.warning(f"{method} {final_url} failed with status {status}")
            raise HTTPStatusError(status)

        if out is None:
            return None

        content_type = response.headers.get(Header.CONTENT_TYPE.value)
        if not content_type:
            raise MissingContentTypeError(
                f"could not auto-detect response format, header '{Header.CONTENT_TYPE}' is not set"
            )

        fmt = Format.from_content_type(content_type)
        if fmt is None:
            raise UnsupportedFormatError(
                content_type, f"deserializing format '{content_type}' is not supported"
            )
        return codec_for(fmt).decode(response.content, out)

    def get(self, url: str, out: Any = None) -> Any:
        return self.execute(Method.GET, url, out)

    def post(self, url: str, out: Any = None) -> Any:
        return self.execute(Method.POST, url, out)

    def put(self, url: str, out: Any = None) -> Any:
        return self.execute(Method.PUT, url, out)

    def patch(self, url: str, out: Any = None) -> Any:
        return self.execute(Method.PATCH, url, out)

    def delete(self, url: str, out: Any = None) -> Any:
        return self.execute(Method.DELETE, url, out)

    def head(self, url: str, out: Any = None) -> Any:
        return self.execute(Method.HEAD, url, out)

    def options(self, url: str, out: Any = None) -> Any:
        return self.execute(Method.OPTIONS, url, out)
