"""
HTTP client wrapping a pooled httpx transport.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import logging
import threading
from typing import TYPE_CHECKING, Any

import httpx

from httpchain.config import ClientConfig, get_config

if TYPE_CHECKING:
    from httpchain.request import Request

logger = logging.getLogger(__name__)


class Client:
    """
    Holds one configured httpx.Client and executes prepared requests.

    The client keeps no per-request state, so one instance can be shared
    across threads; connection pooling is owned by httpx.

    Usage:
        with Client() as client:
            items = client.request().get("https://api.example.com/items", dict)

    A ready-made ``http_client`` is used as given; its settings come from
    whoever built it, so passing ``config`` alongside it is rejected and
    ``config`` is None.
    """

    def __init__(
        self,
        http_client: httpx.Client | None = None,
        config: ClientConfig | None = None,
    ):
        if http_client is not None:
            if config is not None:
                raise ValueError("pass either http_client or config, not both")
            self.config: ClientConfig | None = None
            self._inner = http_client
            return

        self.config = config or ClientConfig()
        self._inner = httpx.Client(
            timeout=self.config.to_httpx_timeout(),
            limits=self.config.to_httpx_limits(),
            headers=self.config.default_headers,
            verify=self.config.verify_ssl,
        )

    @property
    def http_client(self) -> httpx.Client:
        return self._inner

    def prepare(
        self,
        method: str,
        url: str,
        content: bytes = b"",
        headers: httpx.Headers | dict[str, str] | None = None,
        timeout: float | httpx.Timeout | None = None,
    ) -> httpx.Request:
        """
        Build a request carrying this client's default headers and timeout.

        Args:
            method: HTTP method
            url: Final URL, query string included
            content: Encoded body
            headers: Request headers, merged over the client defaults
            timeout: Per-request timeout overriding the client's

        Returns:
            Prepared httpx.Request ready for execute()
        """
        return self._inner.build_request(
            method,
            url,
            content=content,
            headers=headers,
            timeout=httpx.USE_CLIENT_DEFAULT if timeout is None else timeout,
        )

    def execute(self, request: httpx.Request) -> httpx.Response:
        """
        Send a prepared request and return the unread response.

        The caller owns the response and must read and close it. Transport
        errors propagate unchanged; status codes are not interpreted here.
        """
        return self._inner.send(request, stream=True)

    def request(self) -> "Request":
        """Create a new request builder bound to this client."""
        from httpchain.request import Request

        return Request(self)

    def close(self) -> None:
        """Close the underlying transport and its connection pool."""
        if not self._inner.is_closed:
            self._inner.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *_args: Any) -> None:
        self.close()


# Global client instance
_default_client: Client | None = None
_default_client_lock = threading.Lock()


def get_default_client() -> Client:
    """Get the process-wide default client, creating it on first use."""
    global _default_client
    with _default_client_lock:
        if _default_client is None:
            config = get_config()
            _default_client = Client(config=config)
            logger.debug(
                f"Created default client (timeout={config.timeout}s, "
                f"max idle per host={config.max_idle_conns_per_host}, "
                f"keep-alives={not config.disable_keep_alives})"
            )
        return _default_client


def set_default_client(client: Client | None) -> None:
    """Replace the process-wide default client (None recreates it on next use)."""
    global _default_client
    with _default_client_lock:
        _default_client = client
