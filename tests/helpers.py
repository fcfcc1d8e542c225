"""
Test doubles shared across the httpchain test modules.
"""

from collections.abc import Callable

import httpx

from httpchain.client import Client


class RecordingClient(Client):
    """Client over httpx.MockTransport that keeps every request and response."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response], **kwargs):
        self.sent: list[httpx.Request] = []
        self.responses: list[httpx.Response] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.sent.append(request)
            return handler(request)

        super().__init__(httpx.Client(transport=httpx.MockTransport(record)), **kwargs)

    def execute(self, request: httpx.Request) -> httpx.Response:
        response = super().execute(request)
        self.responses.append(response)
        return response


def json_response(
    status_code: int = 200,
    body: bytes = b'{"foo":"bar"}',
    content_type: str | None = "application/json; charset=UTF-8",
) -> httpx.Response:
    """Response whose body is left unread until the client reads it."""
    headers = {"Content-Type": content_type} if content_type else {}
    return httpx.Response(status_code, headers=headers, stream=httpx.ByteStream(body))
