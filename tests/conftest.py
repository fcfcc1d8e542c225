"""
Pytest configuration and shared fixtures for httpchain tests.

Requests never reach the network: clients are built over
httpx.MockTransport with a handler that records what it was sent.
"""

import os
from collections.abc import Callable

import httpx
import pytest

from helpers import RecordingClient, json_response
from httpchain import config as config_module
from httpchain.client import set_default_client
from httpchain.config import set_config


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Hide HTTPCHAIN_* variables and .env files, reset process-wide state."""
    for name in list(os.environ):
        if name.startswith("HTTPCHAIN_"):
            monkeypatch.delenv(name)
    monkeypatch.setattr(config_module, "ENV_LOCATIONS", [])
    set_config(None)
    set_default_client(None)

    yield

    set_config(None)
    set_default_client(None)
    for name in list(os.environ):
        if name.startswith("HTTPCHAIN_"):
            del os.environ[name]


@pytest.fixture
def make_client():
    """Factory for clients answering every request with ``handler``."""
    clients: list[RecordingClient] = []

    def factory(
        handler: Callable[[httpx.Request], httpx.Response] | None = None,
        **kwargs,
    ) -> RecordingClient:
        client = RecordingClient(handler or (lambda request: json_response()), **kwargs)
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.close()
