"""
Configuration management for httpchain.

Loads transport defaults from environment variables or a .env file.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

import httpx
from dotenv import load_dotenv

from httpchain.errors import ConfigError


# Check common locations for .env
ENV_LOCATIONS = [
    Path.home() / ".httpchain" / ".env",
    Path.home() / ".config" / "httpchain" / ".env",
    Path.cwd() / ".env",
]

DEFAULT_TIMEOUT = 5.0
DEFAULT_DIAL_TIMEOUT = 5.0
DEFAULT_TLS_HANDSHAKE_TIMEOUT = 5.0
DEFAULT_IDLE_CONN_TIMEOUT = 5.0
DEFAULT_MAX_IDLE_CONNS_PER_HOST = 100
DEFAULT_DISABLE_KEEP_ALIVES = False


def load_env_file() -> Path | None:
    """Load the first .env file found, returning its path."""
    for env_path in ENV_LOCATIONS:
        if env_path.exists():
            load_dotenv(env_path)
            return env_path
    return None


@dataclass
class ClientConfig:
    """Transport configuration for a Client."""

    # Seconds
    timeout: float = DEFAULT_TIMEOUT
    dial_timeout: float = DEFAULT_DIAL_TIMEOUT
    tls_handshake_timeout: float = DEFAULT_TLS_HANDSHAKE_TIMEOUT
    idle_conn_timeout: float = DEFAULT_IDLE_CONN_TIMEOUT

    max_idle_conns_per_host: int = DEFAULT_MAX_IDLE_CONNS_PER_HOST
    disable_keep_alives: bool = DEFAULT_DISABLE_KEEP_ALIVES
    verify_ssl: bool = True
    default_headers: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Load configuration from environment variables."""
        return cls(
            timeout=_env_float("HTTPCHAIN_TIMEOUT", DEFAULT_TIMEOUT),
            dial_timeout=_env_float("HTTPCHAIN_DIAL_TIMEOUT", DEFAULT_DIAL_TIMEOUT),
            tls_handshake_timeout=_env_float(
                "HTTPCHAIN_TLS_HANDSHAKE_TIMEOUT", DEFAULT_TLS_HANDSHAKE_TIMEOUT
            ),
            idle_conn_timeout=_env_float("HTTPCHAIN_IDLE_CONN_TIMEOUT", DEFAULT_IDLE_CONN_TIMEOUT),
            max_idle_conns_per_host=_env_int(
                "HTTPCHAIN_MAX_IDLE_CONNS_PER_HOST", DEFAULT_MAX_IDLE_CONNS_PER_HOST
            ),
            disable_keep_alives=_env_bool("HTTPCHAIN_DISABLE_KEEP_ALIVES", DEFAULT_DISABLE_KEEP_ALIVES),
            verify_ssl=_env_bool("HTTPCHAIN_VERIFY_SSL", True),
        )

    def to_httpx_timeout(self) -> httpx.Timeout:
        # httpx's connect phase covers both the TCP dial and the TLS handshake
        return httpx.Timeout(self.timeout, connect=self.dial_timeout + self.tls_handshake_timeout)

    def to_httpx_limits(self) -> httpx.Limits:
        # httpx bounds keep-alive connections per pool, not per host
        return httpx.Limits(
            max_keepalive_connections=0 if self.disable_keep_alives else self.max_idle_conns_per_host,
            keepalive_expiry=self.idle_conn_timeout,
        )


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be a number, got '{raw}'") from e


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer, got '{raw}'") from e


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    value = raw.strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off"):
        return False
    raise ConfigError(f"{name} must be a boolean, got '{raw}'")


# Global config instance
_config: ClientConfig | None = None


def get_config() -> ClientConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        load_env_file()
        _config = ClientConfig.from_env()
    return _config


def set_config(config: ClientConfig | None) -> None:
    """Set the global configuration instance (None reloads from the environment)."""
    global _config
    _config = config
