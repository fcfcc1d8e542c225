"""
httpchain - Fluent HTTP request builder

Chainable request configuration (headers, query and path parameters,
bearer and basic auth), JSON and XML body marshaling, and a thin client
wrapper with connection pooling defaults, on top of httpx.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from httpchain.client import Client, get_default_client, set_default_client
from httpchain.codecs import JSONCodec, XMLCodec, codec_for
from httpchain.config import ClientConfig, get_config, set_config
from httpchain.constants import MIME, Format, Header, Method, Status
from httpchain.errors import (
    ConfigError,
    DecodeError,
    HTTPChainError,
    HTTPStatusError,
    MissingContentTypeError,
    RequestAlreadySentError,
    TransportError,
    UnsupportedFormatError,
)
from httpchain.request import Request

__version__ = "0.1.0"
__author__ = "DNS Science.io"
__copyright__ = "Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company"

__all__ = [
    "Client",
    "ClientConfig",
    "ConfigError",
    "DecodeError",
    "Format",
    "HTTPChainError",
    "HTTPStatusError",
    "Header",
    "JSONCodec",
    "MIME",
    "Method",
    "MissingContentTypeError",
    "Request",
    "RequestAlreadySentError",
    "Status",
    "TransportError",
    "UnsupportedFormatError",
    "XMLCodec",
    "codec_for",
    "get_config",
    "get_default_client",
    "set_config",
    "set_default_client",
]
