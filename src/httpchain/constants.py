"""
Well-known HTTP values: media types, header names, methods and status codes.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from enum import Enum

import httpx


CHARSET_UTF8 = "charset=UTF-8"


# =============================================================================
# Enumerations
# =============================================================================

class Format(str, Enum):
    """Structured body formats the request builder can marshal."""
    JSON = "json"
    XML = "xml"

    @classmethod
    def from_content_type(cls, content_type: str | None) -> "Format | None":
        """Classify a Content-Type value, ignoring parameters such as charset."""
        if not content_type:
            return None
        media_type = content_type.split(";", 1)[0].strip().lower()
        return _FORMATS_BY_MEDIA_TYPE.get(media_type)


_FORMATS_BY_MEDIA_TYPE = {
    "application/json": Format.JSON,
    "application/xml": Format.XML,
    "text/xml": Format.XML,
}


class MIME(str, Enum):
    """Media types (see https://www.iana.org/assignments/media-types)."""
    APPLICATION_JSON = "application/json"
    APPLICATION_JSON_CHARSET_UTF8 = f"application/json; {CHARSET_UTF8}"
    APPLICATION_JAVASCRIPT = "application/javascript"
    APPLICATION_JAVASCRIPT_CHARSET_UTF8 = f"application/javascript; {CHARSET_UTF8}"
    APPLICATION_XML = "application/xml"
    APPLICATION_XML_CHARSET_UTF8 = f"application/xml; {CHARSET_UTF8}"
    TEXT_XML = "text/xml"
    TEXT_XML_CHARSET_UTF8 = f"text/xml; {CHARSET_UTF8}"
    APPLICATION_FORM = "application/x-www-form-urlencoded"
    APPLICATION_PROTOBUF = "application/protobuf"
    APPLICATION_MSGPACK = "application/msgpack"
    TEXT_HTML = "text/html"
    TEXT_HTML_CHARSET_UTF8 = f"text/html; {CHARSET_UTF8}"
    TEXT_PLAIN = "text/plain"
    TEXT_PLAIN_CHARSET_UTF8 = f"text/plain; {CHARSET_UTF8}"
    MULTIPART_FORM = "multipart/form-data"
    OCTET_STREAM = "application/octet-stream"

    def __str__(self) -> str:
        return self.value

    @property
    def body_format(self) -> Format | None:
        """Body format for this media type, None when it is not structured."""
        return Format.from_content_type(self.value)


class Header(str, Enum):
    """Header names. Any plain string is accepted wherever a Header is."""
    # Common
    ACCEPT = "Accept"
    ACCEPT_ENCODING = "Accept-Encoding"
    ALLOW = "Allow"
    AUTHORIZATION = "Authorization"
    CONTENT_DISPOSITION = "Content-Disposition"
    CONTENT_ENCODING = "Content-Encoding"
    CONTENT_LENGTH = "Content-Length"
    CONTENT_TYPE = "Content-Type"
    COOKIE = "Cookie"
    SET_COOKIE = "Set-Cookie"
    IF_MODIFIED_SINCE = "If-Modified-Since"
    LAST_MODIFIED = "Last-Modified"
    LOCATION = "Location"
    UPGRADE = "Upgrade"
    VARY = "Vary"
    WWW_AUTHENTICATE = "WWW-Authenticate"
    X_FORWARDED_FOR = "X-Forwarded-For"
    X_FORWARDED_PROTO = "X-Forwarded-Proto"
    X_FORWARDED_PROTOCOL = "X-Forwarded-Protocol"
    X_FORWARDED_SSL = "X-Forwarded-Ssl"
    X_URL_SCHEME = "X-Url-Scheme"
    X_HTTP_METHOD_OVERRIDE = "X-HTTP-Method-Override"
    X_REAL_IP = "X-Real-IP"
    X_REQUEST_ID = "X-Request-ID"
    X_REQUESTED_WITH = "X-Requested-With"
    SERVER = "Server"
    ORIGIN = "Origin"

    # Access control
    ACCESS_CONTROL_REQUEST_METHOD = "Access-Control-Request-Method"
    ACCESS_CONTROL_REQUEST_HEADERS = "Access-Control-Request-Headers"
    ACCESS_CONTROL_ALLOW_ORIGIN = "Access-Control-Allow-Origin"
    ACCESS_CONTROL_ALLOW_METHODS = "Access-Control-Allow-Methods"
    ACCESS_CONTROL_ALLOW_HEADERS = "Access-Control-Allow-Headers"
    ACCESS_CONTROL_ALLOW_CREDENTIALS = "Access-Control-Allow-Credentials"
    ACCESS_CONTROL_EXPOSE_HEADERS = "Access-Control-Expose-Headers"
    ACCESS_CONTROL_MAX_AGE = "Access-Control-Max-Age"

    # Security
    STRICT_TRANSPORT_SECURITY = "Strict-Transport-Security"
    X_CONTENT_TYPE_OPTIONS = "X-Content-Type-Options"
    X_XSS_PROTECTION = "X-XSS-Protection"
    X_FRAME_OPTIONS = "X-Frame-Options"
    CONTENT_SECURITY_POLICY = "Content-Security-Policy"
    X_CSRF_TOKEN = "X-CSRF-Token"

    def __str__(self) -> str:
        return self.value


class Method(str, Enum):
    """HTTP methods (RFC 7231 section 4.3, PATCH from RFC 5789)."""
    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    CONNECT = "CONNECT"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"

    def __str__(self) -> str:
        return self.value


class Status(int):
    """
    HTTP status code.

    Wraps any integer, registered with IANA or not. Registered codes are
    also available as class attributes, e.g. ``Status.NOT_FOUND``.
    """

    @property
    def code(self) -> int:
        return int(self)

    @property
    def reason(self) -> str:
        """Reason phrase, empty for unregistered codes."""
        return httpx.codes.get_reason_phrase(int(self))

    @property
    def is_informational(self) -> bool:
        return 100 <= self < 200

    @property
    def is_success(self) -> bool:
        return 200 <= self < 300

    @property
    def is_redirect(self) -> bool:
        return 300 <= self < 400

    @property
    def is_client_error(self) -> bool:
        return 400 <= self < 500

    @property
    def is_server_error(self) -> bool:
        return 500 <= self < 600

    def __str__(self) -> str:
        return f"{int(self)}: {self.reason}"

    def __repr__(self) -> str:
        return f"Status({int(self)})"


# Status.OK, Status.CREATED, ... Status.NETWORK_AUTHENTICATION_REQUIRED
for _code in httpx.codes:
    setattr(Status, _code.name, Status(_code.value))
del _code
