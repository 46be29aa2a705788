"""
=============================================================================
HTTP PROTOCOL LAYER
=============================================================================

The HTTP/1.1 pieces a WebSocket server needs before the upgrade:

    ┌─────────────────────────────────────────────────────────────────────┐
    │ ENCODING (encoding.py)                                              │
    │   text ⇄ bytes, one byte per character                              │
    ├─────────────────────────────────────────────────────────────────────┤
    │ REQUEST PARSER (request.py)                                         │
    │   b"GET /chat HTTP/1.1\\r\\n..."  →  HTTPRequest(method="GET", ...)   │
    │   is_same_origin(): Origin header check                             │
    ├─────────────────────────────────────────────────────────────────────┤
    │ STATUS CODES (status_codes.py)                                      │
    │   426 → "Upgrade Required", extensible per table                    │
    ├─────────────────────────────────────────────────────────────────────┤
    │ RESPONSE BUILDER (response.py)                                      │
    │   426  →  "HTTP/1.1 426 Upgrade Required\\r\\nConnection: close..."  │
    └─────────────────────────────────────────────────────────────────────┘

The WebSocket handshake itself (Sec-WebSocket-Accept, 101 Switching
Protocols) lives outside this package.

=============================================================================
"""

from .encoding import string_to_buffer, buffer_to_string
from .request import (
    HTTPRequest,
    RequestParser,
    HTTPParseError,
    MalformedRequestLine,
    MalformedHeaderLine,
    parse_http,
    is_same_origin,
)
from .response import (
    ResponseBuilder,
    format_http_date,
    make_http_response,
    make_http_html_response,
    make_http_header_response,
)
from .status_codes import (
    HTTPStatus,
    StatusCodeTable,
    UnknownStatusCode,
    http_status_codes,
)

__all__ = [
    # Encoding
    "string_to_buffer",
    "buffer_to_string",

    # Request parsing
    "HTTPRequest",
    "RequestParser",
    "HTTPParseError",
    "MalformedRequestLine",
    "MalformedHeaderLine",
    "parse_http",
    "is_same_origin",

    # Response building
    "ResponseBuilder",
    "format_http_date",
    "make_http_response",
    "make_http_html_response",
    "make_http_header_response",

    # Status codes
    "HTTPStatus",
    "StatusCodeTable",
    "UnknownStatusCode",
    "http_status_codes",
]
