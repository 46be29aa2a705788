"""
wshttp - HTTP/1.1 request parsing and response building for WebSocket servers.

Parses the HTTP request that precedes a WebSocket upgrade and formats the
plain HTTP responses sent when no upgrade happens:

    from wshttp import parse_http, is_same_origin, make_http_response, string_to_buffer

    request = parse_http(data)
    if not is_same_origin("https://example.com", request):
        sock.sendall(string_to_buffer(make_http_response(403)))
"""

from .codec import HttpCodec
from .config import CodecConfig, configure_logging
from .http import (
    HTTPRequest,
    HTTPStatus,
    HTTPParseError,
    MalformedHeaderLine,
    MalformedRequestLine,
    RequestParser,
    ResponseBuilder,
    StatusCodeTable,
    UnknownStatusCode,
    buffer_to_string,
    format_http_date,
    http_status_codes,
    is_same_origin,
    make_http_header_response,
    make_http_html_response,
    make_http_response,
    parse_http,
    string_to_buffer,
)

__version__ = "1.0.0"

__all__ = [
    "HttpCodec",
    "CodecConfig",
    "configure_logging",
    "HTTPRequest",
    "HTTPStatus",
    "HTTPParseError",
    "MalformedHeaderLine",
    "MalformedRequestLine",
    "RequestParser",
    "ResponseBuilder",
    "StatusCodeTable",
    "UnknownStatusCode",
    "buffer_to_string",
    "format_http_date",
    "http_status_codes",
    "is_same_origin",
    "make_http_header_response",
    "make_http_html_response",
    "make_http_response",
    "parse_http",
    "string_to_buffer",
    "__version__",
]
