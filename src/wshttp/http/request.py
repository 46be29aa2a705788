"""
=============================================================================
HTTP REQUEST PARSER
=============================================================================

Parses the raw bytes of an HTTP/1.1 request head into an HTTPRequest.
This is the request that precedes a WebSocket upgrade handshake.

=============================================================================
WHAT THE PARSER SEES
=============================================================================

    GET /Chat HTTP/1.1\\r\\n                      ← Request line
    Host: example.com\\r\\n                       ┐
    Upgrade: websocket\\r\\n                      │
    Connection: Upgrade\\r\\n                     │ Header lines
    Sec-WebSocket-Key: dGhlIHNhbXBsZSBub25jZQ==\\r\\n
    Sec-WebSocket-Version: 13\\r\\n               │
    Origin: http://example.com\\r\\n              ┘
    \\r\\n                                        ← Blank line (end of head)

becomes:

    HTTPRequest(
        method="GET",
        url="/chat",
        http_version="1.1",
        headers={"host": "example.com", "upgrade": "websocket", ...},
    )

=============================================================================
PRECONDITIONS
=============================================================================

1. ONE BUFFER, ONE REQUEST:
   The whole request head must arrive in a single buffer. The parser does
   not buffer partial reads or reassemble a head split across several
   recv() calls. A transport that needs that must do it in front of the
   parser.

2. NO BODY:
   Upgrade requests carry no body. Anything after the blank line is
   ignored.

=============================================================================
NORMALIZATION
=============================================================================

    method         → uppercase            "get"        → "GET"
    url            → lowercase            "/Chat"      → "/chat"
    http_version   → "HTTP/" stripped     "HTTP/1.1"   → "1.1"
    header names   → trimmed, lowercase   " Host "     → "host"
    header values  → trimmed              " a.com "    → "a.com"

URL lowercasing is kept for compatibility with existing handshake code
even though request targets are case-sensitive in general HTTP.

=============================================================================
LENIENT VS STRICT
=============================================================================

Lenient (default):
    Header lines without a colon are skipped.
    Extra fields on the request line are ignored.

Strict:
    Every malformed line raises:
      MalformedRequestLine  - request line is not METHOD SP URL SP HTTP/x
      MalformedHeaderLine   - header line without a colon
      HTTPParseError        - missing blank line terminator

A request line with fewer than three fields raises MalformedRequestLine in
both modes, since no request can be built from it.

=============================================================================
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from .encoding import BufferLike, buffer_to_string


logger = logging.getLogger(__name__)


CRLF = "\r\n"
VERSION_PREFIX = "HTTP/"


class HTTPParseError(Exception):
    """
    Raised when HTTP request parsing fails.

    Carries the HTTP status code that should be returned to the client:

        400 Bad Request       - Malformed request syntax
        413 Payload Too Large - Request exceeds size limit
    """

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code


class MalformedRequestLine(HTTPParseError):
    """The request line is not ``METHOD SP URL SP HTTP/<version>``."""


class MalformedHeaderLine(HTTPParseError):
    """A header line has no colon separating name from value."""


@dataclass(frozen=True)
class HTTPRequest:
    """
    A parsed HTTP request head.

    Attributes:
        method:       Uppercase method token ("GET").
        url:          Request target, lowercased ("/chat").
        http_version: Version without the protocol name ("1.1").
        headers:      Lowercase header name → trimmed value (read-only).

    The headers a WebSocket handshake reads from it:

        connection              "Upgrade"
        upgrade                 "websocket"
        sec-websocket-version   "13"
        sec-websocket-key       base64 of 16 random bytes
        origin                  browser origin (see is_same_origin)
    """

    method: str
    url: str
    http_version: str
    headers: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        # Read-only view keeps the lowercase-key invariant after parsing
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    @property
    def origin(self) -> Optional[str]:
        """The Origin header, or None if the client did not send one."""
        return self.headers.get("origin")

    def get_header(self, name: str, default: str = "") -> str:
        """
        Get a header value (case-insensitive lookup).

        Example:
            key = request.get_header("Sec-WebSocket-Key")
        """
        return self.headers.get(name.lower(), default)


class RequestParser:
    """
    Parses raw HTTP request bytes into HTTPRequest objects.

        Raw bytes
            │
            ▼
        1. Decode              one byte → one character
        2. Size check          too large? → HTTPParseError(413)
        3. Split on CRLF
        4. Request line        METHOD SP URL SP HTTP/x.y
        5. Header lines        up to the blank line
        6. Normalize           → HTTPRequest

    A parser holds only its settings, so one instance can be shared by
    every connection.
    """

    def __init__(self, strict: bool = False, max_request_size: Optional[int] = None):
        """
        Initialize the request parser.

        Args:
            strict: Report malformed lines instead of tolerating them.
            max_request_size: Maximum buffer size in bytes. None disables
                              the check.
        """
        self.strict = strict
        self.max_request_size = max_request_size

    def parse(self, buffer: BufferLike) -> HTTPRequest:
        """
        Parse one complete request head.

        Args:
            buffer: Raw bytes received from the client.

        Returns:
            Parsed HTTPRequest.

        Raises:
            HTTPParseError: If the request is malformed (see module docs).
        """
        try:
            text = buffer_to_string(buffer)
        except (TypeError, ValueError) as e:
            raise HTTPParseError(f"Failed to decode request: {e}")

        # One character per byte, so len(text) is the buffer size
        if self.max_request_size is not None and len(text) > self.max_request_size:
            raise HTTPParseError(
                f"Request too large: {len(text)} bytes",
                status_code=413,
            )

        if self.strict and CRLF * 2 not in text:
            raise HTTPParseError("Incomplete request: no header terminator")

        lines = text.split(CRLF)
        method, url, version = self._parse_request_line(lines[0])
        headers = self._parse_headers(lines[1:])

        request = HTTPRequest(
            method=method.upper(),
            url=url.lower(),
            http_version=version[len(VERSION_PREFIX):],
            headers=headers,
        )
        logger.debug(f"Parsed {request.method} {request.url} HTTP/{request.http_version} with {len(headers)} headers")
        return request

    def _parse_request_line(self, line: str) -> tuple[str, str, str]:
        """
        Split the request line into method, url and version token.

        Format: METHOD SP REQUEST-TARGET SP HTTP-VERSION
        Example: "GET /chat HTTP/1.1"
        """
        parts = line.split(" ")

        if len(parts) < 3:
            raise MalformedRequestLine(f"Invalid request line: {line!r}")

        if self.strict:
            if len(parts) > 3:
                raise MalformedRequestLine(f"Invalid request line: {line!r}")
            if not parts[2].startswith(VERSION_PREFIX):
                raise MalformedRequestLine(f"Invalid HTTP version: {parts[2]!r}")

        method, url, version = parts[:3]
        return method, url, version

    def _parse_headers(self, lines: list[str]) -> Dict[str, str]:
        """
        Parse header lines into a dictionary.

        Stops at the blank line ending the head. Each line is split at its
        first colon, so "Host: example.com:8080" keeps the port in the
        value. A repeated header overwrites the earlier value.
        """
        headers: Dict[str, str] = {}

        for line in lines:
            if not line:
                break

            name, sep, value = line.partition(":")
            if not sep:
                if self.strict:
                    raise MalformedHeaderLine(f"Invalid header line: {line!r}")
                logger.debug(f"Skipping header line without colon: {line!r}")
                continue

            headers[name.strip().lower()] = value.strip()

        return headers


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

def parse_http(buffer: BufferLike, strict: bool = False) -> HTTPRequest:
    """
    Parse an incoming HTTP request from a TCP socket.

    Creates a RequestParser and parses the buffer in one call. Use
    RequestParser directly to reuse settings across requests.
    """
    return RequestParser(strict=strict).parse(buffer)


def is_same_origin(origin: str, request: HTTPRequest) -> bool:
    """
    Check that a request comes from the expected origin.

    Browsers send an Origin header with every WebSocket handshake. The
    comparison is case-insensitive; a request without the header never
    matches.

    Args:
        origin: The origin the server expects ("https://example.com").
        request: The parsed handshake request.

    Returns:
        True if the request's Origin header matches ``origin``.
    """
    request_origin = request.origin
    if request_origin is None:
        return False
    return request_origin.lower() == origin.lower()
