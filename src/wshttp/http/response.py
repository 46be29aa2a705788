"""
=============================================================================
HTTP RESPONSE BUILDER
=============================================================================

Formats HTTP/1.1 responses as text for a server that closes the
connection after answering.

=============================================================================
RESPONSE ANATOMY
=============================================================================

    HTTP/1.1 403 Forbidden\\r\\n               ← Status line
    Connection: close\\r\\n                     ← Always sent
    Date: Sat, 17 Oct 2026 12:00:00 GMT\\r\\n   ← Always sent
    Content-Type: text/html\\r\\n               ┐ Optional, depending on
    Content-Length: 9\\r\\n                     ┘ the builder method
    \\r\\n                                      ← Blank line (end of head)
    <p>hi</p>                                 ← Optional body

Order is fixed: status line, fixed headers, caller headers, terminator,
body.

=============================================================================
THREE BUILDERS
=============================================================================

    response(code, done=True)
        Status line + fixed headers. With done=False the blank line is
        left off so more header lines can be appended:

            text = builder.response(101, done=False)
            text += "Upgrade: websocket\\r\\n"
            text += "\\r\\n"

    html_response(body, code=200)
        Complete response with a text/html body.

    header_response(code, headers)
        Complete head with caller headers and no body. The caller can
        concatenate a body whose Content-Length it set itself.

All three return text. Use to_bytes() (or encoding.string_to_buffer)
before writing to the socket.

=============================================================================
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Mapping, Optional

from .encoding import string_to_buffer
from .status_codes import StatusCodeTable, http_status_codes


logger = logging.getLogger(__name__)


CRLF = "\r\n"
HTTP_VERSION = "HTTP/1.1"

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Current time in UTC."""
    return datetime.now(timezone.utc)


class ResponseBuilder:
    """
    Builds HTTP/1.1 response text.

    Owns the StatusCodeTable used for reason phrases and the clock used for
    the Date header. Both can be replaced, which keeps tests deterministic:

        table = StatusCodeTable({201: "Created"})
        builder = ResponseBuilder(status_codes=table, clock=lambda: fixed_dt)

    Builders keep no per-response state and can be shared across threads.
    """

    def __init__(
        self,
        status_codes: Optional[StatusCodeTable] = None,
        clock: Optional[Clock] = None,
        strict: bool = False,
    ):
        """
        Initialize the response builder.

        Args:
            status_codes: Reason phrase table. Defaults to the shared
                          ``http_status_codes``.
            clock: Callable returning the current datetime. Defaults to
                   UTC now.
            strict: Raise UnknownStatusCode for unregistered codes instead
                    of sending the fallback phrase.
        """
        self.status_codes = status_codes if status_codes is not None else http_status_codes
        self.clock = clock or utc_now
        self.strict = strict

    def status_line(self, code: int) -> str:
        """
        Get the HTTP status line (without CRLF).

        Example: "HTTP/1.1 426 Upgrade Required"
        """
        reason = self.status_codes.phrase(code, strict=self.strict)
        return f"{HTTP_VERSION} {int(code)} {reason}"

    def response(self, code: int, done: bool = True) -> str:
        """
        Make a simple response with only the required headers.

        Args:
            code: HTTP status code.
            done: Only an explicit False leaves off the terminating blank
                  line, so the caller can append more headers.

        Returns:
            Response text.

        Raises:
            UnknownStatusCode: In strict mode, for an unregistered code.
        """
        lines = [
            self.status_line(code),
            "Connection: close",
            f"Date: {format_http_date(self.clock())}",
        ]
        logger.debug(f"Built response head: {lines[0]}")
        if done is not False:
            lines.append("")
        return CRLF.join(lines) + CRLF

    def html_response(self, body: str, code: int = 200) -> str:
        """
        Make a complete response with HTML content.

        Content-Length is the character count of ``body``, which is its
        byte count under the one-byte-per-character encoding.
        """
        lines = [
            "Content-Type: text/html",
            f"Content-Length: {len(body)}",
            "",
        ]
        return self.response(code, done=False) + CRLF.join(lines) + CRLF + body

    def header_response(self, code: int, headers: Mapping[str, str]) -> str:
        """
        Make a response head with custom headers and no body.

        Args:
            code: HTTP status code.
            headers: Header name → value, written in mapping order.

        Returns:
            Response text ending with the blank line. A body can be
            concatenated if the matching headers were supplied.
        """
        head = self.response(code, done=False)
        if not headers:
            return head + CRLF

        lines = [f"{name}: {value}" for name, value in headers.items()]
        return head + CRLF.join(lines) + CRLF + CRLF

    @staticmethod
    def to_bytes(text: str) -> bytes:
        """Encode response text for socket.sendall()."""
        return string_to_buffer(text)


def format_http_date(dt: datetime) -> str:
    """
    Format a datetime as an HTTP-date (RFC 7231).

    Format: Day, DD Mon YYYY HH:MM:SS GMT
    Example: Sat, 17 Oct 2026 12:00:00 GMT

    Aware datetimes are converted to UTC first; naive ones are taken as UTC.
    """
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc)

    days = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
    months = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
              "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

    return (
        f"{days[dt.weekday()]}, "
        f"{dt.day:02d} {months[dt.month - 1]} {dt.year} "
        f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d} GMT"
    )


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================
#
# One-liners backed by a builder that uses the shared http_status_codes
# table and the real clock:
#
#     sock.sendall(string_to_buffer(make_http_response(426)))
#     return make_http_html_response("<h1>Not a WebSocket endpoint</h1>")
#
# =============================================================================

_default_builder = ResponseBuilder()


def make_http_response(code: int, done: bool = True) -> str:
    """Make a simple HTTP response without a body and only required headers."""
    return _default_builder.response(code, done)


def make_http_html_response(body: str, code: int = 200) -> str:
    """Make a simple HTTP response with HTML content."""
    return _default_builder.html_response(body, code)


def make_http_header_response(code: int, headers: Mapping[str, str]) -> str:
    """Make a simple HTTP response with customizable headers."""
    return _default_builder.header_response(code, headers)
