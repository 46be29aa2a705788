"""
=============================================================================
HTTP CODEC
=============================================================================

One object that wires a CodecConfig into a parser, a status code table and
a response builder. A WebSocket server keeps one codec and uses it from
every connection:

    codec = HttpCodec(CodecConfig(extra_status_codes={101: "Switching Protocols"}))

    def on_data(sock, data):
        try:
            request = codec.parse(data)
        except HTTPParseError as e:
            sock.sendall(codec.to_bytes(codec.response(e.status_code)))
            return

        if not codec.is_same_origin("https://example.com", request):
            sock.sendall(codec.to_bytes(codec.response(HTTPStatus.FORBIDDEN)))
            return

        handshake.upgrade(sock, request)   # outside this package

=============================================================================
"""

import logging
from datetime import datetime
from typing import Callable, Mapping, Optional

from .config import CodecConfig
from .http import (
    HTTPRequest,
    RequestParser,
    ResponseBuilder,
    StatusCodeTable,
    is_same_origin,
)
from .http.encoding import BufferLike


logger = logging.getLogger(__name__)


class HttpCodec:
    """
    HTTP request parsing and response building from one configuration.

    Each codec owns its StatusCodeTable. Codes registered through a codec
    never leak into the shared ``http_status_codes`` table.
    """

    def __init__(
        self,
        config: Optional[CodecConfig] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize the codec.

        Args:
            config: Codec configuration. Uses defaults if not provided.
            clock: Time source for Date headers (tests pass a fixed one).
        """
        self.config = config or CodecConfig()
        self.config.validate()

        self._parser = RequestParser(
            strict=self.config.strict_parsing,
            max_request_size=self.config.max_request_size,
        )

        self._status_codes = StatusCodeTable(self.config.extra_status_codes)

        self._builder = ResponseBuilder(
            status_codes=self._status_codes,
            clock=clock,
            strict=self.config.strict_status_codes,
        )

    @property
    def status_codes(self) -> StatusCodeTable:
        """The codec's own reason phrase table."""
        return self._status_codes

    def register_status(self, code: int, phrase: str) -> "HttpCodec":
        """
        Register a status code for responses built by this codec.

        Returns:
            Self for method chaining
        """
        self._status_codes.register(code, phrase)
        logger.info(f"Registered status {code} {phrase}")
        return self

    # =========================================================================
    # REQUESTS
    # =========================================================================

    def parse(self, buffer: BufferLike) -> HTTPRequest:
        """Parse one request head with the configured parser."""
        return self._parser.parse(buffer)

    def is_same_origin(self, origin: str, request: HTTPRequest) -> bool:
        return is_same_origin(origin, request)

    # =========================================================================
    # RESPONSES
    # =========================================================================

    def response(self, code: int, done: bool = True) -> str:
        return self._builder.response(code, done)

    def html_response(self, body: str, code: int = 200) -> str:
        return self._builder.html_response(body, code)

    def header_response(self, code: int, headers: Mapping[str, str]) -> str:
        return self._builder.header_response(code, headers)

    def to_bytes(self, text: str) -> bytes:
        return self._builder.to_bytes(text)
