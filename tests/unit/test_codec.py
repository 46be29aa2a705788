"""
Unit tests for HttpCodec.
"""

import pytest

from wshttp import (
    CodecConfig,
    HttpCodec,
    HTTPParseError,
    HTTPStatus,
    MalformedHeaderLine,
    UnknownStatusCode,
    http_status_codes,
)


@pytest.fixture
def codec(fixed_clock) -> HttpCodec:
    """Codec with default config and a fixed clock."""
    return HttpCodec(clock=fixed_clock)


class TestHttpCodec:
    """Tests for HttpCodec class."""

    def test_parse_and_check_origin(self, codec: HttpCodec, sample_upgrade_request: bytes):
        """Test the request side of the handshake flow."""
        request = codec.parse(sample_upgrade_request)

        assert request.method == "GET"
        assert request.http_version == "1.1"
        assert codec.is_same_origin("http://example.com", request)
        assert not codec.is_same_origin("http://other.com", request)

    def test_responses(self, codec: HttpCodec, fixed_date: str):
        """Test the response side with the injected clock."""
        assert codec.response(HTTPStatus.FORBIDDEN) == (
            "HTTP/1.1 403 Forbidden\r\n"
            "Connection: close\r\n"
            f"Date: {fixed_date}\r\n"
            "\r\n"
        )
        assert codec.html_response("<p>hi</p>").endswith("Content-Length: 9\r\n\r\n<p>hi</p>")
        assert "X-Foo: bar\r\n\r\n" in codec.header_response(404, {"X-Foo": "bar"})

    def test_to_bytes(self, codec: HttpCodec):
        """Test encoding a response for the socket."""
        assert codec.to_bytes(codec.response(426)).startswith(b"HTTP/1.1 426 Upgrade Required\r\n")

    def test_parse_error_maps_to_response(self, codec: HttpCodec):
        """Test answering a bad request with the error's status code."""
        with pytest.raises(HTTPParseError) as exc_info:
            codec.parse(b"NONSENSE\r\n\r\n")

        text = codec.response(exc_info.value.status_code)
        assert text.startswith("HTTP/1.1 400 Bad Request\r\n")

    def test_max_request_size(self, fixed_clock):
        """Test that the configured size limit reaches the parser."""
        codec = HttpCodec(CodecConfig(max_request_size=32), clock=fixed_clock)

        with pytest.raises(HTTPParseError) as exc_info:
            codec.parse(b"GET / HTTP/1.1\r\nHost: a-long-host-name.example.com\r\n\r\n")

        assert exc_info.value.status_code == 413

    def test_strict_parsing(self, fixed_clock):
        """Test that strict_parsing reaches the parser."""
        codec = HttpCodec(CodecConfig(strict_parsing=True), clock=fixed_clock)

        with pytest.raises(MalformedHeaderLine):
            codec.parse(b"GET / HTTP/1.1\r\nno colon here\r\n\r\n")

    def test_strict_status_codes(self, fixed_clock):
        """Test that strict_status_codes reaches the builder."""
        codec = HttpCodec(CodecConfig(strict_status_codes=True), clock=fixed_clock)

        with pytest.raises(UnknownStatusCode):
            codec.response(101)

    def test_extra_status_codes(self, fixed_clock):
        """Test codes registered through config."""
        codec = HttpCodec(
            CodecConfig(extra_status_codes={101: "Switching Protocols"}),
            clock=fixed_clock,
        )

        text = codec.response(101, done=False)
        assert text.startswith("HTTP/1.1 101 Switching Protocols\r\n")
        assert 101 not in http_status_codes

    def test_register_status(self, codec: HttpCodec):
        """Test registering a code at runtime."""
        codec.register_status(201, "Created").register_status(503, "Service Unavailable")

        assert codec.response(201).startswith("HTTP/1.1 201 Created\r\n")
        assert codec.status_codes[503] == "Service Unavailable"
        assert 201 not in http_status_codes

    def test_invalid_config_rejected(self):
        """Test fail-fast validation at construction."""
        with pytest.raises(ValueError):
            HttpCodec(CodecConfig(max_request_size=-1))
