"""
pytest configuration and fixtures.
"""

from datetime import datetime, timezone
from typing import Callable

import pytest

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from wshttp.http import ResponseBuilder, StatusCodeTable


FIXED_NOW = datetime(2026, 1, 15, 12, 30, 45, tzinfo=timezone.utc)
FIXED_DATE = "Thu, 15 Jan 2026 12:30:45 GMT"


@pytest.fixture
def sample_upgrade_request() -> bytes:
    """Sample WebSocket upgrade request."""
    return (
        b"GET /Chat HTTP/1.1\r\n"
        b"Host: example.com:8080\r\n"
        b"Upgrade: websocket\r\n"
        b"Connection: Upgrade\r\n"
        b"Sec-WebSocket-Key: dGhlIHNhbXBsZSBub25jZQ==\r\n"
        b"Sec-WebSocket-Version: 13\r\n"
        b"Origin: http://Example.com\r\n"
        b"\r\n"
    )


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """Clock that always returns FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def fixed_date() -> str:
    """Date header value produced by fixed_clock."""
    return FIXED_DATE


@pytest.fixture
def status_table() -> StatusCodeTable:
    """Fresh status code table, isolated from the shared default."""
    return StatusCodeTable()


@pytest.fixture
def builder(status_table: StatusCodeTable, fixed_clock) -> ResponseBuilder:
    """Response builder with a private table and a fixed clock."""
    return ResponseBuilder(status_codes=status_table, clock=fixed_clock)
