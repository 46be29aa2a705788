"""
=============================================================================
HTTP STATUS CODES
=============================================================================

Maps numeric status codes to the reason phrases used in response lines.

    HTTP/1.1 426 Upgrade Required
             ─── ────────────────
              │          │
              │          └── Reason phrase (from StatusCodeTable)
              └───────────── Status code

=============================================================================
THE STATUS CODE TABLE
=============================================================================

A handshake layer only ever answers with a handful of codes, so the table
starts small:

    200  OK                  Plain HTML page (no upgrade requested)
    400  Bad Request         Malformed request or handshake headers
    403  Forbidden           Origin check failed
    404  Not Found           Unknown resource
    426  Upgrade Required    Client must speak WebSocket here

Callers extend it for anything else:

    table = StatusCodeTable()
    table.register(201, "Created")
    table[503] = "Service Unavailable"

Entries can be added or replaced but never removed. Every ResponseBuilder
owns a table; the module-level ``http_status_codes`` is the shared default
used by the convenience functions in response.py.

=============================================================================
THREAD SAFETY
=============================================================================

Registration takes a lock, so several threads may register codes during
startup. Lookups read a plain dict and take no lock.

=============================================================================
"""

import logging
import threading
from collections.abc import Mapping
from enum import IntEnum
from typing import Dict, Iterator, Optional


logger = logging.getLogger(__name__)


FALLBACK_PHRASE = "Unknown"


class UnknownStatusCode(LookupError):
    """
    Raised when a response is built for a code missing from the table.

    Only raised in strict mode; otherwise the fallback phrase is used.
    """

    def __init__(self, code: int):
        super().__init__(f"Unknown HTTP status code: {code}")
        self.code = code


class HTTPStatus(IntEnum):
    """
    The status codes a handshake layer answers with by default.

    IntEnum members are plain integers, so they work as table keys:

        >>> HTTPStatus.FORBIDDEN == 403
        True
        >>> http_status_codes[HTTPStatus.FORBIDDEN]
        'Forbidden'
    """

    OK = 200                    # Request served, no upgrade
    BAD_REQUEST = 400           # Malformed request syntax
    FORBIDDEN = 403             # Cross-origin request refused
    NOT_FOUND = 404             # Resource doesn't exist
    UPGRADE_REQUIRED = 426      # Must upgrade protocol

    @property
    def phrase(self) -> str:
        """Default reason phrase for this status code."""
        return DEFAULT_STATUS_PHRASES[self]


DEFAULT_STATUS_PHRASES: Dict[int, str] = {
    HTTPStatus.OK: "OK",
    HTTPStatus.BAD_REQUEST: "Bad Request",
    HTTPStatus.FORBIDDEN: "Forbidden",
    HTTPStatus.NOT_FOUND: "Not Found",
    HTTPStatus.UPGRADE_REQUIRED: "Upgrade Required",
}


class StatusCodeTable(Mapping):
    """
    Extensible mapping of status code to reason phrase.

    Seeded with DEFAULT_STATUS_PHRASES. Supports the read-only Mapping
    interface plus ``table[code] = phrase`` and register(). There is no
    deletion: the table only grows.
    """

    def __init__(self, extra: Optional[Dict[int, str]] = None):
        """
        Initialize the table with the default phrases.

        Args:
            extra: Additional codes to register on top of the defaults.
        """
        self._phrases: Dict[int, str] = {
            int(code): phrase for code, phrase in DEFAULT_STATUS_PHRASES.items()
        }
        self._lock = threading.Lock()
        for code, phrase in (extra or {}).items():
            self.register(code, phrase)

    # =========================================================================
    # MAPPING INTERFACE
    # =========================================================================

    def __getitem__(self, code: int) -> str:
        return self._phrases[self._key(code)]

    def __iter__(self) -> Iterator[int]:
        return iter(self._phrases)

    def __len__(self) -> int:
        return len(self._phrases)

    def __setitem__(self, code: int, phrase: str) -> None:
        self.register(code, phrase)

    @staticmethod
    def _key(code) -> int:
        # Same int() conversion as register(), so reads and writes agree
        try:
            return int(code)
        except (TypeError, ValueError):
            raise KeyError(code)

    def __repr__(self) -> str:
        return f"StatusCodeTable({self._phrases!r})"

    # =========================================================================
    # REGISTRATION AND LOOKUP
    # =========================================================================

    def register(self, code: int, phrase: str) -> "StatusCodeTable":
        """
        Register (or replace) the reason phrase for a status code.

        No validation is done on the code range or the phrase text.

        Returns:
            Self for method chaining
        """
        with self._lock:
            self._phrases[int(code)] = phrase
        return self

    def phrase(self, code: int, strict: bool = False) -> str:
        """
        Get the reason phrase for a code.

        Args:
            code: HTTP status code.
            strict: Raise instead of falling back for unknown codes.

        Returns:
            The registered phrase, or FALLBACK_PHRASE for unknown codes.

        Raises:
            UnknownStatusCode: If ``strict`` and the code is not registered.
        """
        try:
            phrase = self._phrases.get(self._key(code))
        except KeyError:
            phrase = None
        if phrase is not None:
            return phrase

        if strict:
            raise UnknownStatusCode(code)

        logger.warning(f"No reason phrase registered for status {code}, using {FALLBACK_PHRASE!r}")
        return FALLBACK_PHRASE


# Shared default table for the module-level response helpers
http_status_codes = StatusCodeTable()
