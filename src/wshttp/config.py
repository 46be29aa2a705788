"""
=============================================================================
CODEC CONFIGURATION
=============================================================================

Centralized settings for request parsing, response building and logging.

    ┌─────────────────────────────────────────────────────────────────────┐
    │                    CONFIGURATION SOURCES                            │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   1. Code                                                           │
    │      └── CodecConfig(strict_parsing=True)                           │
    │                                                                      │
    │   2. Environment variables                                          │
    │      └── WSHTTP_STRICT_PARSING=1 python app.py                      │
    │                                                                      │
    │   3. Defaults                                                       │
    │      └── Lenient parsing, 64 KB limit, WARNING logs                 │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Dict, Optional


_TRUE_VALUES = {"1", "true", "yes", "on"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


@dataclass
class CodecConfig:
    """
    Configuration for an HttpCodec.

    =========================================================================
    CONFIGURATION GROUPS
    =========================================================================

    PARSING
    - strict_parsing, max_request_size

    RESPONSES
    - strict_status_codes, extra_status_codes

    LOGGING
    - log_level

    =========================================================================
    """

    # ─────────────────────────────────────────────────────────────────────
    # PARSING
    # ─────────────────────────────────────────────────────────────────────

    strict_parsing: bool = False
    """
    Raise MalformedHeaderLine / MalformedRequestLine for malformed input.
    Off by default: colon-less header lines are skipped.
    """

    max_request_size: Optional[int] = 64 * 1024  # 64 KB
    """
    Largest request head accepted, in bytes. None disables the check.
    A handshake request is well under 1 KB.
    """

    # ─────────────────────────────────────────────────────────────────────
    # RESPONSES
    # ─────────────────────────────────────────────────────────────────────

    strict_status_codes: bool = False
    """
    Raise UnknownStatusCode when building a response for an unregistered
    code. Off by default: the reason phrase "Unknown" is sent.
    """

    extra_status_codes: Dict[int, str] = field(default_factory=dict)
    """
    Codes registered on top of the defaults, e.g. {101: "Switching Protocols"}.
    """

    # ─────────────────────────────────────────────────────────────────────
    # LOGGING
    # ─────────────────────────────────────────────────────────────────────

    log_level: str = "WARNING"
    """
    Logging level for the wshttp loggers (DEBUG, INFO, WARNING, ...).
    DEBUG logs every parsed request.
    """

    @classmethod
    def from_env(cls) -> "CodecConfig":
        """
        Create configuration from environment variables.

        =====================================================================
        ENVIRONMENT VARIABLES
        =====================================================================

        WSHTTP_STRICT_PARSING    Strict request parsing (default: off)
        WSHTTP_STRICT_STATUS     Strict status codes (default: off)
        WSHTTP_MAX_REQUEST_SIZE  Max request size in bytes (default: 65536)
        WSHTTP_LOG_LEVEL         Logging level (default: WARNING)

        =====================================================================
        """
        return cls(
            strict_parsing=_env_flag("WSHTTP_STRICT_PARSING", False),
            strict_status_codes=_env_flag("WSHTTP_STRICT_STATUS", False),
            max_request_size=int(os.getenv("WSHTTP_MAX_REQUEST_SIZE", str(64 * 1024))),
            log_level=os.getenv("WSHTTP_LOG_LEVEL", "WARNING"),
        )

    def validate(self) -> None:
        """
        Validate configuration values.

        Raises:
            ValueError: On the first invalid value.
        """
        if self.max_request_size is not None and self.max_request_size <= 0:
            raise ValueError(f"max_request_size must be > 0, got {self.max_request_size}")

        if self.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(f"Invalid log level: {self.log_level}")

        for code in self.extra_status_codes:
            if not isinstance(code, int) or not 100 <= code <= 599:
                raise ValueError(f"Invalid status code: {code!r}. Must be 100-599.")


def configure_logging(config: CodecConfig) -> None:
    """Configure logging based on config."""
    level = getattr(logging, config.log_level.upper(), logging.WARNING)

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    logging.getLogger("wshttp").setLevel(level)
