"""
Logging setup for the boutique cart.

Every module logs through ``get_logger(__name__)``. Cart log lines carry
shopper-controlled text (session ids from the X-Cart-Session header, product
names and sizes from add-to-cart events), so those values go through the
sanitizers below before they reach a log line.
"""

import logging
import os
import sys
from functools import cache

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_SIMPLE = "%(levelname)s - %(name)s - %(message)s"

# Upstash Redis talks REST over httpx; one line per cart write is noise
_QUIET_LOGGERS = ("httpx", "httpcore", "upstash_redis")

# Control characters that could forge extra log entries (CWE-117)
_LOG_ESCAPES = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t", "\x00": ""})

SESSION_ID_LOG_LENGTH = 8


def configure_logging(level_name: str | None = None) -> None:
    """
    Attach a stdout handler to the root logger.

    Does nothing when the host (uvicorn, pytest) already installed handlers.
    The level comes from LOG_LEVEL unless given; VERCEL=1 drops timestamps
    since the platform adds its own.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    level_name = (level_name or os.environ.get("LOG_LEVEL", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(LOG_FORMAT_SIMPLE if os.environ.get("VERCEL") == "1" else LOG_FORMAT)
    )
    root.setLevel(level)
    root.addHandler(handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


configure_logging()


@cache
def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def sanitize_id_for_logging(session_id: str | None) -> str:
    """Escaped session id, cut to its first few characters; "N/A" when empty."""
    if not session_id:
        return "N/A"
    return str(session_id).translate(_LOG_ESCAPES)[:SESSION_ID_LOG_LENGTH]


def sanitize_string_for_logging(value: str | None, max_length: int = 50) -> str:
    """
    Escaped product name or size for a log line.

    Values longer than max_length are cut and marked with "...".
    """
    if not value:
        return "N/A"
    safe_value = str(value).translate(_LOG_ESCAPES)
    if len(safe_value) <= max_length:
        return safe_value
    return safe_value[:max_length] + "..."


__all__ = [
    "LOG_FORMAT",
    "LOG_FORMAT_SIMPLE",
    "configure_logging",
    "get_logger",
    "sanitize_id_for_logging",
    "sanitize_string_for_logging",
]
