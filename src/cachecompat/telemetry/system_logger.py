"""System logger for cachecompat.

Messages are dicts with an "event" key, e.g.:
    {"event": "test_input_loaded", "scope": "User.Read", "accounts": 2}

Passwords are never passed to the logger. Use redact_descriptor() when a
descriptor has to be shown to a human.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from cachecompat.constants import (
    ACCOUNT_WIRE_KEYS,
    DESCRIPTOR_WIRE_KEYS,
    REDACTED,
    SYSTEM_LOGGER_NAME,
)
from cachecompat.models import TestInputDescriptor

__all__ = [
    "configure_logging",
    "get_system_logger",
    "redact_descriptor",
]

_HANDLER_MARKER = "_cachecompat_handler"


def get_system_logger() -> logging.Logger:
    """Get the cachecompat system logger."""
    return logging.getLogger(SYSTEM_LOGGER_NAME)


def configure_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """Attach a stderr handler to the system logger.

    Safe to call more than once: a handler added by an earlier call is
    replaced, so the logger always writes to the current sys.stderr.

    Args:
        level: Logging level name ("DEBUG", "INFO", ...) or number.

    Returns:
        The configured system logger.
    """
    logger = get_system_logger()
    logger.setLevel(level.upper() if isinstance(level, str) else level)

    for old in [h for h in logger.handlers if getattr(h, _HANDLER_MARKER, False)]:
        logger.removeHandler(old)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    setattr(handler, _HANDLER_MARKER, True)
    logger.addHandler(handler)

    return logger


def redact_descriptor(descriptor: TestInputDescriptor) -> dict[str, Any]:
    """Render a descriptor in wire-key form with passwords masked.

    Args:
        descriptor: Loaded test input.

    Returns:
        dict keyed like the input file, each Password replaced by "***".
    """
    data = descriptor.model_dump(by_alias=True, mode="json")
    users_key = DESCRIPTOR_WIRE_KEYS["users"]
    password_key = ACCOUNT_WIRE_KEYS["password"]
    data[users_key] = [{**user, password_key: REDACTED} for user in data[users_key]]
    return data
