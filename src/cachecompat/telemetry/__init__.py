"""Logging for cachecompat."""

from cachecompat.telemetry.system_logger import (
    configure_logging,
    get_system_logger,
    redact_descriptor,
)

__all__ = [
    "configure_logging",
    "get_system_logger",
    "redact_descriptor",
]
