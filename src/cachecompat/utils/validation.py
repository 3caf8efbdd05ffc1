"""Validation utilities for cachecompat.

Provides reusable predicates for account field values. Predicates never
raise: malformed values report False so callers can choose a policy.
"""

from __future__ import annotations

import re
from urllib.parse import urlparse

from cachecompat.constants import ALLOWED_AUTHORITY_SCHEMES

__all__ = [
    "is_valid_upn",
    "is_well_formed_url",
]

# local-part@domain, domain has at least one dot, no whitespace anywhere
_UPN_PATTERN: re.Pattern[str] = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def is_valid_upn(value: str) -> bool:
    """Check that a user principal name looks like local-part@domain.

    Args:
        value: The UPN to check.

    Returns:
        True if the value has exactly one "@" with a dotted domain after it.

    Example:
        >>> is_valid_upn("user@contoso.com")
        True
        >>> is_valid_upn("user")
        False
    """
    if not isinstance(value, str):
        return False
    return _UPN_PATTERN.match(value) is not None


def is_well_formed_url(value: str) -> bool:
    """Check that a value is an absolute http(s) URL with a host.

    The value is not normalized; only its shape is checked.

    Args:
        value: The URL to check.

    Returns:
        True if the value parses with an allowed scheme and a host.
    """
    if not isinstance(value, str) or any(c.isspace() for c in value):
        return False
    try:
        parsed = urlparse(value)
        # Accessing .port validates the port component
        parsed.port
    except ValueError:
        return False
    return parsed.scheme.lower() in ALLOWED_AUTHORITY_SCHEMES and bool(parsed.hostname)
