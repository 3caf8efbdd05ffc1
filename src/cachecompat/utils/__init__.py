"""Shared helpers for cachecompat."""

from cachecompat.utils.validation import is_valid_upn, is_well_formed_url

__all__ = [
    "is_valid_upn",
    "is_well_formed_url",
]
