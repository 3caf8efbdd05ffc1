"""Application-wide constants for cachecompat.

Constants that define the wire contract and loader behavior.
For per-run loader settings, see config.py.
"""

# ============================================================================
# Wire Contract (serialized key names)
# ============================================================================

# Serialized keys are fixed by generators written in other languages.
# Keys are case-sensitive and independent of the Python attribute names.

# TestInputDescriptor attribute -> serialized key
DESCRIPTOR_WIRE_KEYS: dict[str, str] = {
    "scope": "Scope",
    "cache_file_path": "CacheFilePath",
    "results_file_path": "ResultsFilePath",
    "users": "LabUserDatas",
}

# AccountDescriptor attribute -> serialized key
ACCOUNT_WIRE_KEYS: dict[str, str] = {
    "upn": "Upn",
    "password": "Password",
    "authority": "Authority",
    "client_id": "ClientId",
}

# Field label used in errors when the document itself has the wrong shape
ROOT_FIELD: str = "<root>"

# ============================================================================
# Authority URLs
# ============================================================================

ALLOWED_AUTHORITY_SCHEMES: frozenset[str] = frozenset({"http", "https"})

# ============================================================================
# Environment Overrides
# ============================================================================

ENV_REQUIRE_USERS: str = "CACHECOMPAT_REQUIRE_USERS"
ENV_STRICT_UPN: str = "CACHECOMPAT_STRICT_UPN"
ENV_LOG_LEVEL: str = "CACHECOMPAT_LOG_LEVEL"

TRUTHY_ENV_VALUES: frozenset[str] = frozenset({"1", "true", "yes", "on"})

DEFAULT_LOG_LEVEL: str = "WARNING"

# ============================================================================
# Logging
# ============================================================================

SYSTEM_LOGGER_NAME: str = "cachecompat.system"

# Placeholder written in place of passwords wherever a descriptor is displayed
REDACTED: str = "***"
