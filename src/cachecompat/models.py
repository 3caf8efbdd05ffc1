"""Test input models for cache-compatibility runs.

This module defines the in-memory form of one test case's input. The
serialized keys are fixed by generators written in other languages and
come from the mapping tables in constants.py, not from the attribute names.

Model structure:
    TestInputDescriptor
    ├── scope: Permission scope requested during sign-in
    ├── cache_file_path: Cache artifact to read or write
    ├── results_file_path: Where the harness writes outcomes
    └── users: tuple[AccountDescriptor, ...] (source order)
        └── AccountDescriptor
            ├── upn
            ├── password (never shown in repr)
            ├── authority
            └── client_id

Both models are frozen. Build them with cachecompat.loader.load().
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from cachecompat.constants import ACCOUNT_WIRE_KEYS, DESCRIPTOR_WIRE_KEYS
from cachecompat.utils.validation import is_valid_upn, is_well_formed_url

__all__ = [
    "AccountDescriptor",
    "TestInputDescriptor",
]

# Required text: must be a JSON string and not "". Never trimmed.
NonEmptyStr = Annotated[StrictStr, Field(min_length=1)]


class AccountDescriptor(BaseModel):
    """A lab account used for automated sign-in.

    Attributes:
        upn: User principal name (login identifier).
        password: Plaintext credential. Excluded from repr; never log it.
        authority: Identity-provider endpoint/tenant URL.
        client_id: Application identifier used when requesting tokens.
    """

    upn: NonEmptyStr
    password: NonEmptyStr = Field(repr=False)
    authority: NonEmptyStr
    client_id: NonEmptyStr

    model_config = ConfigDict(frozen=True, alias_generator=ACCOUNT_WIRE_KEYS.__getitem__)

    @field_validator("upn")
    @classmethod
    def upn_shape(cls, value: str, info: ValidationInfo) -> str:
        """Reject malformed UPNs only when the loader asks for strict UPNs."""
        strict = bool(info.context and info.context.get("strict_upn"))
        if strict and not is_valid_upn(value):
            raise PydanticCustomError(
                "upn_format",
                "Upn must look like local-part@domain",
            )
        return value

    @field_validator("authority")
    @classmethod
    def authority_is_url(cls, value: str) -> str:
        if not is_well_formed_url(value):
            raise PydanticCustomError(
                "authority_url",
                "Authority must be an absolute http(s) URL with a host",
            )
        return value


class TestInputDescriptor(BaseModel):
    """One test case's input: what to sign in as and which files to use.

    Attributes:
        scope: OAuth-style permission scope requested during sign-in.
        cache_file_path: Path to the credential cache artifact. Not checked
            for existence; the cache may not exist yet when writing.
        results_file_path: Path where the harness writes test outcomes.
        users: Accounts in source order. Empty when LabUserDatas is absent.
    """

    # Not a pytest test class
    __test__ = False

    scope: NonEmptyStr
    cache_file_path: NonEmptyStr
    results_file_path: NonEmptyStr
    users: tuple[AccountDescriptor, ...] = ()

    model_config = ConfigDict(frozen=True, alias_generator=DESCRIPTOR_WIRE_KEYS.__getitem__)

    @field_validator("users", mode="before")
    @classmethod
    def users_is_array(cls, value: Any) -> Any:
        if not isinstance(value, (list, tuple)):
            raise PydanticCustomError("list_type", "LabUserDatas must be an array")
        return value
