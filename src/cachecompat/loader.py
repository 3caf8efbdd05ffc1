"""Test input loader - parse and validate cache-compatibility test input.

Turns the raw text of a test input file into a TestInputDescriptor, or
fails with a TestInputError naming the offending field or parse position.

Features:
- Fixed, case-sensitive wire keys (see constants.py)
- No coercion, trimming or defaulting of required fields
- LabUserDatas optional-empty unless LoaderOptions.require_users is set
- Passwords never reach the logs
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from cachecompat.config import LoaderOptions
from cachecompat.constants import ACCOUNT_WIRE_KEYS, DESCRIPTOR_WIRE_KEYS, ROOT_FIELD
from cachecompat.exceptions import (
    InputFileError,
    MalformedInputError,
    MissingFieldError,
    TestInputError,
    TypeMismatchError,
)
from cachecompat.models import TestInputDescriptor
from cachecompat.telemetry.system_logger import get_system_logger
from cachecompat.utils.validation import is_valid_upn

__all__ = [
    "dump",
    "load",
    "load_file",
]

_system_logger = get_system_logger()

# pydantic error types that mean "required value not supplied"
_MISSING_ERROR_TYPES: frozenset[str] = frozenset({"missing", "string_too_short"})


def _wire_path(loc: tuple[int | str, ...]) -> str:
    """Format a pydantic error location as a wire path.

    Example:
        >>> _wire_path(("LabUserDatas", 1, "Upn"))
        'LabUserDatas[1].Upn'
    """
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path or ROOT_FIELD


def _describe(error: dict[str, Any]) -> str:
    if error["type"] == "string_too_short":
        return "Field required (empty string)"
    if error["type"] == "string_unicode":
        return "String is not valid Unicode (lone surrogate escape)"
    return error["msg"]


def _translate_validation_error(e: ValidationError) -> TestInputError:
    """Map a pydantic ValidationError to MissingFieldError or TypeMismatchError.

    The first reported error decides the class; every error is listed.
    """
    errors = e.errors()
    first = errors[0]
    field = _wire_path(first["loc"])
    lines = [f"  - {_wire_path(err['loc'])}: {_describe(err)}" for err in errors]
    message = "Invalid test input:\n" + "\n".join(lines)

    if first["type"] in _MISSING_ERROR_TYPES:
        return MissingFieldError(field, message)
    return TypeMismatchError(field, message)


def _log_rejected(error: TestInputError) -> None:
    details: dict[str, Any] = {
        "event": "test_input_rejected",
        "error_type": type(error).__name__,
    }
    if isinstance(error, MalformedInputError):
        details.update(line=error.line, column=error.column, position=error.position)
    else:
        details["field"] = getattr(error, "field", None)
    _system_logger.warning(details)


def _warn_malformed_upns(descriptor: TestInputDescriptor) -> None:
    for index, user in enumerate(descriptor.users):
        if not is_valid_upn(user.upn):
            _system_logger.warning(
                {
                    "event": "upn_malformed",
                    "field": f"{DESCRIPTOR_WIRE_KEYS['users']}[{index}].{ACCOUNT_WIRE_KEYS['upn']}",
                    "upn": user.upn,
                }
            )


def load(raw_input: str, options: LoaderOptions | None = None) -> TestInputDescriptor:
    """Load a test input from its serialized text.

    Args:
        raw_input: JSON text of the test input.
        options: Loader policy. Defaults to LoaderOptions().

    Returns:
        TestInputDescriptor with users in source order.

    Raises:
        MalformedInputError: If the text is not valid JSON or is nested too deeply.
        MissingFieldError: If a required field is absent or empty.
        TypeMismatchError: If a field has the wrong type or shape.
    """
    options = options or LoaderOptions()

    try:
        data = json.loads(raw_input)
    except json.JSONDecodeError as e:
        error = MalformedInputError(f"Invalid JSON in test input: {e.msg}", e.lineno, e.colno, e.pos)
        _log_rejected(error)
        raise error from e
    except RecursionError as e:
        error = MalformedInputError("Invalid JSON in test input: input nested too deeply", 1, 1, 0)
        _log_rejected(error)
        raise error from e

    try:
        descriptor = TestInputDescriptor.model_validate(
            data,
            context={"strict_upn": options.strict_upn},
        )
    except ValidationError as e:
        error = _translate_validation_error(e)
        _log_rejected(error)
        raise error from e

    if options.require_users and not descriptor.users:
        users_key = DESCRIPTOR_WIRE_KEYS["users"]
        error = MissingFieldError(
            users_key,
            f"Invalid test input:\n  - {users_key}: at least one account is required",
        )
        _log_rejected(error)
        raise error

    if not options.strict_upn:
        _warn_malformed_upns(descriptor)

    _system_logger.info(
        {
            "event": "test_input_loaded",
            "scope": descriptor.scope,
            "cache_file_path": descriptor.cache_file_path,
            "results_file_path": descriptor.results_file_path,
            "accounts": len(descriptor.users),
        }
    )
    for user in descriptor.users:
        _system_logger.debug(
            {
                "event": "test_account_loaded",
                "upn": user.upn,
                "authority": user.authority,
                "client_id": user.client_id,
            }
        )
    return descriptor


def load_file(path: Path, options: LoaderOptions | None = None) -> TestInputDescriptor:
    """Read a test input file and load it.

    The file is decoded as UTF-8; a leading byte-order mark is accepted.
    The path is used as given and not resolved.

    Args:
        path: Path to the test input file.
        options: Loader policy. Defaults to LoaderOptions().

    Returns:
        TestInputDescriptor loaded from the file.

    Raises:
        InputFileError: If the file cannot be read.
        MalformedInputError: If the file is not valid UTF-8 or JSON.
        MissingFieldError: If a required field is absent or empty.
        TypeMismatchError: If a field has the wrong type or shape.
    """
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise InputFileError(f"Could not read test input file {path}: {e}") from e

    try:
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        line_start = raw.rfind(b"\n", 0, e.start) + 1
        error = MalformedInputError(
            f"Test input file {path} is not valid UTF-8",
            line=raw.count(b"\n", 0, e.start) + 1,
            column=e.start - line_start + 1,
            position=e.start,
        )
        _log_rejected(error)
        raise error from e

    return load(text, options)


def dump(descriptor: TestInputDescriptor) -> str:
    """Serialize a descriptor back to the wire schema.

    The output includes passwords; it is meant for generators and
    round-trip checks, not for display (see redact_descriptor).

    Args:
        descriptor: Descriptor to serialize.

    Returns:
        Indented JSON text that load() accepts.
    """
    return descriptor.model_dump_json(by_alias=True, indent=2)
