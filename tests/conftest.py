"""Shared fixtures for cachecompat tests."""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Iterator

import pytest


def _make_account(upn: str = "a@b.com", **overrides: Any) -> dict[str, Any]:
    account = {
        "Upn": upn,
        "Password": "p",
        "Authority": "https://login.example.com/tenant",
        "ClientId": "cid",
    }
    account.update(overrides)
    return account


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep CACHECOMPAT_* overrides from the outer environment out of tests."""
    for name in ("CACHECOMPAT_REQUIRE_USERS", "CACHECOMPAT_STRICT_UPN", "CACHECOMPAT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_account() -> Callable[..., dict[str, Any]]:
    """Factory for one LabUserDatas entry in wire form."""
    return _make_account


@pytest.fixture
def valid_payload() -> dict[str, Any]:
    """Test input with one account, in wire form."""
    return {
        "Scope": "User.Read",
        "CacheFilePath": "/tmp/cache.bin",
        "ResultsFilePath": "/tmp/results.json",
        "LabUserDatas": [_make_account()],
    }


@pytest.fixture
def valid_text(valid_payload: dict[str, Any]) -> str:
    return json.dumps(valid_payload)


@pytest.fixture(autouse=True)
def reset_system_logger() -> Iterator[None]:
    """Drop handlers and level set by CLI runs so tests stay isolated."""
    yield
    logger = logging.getLogger("cachecompat.system")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
