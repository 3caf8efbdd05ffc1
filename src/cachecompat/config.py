"""Loader configuration for cachecompat.

Defines the policy knobs the loader applies on top of the fixed wire schema.
Defaults can be overridden from the environment, and CLI flags override both.

Example usage:
    # Defaults (users optional, UPN shape only warned about)
    options = LoaderOptions()

    # Pick up CACHECOMPAT_* environment overrides
    options = LoaderOptions.from_env()
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict

from cachecompat.constants import ENV_REQUIRE_USERS, ENV_STRICT_UPN, TRUTHY_ENV_VALUES

__all__ = ["LoaderOptions"]


def _env_flag(environ: Mapping[str, str], name: str) -> bool | None:
    """Read a boolean flag from the environment, None when unset."""
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return None
    return raw.strip().lower() in TRUTHY_ENV_VALUES


class LoaderOptions(BaseModel):
    """Policy applied when loading a test input.

    Attributes:
        require_users: Reject input whose LabUserDatas is absent or empty.
            When False, both load as an empty user list (for tests that do
            no interactive sign-in).
        strict_upn: Reject UPNs not shaped local-part@domain. When False,
            such UPNs are accepted and a warning is logged.
    """

    require_users: bool = False
    strict_upn: bool = False

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> LoaderOptions:
        """Build options from CACHECOMPAT_* environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            LoaderOptions with unset variables left at their defaults.
        """
        env = os.environ if environ is None else environ
        overrides = {
            field: value
            for field, value in (
                ("require_users", _env_flag(env, ENV_REQUIRE_USERS)),
                ("strict_upn", _env_flag(env, ENV_STRICT_UPN)),
            )
            if value is not None
        }
        return cls(**overrides)
