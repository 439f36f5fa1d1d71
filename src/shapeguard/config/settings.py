"""Unified settings — CLI flags and env vars in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``SHAPEGUARD_*`` prefix
  3. Code defaults
"""

from __future__ import annotations

from typing import Any

from pydantic_settings import BaseSettings, SettingsConfigDict


class ShapeguardSettings(BaseSettings):
    """Settings for the ``shapeguard`` CLI.

    Frozen after construction and stored on the CLI ``AppContext``.

    Attributes:
        json_output: Render command results as JSON.
        verbose: Enable DEBUG logging for the ``shapeguard`` logger.
        log_json: Emit log lines as JSON instead of console text.
    """

    model_config = SettingsConfigDict(frozen=True, env_prefix="SHAPEGUARD_")

    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> ShapeguardSettings:
        """Construct settings from a CLI invocation.

        Click boolean flags are ``False`` when not passed; those are dropped
        so a ``SHAPEGUARD_*`` env var can still switch the setting on.
        """
        overrides = {key: value for key, value in cli_flags.items() if value}
        return cls(**overrides)
