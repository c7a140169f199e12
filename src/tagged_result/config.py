"""Configuration: frozen Settings installed explicitly by the application.

Settings only toggle diagnostics. Tag derivation is fixed and never depends on
configuration, and building a value never reads the environment or ``.env``.
Applications opt in with ``configure(...)`` or, to honour ``TAGGED_RESULT_*``
variables, ``configure_from_env()`` once at startup.

Example:
    import tagged_result

    tagged_result.configure(warn_on_lowercase_tags=True)
"""

from __future__ import annotations

import os
from typing import Any

import dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from tagged_result.constants import ENV_WARN_LOWERCASE
from tagged_result.errors import ConfigurationError

# Settings field -> environment variable
_ENV_VARS: dict[str, str] = {
    "warn_on_lowercase_tags": ENV_WARN_LOWERCASE,
}


class Settings(BaseModel):
    """Validated, immutable library settings."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    #: Log a warning when a custom tag suffix is not all-uppercase.
    warn_on_lowercase_tags: bool = Field(default=False)


_current = Settings()


def current_settings() -> Settings:
    """Return the installed Settings. Never touches the environment."""
    return _current


def configure(settings: Settings | None = None, **overrides: Any) -> Settings:
    """Install library settings and return them.

    ``configure()`` with no arguments restores the defaults.

    Raises:
        ConfigurationError: An override is unknown or has the wrong type.
    """
    global _current
    base = settings if settings is not None else Settings()
    try:
        _current = Settings.model_validate({**base.model_dump(), **overrides})
    except ValidationError as exc:
        bad = ", ".join(str(err["loc"][0]) for err in exc.errors())
        raise ConfigurationError(
            f"Invalid settings: {bad}",
            hint=f"Known settings: {', '.join(Settings.model_fields)}.",
        ) from exc
    return _current


def configure_from_env() -> Settings:
    """Install settings read from ``.env`` and ``TAGGED_RESULT_*`` variables.

    Only called by applications that opt in; ``ok``/``err`` never call it.

    Raises:
        ConfigurationError: A variable holds a value that is not a boolean.
    """
    global _current
    dotenv.load_dotenv()
    raw: dict[str, Any] = {}
    for field_name, env_var in _ENV_VARS.items():
        value = os.environ.get(env_var)
        if value is not None:
            raw[field_name] = value.strip()
    try:
        _current = Settings.model_validate(raw)
    except ValidationError as exc:
        bad = ", ".join(
            _ENV_VARS.get(str(err["loc"][0]), str(err["loc"][0])) for err in exc.errors()
        )
        raise ConfigurationError(
            f"Invalid environment configuration: {bad}",
            hint="Boolean settings accept 1/0, true/false, yes/no or on/off.",
        ) from exc
    return _current
