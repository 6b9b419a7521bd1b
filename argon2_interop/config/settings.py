"""Typed hasher settings loaded from static environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

from argon2.low_level import Type

from argon2_interop.hashing.errors import ConfigurationError
from argon2_interop.hashing.options import (
    DEFAULT_HASH_LENGTH,
    DEFAULT_MEMORY_COST_KIB,
    DEFAULT_MIN_SALT_LENGTH,
    DEFAULT_PARALLELISM,
    DEFAULT_TIME_COST,
    Argon2Options,
    Argon2Version,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

LogLevel = str

ENV_VARIANT = "ARGON2_VARIANT"
ENV_VERSION = "ARGON2_VERSION"
ENV_TIME_COST = "ARGON2_TIME_COST"
ENV_MEMORY_COST = "ARGON2_MEMORY_COST"
ENV_PARALLELISM = "ARGON2_PARALLELISM"
ENV_HASH_LENGTH = "ARGON2_HASH_LENGTH"
ENV_MIN_SALT_LENGTH = "ARGON2_MIN_SALT_LENGTH"
ENV_LOG_LEVEL = "ARGON2_LOG_LEVEL"

DEFAULT_VARIANT = Type.ID
DEFAULT_VERSION = Argon2Version.V13
DEFAULT_LOG_LEVEL: LogLevel = "INFO"

VALID_VARIANTS: dict[str, Type] = {"d": Type.D, "i": Type.I, "id": Type.ID}
VALID_VERSIONS: dict[str, Argon2Version] = {
    str(int(member)): member for member in Argon2Version
}
VALID_LOG_LEVELS: frozenset[LogLevel] = frozenset(
    {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"},
)


class SettingsValidationError(ConfigurationError):
    """Raised when static settings env vars contain invalid values."""

    @classmethod
    def for_empty_value(cls, env_var: str) -> SettingsValidationError:
        """Build error for empty non-optional env var values."""
        message = f"Invalid {env_var}: value cannot be empty."
        return cls(message)

    @classmethod
    def for_invalid_choice(
        cls,
        env_var: str,
        value: str,
        allowed_values: str,
    ) -> SettingsValidationError:
        """Build error for enum-like env vars with fixed allowlists."""
        message = f"Invalid {env_var}: {value!r}. Allowed values: {allowed_values}."
        return cls(message)

    @classmethod
    def for_non_positive_int(cls, env_var: str, value: str) -> SettingsValidationError:
        """Build error for numeric env vars that are not positive integers."""
        message = f"Invalid {env_var}: {value!r}. Must be a positive integer."
        return cls(message)


@dataclass(frozen=True, slots=True)
class HasherSettings:
    """Resolved static configuration for a hasher process."""

    options: Argon2Options
    log_level: LogLevel


def load_settings(environ: Mapping[str, str] | None = None) -> HasherSettings:
    """Load and validate static settings from process environment."""
    env = os.environ if environ is None else environ

    options = Argon2Options(
        variant=_read_variant(env),
        version=_read_version(env),
        time_cost=_read_positive_int(env, ENV_TIME_COST, DEFAULT_TIME_COST),
        memory_cost=_read_positive_int(env, ENV_MEMORY_COST, DEFAULT_MEMORY_COST_KIB),
        parallelism=_read_positive_int(env, ENV_PARALLELISM, DEFAULT_PARALLELISM),
        hash_length=_read_positive_int(env, ENV_HASH_LENGTH, DEFAULT_HASH_LENGTH),
        min_salt_length=_read_positive_int(
            env,
            ENV_MIN_SALT_LENGTH,
            DEFAULT_MIN_SALT_LENGTH,
        ),
    )
    return HasherSettings(options=options, log_level=_read_log_level(env))


def _read_variant(environ: Mapping[str, str]) -> Type:
    raw = environ.get(ENV_VARIANT)
    if raw is None:
        return DEFAULT_VARIANT
    value = raw.strip().lower()
    if value in VALID_VARIANTS:
        return VALID_VARIANTS[value]
    allowed = ", ".join(sorted(VALID_VARIANTS))
    raise SettingsValidationError.for_invalid_choice(ENV_VARIANT, raw, allowed)


def _read_version(environ: Mapping[str, str]) -> Argon2Version:
    raw = environ.get(ENV_VERSION)
    if raw is None:
        return DEFAULT_VERSION
    value = raw.strip()
    if value in VALID_VERSIONS:
        return VALID_VERSIONS[value]
    allowed = ", ".join(sorted(VALID_VERSIONS))
    raise SettingsValidationError.for_invalid_choice(ENV_VERSION, raw, allowed)


def _read_positive_int(environ: Mapping[str, str], env_var: str, default: int) -> int:
    raw = environ.get(env_var)
    if raw is None:
        return default
    value = raw.strip()
    if not value:
        raise SettingsValidationError.for_empty_value(env_var)
    if not value.isascii() or not value.isdigit() or int(value) <= 0:
        raise SettingsValidationError.for_non_positive_int(env_var, raw)
    return int(value)


def _read_log_level(environ: Mapping[str, str]) -> LogLevel:
    raw = environ.get(ENV_LOG_LEVEL)
    if raw is None:
        return DEFAULT_LOG_LEVEL
    value = raw.strip().upper()
    if value in VALID_LOG_LEVELS:
        return value
    allowed = ", ".join(sorted(VALID_LOG_LEVELS))
    raise SettingsValidationError.for_invalid_choice(ENV_LOG_LEVEL, raw, allowed)
