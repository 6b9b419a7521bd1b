"""Immutable Argon2 cost/variant configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from argon2.low_level import Type

from .errors import ConfigurationError

DEFAULT_TIME_COST = 3
DEFAULT_MEMORY_COST_KIB = 64 * 1024
DEFAULT_PARALLELISM = 4
DEFAULT_HASH_LENGTH = 32
DEFAULT_MIN_SALT_LENGTH = 16


class Argon2Version(IntEnum):
    """Argon2 algorithm versions as embedded in the ``v=`` segment."""

    V10 = 0x10
    V13 = 0x13


VARIANT_TAGS: dict[Type, str] = {
    Type.D: "argon2d",
    Type.I: "argon2i",
    Type.ID: "argon2id",
}

_POSITIVE_INT_FIELDS = (
    "time_cost",
    "memory_cost",
    "parallelism",
    "hash_length",
    "min_salt_length",
)


@dataclass(frozen=True, slots=True)
class Argon2Options:
    """Argon2 parameters shared by every operation of one hasher."""

    variant: Type = Type.ID
    version: Argon2Version = Argon2Version.V13
    time_cost: int = DEFAULT_TIME_COST
    memory_cost: int = DEFAULT_MEMORY_COST_KIB
    parallelism: int = DEFAULT_PARALLELISM
    hash_length: int = DEFAULT_HASH_LENGTH
    min_salt_length: int = DEFAULT_MIN_SALT_LENGTH

    def __post_init__(self) -> None:
        if not isinstance(self.variant, Type):
            allowed = ", ".join(member.name for member in Type)
            raise ConfigurationError.for_field(
                "variant",
                self.variant,
                f"one of {allowed}",
            )
        try:
            version = Argon2Version(self.version)
        except ValueError as exc:
            allowed = ", ".join(str(member.value) for member in Argon2Version)
            raise ConfigurationError.for_field(
                "version",
                self.version,
                f"one of {allowed}",
            ) from exc
        # Normalize plain ints (16/19) to the enum member.
        object.__setattr__(self, "version", version)

        for field in _POSITIVE_INT_FIELDS:
            value: object = getattr(self, field)
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                raise ConfigurationError.for_field(field, value, "a positive integer")

    @property
    def variant_tag(self) -> str:
        """Return the ``argon2<variant>`` tag used in encoded strings."""
        return VARIANT_TAGS[self.variant]

    def parameter_template(self) -> str:
        """Render the encoded-string skeleton with empty salt and hash fields."""
        return (
            f"${self.variant_tag}$v={int(self.version)}"
            f"$m={self.memory_cost},t={self.time_cost},p={self.parallelism}$$"
        )


DEFAULT_OPTIONS = Argon2Options()
