"""Salt generation and the default salt sizing policy."""

from __future__ import annotations

import secrets
from typing import Protocol, runtime_checkable

from .errors import ConfigurationError, SaltSourceError


@runtime_checkable
class SaltSource(Protocol):
    """Source of cryptographically random salt bytes."""

    def generate(self, length: int) -> bytes:
        """Return exactly ``length`` random bytes."""
        ...


class SecretsSaltSource:
    """Salt source backed by the OS CSPRNG via :mod:`secrets`."""

    def generate(self, length: int) -> bytes:
        """Return ``length`` bytes from ``secrets.token_bytes``."""
        try:
            return secrets.token_bytes(length)
        except (OSError, NotImplementedError) as exc:
            message = "entropy source unavailable while generating salt."
            raise SaltSourceError(message) from exc


def default_salt_length(*, password_length: int, min_salt_length: int) -> int:
    """Size an auto-generated salt: never below the floor, grows with the password."""
    return max(min_salt_length, password_length)


def generate_salt(source: SaltSource, length: int) -> bytes:
    """Draw one salt from ``source`` and enforce its exact length."""
    if not isinstance(length, int) or isinstance(length, bool) or length <= 0:
        raise ConfigurationError.for_field("salt length", length, "a positive integer")

    salt = source.generate(length)
    if len(salt) != length:
        message = f"salt source returned {len(salt)} bytes, expected {length}."
        raise SaltSourceError(message)
    return bytes(salt)
