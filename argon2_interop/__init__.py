"""Argon2 password hashing facade over libargon2."""

from .config import HasherSettings, SettingsValidationError, init_logging, load_settings
from .hashing import (
    DEFAULT_OPTIONS,
    Argon2Error,
    Argon2Hasher,
    Argon2Options,
    Argon2Version,
    ConfigurationError,
    EncodedHash,
    EncodingCorruption,
    HashResult,
    OperationalFailure,
    PrimitiveFailure,
    SaltSourceError,
    VerificationOutcome,
    format_encoded,
    parse_encoded,
)

__all__ = [
    "DEFAULT_OPTIONS",
    "Argon2Error",
    "Argon2Hasher",
    "Argon2Options",
    "Argon2Version",
    "ConfigurationError",
    "EncodedHash",
    "EncodingCorruption",
    "HashResult",
    "HasherSettings",
    "OperationalFailure",
    "PrimitiveFailure",
    "SaltSourceError",
    "SettingsValidationError",
    "VerificationOutcome",
    "format_encoded",
    "init_logging",
    "load_settings",
    "parse_encoded",
]
