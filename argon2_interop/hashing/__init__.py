"""Argon2 password hashing: options, encoded-string codec and facade."""

from .encoding import (
    EncodedHash,
    b64decode_nopad,
    b64encode_nopad,
    base64_nopad_length,
    encoded_buffer_length,
    format_encoded,
    parse_encoded,
    strip_filler,
)
from .errors import (
    Argon2Error,
    Argon2ErrorCode,
    ConfigurationError,
    EncodingCorruption,
    OperationalFailure,
    PrimitiveFailure,
    SaltSourceError,
)
from .facade import Argon2Hasher, HashResult, VerificationOutcome, classify_verify_code
from .options import DEFAULT_OPTIONS, Argon2Options, Argon2Version
from .primitive import Argon2Primitive, DeriveResult, LibArgon2Primitive
from .salt import SaltSource, SecretsSaltSource, default_salt_length, generate_salt

__all__ = [
    "DEFAULT_OPTIONS",
    "Argon2Error",
    "Argon2ErrorCode",
    "Argon2Hasher",
    "Argon2Options",
    "Argon2Primitive",
    "Argon2Version",
    "ConfigurationError",
    "DeriveResult",
    "EncodedHash",
    "EncodingCorruption",
    "HashResult",
    "LibArgon2Primitive",
    "OperationalFailure",
    "PrimitiveFailure",
    "SaltSource",
    "SaltSourceError",
    "SecretsSaltSource",
    "VerificationOutcome",
    "b64decode_nopad",
    "b64encode_nopad",
    "base64_nopad_length",
    "classify_verify_code",
    "default_salt_length",
    "encoded_buffer_length",
    "format_encoded",
    "generate_salt",
    "parse_encoded",
    "strip_filler",
]
