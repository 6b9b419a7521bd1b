"""Password hashing facade over the Argon2 primitive."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from .encoding import encoded_buffer_length, parse_encoded, strip_filler
from .errors import (
    Argon2ErrorCode,
    EncodingCorruption,
    OperationalFailure,
    PrimitiveFailure,
)
from .options import DEFAULT_OPTIONS, Argon2Options
from .primitive import Argon2Primitive, LibArgon2Primitive
from .salt import SaltSource, SecretsSaltSource, default_salt_length, generate_salt

if TYPE_CHECKING:
    from collections.abc import Iterator

    from argon2_interop.config.settings import HasherSettings

logger = logging.getLogger(__name__)

_TEXT_ENCODING = "utf-8"


class VerificationOutcome(Enum):
    """Successful completions of a verification call."""

    MATCH = "match"
    MISMATCH = "mismatch"


@dataclass(frozen=True, slots=True)
class HashResult:
    """Raw derived hash together with its canonical encoded string."""

    raw_hash: bytes
    encoded: str

    def __iter__(self) -> Iterator[bytes | str]:
        """Allow ``raw_hash, encoded = hasher.hash(...)`` unpacking."""
        yield self.raw_hash
        yield self.encoded


def classify_verify_code(code: int) -> VerificationOutcome:
    """Map a libargon2 verify code to an outcome, raising on operational failure."""
    if code == Argon2ErrorCode.ARGON2_OK:
        return VerificationOutcome.MATCH
    if code == Argon2ErrorCode.ARGON2_VERIFY_MISMATCH:
        return VerificationOutcome.MISMATCH
    raise PrimitiveFailure(code, action="Argon2 verification")


class Argon2Hasher:
    """Hash and verify passwords with one fixed set of Argon2 options.

    Instances hold only immutable options and stateless collaborators, so one
    hasher can be shared across threads. Derivation blocks the calling thread.
    """

    def __init__(
        self,
        options: Argon2Options | None = None,
        *,
        primitive: Argon2Primitive | None = None,
        salt_source: SaltSource | None = None,
    ) -> None:
        self._options = DEFAULT_OPTIONS if options is None else options
        self._primitive = LibArgon2Primitive() if primitive is None else primitive
        self._salt_source = SecretsSaltSource() if salt_source is None else salt_source

    @classmethod
    def from_settings(cls, settings: HasherSettings) -> Argon2Hasher:
        """Build a hasher from env-loaded settings."""
        return cls(settings.options)

    @property
    def options(self) -> Argon2Options:
        """Return the options every operation of this hasher uses."""
        return self._options

    def hash(self, password: bytes, salt: bytes | None = None) -> HashResult:
        """Derive the raw hash and encoded string for ``password``.

        Without ``salt`` a random one of ``max(min_salt_length, len(password))``
        bytes is generated.
        """
        if salt is None:
            salt = generate_salt(
                self._salt_source,
                default_salt_length(
                    password_length=len(password),
                    min_salt_length=self._options.min_salt_length,
                ),
            )

        options = self._options
        result = self._primitive.derive(
            password=password,
            salt=salt,
            time_cost=options.time_cost,
            memory_cost=options.memory_cost,
            parallelism=options.parallelism,
            hash_length=options.hash_length,
            encoded_length=encoded_buffer_length(options, len(salt)),
            variant=options.variant,
            version=int(options.version),
        )
        if result.code != Argon2ErrorCode.ARGON2_OK:
            failure = PrimitiveFailure(result.code, action="Argon2 hashing")
            logger.warning(
                "Argon2 hashing failed (code=%d, name=%s)",
                failure.code,
                failure.code_name,
            )
            raise failure

        encoded = strip_filler(result.encoded_buffer)
        logger.debug(
            "Derived Argon2 hash (variant=%s, version=%d, m=%d, t=%d, p=%d)",
            options.variant_tag,
            options.version,
            options.memory_cost,
            options.time_cost,
            options.parallelism,
        )
        return HashResult(raw_hash=result.raw_hash, encoded=encoded)

    def encode(self, password: bytes, salt: bytes | None = None) -> str:
        """Return only the encoded string for ``password``."""
        return self.hash(password, salt).encoded

    def verify(self, encoded: str, password: bytes) -> bool:
        """Return whether ``password`` matches ``encoded``.

        A wrong password is ``False``. A malformed string, a variant that differs
        from this hasher's, or a primitive failure raises ``OperationalFailure``.
        """
        # libargon2 reads the string up to the first NUL.
        if "\x00" in encoded:
            message = "encoded hash must be NUL-free ASCII"
            raise EncodingCorruption(message)
        try:
            encoded_bytes = encoded.encode("ascii")
        except UnicodeEncodeError as exc:
            message = "encoded hash must be ASCII"
            raise EncodingCorruption(message) from exc

        code = self._primitive.verify(
            encoded=encoded_bytes,
            password=password,
            variant=self._options.variant,
        )
        try:
            outcome = classify_verify_code(code)
        except OperationalFailure:
            logger.warning("Argon2 verification failed (code=%d)", code)
            raise
        return outcome is VerificationOutcome.MATCH

    def needs_rehash(self, encoded: str) -> bool:
        """Return True when ``encoded`` was produced with different options."""
        return not parse_encoded(encoded).matches(self._options)

    def hash_text(self, password: str, salt: str | bytes | None = None) -> HashResult:
        """UTF-8 encode ``password`` (and a text ``salt``) then :meth:`hash`."""
        if isinstance(salt, str):
            salt = salt.encode(_TEXT_ENCODING)
        return self.hash(password.encode(_TEXT_ENCODING), salt)

    def encode_text(self, password: str, salt: str | bytes | None = None) -> str:
        """UTF-8 encode ``password`` (and a text ``salt``) then :meth:`encode`."""
        return self.hash_text(password, salt).encoded

    def verify_text(self, encoded: str, password: str) -> bool:
        """UTF-8 encode ``password`` then :meth:`verify`."""
        return self.verify(encoded, password.encode(_TEXT_ENCODING))
