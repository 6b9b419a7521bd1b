"""Canonical ``$argon2<variant>$v=..$m=..,t=..,p=..$salt$hash`` codec.

Everything here is pure: buffer sizing for the primitive's encoder, removal of
the NUL filler the primitive leaves behind, and a Python rendering/parser of the
same format used to cross-check what libargon2 produced.
"""

from __future__ import annotations

import base64
import binascii
import re
from dataclasses import dataclass

from argon2.low_level import Type

from .errors import ConfigurationError, EncodingCorruption
from .options import DEFAULT_MIN_SALT_LENGTH, VARIANT_TAGS, Argon2Options, Argon2Version

# libargon2 writes a NUL terminator after the text it encodes.
ENCODED_BUFFER_SLACK_BYTES = 1

_TAG_VARIANTS: dict[str, Type] = {tag: variant for variant, tag in VARIANT_TAGS.items()}
_DECIMAL = "(0|[1-9][0-9]*)"
_VERSION_PATTERN = re.compile(f"v={_DECIMAL}")
_PARAMS_PATTERN = re.compile(f"m={_DECIMAL},t={_DECIMAL},p={_DECIMAL}")
_BASE64_NOPAD_PATTERN = re.compile("[A-Za-z0-9+/]*")
_PARTS_WITH_VERSION = 6
_PARTS_WITHOUT_VERSION = 5
_VALID_PART_COUNTS = frozenset({_PARTS_WITH_VERSION, _PARTS_WITHOUT_VERSION})


@dataclass(frozen=True, slots=True)
class EncodedHash:
    """Fields recovered from one encoded Argon2 string."""

    variant: Type
    version: Argon2Version
    memory_cost: int
    time_cost: int
    parallelism: int
    salt: bytes
    raw_hash: bytes

    def to_options(
        self,
        *,
        min_salt_length: int = DEFAULT_MIN_SALT_LENGTH,
    ) -> Argon2Options:
        """Rebuild the options that produced this string."""
        return Argon2Options(
            variant=self.variant,
            version=self.version,
            time_cost=self.time_cost,
            memory_cost=self.memory_cost,
            parallelism=self.parallelism,
            hash_length=len(self.raw_hash),
            min_salt_length=min_salt_length,
        )

    def matches(self, options: Argon2Options) -> bool:
        """Return True when variant, version and costs equal ``options``."""
        return (
            self.variant == options.variant
            and self.version == options.version
            and self.memory_cost == options.memory_cost
            and self.time_cost == options.time_cost
            and self.parallelism == options.parallelism
            and len(self.raw_hash) == options.hash_length
        )


def base64_nopad_length(length: int) -> int:
    """Return the unpadded base64 length of ``length`` bytes, ``ceil(n / 3 * 4)``."""
    if length < 0:
        raise ConfigurationError.for_field("length", length, "zero or positive")
    return (length * 4 + 2) // 3


def encoded_buffer_length(options: Argon2Options, salt_length: int) -> int:
    """Return the buffer size libargon2 needs to encode a hash for ``options``."""
    return (
        len(options.parameter_template())
        + base64_nopad_length(options.hash_length)
        + base64_nopad_length(salt_length)
        + ENCODED_BUFFER_SLACK_BYTES
    )


def strip_filler(buffer: bytes) -> str:
    """Drop NUL filler bytes from an encoder buffer and decode it as ASCII."""
    cleaned = bytes(byte for byte in buffer if byte != 0)
    try:
        text = cleaned.decode("ascii")
    except UnicodeDecodeError as exc:
        message = f"non-ASCII byte at offset {exc.start} of encoded buffer"
        raise EncodingCorruption(message) from exc
    if not text.isprintable():
        message = "non-printable character in encoded buffer"
        raise EncodingCorruption(message)
    return text


def b64encode_nopad(data: bytes) -> str:
    """Encode bytes as standard base64 without ``=`` padding."""
    return base64.b64encode(data).decode("ascii").rstrip("=")


def b64decode_nopad(text: str, *, field: str = "base64 field") -> bytes:
    """Decode unpadded standard base64, rejecting padding and foreign characters."""
    if _BASE64_NOPAD_PATTERN.fullmatch(text) is None or len(text) % 4 == 1:
        message = f"invalid unpadded base64 in {field}"
        raise EncodingCorruption(message)
    padded = text + "=" * (-len(text) % 4)
    try:
        return base64.b64decode(padded.encode("ascii"), validate=True)
    except (binascii.Error, ValueError) as exc:
        message = f"invalid unpadded base64 in {field}"
        raise EncodingCorruption(message) from exc


def format_encoded(options: Argon2Options, salt: bytes, raw_hash: bytes) -> str:
    """Render the canonical encoded string for an (options, salt, hash) triple."""
    return (
        f"${options.variant_tag}$v={int(options.version)}"
        f"$m={options.memory_cost},t={options.time_cost},p={options.parallelism}"
        f"${b64encode_nopad(salt)}${b64encode_nopad(raw_hash)}"
    )


def parse_encoded(encoded: str) -> EncodedHash:
    """Parse and validate an encoded Argon2 string.

    A string without the ``v=`` segment is read as version 0x10, which is how
    libargon2 decodes hashes written before versions were embedded.
    """
    if not encoded.isascii() or "\x00" in encoded:
        message = "encoded hash must be NUL-free ASCII"
        raise EncodingCorruption(message)

    parts = encoded.split("$")
    if parts[0] != "" or len(parts) not in _VALID_PART_COUNTS:
        message = f"expected '$'-delimited segments, got {len(parts) - 1}"
        raise EncodingCorruption(message)

    variant = _parse_variant(parts[1])
    if len(parts) == _PARTS_WITH_VERSION:
        version = _parse_version(parts[2])
        params_segment, salt_segment, hash_segment = parts[3:]
    else:
        version = Argon2Version.V10
        params_segment, salt_segment, hash_segment = parts[2:]

    memory_cost, time_cost, parallelism = _parse_params(params_segment)
    return EncodedHash(
        variant=variant,
        version=version,
        memory_cost=memory_cost,
        time_cost=time_cost,
        parallelism=parallelism,
        salt=b64decode_nopad(salt_segment, field="salt segment"),
        raw_hash=b64decode_nopad(hash_segment, field="hash segment"),
    )


def _parse_variant(segment: str) -> Type:
    variant = _TAG_VARIANTS.get(segment)
    if variant is None:
        message = f"unknown variant tag {segment!r}"
        raise EncodingCorruption(message)
    return variant


def _parse_version(segment: str) -> Argon2Version:
    match = _VERSION_PATTERN.fullmatch(segment)
    if match is None:
        message = f"malformed version segment {segment!r}"
        raise EncodingCorruption(message)
    try:
        return Argon2Version(int(match.group(1)))
    except ValueError as exc:
        message = f"unsupported version {match.group(1)}"
        raise EncodingCorruption(message) from exc


def _parse_params(segment: str) -> tuple[int, int, int]:
    match = _PARAMS_PATTERN.fullmatch(segment)
    if match is None:
        message = f"malformed parameter segment {segment!r}"
        raise EncodingCorruption(message)
    memory_cost, time_cost, parallelism = (int(group) for group in match.groups())
    return memory_cost, time_cost, parallelism
