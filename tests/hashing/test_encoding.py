"""Tests for encoded-string sizing, filler stripping and parsing."""

from __future__ import annotations

import pytest
from argon2.low_level import Type

from argon2_interop.hashing.encoding import (
    ENCODED_BUFFER_SLACK_BYTES,
    b64decode_nopad,
    b64encode_nopad,
    base64_nopad_length,
    encoded_buffer_length,
    format_encoded,
    parse_encoded,
    strip_filler,
)
from argon2_interop.hashing.errors import (
    Argon2ErrorCode,
    ConfigurationError,
    EncodingCorruption,
    PrimitiveFailure,
)
from argon2_interop.hashing.options import Argon2Options, Argon2Version

SALT = bytes(range(16))
RAW_HASH = bytes(range(100, 132))
# Reference string from the Argon2 command-line tool's documentation.
REFERENCE_ENCODED = (
    "$argon2i$v=19$m=65536,t=2,p=4$c29tZXNhbHQ"
    "$RdescudvJCsgt3ub+b+dWRWJTmaaJObG"
)


@pytest.mark.parametrize(
    ("length", "expected"),
    [(0, 0), (1, 2), (2, 3), (3, 4), (16, 22), (32, 43), (64, 86)],
)
def test_base64_nopad_length_matches_ceil_of_four_thirds(
    length: int,
    expected: int,
) -> None:
    """Ensure unpadded base64 sizing is exact, including zero-length input."""
    if base64_nopad_length(length) != expected:
        raise AssertionError
    if len(b64encode_nopad(bytes(length))) != expected:
        raise AssertionError


def test_base64_nopad_length_rejects_negative_length() -> None:
    """Ensure negative sizes are rejected instead of producing a bogus length."""
    with pytest.raises(ConfigurationError):
        _ = base64_nopad_length(-1)


def test_encoded_buffer_length_is_template_plus_fields_plus_one(
    cheap_options: Argon2Options,
) -> None:
    """Ensure buffer capacity leaves exactly one byte beyond the encoded text."""
    template = cheap_options.parameter_template()
    expected = len(template) + 43 + 22 + ENCODED_BUFFER_SLACK_BYTES

    if encoded_buffer_length(cheap_options, len(SALT)) != expected:
        raise AssertionError

    encoded = format_encoded(cheap_options, SALT, RAW_HASH)
    if len(encoded) + ENCODED_BUFFER_SLACK_BYTES != expected:
        raise AssertionError


def test_format_then_parse_recovers_options_salt_and_hash(
    cheap_options: Argon2Options,
) -> None:
    """Ensure the serialized string parses back to the original parameters."""
    encoded = format_encoded(cheap_options, SALT, RAW_HASH)
    parsed = parse_encoded(encoded)

    rebuilt = parsed.to_options(min_salt_length=cheap_options.min_salt_length)
    if rebuilt != cheap_options:
        raise AssertionError
    if parsed.salt != SALT or parsed.raw_hash != RAW_HASH:
        raise AssertionError
    if not parsed.matches(cheap_options):
        raise AssertionError


def test_format_encoded_uses_canonical_layout() -> None:
    """Ensure field order, separators and unpadded base64 match the format."""
    options = Argon2Options(
        variant=Type.I,
        version=Argon2Version.V13,
        time_cost=2,
        memory_cost=65536,
        parallelism=4,
        hash_length=24,
    )
    parsed = parse_encoded(REFERENCE_ENCODED)

    rendered = format_encoded(options, parsed.salt, parsed.raw_hash)

    if rendered != REFERENCE_ENCODED:
        raise AssertionError
    if parsed.salt != b"somesalt":
        raise AssertionError


@pytest.mark.parametrize("variant", list(Type))
def test_encoded_strings_are_nul_free_printable_ascii(variant: Type) -> None:
    """Ensure every variant renders NUL-free printable ASCII with no padding."""
    options = Argon2Options(variant=variant, hash_length=31)
    encoded = format_encoded(options, b"\x00" * 17, b"\xff" * 31)

    if "\x00" in encoded or "=" in encoded.rsplit("$", 2)[-1]:
        raise AssertionError
    if not (encoded.isascii() and encoded.isprintable()):
        raise AssertionError


def test_zero_length_salt_and_hash_render_as_empty_fields(
    cheap_options: Argon2Options,
) -> None:
    """Ensure empty salt/hash yield empty segments rather than crashing."""
    encoded = format_encoded(cheap_options, b"", b"")

    if not encoded.endswith("$$"):
        raise AssertionError
    parsed = parse_encoded(encoded)
    if parsed.salt != b"" or parsed.raw_hash != b"":
        raise AssertionError


def test_strip_filler_removes_every_nul_byte() -> None:
    """Ensure NUL filler is removed wherever the encoder left it."""
    buffer = b"$argon2id$v=19" + b"\x00" * 5

    if strip_filler(buffer) != "$argon2id$v=19":
        raise AssertionError
    if strip_filler(b"\x00\x00") != "":
        raise AssertionError


@pytest.mark.parametrize("buffer", [b"$argon2id\xc3\xa9\x00", b"$argon2id\n\x00"])
def test_strip_filler_rejects_corrupted_buffer(buffer: bytes) -> None:
    """Ensure non-ASCII or control bytes surface as EncodingCorruption."""
    with pytest.raises(EncodingCorruption) as exc_info:
        _ = strip_filler(buffer)

    if not isinstance(exc_info.value, PrimitiveFailure):
        raise AssertionError
    if exc_info.value.code != Argon2ErrorCode.ARGON2_ENCODING_FAIL:
        raise AssertionError


def test_parse_accepts_legacy_string_without_version_segment() -> None:
    """Ensure a string with no v= segment reads as version 0x10."""
    parsed = parse_encoded("$argon2i$m=4096,t=3,p=1$c29tZXNhbHQ$AAAAAAAAAAAAAAAAAAAAAA")

    if parsed.version is not Argon2Version.V10:
        raise AssertionError
    if (parsed.memory_cost, parsed.time_cost, parsed.parallelism) != (4096, 3, 1):
        raise AssertionError


@pytest.mark.parametrize(
    "encoded",
    [
        "argon2id$v=19$m=8,t=1,p=1$c29tZXNhbHQ$AAAAAAAAAAAAAAAAAAAAAA",
        "$argon2id$v=19$m=8,t=1,p=1$AAAAAAAAAAAAAAAAAAAAAA",
        "$argon2x$v=19$m=8,t=1,p=1$c29tZXNhbHQ$AAAAAAAAAAAAAAAAAAAAAA",
        "$argon2id$v=18$m=8,t=1,p=1$c29tZXNhbHQ$AAAAAAAAAAAAAAAAAAAAAA",
        "$argon2id$v=19$t=1,m=8,p=1$c29tZXNhbHQ$AAAAAAAAAAAAAAAAAAAAAA",
        "$argon2id$v=19$m=8, t=1,p=1$c29tZXNhbHQ$AAAAAAAAAAAAAAAAAAAAAA",
        "$argon2id$v=19$m=08,t=1,p=1$c29tZXNhbHQ$AAAAAAAAAAAAAAAAAAAAAA",
        "$argon2id$v=19$m=8,t=1,p=1$c29tZXNhbHQ=$AAAAAAAAAAAAAAAAAAAAAA",
        "$argon2id$v=19$m=8,t=1,p=1$c29tZXNhbHQ$A",
        "$argon2id$v=19$m=8,t=1,p=1$c29t-XNhbHQ$AAAAAAAAAAAAAAAAAAAAAA",
        "$argon2id$v=19$m=8,t=1,p=1$c29tZXNhbHQ$AAAAAAAAAAAAAAAAAAAAAA$",
        "$argon2id$v=19$m=8,t=1,p=1$c29tZXNhbHQ$AAAAAAAAAAAAAAAAAAAAAé",
    ],
)
def test_parse_rejects_malformed_strings(encoded: str) -> None:
    """Ensure structural and field-level damage raises EncodingCorruption."""
    with pytest.raises(EncodingCorruption):
        _ = parse_encoded(encoded)


def test_b64decode_nopad_round_trips_arbitrary_lengths() -> None:
    """Ensure unpadded decoding restores inputs of every residue mod 3."""
    for length in range(7):
        data = bytes(range(200, 200 + length))
        if b64decode_nopad(b64encode_nopad(data)) != data:
            raise AssertionError


def test_matches_detects_cost_drift(cheap_options: Argon2Options) -> None:
    """Ensure a parsed string no longer matches options with a higher cost."""
    parsed = parse_encoded(format_encoded(cheap_options, SALT, RAW_HASH))
    stronger = Argon2Options(
        variant=cheap_options.variant,
        version=cheap_options.version,
        time_cost=cheap_options.time_cost + 1,
        memory_cost=cheap_options.memory_cost,
        parallelism=cheap_options.parallelism,
        hash_length=cheap_options.hash_length,
    )

    if parsed.matches(stronger):
        raise AssertionError
