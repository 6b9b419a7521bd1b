"""Argon2 derivation/verification capability backed by libargon2."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from argon2.low_level import Type, ffi, lib


@dataclass(frozen=True, slots=True)
class DeriveResult:
    """Raw outcome of one derivation: return code plus both output buffers."""

    code: int
    raw_hash: bytes
    encoded_buffer: bytes


@runtime_checkable
class Argon2Primitive(Protocol):
    """Opaque Argon2 capability reporting libargon2-style return codes."""

    def derive(  # noqa: PLR0913
        self,
        *,
        password: bytes,
        salt: bytes,
        time_cost: int,
        memory_cost: int,
        parallelism: int,
        hash_length: int,
        encoded_length: int,
        variant: Type,
        version: int,
    ) -> DeriveResult:
        """Derive a raw hash and encode it into an ``encoded_length`` buffer."""
        ...

    def verify(self, *, encoded: bytes, password: bytes, variant: Type) -> int:
        """Check ``password`` against ``encoded`` and return the libargon2 code."""
        ...


class LibArgon2Primitive:
    """Call ``argon2_hash``/``argon2_verify`` through argon2-cffi's bindings."""

    def derive(  # noqa: PLR0913
        self,
        *,
        password: bytes,
        salt: bytes,
        time_cost: int,
        memory_cost: int,
        parallelism: int,
        hash_length: int,
        encoded_length: int,
        variant: Type,
        version: int,
    ) -> DeriveResult:
        """Run ``argon2_hash`` with caller-sized output buffers."""
        hash_buffer = ffi.new("uint8_t[]", hash_length)
        encoded_buffer = ffi.new("char[]", encoded_length)
        code = int(
            lib.argon2_hash(
                time_cost,
                memory_cost,
                parallelism,
                ffi.new("uint8_t[]", password),
                len(password),
                ffi.new("uint8_t[]", salt),
                len(salt),
                hash_buffer,
                hash_length,
                encoded_buffer,
                encoded_length,
                variant.value,
                version,
            ),
        )
        return DeriveResult(
            code=code,
            raw_hash=bytes(ffi.buffer(hash_buffer, hash_length)),
            encoded_buffer=bytes(ffi.buffer(encoded_buffer, encoded_length)),
        )

    def verify(self, *, encoded: bytes, password: bytes, variant: Type) -> int:
        """Run ``argon2_verify`` and return its raw code."""
        return int(
            lib.argon2_verify(
                ffi.new("char[]", encoded),
                ffi.new("uint8_t[]", password),
                len(password),
                variant.value,
            ),
        )
