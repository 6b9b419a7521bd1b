"""Error taxonomy for Argon2 hashing and the libargon2 error-code table."""

from __future__ import annotations

from enum import IntEnum

from argon2.low_level import error_to_str


class Argon2ErrorCode(IntEnum):
    """Return codes of libargon2 (``Argon2_ErrorCodes`` in ``argon2.h``)."""

    ARGON2_OK = 0
    ARGON2_OUTPUT_PTR_NULL = -1
    ARGON2_OUTPUT_TOO_SHORT = -2
    ARGON2_OUTPUT_TOO_LONG = -3
    ARGON2_PWD_TOO_SHORT = -4
    ARGON2_PWD_TOO_LONG = -5
    ARGON2_SALT_TOO_SHORT = -6
    ARGON2_SALT_TOO_LONG = -7
    ARGON2_AD_TOO_SHORT = -8
    ARGON2_AD_TOO_LONG = -9
    ARGON2_SECRET_TOO_SHORT = -10
    ARGON2_SECRET_TOO_LONG = -11
    ARGON2_TIME_TOO_SMALL = -12
    ARGON2_TIME_TOO_LARGE = -13
    ARGON2_MEMORY_TOO_LITTLE = -14
    ARGON2_MEMORY_TOO_MUCH = -15
    ARGON2_LANES_TOO_FEW = -16
    ARGON2_LANES_TOO_MANY = -17
    ARGON2_PWD_PTR_MISMATCH = -18
    ARGON2_SALT_PTR_MISMATCH = -19
    ARGON2_SECRET_PTR_MISMATCH = -20
    ARGON2_AD_PTR_MISMATCH = -21
    ARGON2_MEMORY_ALLOCATION_ERROR = -22
    ARGON2_FREE_MEMORY_CBK_NULL = -23
    ARGON2_ALLOCATE_MEMORY_CBK_NULL = -24
    ARGON2_INCORRECT_PARAMETER = -25
    ARGON2_INCORRECT_TYPE = -26
    ARGON2_OUT_PTR_MISMATCH = -27
    ARGON2_THREADS_TOO_FEW = -28
    ARGON2_THREADS_TOO_MANY = -29
    ARGON2_MISSING_ARGS = -30
    ARGON2_ENCODING_FAIL = -31
    ARGON2_DECODING_FAIL = -32
    ARGON2_THREAD_FAIL = -33
    ARGON2_DECODING_LENGTH_FAIL = -34
    ARGON2_VERIFY_MISMATCH = -35


_UNKNOWN_CODE_NAME = "UNKNOWN"


def code_name(code: int) -> str:
    """Return the symbolic libargon2 name for a numeric return code."""
    try:
        return Argon2ErrorCode(code).name
    except ValueError:
        return _UNKNOWN_CODE_NAME


class Argon2Error(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(Argon2Error, ValueError):
    """Raised when hashing options or their inputs are malformed."""

    @classmethod
    def for_field(
        cls,
        field: str,
        value: object,
        requirement: str,
    ) -> ConfigurationError:
        """Build error for one option field that breaks its requirement."""
        message = f"Invalid {field}: {value!r}. Must be {requirement}."
        return cls(message)


class OperationalFailure(Argon2Error, RuntimeError):
    """Raised when an operation cannot produce an answer.

    Never raised for a password mismatch: ``verify`` reports that as ``False``.
    """


class SaltSourceError(OperationalFailure):
    """Raised when the entropy source fails or returns the wrong length."""


class PrimitiveFailure(OperationalFailure):
    """Raised when libargon2 returns a code other than success or mismatch."""

    code: int
    code_name: str

    def __init__(
        self,
        code: int,
        *,
        action: str = "Argon2 operation",
        detail: str | None = None,
    ) -> None:
        self.code = int(code)
        self.code_name = code_name(self.code)
        message = (
            f"{action} failed. Error: {self.code} ({self.code_name}): "
            f"{_describe(self.code)}"
        )
        if detail is not None:
            message = f"{message} ({detail})"
        super().__init__(message)


class EncodingCorruption(PrimitiveFailure):
    """Raised when an encoded Argon2 string is malformed or not clean ASCII."""

    detail: str

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(
            Argon2ErrorCode.ARGON2_ENCODING_FAIL,
            action="Argon2 encoding",
            detail=detail,
        )


def _describe(code: int) -> str:
    if code_name(code) == _UNKNOWN_CODE_NAME:
        return "Unknown error code"
    return error_to_str(code)
