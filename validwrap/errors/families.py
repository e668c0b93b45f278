"""Per-Family Validation Errors

One closed error type per value-kind. Each error is a frozen dataclass tagged
with a ``kind`` enum; the families are independent of each other and convert
into ``AppError`` only at module boundaries.

    StringError  REGEX_ERROR | NOT_MATCH | DECODE_ERROR
    NumberError  REGEX_ERROR | PARSE_ERROR(message) | OUT_RANGE | NOT_MATCH | DECODE_ERROR
    VecError     OVERFLOW | UNDERFLOW | NOT_SUPPORT | DECODE_ERROR
    PhoneError   FAILURE(cause) | INVALID
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

from .builders import validation_error
from .types import AppError, ErrorCode


def _describe(cause: Exception | str | None) -> str:
    if cause is None:
        return ""
    return cause if isinstance(cause, str) else str(cause)


def _cause_of(cause) -> Exception | None:
    if isinstance(cause, DecodeFailure):
        return cause.cause
    return cause if isinstance(cause, Exception) else None


def _app_error(error, codes: dict, origin: str) -> AppError:
    return validation_error(
        str(error),
        code=codes[error.kind],
        origin=origin,
        cause=error.cause,
        family=type(error).__name__,
        kind=error.kind.value,
    ).error


@dataclass(frozen=True, slots=True)
class DecodeFailure:
    """Failure reported by a host-integration decoder before validation runs."""
    message: str
    cause: Exception | None = field(default=None, compare=False)

    def __str__(self) -> str:
        return self.message


# ============================================================================
# String family
# ============================================================================

class StringErrorKind(str, Enum):
    REGEX_ERROR = "regex_error"
    NOT_MATCH = "not_match"
    DECODE_ERROR = "decode_error"


@dataclass(frozen=True, slots=True)
class StringError:
    """Rejection of a customized-string input."""
    kind: StringErrorKind
    message: str = ""
    cause: Exception | None = field(default=None, compare=False, repr=False)

    _CODES: ClassVar[dict] = {
        StringErrorKind.REGEX_ERROR: ErrorCode.E2008_INVALID_PATTERN,
        StringErrorKind.NOT_MATCH: ErrorCode.E2002_INVALID_FORMAT,
        StringErrorKind.DECODE_ERROR: ErrorCode.E2007_DECODE_FAILED,
    }

    @classmethod
    def regex_error(cls, cause: Exception | str) -> StringError:
        return cls(StringErrorKind.REGEX_ERROR, _describe(cause), cause if isinstance(cause, Exception) else None)

    @classmethod
    def not_match(cls) -> StringError:
        return cls(StringErrorKind.NOT_MATCH)

    @classmethod
    def decode_error(cls, cause: DecodeFailure | Exception | str) -> StringError:
        return cls(StringErrorKind.DECODE_ERROR, _describe(cause), _cause_of(cause))

    @property
    def code(self) -> ErrorCode:
        return self._CODES[self.kind]

    def to_app_error(self, origin: str = "") -> AppError:
        return _app_error(self, self._CODES, origin)

    def __str__(self) -> str:
        match self.kind:
            case StringErrorKind.REGEX_ERROR:
                return f"invalid pattern: {self.message}"
            case StringErrorKind.NOT_MATCH:
                return "input does not match the required pattern"
            case StringErrorKind.DECODE_ERROR:
                return f"cannot decode input: {self.message}"


# ============================================================================
# Number family
# ============================================================================

class NumberErrorKind(str, Enum):
    REGEX_ERROR = "regex_error"
    PARSE_ERROR = "parse_error"
    OUT_RANGE = "out_range"
    NOT_MATCH = "not_match"
    DECODE_ERROR = "decode_error"


@dataclass(frozen=True, slots=True)
class NumberError:
    """Rejection of a customized-number input.

    ``message`` carries the parse failure description for PARSE_ERROR.
    """
    kind: NumberErrorKind
    message: str = ""
    cause: Exception | None = field(default=None, compare=False, repr=False)

    _CODES: ClassVar[dict] = {
        NumberErrorKind.REGEX_ERROR: ErrorCode.E2008_INVALID_PATTERN,
        NumberErrorKind.PARSE_ERROR: ErrorCode.E2006_PARSE_FAILED,
        NumberErrorKind.OUT_RANGE: ErrorCode.E2003_OUT_OF_RANGE,
        NumberErrorKind.NOT_MATCH: ErrorCode.E2002_INVALID_FORMAT,
        NumberErrorKind.DECODE_ERROR: ErrorCode.E2007_DECODE_FAILED,
    }

    @classmethod
    def regex_error(cls, cause: Exception | str) -> NumberError:
        return cls(NumberErrorKind.REGEX_ERROR, _describe(cause), cause if isinstance(cause, Exception) else None)

    @classmethod
    def parse_error(cls, message: str) -> NumberError:
        return cls(NumberErrorKind.PARSE_ERROR, message)

    @classmethod
    def out_range(cls, message: str = "") -> NumberError:
        return cls(NumberErrorKind.OUT_RANGE, message)

    @classmethod
    def not_match(cls) -> NumberError:
        return cls(NumberErrorKind.NOT_MATCH)

    @classmethod
    def decode_error(cls, cause: DecodeFailure | Exception | str) -> NumberError:
        return cls(NumberErrorKind.DECODE_ERROR, _describe(cause), _cause_of(cause))

    @property
    def code(self) -> ErrorCode:
        return self._CODES[self.kind]

    def to_app_error(self, origin: str = "") -> AppError:
        return _app_error(self, self._CODES, origin)

    def __str__(self) -> str:
        match self.kind:
            case NumberErrorKind.REGEX_ERROR:
                return f"invalid pattern: {self.message}"
            case NumberErrorKind.PARSE_ERROR:
                return f"cannot parse number: {self.message}"
            case NumberErrorKind.OUT_RANGE:
                return f"number out of range: {self.message}" if self.message else "number out of range"
            case NumberErrorKind.NOT_MATCH:
                return "input does not match the required pattern"
            case NumberErrorKind.DECODE_ERROR:
                return f"cannot decode input: {self.message}"


# ============================================================================
# Sequence family
# ============================================================================

class VecErrorKind(str, Enum):
    OVERFLOW = "overflow"
    UNDERFLOW = "underflow"
    NOT_SUPPORT = "not_support"
    DECODE_ERROR = "decode_error"


@dataclass(frozen=True, slots=True)
class VecError:
    """Rejection of a customized-vec input."""
    kind: VecErrorKind
    message: str = ""
    cause: Exception | None = field(default=None, compare=False, repr=False)

    _CODES: ClassVar[dict] = {
        VecErrorKind.OVERFLOW: ErrorCode.E2003_OUT_OF_RANGE,
        VecErrorKind.UNDERFLOW: ErrorCode.E2003_OUT_OF_RANGE,
        VecErrorKind.NOT_SUPPORT: ErrorCode.E9002_NOT_SUPPORTED,
        VecErrorKind.DECODE_ERROR: ErrorCode.E2007_DECODE_FAILED,
    }

    @classmethod
    def overflow(cls, message: str = "") -> VecError:
        return cls(VecErrorKind.OVERFLOW, message)

    @classmethod
    def underflow(cls, message: str = "") -> VecError:
        return cls(VecErrorKind.UNDERFLOW, message)

    @classmethod
    def not_support(cls) -> VecError:
        return cls(VecErrorKind.NOT_SUPPORT)

    @classmethod
    def decode_error(cls, cause: DecodeFailure | Exception | str) -> VecError:
        return cls(VecErrorKind.DECODE_ERROR, _describe(cause), _cause_of(cause))

    @property
    def code(self) -> ErrorCode:
        return self._CODES[self.kind]

    def to_app_error(self, origin: str = "") -> AppError:
        return _app_error(self, self._CODES, origin)

    def __str__(self) -> str:
        match self.kind:
            case VecErrorKind.OVERFLOW:
                return f"too many elements: {self.message}" if self.message else "too many elements"
            case VecErrorKind.UNDERFLOW:
                return f"too few elements: {self.message}" if self.message else "too few elements"
            case VecErrorKind.NOT_SUPPORT:
                return "textual construction is not supported"
            case VecErrorKind.DECODE_ERROR:
                return f"cannot decode input: {self.message}"


# ============================================================================
# Phone-like domain errors
# ============================================================================

class PhoneErrorKind(str, Enum):
    FAILURE = "failure"
    INVALID = "invalid"


@dataclass(frozen=True, slots=True)
class PhoneError:
    """Rejection reported by a phone-number collaborator.

    FAILURE: the collaborator could not parse the input (opaque cause).
    INVALID: parsed successfully, but not valid for the region.
    """
    kind: PhoneErrorKind
    cause: Exception | None = field(default=None, compare=False, repr=False)

    _CODES: ClassVar[dict] = {
        PhoneErrorKind.FAILURE: ErrorCode.E2006_PARSE_FAILED,
        PhoneErrorKind.INVALID: ErrorCode.E2013_INVALID_PHONE,
    }

    @classmethod
    def failure(cls, cause: Exception) -> PhoneError:
        return cls(PhoneErrorKind.FAILURE, cause)

    @classmethod
    def invalid(cls) -> PhoneError:
        return cls(PhoneErrorKind.INVALID)

    @property
    def code(self) -> ErrorCode:
        return self._CODES[self.kind]

    def to_app_error(self, origin: str = "") -> AppError:
        return _app_error(self, self._CODES, origin)

    def __str__(self) -> str:
        if self.kind is PhoneErrorKind.FAILURE:
            return str(self.cause) if self.cause is not None else "cannot parse phone number"
        return "invalid phone number"
