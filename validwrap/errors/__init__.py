"""Monadic Error Handling System

Result type plus one closed error type per validated value-kind.

Key components:
- Result[T, E]: Monadic container for success/failure
- StringError / NumberError / VecError / PhoneError: family error taxonomy
- AppError / ErrorCode: uniform error for module boundaries
- WrapperError: exception bridge for exception-based callers

Usage:
    from validwrap.errors import Ok, Err, NumberErrorKind

    match Score.from_str("101"):
        case Ok(score):
            print(score.number)
        case Err(error) if error.kind is NumberErrorKind.OUT_RANGE:
            log.info("score_rejected", reason=str(error))
"""
from .types import (
    # Core types
    Result,
    Ok,
    Err,
    AppError,
    ErrorCode,
    ErrorContext,
    # Constructors
    ok,
    err,
    # Combinators
    sequence_results,
)

from .builders import (
    validation_error,
    invalid_pattern,
)

from .families import (
    DecodeFailure,
    StringError,
    StringErrorKind,
    NumberError,
    NumberErrorKind,
    VecError,
    VecErrorKind,
    PhoneError,
    PhoneErrorKind,
)

from .handlers import (
    WrapperError,
    raise_error,
    raise_result,
)

__all__ = [
    # Core types
    "Result",
    "Ok",
    "Err",
    "AppError",
    "ErrorCode",
    "ErrorContext",
    # Constructors
    "ok",
    "err",
    # Combinators
    "sequence_results",
    # Builders
    "validation_error",
    "invalid_pattern",
    # Families
    "DecodeFailure",
    "StringError",
    "StringErrorKind",
    "NumberError",
    "NumberErrorKind",
    "VecError",
    "VecErrorKind",
    "PhoneError",
    "PhoneErrorKind",
    # Handlers
    "WrapperError",
    "raise_error",
    "raise_result",
]
