"""Validation Error Builders

Ergonomic constructors for ``AppError`` values in the validation range.
Each builder returns ``Err(AppError)`` with the appropriate code and context.
"""
from .types import AppError, ErrorCode, ErrorContext, Err


def validation_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC,
    field: str | None = None,
    value: str | None = None,
    origin: str = "",
    cause: Exception | None = None,
    **metadata,
) -> Err[AppError]:
    """Create validation error."""
    meta = {"field": field, "value": value, **metadata}
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in meta.items() if v is not None},
        cause=cause,
    ))


def invalid_pattern(
    pattern: str, reason: str, origin: str = "", cause: Exception | None = None
) -> Err[AppError]:
    return validation_error(
        f"Invalid pattern {pattern!r}: {reason}",
        code=ErrorCode.E2008_INVALID_PATTERN,
        pattern=pattern,
        origin=origin,
        cause=cause,
    )
