"""Exception Bridge for Result-Based Validation

Integrates the Result monad with exception-based callers. Validation entry
points never raise for rejected input; these helpers convert an ``Err`` into a
raised ``WrapperError`` when the caller prefers exceptions.
"""
from __future__ import annotations

from typing import Any, TypeVar

from validwrap.logging import get_logger

from .types import AppError, Result

T = TypeVar("T")

log = get_logger("validwrap.errors.handlers")


class WrapperError(ValueError):
    """Exception wrapper for a family error.

    Use this when you need to raise a validation failure in code that
    doesn't use the Result monad (e.g., pydantic validators).
    """

    def __init__(self, error: Any, origin: str = ""):
        self.error = error
        self.origin = origin
        super().__init__(str(error))

    def to_app_error(self) -> AppError:
        return self.error.to_app_error(origin=self.origin)


def raise_error(error: Any, origin: str = "") -> None:
    """Raise a family error as exception.

    Usage:
        if result.is_err():
            raise_error(result.unwrap_err(), origin="signup_form")
    """
    log.debug("raise_error", error=str(error), origin=origin)
    raise WrapperError(error, origin=origin)


def raise_result(result: Result[T, Any], origin: str = "") -> T:
    """Return the Ok value, or raise WrapperError if Result is Err.

    Usage:
        greet = raise_result(Greet.from_str(text))
    """
    if result.is_err():
        raise_error(result.unwrap_err(), origin=origin)
    return result.unwrap()
