"""Raw Input Shapes and Wrapper Rules

Every construction entry point wraps its argument in one of the raw input
shapes below and hands it to a single ``Rule.check``. Rules are frozen
dataclasses; the wrapper families bind one rule per generated class.

    OwnedText        from_string
    BorrowedText     from_str
    TypedNumber      from_number
    ElementSequence  from_vec

A rule accepts the shapes that make sense for its family and raises
TypeError for the others (a wiring mistake, not a validation failure).
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Callable, Generic, Sequence, TypeVar, Union

from validwrap.errors import Err, NumberError, Ok, Result, StringError, VecError

from .parsing import NumberType, coerce_number, parse_number, type_name
from .patterns import compile_pattern

T = TypeVar("T")
E = TypeVar("E")


# ============================================================================
# Raw input shapes
# ============================================================================

@dataclass(frozen=True, slots=True)
class OwnedText:
    value: str


@dataclass(frozen=True, slots=True)
class BorrowedText:
    value: str


@dataclass(frozen=True, slots=True)
class TypedNumber:
    value: Any


@dataclass(frozen=True, slots=True)
class ElementSequence:
    items: tuple


RawInput = Union[OwnedText, BorrowedText, TypedNumber, ElementSequence]


def _text_of(raw: RawInput, rule: Rule) -> str:
    match raw:
        case OwnedText(value) | BorrowedText(value):
            if not isinstance(value, str):
                raise TypeError(f"{rule.constraint_name} expects str, got {type(value).__name__}")
            return value
    raise TypeError(f"{rule.constraint_name} does not accept {type(raw).__name__}")


class Rule(ABC, Generic[T, E]):
    """A predicate bound to a wrapper family: raw input in, canonical value or error out."""

    @abstractmethod
    def check(self, raw: RawInput) -> Result[T, E]:
        """Validate raw input, returning the value the wrapper will hold."""

    @property
    @abstractmethod
    def constraint_name(self) -> str:
        """Human-readable constraint name for logs and schemas."""

    def json_schema(self) -> dict[str, Any]:
        """JSON Schema keywords describing the constraint."""
        return {}


# ============================================================================
# String rules
# ============================================================================

@dataclass(frozen=True, slots=True)
class PassThroughRule(Rule[str, StringError]):
    """Accept any text unchanged."""

    @property
    def constraint_name(self) -> str:
        return "any_text"

    def check(self, raw: RawInput) -> Result[str, StringError]:
        return Ok(_text_of(raw, self))


@dataclass(frozen=True, slots=True)
class RegexMatchRule(Rule[str, StringError]):
    """Accept text in which the pattern finds a match.

    The pattern is compiled on every check so that a broken pattern surfaces
    as REGEX_ERROR at validation time.
    """
    pattern: str
    size_limit: int | None = None

    @property
    def constraint_name(self) -> str:
        return f"pattern[{self.pattern}]"

    def json_schema(self) -> dict[str, Any]:
        return {"pattern": self.pattern}

    def check(self, raw: RawInput) -> Result[str, StringError]:
        text = _text_of(raw, self)
        compiled = compile_pattern(self.pattern, self.size_limit)
        if compiled.is_err():
            error = compiled.unwrap_err()
            return Err(StringError.regex_error(error.cause or error.reason))
        if compiled.unwrap().search(text) is None:
            return Err(StringError.not_match())
        return Ok(text)


@dataclass(frozen=True, slots=True)
class CustomTextRule(Rule[str, StringError]):
    """Author-supplied text predicate.

    ``fn`` receives the text and returns ``Ok(canonical_text)`` or
    ``Err(StringError)``. The same function serves owned and borrowed text.
    """
    fn: Callable[[str], Result[str, StringError]]
    name: str = "custom"

    @property
    def constraint_name(self) -> str:
        return self.name

    def check(self, raw: RawInput) -> Result[str, StringError]:
        return self.fn(_text_of(raw, self))


# ============================================================================
# Number rules
# ============================================================================

def _parse(text: str, number_type: NumberType) -> Result[Any, NumberError]:
    return parse_number(text, number_type).map_err(NumberError.parse_error)


def _typed(value: Any, number_type: NumberType) -> Result[Any, NumberError]:
    return coerce_number(value, number_type).map_err(NumberError.out_range)


@dataclass(frozen=True, slots=True)
class PrimitiveNumberRule(Rule[Any, NumberError]):
    """Parse only; any value of the number type is accepted."""
    number_type: NumberType = int

    @property
    def constraint_name(self) -> str:
        return type_name(self.number_type)

    def check(self, raw: RawInput) -> Result[Any, NumberError]:
        if isinstance(raw, TypedNumber):
            return _typed(raw.value, self.number_type)
        return _parse(_text_of(raw, self), self.number_type)


@dataclass(frozen=True, slots=True)
class RangedNumberRule(Rule[Any, NumberError]):
    """Accept values inside the closed interval ``[min_value, max_value]``."""
    number_type: NumberType
    min_value: int | float | Decimal
    max_value: int | float | Decimal

    def __post_init__(self):
        if self.min_value > self.max_value:
            raise ValueError(f"min_value {self.min_value} is greater than max_value {self.max_value}")

    @property
    def constraint_name(self) -> str:
        return f"range[{self.min_value}, {self.max_value}]"

    def json_schema(self) -> dict[str, Any]:
        return {"minimum": self.min_value, "maximum": self.max_value}

    def check(self, raw: RawInput) -> Result[Any, NumberError]:
        if isinstance(raw, TypedNumber):
            result = _typed(raw.value, self.number_type)
        else:
            result = _parse(_text_of(raw, self), self.number_type)
        return result.and_then(self._in_range)

    def _in_range(self, value: Any) -> Result[Any, NumberError]:
        # NaN compares false both ways and falls out of every range
        if self.min_value <= value <= self.max_value:
            return Ok(value)
        return Err(NumberError.out_range(f"{value} is not within [{self.min_value}, {self.max_value}]"))


@dataclass(frozen=True, slots=True)
class RegexNumberRule(Rule[Any, NumberError]):
    """Accept text that matches the pattern and parses as the number type.

    Typed numbers are rendered with ``str`` and checked the same way.
    """
    number_type: NumberType
    pattern: str
    size_limit: int | None = None

    @property
    def constraint_name(self) -> str:
        return f"{type_name(self.number_type)}_pattern[{self.pattern}]"

    def json_schema(self) -> dict[str, Any]:
        return {"pattern": self.pattern}

    def check(self, raw: RawInput) -> Result[Any, NumberError]:
        if isinstance(raw, TypedNumber):
            typed = _typed(raw.value, self.number_type)
            if typed.is_err():
                return typed
            text = str(typed.unwrap())
        else:
            text = _text_of(raw, self)

        compiled = compile_pattern(self.pattern, self.size_limit)
        if compiled.is_err():
            error = compiled.unwrap_err()
            return Err(NumberError.regex_error(error.cause or error.reason))
        if compiled.unwrap().search(text) is None:
            return Err(NumberError.not_match())
        return _parse(text, self.number_type)


@dataclass(frozen=True, slots=True)
class CustomNumberRule(Rule[Any, NumberError]):
    """Author-supplied number predicate.

    ``check_number`` validates typed values; text is parsed as the number
    type first unless ``parse_text`` is given.
    """
    number_type: NumberType
    check_number: Callable[[Any], Result[Any, NumberError]]
    parse_text: Callable[[str], Result[Any, NumberError]] | None = None
    name: str = "custom"

    @property
    def constraint_name(self) -> str:
        return self.name

    def check(self, raw: RawInput) -> Result[Any, NumberError]:
        if isinstance(raw, TypedNumber):
            return _typed(raw.value, self.number_type).and_then(self.check_number)
        text = _text_of(raw, self)
        if self.parse_text is not None:
            return self.parse_text(text)
        return _parse(text, self.number_type).and_then(self.check_number)


# ============================================================================
# Sequence rules
# ============================================================================

@dataclass(frozen=True, slots=True)
class RangedLengthRule(Rule[tuple, VecError]):
    """Accept sequences with ``min_length <= len <= max_length``.

    Text is NOT_SUPPORT unless ``text_parser`` turns it into elements; parsed
    elements are held to the same length bounds.
    """
    min_length: int = 0
    max_length: int | None = None
    text_parser: Callable[[str], Result[Sequence, VecError]] | None = field(default=None, compare=False)

    def __post_init__(self):
        if self.min_length < 0:
            raise ValueError("min_length cannot be negative")
        if self.max_length is not None and self.min_length > self.max_length:
            raise ValueError(f"min_length {self.min_length} is greater than max_length {self.max_length}")

    @property
    def constraint_name(self) -> str:
        if self.max_length is None:
            return f"min_items[{self.min_length}]"
        if self.min_length == self.max_length:
            return f"exact_items[{self.min_length}]"
        return f"items[{self.min_length}, {self.max_length}]"

    def json_schema(self) -> dict[str, Any]:
        schema: dict[str, Any] = {"minItems": self.min_length}
        if self.max_length is not None:
            schema["maxItems"] = self.max_length
        return schema

    def check(self, raw: RawInput) -> Result[tuple, VecError]:
        if isinstance(raw, ElementSequence):
            return self._in_bounds(raw.items)
        text = _text_of(raw, self)
        if self.text_parser is None:
            return Err(VecError.not_support())
        return self.text_parser(text).map(tuple).and_then(self._in_bounds)

    def _in_bounds(self, items: tuple) -> Result[tuple, VecError]:
        length = len(items)
        if self.max_length is not None and length > self.max_length:
            return Err(VecError.overflow(f"{length} > {self.max_length}"))
        if length < self.min_length:
            return Err(VecError.underflow(f"{length} < {self.min_length}"))
        return Ok(items)
