"""Validated Wrapper Families

A validated wrapper holds one value that passed its class's rule. Instances
come only from the classmethod constructors; calling the class raises
TypeError and instances are immutable.

Families are configured with class keywords or class attributes:

    class Greet(RegexString, pattern=r"^(Hi|Hello)$"):
        pass

    class Score(RangedNumber):
        number_type = U8
        min_value = 0
        max_value = 100

    class Tags(RangedLengthVec, min_length=1, max_length=5, element_type=Greet):
        pass

or built at runtime with the factory functions at the bottom of this module:

    Greet = regex_string("Greet", r"^(Hi|Hello)$")

Every constructor returns ``Result``:

    match Score.from_str("101"):
        case Ok(score):
            ...
        case Err(error):
            assert error.kind is NumberErrorKind.OUT_RANGE
"""
from __future__ import annotations

import sys
import types
from decimal import Decimal
from functools import total_ordering
from typing import Any, Callable, ClassVar, Generic, Iterable, Iterator, Sequence, TypeVar

from validwrap.errors import Err, NumberError, Result, StringError, VecError, sequence_results
from validwrap.logging import validation_logger

from .parsing import NumberType
from .rules import (
    BorrowedText,
    CustomNumberRule,
    CustomTextRule,
    ElementSequence,
    OwnedText,
    PassThroughRule,
    PrimitiveNumberRule,
    RangedLengthRule,
    RangedNumberRule,
    RawInput,
    RegexMatchRule,
    RegexNumberRule,
    Rule,
    TypedNumber,
)
from .traits import ValidateSignedInteger, ValidateString, ValidateUnsignedInteger
from .widths import I128, U128

T = TypeVar("T")
E = TypeVar("E")

log = validation_logger()


def _restore(cls: type, value: Any) -> Any:
    return cls._construct(value)


# ============================================================================
# Base
# ============================================================================

@total_ordering
class ValidatedValue(Generic[T, E]):
    """A value that satisfied its class's rule when it was constructed."""

    __slots__ = ("_value",)

    rule: ClassVar[Rule | None] = None
    error_type: ClassVar[type]

    def __new__(cls, *args, **kwargs):
        raise TypeError(f"{cls.__name__} cannot be constructed directly; use its from_* constructors")

    @classmethod
    def _construct(cls, value: T):
        instance = object.__new__(cls)
        object.__setattr__(instance, "_value", value)
        return instance

    @classmethod
    def _validate(cls, raw: RawInput) -> Result[Any, E]:
        """Run the rule once over ``raw`` and wrap the accepted value."""
        if cls.rule is None:
            raise TypeError(f"{cls.__name__} has no validation rule configured")
        result = cls.rule.check(raw)
        if result.is_err():
            log.debug(
                "validation_rejected",
                wrapper=cls.__name__,
                kind=result.unwrap_err().kind.value,
                input_shape=type(raw).__name__,
            )
            return result
        return result.map(cls._construct)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash((type(self), self._value))

    def __copy__(self):
        return self

    def __deepcopy__(self, memo: dict):
        return self

    def __reduce__(self):
        return (_restore, (type(self), self._value))

    def clone(self):
        return self

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value})"

    def __str__(self) -> str:
        return str(self._value)


class ValidatedWrapper(ValidatedValue[T, E]):
    """Validated value with textual constructors."""

    __slots__ = ()

    @classmethod
    def from_string(cls, s: str) -> Result[Any, E]:
        """Validate text the caller hands over."""
        return cls._validate(OwnedText(s))

    @classmethod
    def from_str(cls, s: str) -> Result[Any, E]:
        """Validate borrowed text; accepts exactly what ``from_string`` accepts."""
        return cls._validate(BorrowedText(s))


# ============================================================================
# Strings
# ============================================================================

class CustomizedString(ValidatedWrapper[str, StringError], ValidateString):
    """Wrapped text.

    Pass ``check=fn`` (text -> Result[str, StringError]) or ``rule=`` as a
    class keyword to replace the default pass-through rule.
    """

    __slots__ = ()

    error_type = StringError
    rule = PassThroughRule()

    def __init_subclass__(cls, rule: Rule | None = None,
                          check: Callable[[str], Result[str, StringError]] | None = None, **kwargs):
        super().__init_subclass__(**kwargs)
        if rule is not None:
            cls.rule = rule
        elif check is not None:
            cls.rule = CustomTextRule(check, name=cls.__name__)

    @classmethod
    def parse_string(cls, s: str) -> Result[Any, StringError]:
        return cls.from_string(s)

    @classmethod
    def parse_str(cls, s: str) -> Result[Any, StringError]:
        return cls.from_str(s)

    def as_str(self) -> str:
        return self._value

    def as_bytes(self) -> bytes:
        return self._value.encode("utf-8")

    def __len__(self) -> int:
        return len(self._value)


class RegexString(CustomizedString):
    """Text in which ``pattern`` finds a match."""

    __slots__ = ()

    rule = None
    pattern: ClassVar[str | None] = None
    size_limit: ClassVar[int | None] = None

    def __init_subclass__(cls, pattern: str | None = None, size_limit: int | None = None, **kwargs):
        overridden = kwargs.get("rule") is not None or kwargs.get("check") is not None
        if pattern is not None and overridden:
            raise TypeError(f"{cls.__name__}: pattern cannot be combined with rule or check")
        super().__init_subclass__(**kwargs)
        if pattern is not None:
            cls.pattern = pattern
        if size_limit is not None:
            cls.size_limit = size_limit
        if cls.pattern is not None and not overridden:
            cls.rule = RegexMatchRule(cls.pattern, cls.size_limit)


# ============================================================================
# Numbers
# ============================================================================

class CustomizedNumber(
    ValidatedWrapper[Any, NumberError],
    ValidateString,
    ValidateSignedInteger,
    ValidateUnsignedInteger,
):
    """Wrapped number of ``number_type`` (int, float, Decimal or an IntWidth).

    Pass ``check=fn`` (number -> Result[number, NumberError]) to validate
    with a custom predicate, optionally with ``parse_text=fn`` for text.
    """

    __slots__ = ()

    error_type = NumberError
    number_type: ClassVar[NumberType] = int

    def __init_subclass__(cls, number_type: NumberType | None = None, rule: Rule | None = None,
                          check: Callable[[Any], Result[Any, NumberError]] | None = None,
                          parse_text: Callable[[str], Result[Any, NumberError]] | None = None, **kwargs):
        super().__init_subclass__(**kwargs)
        if number_type is not None:
            cls.number_type = number_type
        if rule is not None:
            cls.rule = rule
        elif check is not None:
            cls.rule = CustomNumberRule(cls.number_type, check, parse_text, name=cls.__name__)

    @classmethod
    def from_number(cls, value: int | float | Decimal) -> Result[Any, NumberError]:
        """Validate an already-typed number with the same rule as text."""
        return cls._validate(TypedNumber(value))

    @classmethod
    def parse_string(cls, s: str) -> Result[Any, NumberError]:
        return cls.from_string(s)

    @classmethod
    def parse_str(cls, s: str) -> Result[Any, NumberError]:
        return cls.from_str(s)

    @classmethod
    def parse_i128(cls, i: int) -> Result[Any, NumberError]:
        return cls.from_number(I128.check(i))

    @classmethod
    def parse_u128(cls, u: int) -> Result[Any, NumberError]:
        return cls.from_number(U128.check(u))

    @property
    def number(self) -> int | float | Decimal:
        return self._value

    def get_number(self) -> int | float | Decimal:
        return self._value

    def __int__(self) -> int:
        return int(self._value)

    def __float__(self) -> float:
        return float(self._value)


class PrimitiveNumber(CustomizedNumber):
    """Any value of ``number_type``; parse only."""

    __slots__ = ()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if "rule" not in kwargs and "check" not in kwargs:
            cls.rule = PrimitiveNumberRule(cls.number_type)


class RangedNumber(CustomizedNumber):
    """Value of ``number_type`` inside ``[min_value, max_value]``."""

    __slots__ = ()

    min_value: ClassVar[int | float | Decimal | None] = None
    max_value: ClassVar[int | float | Decimal | None] = None

    def __init_subclass__(cls, min_value: int | float | Decimal | None = None,
                          max_value: int | float | Decimal | None = None, **kwargs):
        super().__init_subclass__(**kwargs)
        if min_value is not None:
            cls.min_value = min_value
        if max_value is not None:
            cls.max_value = max_value
        if cls.min_value is not None and cls.max_value is not None:
            cls.rule = RangedNumberRule(cls.number_type, cls.min_value, cls.max_value)


class RegexNumber(CustomizedNumber):
    """Number whose text matches ``pattern`` and parses as ``number_type``."""

    __slots__ = ()

    pattern: ClassVar[str | None] = None
    size_limit: ClassVar[int | None] = None

    def __init_subclass__(cls, pattern: str | None = None, size_limit: int | None = None, **kwargs):
        overridden = kwargs.get("rule") is not None or kwargs.get("check") is not None
        if pattern is not None and overridden:
            raise TypeError(f"{cls.__name__}: pattern cannot be combined with rule or check")
        super().__init_subclass__(**kwargs)
        if pattern is not None:
            cls.pattern = pattern
        if size_limit is not None:
            cls.size_limit = size_limit
        if cls.pattern is not None and not overridden:
            cls.rule = RegexNumberRule(cls.number_type, cls.pattern, cls.size_limit)


# ============================================================================
# Sequences
# ============================================================================

class CustomizedVec(ValidatedWrapper[tuple, VecError]):
    """Ordered sequence of validated wrappers.

    Elements are not re-validated. Text construction is NOT_SUPPORT unless a
    subclass overrides ``parse_text``.
    """

    __slots__ = ()

    error_type = VecError
    element_type: ClassVar[type | None] = None

    def __init_subclass__(cls, rule: Rule | None = None, element_type: type | None = None, **kwargs):
        super().__init_subclass__(**kwargs)
        if element_type is not None:
            cls.element_type = element_type
        if rule is not None:
            cls.rule = rule

    @classmethod
    def parse_text(cls, text: str) -> Result[Sequence, VecError]:
        """Turn text into elements; override to support ``from_string``."""
        return Err(VecError.not_support())

    @classmethod
    def parse_elements(cls, parts: Iterable[str]) -> Result[list, VecError]:
        """Build elements from text parts with ``element_type.from_str``.

        The first rejected part fails the whole parse as DECODE_ERROR.
        """
        element = cls.element_type
        if element is None or not hasattr(element, "from_str"):
            raise TypeError(f"{cls.__name__} has no wrapper element_type to parse into")
        results = [element.from_str(part) for part in parts]
        return sequence_results(results).map_err(lambda e: VecError.decode_error(str(e)))

    @classmethod
    def from_vec(cls, items: Iterable) -> Result[Any, VecError]:
        """Validate a sequence of already-validated elements."""
        items = tuple(items)
        if cls.element_type is not None:
            for item in items:
                if not isinstance(item, cls.element_type):
                    raise TypeError(
                        f"{cls.__name__} holds {cls.element_type.__name__}, got {type(item).__name__}"
                    )
        return cls._validate(ElementSequence(items))

    def as_tuple(self) -> tuple:
        return self._value

    def into_list(self) -> list:
        return list(self._value)

    def __len__(self) -> int:
        return len(self._value)

    def __iter__(self) -> Iterator:
        return iter(self._value)

    def __getitem__(self, index):
        return self._value[index]

    def __str__(self) -> str:
        return "[" + ", ".join(str(item) for item in self._value) + "]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}[" + ", ".join(repr(item) for item in self._value) + "]"


class RangedLengthVec(CustomizedVec):
    """Sequence with ``min_length <= len <= max_length`` (``None`` is unbounded)."""

    __slots__ = ()

    min_length: ClassVar[int] = 0
    max_length: ClassVar[int | None] = None

    def __init_subclass__(cls, min_length: int | None = None, max_length: int | None = None, **kwargs):
        super().__init_subclass__(**kwargs)
        if min_length is not None:
            cls.min_length = min_length
        if max_length is not None:
            cls.max_length = max_length
        if "rule" not in kwargs:
            cls.rule = RangedLengthRule(cls.min_length, cls.max_length, cls.parse_text)


# ============================================================================
# Factories
# ============================================================================

def _define(name: str, base: type, module: str | None, **kwds):
    if module is None:
        # the factory's caller, so pickle can find the class by name
        module = sys._getframe(2).f_globals.get("__name__", __name__)

    def body(ns: dict) -> None:
        ns["__module__"] = module
        ns["__qualname__"] = name
    return types.new_class(name, (base,), kwds, body)


def customized_string(name: str, check: Callable[[str], Result[str, StringError]] | None = None,
                      *, module: str | None = None) -> type[CustomizedString]:
    """Text wrapper with a custom predicate (pass-through when ``check`` is None)."""
    if check is None:
        return _define(name, CustomizedString, module)
    return _define(name, CustomizedString, module, check=check)


def regex_string(name: str, pattern: str, *, size_limit: int | None = None,
                 module: str | None = None) -> type[RegexString]:
    return _define(name, RegexString, module, pattern=pattern, size_limit=size_limit)


def primitive_number(name: str, number_type: NumberType = int, *, module: str | None = None) -> type[PrimitiveNumber]:
    return _define(name, PrimitiveNumber, module, number_type=number_type)


def ranged_number(name: str, number_type: NumberType, min_value: int | float | Decimal,
                  max_value: int | float | Decimal, *, module: str | None = None) -> type[RangedNumber]:
    return _define(name, RangedNumber, module, number_type=number_type, min_value=min_value, max_value=max_value)


def regex_number(name: str, number_type: NumberType, pattern: str, *, size_limit: int | None = None,
                 module: str | None = None) -> type[RegexNumber]:
    return _define(name, RegexNumber, module, number_type=number_type, pattern=pattern, size_limit=size_limit)


def ranged_length_vec(name: str, min_length: int, max_length: int | None = None, *,
                      element_type: type | None = None, module: str | None = None) -> type[RangedLengthVec]:
    """Sequence wrapper; pass ``min_length == max_length`` for an exact length."""
    return _define(name, RangedLengthVec, module, min_length=min_length, max_length=max_length,
                   element_type=element_type)
