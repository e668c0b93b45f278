"""Validation Trait Contracts

Abstract bases every validated type implements, one per raw-input shape.
All methods are classmethods returning ``Result``; the ``validate_*`` form
returns ``Ok(None)`` on acceptance and must agree with the matching
``parse_*`` form on every input.

Integer traits hold the business predicate once, at 128 bits. Every narrower
width checks that its argument fits, widens it losslessly, and delegates to
the next wider level:

    i8 -> i16 -> i32 -> i64 -> i128        u8 -> u16 -> u32 -> u64 -> u128
    isize -> (width matching POINTER_WIDTH) -> ...

Overriding any intermediate level changes the behavior of every narrower
level that reaches it. The cascade is only correct for predicates that are
monotonic under widening (ranges, parity, divisibility). A predicate that
inspects the bit pattern of a specific width must override every level.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from validwrap.errors import Result

from .widths import (
    I8, I16, I32, I64, I128, ISIZE,
    U8, U16, U32, U64, U128, USIZE,
    pointer_sized_target,
)

O = TypeVar("O")
E = TypeVar("E")


def unicode_scalar(c: str) -> str:
    """Return ``c`` if it is exactly one Unicode scalar value."""
    if not isinstance(c, str):
        raise TypeError(f"expected a one-character str, got {type(c).__name__}")
    if len(c) != 1:
        raise ValueError(f"expected exactly one character, got {len(c)}")
    if 0xD800 <= ord(c) <= 0xDFFF:
        raise ValueError(f"surrogate code point U+{ord(c):04X} is not a Unicode scalar value")
    return c


# ============================================================================
# Text, bytes, characters
# ============================================================================

class ValidateString(ABC, Generic[O, E]):
    """Validate and parse text."""

    @classmethod
    def parse_string(cls, s: str) -> Result[O, E]:
        """Parse text the caller hands over; defaults to ``parse_str``."""
        return cls.parse_str(s)

    @classmethod
    @abstractmethod
    def parse_str(cls, s: str) -> Result[O, E]:
        """Parse borrowed text."""

    @classmethod
    def validate_str(cls, s: str) -> Result[None, E]:
        return cls.parse_str(s).map(lambda _: None)


class ValidateBytes(ABC, Generic[O, E]):
    """Validate and parse raw byte buffers."""

    @classmethod
    def parse_bytes(cls, b: bytes) -> Result[O, E]:
        return cls.parse_bytes_view(b)

    @classmethod
    @abstractmethod
    def parse_bytes_view(cls, b: bytes | bytearray | memoryview) -> Result[O, E]:
        """Parse any bytes-like object without taking ownership."""

    @classmethod
    def validate_bytes(cls, b: bytes | bytearray | memoryview) -> Result[None, E]:
        return cls.parse_bytes_view(b).map(lambda _: None)


class ValidateChar(ABC, Generic[O, E]):
    """Validate and parse a single Unicode scalar value."""

    @classmethod
    @abstractmethod
    def parse_char(cls, c: str) -> Result[O, E]:
        """Parse one character; implementations call ``unicode_scalar`` first."""

    @classmethod
    def validate_char(cls, c: str) -> Result[None, E]:
        return cls.parse_char(c).map(lambda _: None)


# ============================================================================
# Integers
# ============================================================================

class ValidateSignedInteger(ABC, Generic[O, E]):
    """Validate and parse signed integers of every width."""

    @classmethod
    @abstractmethod
    def parse_i128(cls, i: int) -> Result[O, E]:
        """The canonical predicate, at maximum width."""

    @classmethod
    def validate_i128(cls, i: int) -> Result[None, E]:
        return cls.parse_i128(i).map(lambda _: None)

    @classmethod
    def parse_i64(cls, i: int) -> Result[O, E]:
        return cls.parse_i128(I64.widen(i, I128))

    @classmethod
    def parse_i32(cls, i: int) -> Result[O, E]:
        return cls.parse_i64(I32.widen(i, I64))

    @classmethod
    def parse_i16(cls, i: int) -> Result[O, E]:
        return cls.parse_i32(I16.widen(i, I32))

    @classmethod
    def parse_i8(cls, i: int) -> Result[O, E]:
        return cls.parse_i16(I8.widen(i, I16))

    @classmethod
    def parse_isize(cls, i: int) -> Result[O, E]:
        target = pointer_sized_target(signed=True)
        return getattr(cls, f"parse_{target.name}")(ISIZE.widen(i, target))

    @classmethod
    def validate_i64(cls, i: int) -> Result[None, E]:
        return cls.validate_i128(I64.widen(i, I128))

    @classmethod
    def validate_i32(cls, i: int) -> Result[None, E]:
        return cls.validate_i64(I32.widen(i, I64))

    @classmethod
    def validate_i16(cls, i: int) -> Result[None, E]:
        return cls.validate_i32(I16.widen(i, I32))

    @classmethod
    def validate_i8(cls, i: int) -> Result[None, E]:
        return cls.validate_i16(I8.widen(i, I16))

    @classmethod
    def validate_isize(cls, i: int) -> Result[None, E]:
        target = pointer_sized_target(signed=True)
        return getattr(cls, f"validate_{target.name}")(ISIZE.widen(i, target))


class ValidateUnsignedInteger(ABC, Generic[O, E]):
    """Validate and parse unsigned integers of every width."""

    @classmethod
    @abstractmethod
    def parse_u128(cls, u: int) -> Result[O, E]:
        """The canonical predicate, at maximum width."""

    @classmethod
    def validate_u128(cls, u: int) -> Result[None, E]:
        return cls.parse_u128(u).map(lambda _: None)

    @classmethod
    def parse_u64(cls, u: int) -> Result[O, E]:
        return cls.parse_u128(U64.widen(u, U128))

    @classmethod
    def parse_u32(cls, u: int) -> Result[O, E]:
        return cls.parse_u64(U32.widen(u, U64))

    @classmethod
    def parse_u16(cls, u: int) -> Result[O, E]:
        return cls.parse_u32(U16.widen(u, U32))

    @classmethod
    def parse_u8(cls, u: int) -> Result[O, E]:
        return cls.parse_u16(U8.widen(u, U16))

    @classmethod
    def parse_usize(cls, u: int) -> Result[O, E]:
        target = pointer_sized_target(signed=False)
        return getattr(cls, f"parse_{target.name}")(USIZE.widen(u, target))

    @classmethod
    def validate_u64(cls, u: int) -> Result[None, E]:
        return cls.validate_u128(U64.widen(u, U128))

    @classmethod
    def validate_u32(cls, u: int) -> Result[None, E]:
        return cls.validate_u64(U32.widen(u, U64))

    @classmethod
    def validate_u16(cls, u: int) -> Result[None, E]:
        return cls.validate_u32(U16.widen(u, U32))

    @classmethod
    def validate_u8(cls, u: int) -> Result[None, E]:
        return cls.validate_u16(U8.widen(u, U16))

    @classmethod
    def validate_usize(cls, u: int) -> Result[None, E]:
        target = pointer_sized_target(signed=False)
        return getattr(cls, f"validate_{target.name}")(USIZE.widen(u, target))
