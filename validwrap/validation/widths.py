"""Fixed-width integer types and lossless widening.

Python integers are unbounded, so widths exist here as descriptors: each
entry point checks that its argument is representable in its width before
widening to the next level. Widening itself never changes the value
(sign-extension and zero-extension are identities on Python ints).
"""
from __future__ import annotations

import struct
from dataclasses import dataclass

# Native word size in bits; drives the first hop of isize/usize delegation.
POINTER_WIDTH: int = struct.calcsize("P") * 8


@dataclass(frozen=True, slots=True)
class IntWidth:
    """An integer representation of a fixed number of bits."""
    name: str
    bits: int
    signed: bool

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value

    def check(self, value: int) -> int:
        """Return ``value`` if it is an int representable in this width.

        Raises TypeError for non-integers and OverflowError for out-of-width
        values; both are caller contract violations, not validation failures.
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{self.name} entry point expects int, got {type(value).__name__}")
        if not self.contains(value):
            raise OverflowError(f"{value} is not representable as {self.name}")
        return value

    def widen(self, value: int, target: IntWidth) -> int:
        """Losslessly widen ``value`` from this width into ``target``."""
        if target.signed != self.signed or target.bits < self.bits:
            raise ValueError(f"cannot widen {self.name} into {target.name}")
        return self.check(value)

    def __str__(self) -> str:
        return self.name


I8 = IntWidth("i8", 8, True)
I16 = IntWidth("i16", 16, True)
I32 = IntWidth("i32", 32, True)
I64 = IntWidth("i64", 64, True)
I128 = IntWidth("i128", 128, True)
ISIZE = IntWidth("isize", POINTER_WIDTH, True)

U8 = IntWidth("u8", 8, False)
U16 = IntWidth("u16", 16, False)
U32 = IntWidth("u32", 32, False)
U64 = IntWidth("u64", 64, False)
U128 = IntWidth("u128", 128, False)
USIZE = IntWidth("usize", POINTER_WIDTH, False)

SIGNED_WIDTHS: tuple[IntWidth, ...] = (I8, I16, I32, I64, I128)
UNSIGNED_WIDTHS: tuple[IntWidth, ...] = (U8, U16, U32, U64, U128)


def pointer_sized_target(signed: bool, pointer_width: int = POINTER_WIDTH) -> IntWidth:
    """Fixed width that a pointer-sized value delegates to first."""
    widths = SIGNED_WIDTHS if signed else UNSIGNED_WIDTHS
    for width in widths:
        if width.bits == pointer_width:
            return width
    raise ValueError(f"unsupported pointer width: {pointer_width}")
