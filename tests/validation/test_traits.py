"""Tests for the trait contracts and the integer widening cascade."""

import pytest

from validwrap.errors import Err, Ok
from validwrap.validation import (
    I8, I16, I32, I64, U8, U16, U32, U64,
    ValidateBytes,
    ValidateChar,
    ValidateSignedInteger,
    ValidateString,
    ValidateUnsignedInteger,
    unicode_scalar,
)


class Even(ValidateSignedInteger, ValidateUnsignedInteger):
    """Parity is monotonic under widening, so only the 128-bit level is written."""

    @classmethod
    def parse_i128(cls, i):
        return Ok(i) if i % 2 == 0 else Err("odd")

    @classmethod
    def parse_u128(cls, u):
        return Ok(u) if u % 2 == 0 else Err("odd")


class NarrowWins(Even):
    """Overrides an intermediate level; every narrower width must follow it."""

    @classmethod
    def parse_i32(cls, i):
        return Err("blocked at i32")


class Shout(ValidateString):
    @classmethod
    def parse_str(cls, s):
        return Ok(s.upper()) if s else Err("empty")


class Ascii(ValidateBytes):
    @classmethod
    def parse_bytes_view(cls, b):
        return Ok(bytes(b)) if bytes(b).isascii() else Err("not ascii")


class Vowel(ValidateChar):
    @classmethod
    def parse_char(cls, c):
        c = unicode_scalar(c)
        return Ok(c) if c in "aeiou" else Err("consonant")


class TestSignedCascade:
    def test_narrow_width_agrees_with_widest(self):
        assert Even.validate_i8(-5) == Even.validate_i128(-5)
        assert Even.validate_i8(-4) == Even.validate_i128(-4) == Ok(None)

    @pytest.mark.parametrize("width", [I8, I16, I32, I64])
    @pytest.mark.parametrize("value", [-128, -3, 0, 7, 126])
    def test_every_width_agrees(self, width, value):
        narrow = getattr(Even, f"validate_{width.name}")(value)
        assert narrow == Even.validate_i128(value)
        assert getattr(Even, f"parse_{width.name}")(value) == Even.parse_i128(value)

    def test_isize_delegates(self):
        assert Even.parse_isize(10) == Ok(10)
        assert Even.validate_isize(11) == Err("odd")

    def test_intermediate_override_reaches_narrower_widths(self):
        assert NarrowWins.parse_i8(2) == Err("blocked at i32")
        assert NarrowWins.parse_i16(2) == Err("blocked at i32")
        assert NarrowWins.parse_i64(2) == Ok(2)

    def test_out_of_width_argument_raises(self):
        with pytest.raises(OverflowError):
            Even.validate_i8(300)
        with pytest.raises(TypeError):
            Even.parse_i16(2.0)


class TestUnsignedCascade:
    @pytest.mark.parametrize("width", [U8, U16, U32, U64])
    @pytest.mark.parametrize("value", [0, 1, 200, 255])
    def test_every_width_agrees(self, width, value):
        assert getattr(Even, f"validate_{width.name}")(value) == Even.validate_u128(value)

    def test_usize_delegates(self):
        assert Even.parse_usize(4) == Ok(4)

    def test_negative_argument_raises(self):
        with pytest.raises(OverflowError):
            Even.validate_u8(-1)


class TestTextTraits:
    def test_string_defaults(self):
        assert Shout.parse_string("hi") == Shout.parse_str("hi") == Ok("HI")
        assert Shout.validate_str("hi") == Ok(None)
        assert Shout.validate_str("") == Err("empty")

    @pytest.mark.parametrize("view", [b"abc", bytearray(b"abc"), memoryview(b"abc")])
    def test_bytes_accepts_any_bytes_like(self, view):
        assert Ascii.validate_bytes(view) == Ok(None)
        assert Ascii.parse_bytes(b"abc") == Ok(b"abc")
        assert Ascii.validate_bytes("é".encode()) == Err("not ascii")

    def test_char(self):
        assert Vowel.parse_char("a") == Ok("a")
        assert Vowel.validate_char("b") == Err("consonant")

    @pytest.mark.parametrize("bad,exc", [("ab", ValueError), ("", ValueError), ("\ud800", ValueError), (97, TypeError)])
    def test_char_contract_violation(self, bad, exc):
        with pytest.raises(exc):
            Vowel.parse_char(bad)
