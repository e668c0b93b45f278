"""Strict textual number parsing.

Text is parsed exactly as written: no surrounding whitespace, no digit
separators, no implicit base prefixes. Failures are reported as a
description string that the number family carries in PARSE_ERROR.
"""
from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Any, Union

from validwrap.errors import Err, Ok, Result

from .widths import IntWidth

NumberType = Union[type, IntWidth]

_INTEGER = re.compile(r"[+-]?[0-9]+")
_FLOAT = re.compile(r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)", re.IGNORECASE)


def type_name(number_type: NumberType) -> str:
    return number_type.name if isinstance(number_type, IntWidth) else number_type.__name__


def parse_number(text: str, number_type: NumberType) -> Result[Any, str]:
    """Parse ``text`` as ``number_type`` (int, float, Decimal or an IntWidth)."""
    if number_type is int or isinstance(number_type, IntWidth):
        return _parse_integer(text, number_type)

    if number_type is float or number_type is Decimal:
        if not text:
            return Err("cannot parse float from empty string")
        if not _FLOAT.fullmatch(text):
            return Err("invalid float literal")
        try:
            return Ok(number_type(text))
        except (ValueError, InvalidOperation) as e:
            return Err(f"invalid float literal: {e}")

    raise TypeError(f"unsupported number type: {type_name(number_type)}")


def _parse_integer(text: str, number_type: NumberType) -> Result[int, str]:
    if not text:
        return Err("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        return Err("invalid digit found in string")

    negative = text[0] == "-"
    if negative and isinstance(number_type, IntWidth) and not number_type.signed:
        return Err("invalid digit found in string")
    digits = text.lstrip("+-").lstrip("0") or "0"

    if isinstance(number_type, IntWidth):
        # digit count bounds the magnitude before any conversion
        bound = number_type.min_value if negative else number_type.max_value
        if len(digits) > len(str(abs(bound))):
            return Err("number too small to fit in target type" if negative else "number too large to fit in target type")

    try:
        magnitude = int(digits)
    except ValueError:
        # interpreter cap on int/str conversion length
        return Err("number has too many digits to convert")
    value = -magnitude if negative else magnitude

    if isinstance(number_type, IntWidth):
        if value > number_type.max_value:
            return Err("number too large to fit in target type")
        if value < number_type.min_value:
            return Err("number too small to fit in target type")
    return Ok(value)


def coerce_number(value: Any, number_type: NumberType) -> Result[Any, str]:
    """Check an already-typed value against ``number_type``.

    Raises TypeError for a value of the wrong kind; returns Err with a
    description when the value is not representable in the width.
    """
    if isinstance(value, bool):
        raise TypeError("bool is not accepted as a number")

    if number_type is int or isinstance(number_type, IntWidth):
        if not isinstance(value, int):
            raise TypeError(f"expected int for {type_name(number_type)}, got {type(value).__name__}")
        if isinstance(number_type, IntWidth) and not number_type.contains(value):
            return Err(f"{value} is not representable as {number_type.name}")
        return Ok(value)

    if number_type is float:
        if not isinstance(value, (int, float)):
            raise TypeError(f"expected float, got {type(value).__name__}")
        return Ok(float(value))

    if number_type is Decimal:
        if not isinstance(value, (int, Decimal)):
            raise TypeError(f"expected Decimal, got {type(value).__name__}")
        return Ok(Decimal(value))

    raise TypeError(f"unsupported number type: {type_name(number_type)}")
