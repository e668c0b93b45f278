"""Tests for fixed-width integer descriptors."""

import pytest

from validwrap.validation import (
    I8, I16, I64, I128, U8, U16, U128,
    POINTER_WIDTH,
    pointer_sized_target,
)


def test_bounds():
    assert (I8.min_value, I8.max_value) == (-128, 127)
    assert (U8.min_value, U8.max_value) == (0, 255)
    assert I128.max_value == 2 ** 127 - 1
    assert U128.max_value == 2 ** 128 - 1


def test_check_rejects_out_of_width():
    assert I8.check(-128) == -128
    with pytest.raises(OverflowError):
        I8.check(128)
    with pytest.raises(OverflowError):
        U8.check(-1)


@pytest.mark.parametrize("value", [1.0, "1", True, None])
def test_check_rejects_non_int(value):
    with pytest.raises(TypeError):
        I16.check(value)


def test_widen_is_identity_for_representable_values():
    assert I8.widen(-5, I16) == -5
    assert U8.widen(255, U16) == 255


def test_widen_refuses_narrowing_or_sign_change():
    with pytest.raises(ValueError):
        I16.widen(1, I8)
    with pytest.raises(ValueError):
        U8.widen(1, I16)


def test_pointer_sized_target():
    assert pointer_sized_target(True, 64) is I64
    assert pointer_sized_target(False, 16) is U16
    assert pointer_sized_target(True).bits == POINTER_WIDTH
    with pytest.raises(ValueError):
        pointer_sized_target(True, 48)
