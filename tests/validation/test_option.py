"""Tests for the tri-state ValidatorOption."""

import pytest

from validwrap.validation import ValidatorOption


@pytest.mark.parametrize("option,allow,not_allow,must", [
    (ValidatorOption.MUST, True, False, True),
    (ValidatorOption.ALLOW, True, False, False),
    (ValidatorOption.NOT_ALLOW, False, True, False),
])
def test_predicates(option, allow, not_allow, must):
    assert option.allow() is allow
    assert option.not_allow() is not_allow
    assert option.must() is must


@pytest.mark.parametrize("option", list(ValidatorOption))
def test_must_implies_allow(option):
    assert not option.must() or option.allow()
    assert option.allow() is not option.not_allow()


@pytest.mark.parametrize("text,expected", [
    ("must", ValidatorOption.MUST),
    ("Allow", ValidatorOption.ALLOW),
    ("not-allow", ValidatorOption.NOT_ALLOW),
    (" NOT_ALLOW ", ValidatorOption.NOT_ALLOW),
])
def test_parse(text, expected):
    assert ValidatorOption.parse(text) is expected


def test_parse_unknown_raises():
    with pytest.raises(ValueError, match="Unknown validator option"):
        ValidatorOption.parse("sometimes")
