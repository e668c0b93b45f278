"""Tests for form-value decoding in front of textual constructors."""

import pytest

from validwrap.errors import DecodeFailure, Err, NumberErrorKind, Ok, StringErrorKind, VecErrorKind
from validwrap.integrations.form import FormValueDecoder, UrlFormDecoder, from_form_value
from validwrap.validation import RangedLengthVec, RangedNumber, RegexString


class City(RegexString, pattern=r"^[A-Za-zé ]+$"):
    pass


class Age(RangedNumber, number_type=int, min_value=0, max_value=150):
    pass


class Cities(RangedLengthVec, min_length=1, max_length=3):
    pass


class RejectAll:
    def decode(self, raw):
        return Err(DecodeFailure("refused"))


class TestUrlFormDecoder:
    @pytest.mark.parametrize("raw,expected", [
        ("San+Jose", "San Jose"),
        ("caf%C3%A9", "café"),
        (b"a%2Bb", "a+b"),
        ("plain", "plain"),
    ])
    def test_decodes(self, raw, expected):
        assert UrlFormDecoder().decode(raw) == Ok(expected)

    def test_plus_kept_when_disabled(self):
        assert UrlFormDecoder(plus_as_space=False).decode("a+b") == Ok("a+b")

    def test_invalid_utf8_is_err(self):
        result = UrlFormDecoder().decode("%FF%FE")
        assert result.is_err()
        assert isinstance(result.unwrap_err().cause, UnicodeDecodeError)

    def test_satisfies_protocol(self):
        assert isinstance(UrlFormDecoder(), FormValueDecoder)
        assert isinstance(RejectAll(), FormValueDecoder)


class TestFromFormValue:
    def test_disabled_by_default(self, no_host_integration):
        with pytest.raises(RuntimeError):
            from_form_value(City, "Paris")

    def test_explicit_decoder_works_when_disabled(self, no_host_integration):
        assert from_form_value(City, "Paris", decoder=UrlFormDecoder()).unwrap().as_str() == "Paris"

    def test_decodes_then_validates(self, host_integration):
        assert from_form_value(City, "caf%C3%A9").unwrap().as_str() == "café"
        assert from_form_value(City, "R2D2").unwrap_err().kind is StringErrorKind.NOT_MATCH
        assert from_form_value(Age, "42").unwrap().number == 42
        assert from_form_value(Age, "%2D1").unwrap_err().kind is NumberErrorKind.OUT_RANGE

    def test_decode_failure_is_family_decode_error(self, host_integration):
        error = from_form_value(City, "%FF").unwrap_err()
        assert error.kind is StringErrorKind.DECODE_ERROR
        assert isinstance(error.cause, UnicodeDecodeError)
        assert from_form_value(Age, "%FF").unwrap_err().kind is NumberErrorKind.DECODE_ERROR

    def test_custom_decoder_failure(self, no_host_integration):
        error = from_form_value(Cities, "x", decoder=RejectAll()).unwrap_err()
        assert error.kind is VecErrorKind.DECODE_ERROR
        assert error.message == "refused"

    def test_vec_text_still_not_supported(self, host_integration):
        assert from_form_value(Cities, "Paris").unwrap_err().kind is VecErrorKind.NOT_SUPPORT
