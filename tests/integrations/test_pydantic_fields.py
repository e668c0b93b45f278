"""Tests for wrapper types as pydantic model fields."""

from decimal import Decimal

import pytest
from pydantic import BaseModel, ValidationError

from validwrap.integrations.pydantic import WrapperField, WrapperSchema, wrapper_field
from validwrap.validation import (
    U8,
    RangedLengthVec,
    RangedNumber,
    RegexString,
    ranged_number,
)


class Greet(RegexString, pattern=r"^(Hi|Hello)$"):
    pass


class Score(RangedNumber, number_type=U8, min_value=0, max_value=100):
    pass


class Greetings(RangedLengthVec, min_length=1, max_length=2, element_type=Greet):
    pass


Price = ranged_number("Price", Decimal, Decimal("0"), Decimal("100"))


class Signup(BaseModel):
    greeting: WrapperField[Greet]
    score: WrapperField[Score]
    greetings: wrapper_field(Greetings)


class TestValidation:
    def test_accepts_raw_inputs(self):
        signup = Signup(greeting="Hi", score=42, greetings=["Hello", "Hi"])
        assert signup.greeting == Greet.from_str("Hi").unwrap()
        assert signup.score.number == 42
        assert str(signup.greetings) == "[Hello, Hi]"

    def test_accepts_wrapper_instances(self):
        greet = Greet.from_str("Hello").unwrap()
        signup = Signup(greeting=greet, score="7", greetings=[greet])
        assert signup.greeting is greet
        assert signup.score.number == 7

    @pytest.mark.parametrize("field,value", [
        ("greeting", "Hey"),
        ("score", 101),
        ("score", "abc"),
        ("score", 1.5),
        ("greetings", []),
        ("greetings", ["Hi", "Hi", "Hi"]),
        ("greetings", ["Hey"]),
        ("greeting", 3),
    ])
    def test_rejections_become_validation_errors(self, field, value):
        data = {"greeting": "Hi", "score": 1, "greetings": ["Hi"]}
        data[field] = value
        with pytest.raises(ValidationError):
            Signup(**data)


class TestSerialization:
    def test_model_dump(self):
        signup = Signup(greeting="Hi", score=42, greetings=["Hello"])
        assert signup.model_dump() == {"greeting": "Hi", "score": 42, "greetings": ["Hello"]}
        assert signup.model_dump_json() == '{"greeting":"Hi","score":42,"greetings":["Hello"]}'


class TestJsonSchema:
    def test_schema_hints(self):
        props = Signup.model_json_schema()["properties"]
        assert props["greeting"]["type"] == "string"
        assert props["greeting"]["pattern"] == r"^(Hi|Hello)$"
        assert props["score"]["type"] == "integer"
        assert (props["score"]["minimum"], props["score"]["maximum"]) == (0, 100)
        assert props["greetings"]["type"] == "array"
        assert (props["greetings"]["minItems"], props["greetings"]["maxItems"]) == (1, 2)


def test_decimal_field():
    class Order(BaseModel):
        price: WrapperField[Price]

    assert Order(price="9.50").price.number == Decimal("9.50")
    assert Order(price=Decimal("1")).price.number == Decimal("1")
    with pytest.raises(ValidationError):
        Order(price="101")


def test_non_wrapper_rejected():
    with pytest.raises(TypeError):
        WrapperSchema(int)
