"""Validated wrappers as pydantic v2 model fields.

Usage:
    from pydantic import BaseModel
    from validwrap.integrations.pydantic import WrapperField

    class Signup(BaseModel):
        greeting: WrapperField[Greet]
        score: WrapperField[Score]
        tags: WrapperField[Tags]

Text input goes through ``from_string``, numbers through ``from_number`` and
lists through ``from_vec`` (elements are converted first when the sequence
declares a wrapper ``element_type``). Rejections surface as pydantic
``ValidationError``. The JSON schema carries the rule's hints (pattern,
minimum/maximum, minItems/maxItems).
"""
from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import CoreSchema, core_schema

from validwrap.errors import raise_result
from validwrap.validation import CustomizedNumber, CustomizedString, CustomizedVec, IntWidth, ValidatedWrapper


def _is_wrapper(tp: Any) -> bool:
    return isinstance(tp, type) and issubclass(tp, ValidatedWrapper)


class WrapperSchema:
    """Annotated marker binding a wrapper type to pydantic validation."""
    __slots__ = ("wrapper",)

    def __init__(self, wrapper: type):
        if not _is_wrapper(wrapper):
            raise TypeError(f"{wrapper!r} is not a validated wrapper type")
        self.wrapper = wrapper

    def __get_pydantic_core_schema__(self, source_type: type, handler: GetCoreSchemaHandler) -> CoreSchema:
        return core_schema.no_info_plain_validator_function(
            self._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(_serialize),
        )

    def __get_pydantic_json_schema__(self, _core_schema: CoreSchema, handler: GetJsonSchemaHandler) -> JsonSchemaValue:
        schema = handler(_input_schema(self.wrapper))
        rule = self.wrapper.rule
        return {**schema, **rule.json_schema()} if rule is not None else schema

    def _validate(self, v: Any) -> Any:
        cls = self.wrapper
        if isinstance(v, cls):
            return v
        try:
            if isinstance(v, str):
                result = cls.from_string(v)
            elif issubclass(cls, CustomizedNumber) and isinstance(v, (int, float, Decimal)):
                result = cls.from_number(v)
            elif issubclass(cls, CustomizedVec) and isinstance(v, (list, tuple)):
                element = cls.element_type
                items = [WrapperSchema(element)._validate(item) for item in v] if _is_wrapper(element) else v
                result = cls.from_vec(items)
            else:
                raise ValueError(f"{cls.__name__} cannot be built from {type(v).__name__}")
        except (TypeError, OverflowError) as e:
            raise ValueError(str(e)) from e
        return raise_result(result, origin=cls.__name__)


def _input_schema(wrapper: type) -> CoreSchema:
    if issubclass(wrapper, CustomizedString):
        return core_schema.str_schema()
    if issubclass(wrapper, CustomizedNumber):
        number_type = wrapper.number_type
        if number_type is int or isinstance(number_type, IntWidth):
            return core_schema.int_schema()
        if number_type is Decimal:
            return core_schema.decimal_schema()
        return core_schema.float_schema()
    if issubclass(wrapper, CustomizedVec):
        element = wrapper.element_type
        return core_schema.list_schema(_input_schema(element) if _is_wrapper(element) else core_schema.any_schema())
    return core_schema.any_schema()


def _serialize(value: Any) -> Any:
    if isinstance(value, CustomizedNumber):
        return value.number
    if isinstance(value, CustomizedVec):
        return [_serialize(item) for item in value]
    return str(value)


def wrapper_field(wrapper: type) -> Any:
    """``Annotated`` alias that makes ``wrapper`` usable as a model field type."""
    return Annotated[wrapper, WrapperSchema(wrapper)]


class WrapperField:
    """``WrapperField[Greet]`` is shorthand for ``wrapper_field(Greet)``."""

    def __class_getitem__(cls, wrapper: type) -> Any:
        return wrapper_field(wrapper)
