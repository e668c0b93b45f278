"""Validated Wrapper System

Construct-once wrapper types whose instances are proof that a rule held.
Validation happens at the boundary, returns ``Result``, and is never repeated
on read.

Key Features:
- Tri-state ValidatorOption for optional sub-components
- Trait contracts for text, bytes, characters and integers of every width
- Integer widening cascade with a single 128-bit predicate
- Customized string, number and vec families with regex, range and length rules
- Pattern compilation under a configurable size ceiling
- Type descriptor catalog for code generators

Usage:
    from validwrap.validation import RegexString, RangedNumber, RangedLengthVec, U8

    class Greet(RegexString, pattern=r"^(Hi|Hello)$"):
        pass

    class Score(RangedNumber, number_type=U8, min_value=0, max_value=100):
        pass

    greet = Greet.from_str("Hello").unwrap()
"""
from .option import ValidatorOption

from .widths import (
    POINTER_WIDTH,
    IntWidth,
    I8, I16, I32, I64, I128, ISIZE,
    U8, U16, U32, U64, U128, USIZE,
    SIGNED_WIDTHS,
    UNSIGNED_WIDTHS,
    pointer_sized_target,
)

from .traits import (
    ValidateString,
    ValidateBytes,
    ValidateChar,
    ValidateSignedInteger,
    ValidateUnsignedInteger,
    unicode_scalar,
)

from .patterns import (
    PatternError,
    compile_pattern,
    estimate_program_size,
)

from .parsing import (
    NumberType,
    parse_number,
    coerce_number,
)

from .rules import (
    # Raw input shapes
    RawInput,
    OwnedText,
    BorrowedText,
    TypedNumber,
    ElementSequence,
    # Rules
    Rule,
    PassThroughRule,
    RegexMatchRule,
    CustomTextRule,
    PrimitiveNumberRule,
    RangedNumberRule,
    RegexNumberRule,
    CustomNumberRule,
    RangedLengthRule,
)

from .customized import (
    ValidatedValue,
    ValidatedWrapper,
    CustomizedString,
    RegexString,
    CustomizedNumber,
    PrimitiveNumber,
    RangedNumber,
    RegexNumber,
    CustomizedVec,
    RangedLengthVec,
    customized_string,
    regex_string,
    primitive_number,
    ranged_number,
    regex_number,
    ranged_length_vec,
)

from .descriptors import TypeDescriptor, describe_expected

__all__ = [
    "ValidatorOption",
    # Widths
    "POINTER_WIDTH",
    "IntWidth",
    "I8", "I16", "I32", "I64", "I128", "ISIZE",
    "U8", "U16", "U32", "U64", "U128", "USIZE",
    "SIGNED_WIDTHS",
    "UNSIGNED_WIDTHS",
    "pointer_sized_target",
    # Traits
    "ValidateString",
    "ValidateBytes",
    "ValidateChar",
    "ValidateSignedInteger",
    "ValidateUnsignedInteger",
    "unicode_scalar",
    # Collaborators
    "PatternError",
    "compile_pattern",
    "estimate_program_size",
    "NumberType",
    "parse_number",
    "coerce_number",
    # Rules
    "RawInput",
    "OwnedText",
    "BorrowedText",
    "TypedNumber",
    "ElementSequence",
    "Rule",
    "PassThroughRule",
    "RegexMatchRule",
    "CustomTextRule",
    "PrimitiveNumberRule",
    "RangedNumberRule",
    "RegexNumberRule",
    "CustomNumberRule",
    "RangedLengthRule",
    # Families
    "ValidatedValue",
    "ValidatedWrapper",
    "CustomizedString",
    "RegexString",
    "CustomizedNumber",
    "PrimitiveNumber",
    "RangedNumber",
    "RegexNumber",
    "CustomizedVec",
    "RangedLengthVec",
    "customized_string",
    "regex_string",
    "primitive_number",
    "ranged_number",
    "regex_number",
    "ranged_length_vec",
    # Descriptors
    "TypeDescriptor",
    "describe_expected",
]
