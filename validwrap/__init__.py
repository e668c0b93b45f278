"""validwrap: construct-once validated value wrappers.

Host integrations live in ``validwrap.integrations`` and are imported
explicitly; the core never imports them.
"""
from validwrap.errors import Err, Ok, Result
from validwrap.validation import (
    CustomizedNumber,
    CustomizedString,
    CustomizedVec,
    PrimitiveNumber,
    RangedLengthVec,
    RangedNumber,
    RegexNumber,
    RegexString,
    ValidatorOption,
)

__version__ = "0.1.0"

__all__ = [
    "Ok",
    "Err",
    "Result",
    "ValidatorOption",
    "CustomizedString",
    "RegexString",
    "CustomizedNumber",
    "PrimitiveNumber",
    "RangedNumber",
    "RegexNumber",
    "CustomizedVec",
    "RangedLengthVec",
]
