"""Form-value decoding in front of the textual constructors.

Request frameworks hand over raw form values that are still percent-encoded.
A decoder turns such a value into text; the text is then validated with the
wrapper's ``from_string``. A value that cannot be decoded is reported as the
wrapper family's DECODE_ERROR and never reaches the rule.

Disabled unless ``VALIDWRAP_HOST_INTEGRATION`` is set or a decoder is passed.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable
from urllib.parse import unquote_to_bytes

from validwrap import config
from validwrap.errors import DecodeFailure, Err, Ok, Result
from validwrap.logging import integration_logger

log = integration_logger()


@runtime_checkable
class FormValueDecoder(Protocol):
    """Turns one raw form value into text."""

    def decode(self, raw: str | bytes) -> Result[str, DecodeFailure]: ...


@dataclass(frozen=True, slots=True)
class UrlFormDecoder:
    """application/x-www-form-urlencoded value decoding with strict UTF-8."""
    plus_as_space: bool = True

    def decode(self, raw: str | bytes) -> Result[str, DecodeFailure]:
        data = raw.encode("utf-8") if isinstance(raw, str) else bytes(raw)
        if self.plus_as_space:
            data = data.replace(b"+", b" ")
        try:
            return Ok(unquote_to_bytes(data).decode("utf-8"))
        except UnicodeDecodeError as e:
            return Err(DecodeFailure(f"form value is not valid UTF-8 at byte {e.start}", e))


def from_form_value(cls: type, raw: str | bytes, decoder: FormValueDecoder | None = None) -> Result[Any, Any]:
    """Decode ``raw`` and validate it with ``cls.from_string``."""
    if decoder is None:
        if not config.settings.HOST_INTEGRATION:
            raise RuntimeError(
                "form decoding is disabled; set VALIDWRAP_HOST_INTEGRATION=true or pass a decoder"
            )
        decoder = UrlFormDecoder()

    decoded = decoder.decode(raw)
    if decoded.is_err():
        failure = decoded.unwrap_err()
        log.debug("form_value_rejected", wrapper=cls.__name__, reason=str(failure))
        return Err(cls.error_type.decode_error(failure))
    return cls.from_string(decoded.unwrap())
