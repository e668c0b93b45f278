"""Tri-state option used by format validators to parametrize optional parts.

A format validator holds one ``ValidatorOption`` per optional sub-component
(a port number, a localhost marker, ...) to say whether that component is
mandatory, permitted, or forbidden in the input.
"""
from __future__ import annotations

from enum import Enum


class ValidatorOption(str, Enum):
    MUST = "must"
    ALLOW = "allow"
    NOT_ALLOW = "not_allow"

    def allow(self) -> bool:
        """True when the component may appear (MUST or ALLOW)."""
        return self is not ValidatorOption.NOT_ALLOW

    def not_allow(self) -> bool:
        return self is ValidatorOption.NOT_ALLOW

    def must(self) -> bool:
        return self is ValidatorOption.MUST

    @classmethod
    def parse(cls, text: str) -> ValidatorOption:
        """Read an option from configuration text ("must", "allow", "not-allow")."""
        normalized = text.strip().lower().replace("-", "_")
        try:
            return cls(normalized)
        except ValueError:
            valid = ", ".join(o.value for o in cls)
            raise ValueError(f"Unknown validator option {text!r}. Valid: {valid}") from None
