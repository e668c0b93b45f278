"""Pattern compilation under a compiled-size ceiling.

Patterns are authored by developers, not end users, but a careless counted
repetition can still make a matcher very large. Before handing a pattern to
``re`` its program size is estimated as the UTF-8 length multiplied by the
upper bound of every counted repetition (``{n}``, ``{m,n}``, ``{m,}``), and
patterns over the ceiling are refused.

Compilation happens at validation time and failures come back as
``Err(PatternError)``. Repeated compiles are served by the ``re`` module cache.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field

from validwrap.config import settings
from validwrap.errors import AppError, Err, Ok, Result, invalid_pattern
from validwrap.logging import validation_logger

log = validation_logger()

_COUNTED_REPEAT = re.compile(r"(\\*)\{(\d+)(?:,(\d*))?\}")


@dataclass(frozen=True, slots=True)
class PatternError:
    """A pattern that could not be compiled."""
    pattern: str
    reason: str
    cause: Exception | None = field(default=None, compare=False, repr=False)

    def to_app_error(self, origin: str = "") -> AppError:
        return invalid_pattern(self.pattern, self.reason, origin=origin, cause=self.cause).error

    def __str__(self) -> str:
        return self.reason


def estimate_program_size(pattern: str) -> int:
    """Estimated compiled size of ``pattern`` in matcher units."""
    size = len(pattern.encode("utf-8"))
    for m in _COUNTED_REPEAT.finditer(pattern):
        escapes, low, high = m.groups()
        if len(escapes) % 2:
            # escaped brace, a literal
            continue
        bound = int(high) if high else int(low)
        size *= max(bound, 1)
    return size


def compile_pattern(pattern: str, size_limit: int | None = None) -> Result[re.Pattern, PatternError]:
    """Compile ``pattern``, refusing it if its estimated size exceeds the ceiling."""
    limit = settings.REGEX_SIZE_LIMIT if size_limit is None else size_limit
    if (estimated := estimate_program_size(pattern)) > limit:
        log.warning("pattern_compile_failed", pattern=pattern[:80], reason="size_limit", estimated=estimated, limit=limit)
        return Err(PatternError(pattern, f"compiled pattern exceeds size limit of {limit}"))
    try:
        return Ok(re.compile(pattern))
    except re.error as e:
        log.warning("pattern_compile_failed", pattern=pattern[:80], reason=str(e))
        return Err(PatternError(pattern, str(e), e))
