"""Data types produced by the span builder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class AnnotatedRange:
    """An annotation applied over a character range of the joined text."""

    start: int  # char offset (inclusive)
    end: int  # char offset (exclusive, slice convention)
    annotation: Any

    @property
    def is_empty(self) -> bool:
        return self.start == self.end


@dataclass(frozen=True, slots=True)
class RichText:
    """Joined text plus the ordered annotation ranges attached to it.

    ``ranges`` keeps attach order: segment index first, then registration
    order within a segment. Renderers may rely on it for layering.
    """

    text: str
    ranges: tuple[AnnotatedRange, ...] = ()

    def __str__(self) -> str:
        return self.text

    def covered_text(self, annotated: AnnotatedRange) -> str:
        """Return the slice of ``text`` covered by *annotated*."""
        return self.text[annotated.start : annotated.end]

    def annotations_at(self, position: int) -> list[Any]:
        """Return annotations whose range covers *position*, in attach order."""
        return [r.annotation for r in self.ranges if r.start <= position < r.end]
