"""Range annotation builder: joins segments and maps annotations onto them."""

from __future__ import annotations

import logging
import operator
from collections.abc import Iterable
from typing import Any

from lib.txt_span.errors import EmptySegmentSequence, IndexOutOfRange
from lib.txt_span.offsets import (
    join_segments,
    segment_bounds,
    segment_starts,
    separator_width,
)
from lib.txt_span.protocols import AnnotationFactory
from lib.txt_span.types import AnnotatedRange, RichText

_UNRESOLVED = object()


class _Deferred:
    """Annotation factory invoked on first resolution and cached afterwards."""

    __slots__ = ("_factory", "_value")

    def __init__(self, factory: AnnotationFactory) -> None:
        self._factory = factory
        self._value: Any = _UNRESOLVED

    def resolve(self) -> Any:
        if self._value is _UNRESOLVED:
            self._value = self._factory()
        return self._value


class RangeAnnotationBuilder:
    """Join text segments into one string and attach annotations per segment.

    Annotations are registered against segment indices and resolved lazily
    by ``build()``. Each pending factory is called at most once, so repeated
    builds return the same annotation instances.

    Set *insert_separator* to ``True`` to put a single space between
    adjacent segments. Annotated ranges of non-last segments then include
    the trailing space.
    """

    def __init__(self, segments: Iterable[str], insert_separator: bool = False) -> None:
        self._segments: tuple[str, ...] = tuple(segments)
        self._insert_separator = insert_separator
        self._pending: list[list[_Deferred]] = [[] for _ in self._segments]
        self._log = logging.getLogger("span_builder")

    @property
    def segments(self) -> tuple[str, ...]:
        return self._segments

    @property
    def insert_separator(self) -> bool:
        return self._insert_separator

    def __len__(self) -> int:
        return len(self._segments)

    def add_annotation(self, indices: Iterable[int], factory: AnnotationFactory) -> None:
        """Register *factory* for every index in *indices*.

        All indices are checked before anything is recorded, so a bad index
        leaves the builder untouched. The factory is called once per index
        at build time.
        """
        checked = [self._check_index(index) for index in indices]
        for index in checked:
            self._pending[index].append(_Deferred(factory))
        self._log.debug("Registered annotation for segments %s", checked)

    def segment_start(self, index: int) -> int:
        """Offset of segment *index* in the joined text."""
        index = self._check_index(index)
        return self._starts()[index]

    def segment_end(self, index: int) -> int:
        """Exclusive end offset of the range annotated for segment *index*."""
        index = self._check_index(index)
        starts = self._starts()
        return segment_bounds(starts, self._text_length(starts), index)[1]

    def build(self) -> RichText:
        """Join the segments and resolve every pending annotation.

        Exceptions raised by annotation factories propagate unchanged.
        """
        if not self._segments:
            raise EmptySegmentSequence()

        text = join_segments(self._segments, self._insert_separator)
        starts = self._starts()

        ranges: list[AnnotatedRange] = []
        for index, pending in enumerate(self._pending):
            start, end = segment_bounds(starts, len(text), index)
            for deferred in pending:
                ranges.append(AnnotatedRange(start=start, end=end, annotation=deferred.resolve()))

        self._log.debug(
            "Built rich text: %d segment(s), %d char(s), %d range(s)",
            len(self._segments),
            len(text),
            len(ranges),
        )
        return RichText(text=text, ranges=tuple(ranges))

    def _starts(self) -> list[int]:
        return segment_starts(self._segments, separator_width(self._insert_separator))

    def _text_length(self, starts: list[int]) -> int:
        return starts[-1] - separator_width(self._insert_separator) if self._segments else 0

    def _check_index(self, index: int) -> int:
        index = operator.index(index)
        if not 0 <= index < len(self._segments):
            raise IndexOutOfRange(index, len(self._segments))
        return index
