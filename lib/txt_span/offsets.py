"""Segment-to-offset mapping for joined text."""

from __future__ import annotations

from collections.abc import Sequence

SEPARATOR = " "


def separator_width(insert_separator: bool) -> int:
    return len(SEPARATOR) if insert_separator else 0


def join_segments(segments: Sequence[str], insert_separator: bool) -> str:
    """Join *segments* the same way the offset table counts them."""
    return (SEPARATOR if insert_separator else "").join(segments)


def segment_starts(segments: Sequence[str], width: int) -> list[int]:
    """Prefix-sum table of segment start offsets.

    The table has ``len(segments) + 1`` entries; entry ``i`` is where segment
    ``i`` starts and the final entry is where a segment appended after the
    last one would start (so it counts one trailing separator).
    """
    starts = [0]
    for segment in segments:
        starts.append(starts[-1] + len(segment) + width)
    return starts


def segment_bounds(starts: Sequence[int], text_length: int, index: int) -> tuple[int, int]:
    """Return the ``[start, end)`` range annotated for segment *index*.

    A segment ends where the next one starts, so every non-last segment
    covers the separator that follows it. The last segment is cut at the end
    of the joined text, which has no trailing separator.
    """
    return starts[index], min(starts[index + 1], text_length)
