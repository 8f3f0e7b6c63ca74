"""Annotation value variants understood by the bundled renderers.

The builder never inspects these; they only carry the data a rendering
surface needs to apply them.
"""

from __future__ import annotations

import dataclasses
import enum
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


class TextStyle(enum.Enum):
    NORMAL = "normal"
    BOLD = "bold"
    ITALIC = "italic"
    BOLD_ITALIC = "bold_italic"


class VerticalAlignment(enum.Enum):
    BOTTOM = "bottom"
    BASELINE = "baseline"
    CENTER = "center"


@dataclass(frozen=True, slots=True)
class ForegroundColor:
    color: int  # 0xAARRGGBB


@dataclass(frozen=True, slots=True)
class BackgroundColor:
    color: int  # 0xAARRGGBB


@dataclass(frozen=True, slots=True)
class Strikethrough:
    pass


@dataclass(frozen=True, slots=True)
class Underline:
    pass


@dataclass(frozen=True, slots=True)
class Image:
    """Image drawn in place of the covered text.

    ``image`` is an opaque handle; renderers that emit markup expect a URL
    or data URI string.
    """

    image: Any
    vertical_alignment: VerticalAlignment = VerticalAlignment.BASELINE


@dataclass(frozen=True, slots=True)
class Style:
    style: TextStyle


@dataclass(frozen=True, slots=True)
class Subscript:
    pass


@dataclass(frozen=True, slots=True)
class Superscript:
    pass


@dataclass(frozen=True, slots=True)
class Typeface:
    family: str


@dataclass(frozen=True, slots=True)
class Url:
    url: str


@dataclass(frozen=True, slots=True)
class ScaleX:
    proportion: float


@dataclass(frozen=True, slots=True)
class AbsoluteSize:
    size: int  # pixels


@dataclass(frozen=True, slots=True)
class RelativeSize:
    proportion: float


@dataclass(frozen=True, slots=True, eq=False)
class Clickable:
    """Click handler attached to a range.

    Compared by identity: two registrations of the same handler are still two
    separate click targets.
    """

    on_click: Callable[[], None]

    def click(self) -> None:
        self.on_click()


_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def annotation_kind(annotation: Any) -> str:
    """Snake-case kind name of an annotation, e.g. ``"foreground_color"``."""
    return _CAMEL_BOUNDARY.sub("_", type(annotation).__name__).lower()


def annotation_to_dict(annotation: Any) -> dict[str, Any]:
    """Describe *annotation* as a JSON-safe dict with a ``kind`` key.

    Callables are left out, and so are image handles that are not strings.
    """
    result: dict[str, Any] = {"kind": annotation_kind(annotation)}
    if not dataclasses.is_dataclass(annotation):
        return result
    for field in dataclasses.fields(annotation):
        value = getattr(annotation, field.name)
        if isinstance(value, enum.Enum):
            value = value.value
        elif callable(value) or not isinstance(value, (str, int, float, bool)):
            continue
        result[field.name] = value
    return result
