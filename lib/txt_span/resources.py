"""Resource-backed helpers: string-array sourced builds and color resolvers."""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping

from lib.txt_span.errors import ResourceNotFound
from lib.txt_span.protocols import DEFAULT_LOCALE, StringArrayResolver
from lib.txt_span.styles import SpanBuilder
from lib.txt_span.types import RichText

_HEX_COLOR = re.compile(r"#([0-9a-fA-F]{6}|[0-9a-fA-F]{8})")


def build_span(
    array_id: str,
    resolver: StringArrayResolver,
    configure: Callable[[SpanBuilder], None],
    *,
    insert_separator: bool = False,
    locale: str = DEFAULT_LOCALE,
) -> RichText:
    """Build rich text from the string array *array_id*.

    *configure* receives the builder and registers annotations on it before
    the value is built.
    """
    segments = resolver.get_text_array(array_id, locale=locale)
    builder = SpanBuilder(segments, insert_separator)
    configure(builder)
    return builder.build()


class HexColorResolver:
    """Resolve ``#RRGGBB`` and ``#AARRGGBB`` color ids.

    Six-digit ids are fully opaque.
    """

    def resolve_color(self, color_id: str) -> int:
        match = _HEX_COLOR.fullmatch(color_id) if isinstance(color_id, str) else None
        if match is None:
            raise ResourceNotFound(color_id, "expected #RRGGBB or #AARRGGBB")
        digits = match.group(1)
        if len(digits) == 6:
            digits = "ff" + digits
        return int(digits, 16)


class PaletteColorResolver:
    """Resolve color names through a fixed palette."""

    def __init__(self, palette: Mapping[str, int]) -> None:
        self._palette = dict(palette)

    def resolve_color(self, color_id: str) -> int:
        try:
            return self._palette[color_id]
        except KeyError:
            raise ResourceNotFound(color_id, "unknown palette color") from None
