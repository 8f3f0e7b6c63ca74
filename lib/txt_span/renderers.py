"""Rendering implementations for rich text values."""

from __future__ import annotations

import logging
import re
from html import escape
from urllib.parse import urlsplit

from lib.txt_span.annotations import (
    AbsoluteSize,
    BackgroundColor,
    Clickable,
    ForegroundColor,
    Image,
    RelativeSize,
    ScaleX,
    Strikethrough,
    Style,
    Subscript,
    Superscript,
    TextStyle,
    Typeface,
    Underline,
    Url,
    VerticalAlignment,
)
from lib.txt_span.types import AnnotatedRange, RichText

_log = logging.getLogger("html_renderer")

_STYLE_TAGS = {
    TextStyle.BOLD: ("<b>", "</b>"),
    TextStyle.ITALIC: ("<i>", "</i>"),
    TextStyle.BOLD_ITALIC: ("<b><i>", "</i></b>"),
}

_VERTICAL_ALIGN = {
    VerticalAlignment.BOTTOM: "bottom",
    VerticalAlignment.BASELINE: "baseline",
    VerticalAlignment.CENTER: "middle",
}

_LINK_SCHEMES = {"http", "https", "mailto"}

# browsers drop these before resolving a scheme
_URL_IGNORED = re.compile(r"[\x00-\x20\x7f]")


def css_color(color: int) -> str:
    """Format a packed 0xAARRGGBB color for CSS."""
    alpha = (color >> 24) & 0xFF
    red = (color >> 16) & 0xFF
    green = (color >> 8) & 0xFF
    blue = color & 0xFF
    if alpha == 0xFF:
        return f"#{red:02x}{green:02x}{blue:02x}"
    return f"rgba({red},{green},{blue},{round(alpha / 255, 3)})"


def _css_span(declaration: str) -> tuple[str, str]:
    return f'<span style="{escape(declaration)}">', "</span>"


def _css_string(value: str) -> str:
    """Quote *value* as a CSS string literal."""
    cleaned = re.sub(r"[\x00-\x1f\x7f]", "", value)
    return '"' + cleaned.replace("\\", "\\\\").replace('"', '\\"') + '"'


def _url_scheme(url: str) -> str | None:
    """Lower-cased scheme of *url*, ``""`` when relative, ``None`` when unparsable."""
    try:
        return urlsplit(_URL_IGNORED.sub("", url)).scheme.lower()
    except ValueError:
        return None


def is_safe_link(url: str) -> bool:
    return _url_scheme(url) in _LINK_SCHEMES | {""}


def is_safe_image_source(source: str) -> bool:
    if is_safe_link(source):
        return True
    return _URL_IGNORED.sub("", source).lower().startswith("data:image/")


def _tags_for(annotation: object) -> tuple[str, str] | None:
    if isinstance(annotation, ForegroundColor):
        return _css_span(f"color:{css_color(annotation.color)}")
    if isinstance(annotation, BackgroundColor):
        return _css_span(f"background-color:{css_color(annotation.color)}")
    if isinstance(annotation, Strikethrough):
        return "<s>", "</s>"
    if isinstance(annotation, Underline):
        return "<u>", "</u>"
    if isinstance(annotation, Style):
        return _STYLE_TAGS.get(annotation.style)
    if isinstance(annotation, Subscript):
        return "<sub>", "</sub>"
    if isinstance(annotation, Superscript):
        return "<sup>", "</sup>"
    if isinstance(annotation, Typeface):
        return _css_span(f"font-family:{_css_string(annotation.family)}")
    if isinstance(annotation, Url):
        if not is_safe_link(annotation.url):
            return None
        return f'<a href="{escape(annotation.url)}">', "</a>"
    if isinstance(annotation, ScaleX):
        return _css_span(f"display:inline-block;transform:scaleX({annotation.proportion})")
    if isinstance(annotation, AbsoluteSize):
        return _css_span(f"font-size:{annotation.size}px")
    if isinstance(annotation, RelativeSize):
        return _css_span(f"font-size:{annotation.proportion}em")
    if isinstance(annotation, Clickable):
        return '<span class="clickable">', "</span>"
    return None


def _is_markup_image(annotation: object) -> bool:
    return (
        isinstance(annotation, Image)
        and isinstance(annotation.image, str)
        and is_safe_image_source(annotation.image)
    )


class HtmlRenderer:
    """Render rich text as an HTML fragment.

    The text is cut at every range boundary. Each piece is wrapped in the
    tags of the ranges covering it, opened in attach order and closed in
    reverse, so overlapping ranges always produce well-formed markup. Each
    image range emits one ``<img>`` at its own start and replaces the text
    it covers. Links and image sources are limited to http, https and
    mailto (plus ``data:image/`` for images); other schemes render as plain
    text. Annotations without an HTML mapping are skipped.
    """

    def render(self, rich_text: RichText) -> str:
        text = rich_text.text
        ranges = [r for r in rich_text.ranges if r.start < r.end]
        for skipped in (r for r in ranges if _tags_for(r.annotation) is None):
            if not _is_markup_image(skipped.annotation):
                _log.debug("Skipping annotation %r", skipped.annotation)

        boundaries = {0, len(text)}
        for r in ranges:
            boundaries.update((r.start, r.end))
        cuts = sorted(b for b in boundaries if 0 <= b <= len(text))

        emitted: set[int] = set()  # positions in `ranges` of images already drawn
        parts: list[str] = []
        for start, end in zip(cuts, cuts[1:]):
            active = [
                (position, r)
                for position, r in enumerate(ranges)
                if r.start <= start and end <= r.end
            ]
            content = self._content(text, start, end, active, emitted)
            if not content:
                continue
            tags = [t for t in (_tags_for(r.annotation) for _, r in active) if t is not None]
            parts.append(
                "".join(open_tag for open_tag, _ in tags)
                + content
                + "".join(close_tag for _, close_tag in reversed(tags))
            )
        return "".join(parts)

    def _content(
        self,
        text: str,
        start: int,
        end: int,
        active: list[tuple[int, AnnotatedRange]],
        emitted: set[int],
    ) -> str:
        images = [(p, r) for p, r in active if _is_markup_image(r.annotation)]
        if not images:
            return escape(text[start:end])
        # text under an image is replaced; draw images not drawn yet
        drawn: list[str] = []
        for position, image_range in images:
            if position in emitted:
                continue
            emitted.add(position)
            drawn.append(self._image_tag(text, image_range))
        return "".join(drawn)

    def _image_tag(self, text: str, image_range: AnnotatedRange) -> str:
        image = image_range.annotation
        return (
            f'<img src="{escape(image.image)}" '
            f'alt="{escape(text[image_range.start:image_range.end])}" '
            f'style="vertical-align:{_VERTICAL_ALIGN[image.vertical_alignment]}">'
        )
