"""Span builder with one registration method per annotation kind."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

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
from lib.txt_span.builder import RangeAnnotationBuilder
from lib.txt_span.protocols import ColorResolver, ImageResolver, InteractiveTarget


class SpanBuilder(RangeAnnotationBuilder):
    """``RangeAnnotationBuilder`` with shortcuts for the bundled annotations.

    Shortcuts that need a resource lookup take the resolver explicitly; the
    lookup itself happens at build time, once per index.

    Usage::

        builder = SpanBuilder(["Hello", "world"], insert_separator=True)
        builder.foreground_color("accent", 1, resolver=palette)
        builder.underline(0, 1)
        rich_text = builder.build()
    """

    def foreground_color(self, color_id: Any, *indices: int, resolver: ColorResolver) -> None:
        self.add_annotation(indices, lambda: ForegroundColor(resolver.resolve_color(color_id)))

    def background_color(self, color_id: Any, *indices: int, resolver: ColorResolver) -> None:
        self.add_annotation(indices, lambda: BackgroundColor(resolver.resolve_color(color_id)))

    def click(
        self,
        *indices: int,
        on_click: Callable[[], None],
        target: InteractiveTarget | None = None,
    ) -> None:
        """Make *indices* clickable.

        When *target* is given it is switched to link navigation right away,
        otherwise the caller is responsible for routing clicks.
        """
        if target is not None:
            target.enable_link_navigation()
        self.add_annotation(indices, lambda: Clickable(on_click))

    def strikethrough(self, *indices: int) -> None:
        self.add_annotation(indices, Strikethrough)

    def underline(self, *indices: int) -> None:
        self.add_annotation(indices, Underline)

    def image(
        self,
        *indices: int,
        image: Any,
        vertical_alignment: VerticalAlignment = VerticalAlignment.BASELINE,
    ) -> None:
        self.add_annotation(indices, lambda: Image(image, vertical_alignment))

    def image_resource(
        self,
        *indices: int,
        resource_id: Any,
        resolver: ImageResolver,
        vertical_alignment: VerticalAlignment = VerticalAlignment.BASELINE,
    ) -> None:
        self.add_annotation(
            indices, lambda: Image(resolver.resolve_image(resource_id), vertical_alignment)
        )

    def style(self, *indices: int, style: TextStyle) -> None:
        self.add_annotation(indices, lambda: Style(style))

    def subscript(self, *indices: int) -> None:
        self.add_annotation(indices, Subscript)

    def superscript(self, *indices: int) -> None:
        self.add_annotation(indices, Superscript)

    def typeface(self, *indices: int, family: str) -> None:
        self.add_annotation(indices, lambda: Typeface(family))

    def url(self, *indices: int, url: str) -> None:
        self.add_annotation(indices, lambda: Url(url))

    def scale_x(self, *indices: int, proportion: float) -> None:
        self.add_annotation(indices, lambda: ScaleX(proportion))

    def absolute_size(self, *indices: int, size: int) -> None:
        self.add_annotation(indices, lambda: AbsoluteSize(size))

    def relative_size(self, *indices: int, proportion: float) -> None:
        self.add_annotation(indices, lambda: RelativeSize(proportion))
