"""Protocol definitions for the collaborators of the span builder."""

from typing import Any, Protocol

from lib.txt_span.types import RichText

DEFAULT_LOCALE = "default"


class AnnotationFactory(Protocol):
    """Zero-argument callable producing one annotation value per call."""

    def __call__(self) -> Any: ...


class ColorResolver(Protocol):
    """Resolve a color id to a packed 0xAARRGGBB value."""

    def resolve_color(self, color_id: Any) -> int: ...


class ImageResolver(Protocol):
    """Resolve an image resource id to an image handle."""

    def resolve_image(self, resource_id: Any) -> Any: ...


class StringArrayResolver(Protocol):
    """Source of localized string arrays used as builder segments."""

    def get_text_array(self, array_id: str, locale: str = DEFAULT_LOCALE) -> list[str]: ...


class InteractiveTarget(Protocol):
    """A rendering surface that must be told to dispatch clicks on spans."""

    def enable_link_navigation(self) -> None: ...


class Renderer(Protocol):
    """Paint a rich text value into a target representation."""

    def render(self, rich_text: RichText) -> str: ...
