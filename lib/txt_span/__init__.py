"""txt_span - join text segments and attach annotation ranges to them."""

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
    annotation_kind,
    annotation_to_dict,
)
from lib.txt_span.builder import RangeAnnotationBuilder
from lib.txt_span.errors import (
    EmptySegmentSequence,
    IndexOutOfRange,
    ResourceNotFound,
    SpanError,
)
from lib.txt_span.offsets import SEPARATOR
from lib.txt_span.protocols import (
    DEFAULT_LOCALE,
    AnnotationFactory,
    ColorResolver,
    ImageResolver,
    InteractiveTarget,
    Renderer,
    StringArrayResolver,
)
from lib.txt_span.renderers import HtmlRenderer
from lib.txt_span.resources import HexColorResolver, PaletteColorResolver, build_span
from lib.txt_span.styles import SpanBuilder
from lib.txt_span.types import AnnotatedRange, RichText

__all__ = [
    # Builders
    "RangeAnnotationBuilder",
    "SpanBuilder",
    "build_span",
    "SEPARATOR",
    # Types
    "AnnotatedRange",
    "RichText",
    # Annotations
    "AbsoluteSize",
    "BackgroundColor",
    "Clickable",
    "ForegroundColor",
    "Image",
    "RelativeSize",
    "ScaleX",
    "Strikethrough",
    "Style",
    "Subscript",
    "Superscript",
    "TextStyle",
    "Typeface",
    "Underline",
    "Url",
    "VerticalAlignment",
    "annotation_kind",
    "annotation_to_dict",
    # Protocols
    "DEFAULT_LOCALE",
    "AnnotationFactory",
    "ColorResolver",
    "ImageResolver",
    "InteractiveTarget",
    "Renderer",
    "StringArrayResolver",
    # Concrete implementations
    "HexColorResolver",
    "HtmlRenderer",
    "PaletteColorResolver",
    # Errors
    "EmptySegmentSequence",
    "IndexOutOfRange",
    "ResourceNotFound",
    "SpanError",
]
