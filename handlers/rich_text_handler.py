from fastapi import APIRouter, Depends, Request, HTTPException
from pydantic import BaseModel, Field, model_validator
from typing import Optional, List, Literal

from lib.storage.string_arrays import StringArraysStorage
from lib.txt_span import (
    DEFAULT_LOCALE,
    EmptySegmentSequence,
    HexColorResolver,
    HtmlRenderer,
    IndexOutOfRange,
    ResourceNotFound,
    SpanBuilder,
    TextStyle,
    VerticalAlignment,
    annotation_to_dict,
)


# Parameter each annotation kind needs besides its indices
REQUIRED_PARAMS = {
    "foreground_color": "color",
    "background_color": "color",
    "strikethrough": None,
    "underline": None,
    "image": "image",
    "style": "style",
    "subscript": None,
    "superscript": None,
    "typeface": "family",
    "url": "url",
    "scale_x": "proportion",
    "absolute_size": "size",
    "relative_size": "proportion",
}

color_resolver = HexColorResolver()
renderer = HtmlRenderer()

REGISTRARS = {
    "foreground_color": lambda b, s: b.foreground_color(s.color, *s.indices, resolver=color_resolver),
    "background_color": lambda b, s: b.background_color(s.color, *s.indices, resolver=color_resolver),
    "strikethrough": lambda b, s: b.strikethrough(*s.indices),
    "underline": lambda b, s: b.underline(*s.indices),
    "image": lambda b, s: b.image(*s.indices, image=s.image, vertical_alignment=s.vertical_alignment),
    "style": lambda b, s: b.style(*s.indices, style=s.style),
    "subscript": lambda b, s: b.subscript(*s.indices),
    "superscript": lambda b, s: b.superscript(*s.indices),
    "typeface": lambda b, s: b.typeface(*s.indices, family=s.family),
    "url": lambda b, s: b.url(*s.indices, url=s.url),
    "scale_x": lambda b, s: b.scale_x(*s.indices, proportion=s.proportion),
    "absolute_size": lambda b, s: b.absolute_size(*s.indices, size=s.size),
    "relative_size": lambda b, s: b.relative_size(*s.indices, proportion=s.proportion),
}


class AnnotationSpec(BaseModel):
    kind: Literal[
        "foreground_color",
        "background_color",
        "strikethrough",
        "underline",
        "image",
        "style",
        "subscript",
        "superscript",
        "typeface",
        "url",
        "scale_x",
        "absolute_size",
        "relative_size",
    ]
    indices: List[int] = Field(min_length=1)
    color: Optional[str] = None
    image: Optional[str] = None
    vertical_alignment: VerticalAlignment = VerticalAlignment.BASELINE
    style: Optional[TextStyle] = None
    family: Optional[str] = None
    url: Optional[str] = None
    proportion: Optional[float] = Field(default=None, gt=0)
    size: Optional[int] = Field(default=None, gt=0)

    @model_validator(mode="after")
    def check_required_param(self):
        param = REQUIRED_PARAMS[self.kind]
        if param is not None and getattr(self, param) is None:
            raise ValueError(f"'{param}' is required for {self.kind}")
        return self


class RichTextRequest(BaseModel):
    segments: Optional[List[str]] = None
    array_id: Optional[str] = None
    locale: str = DEFAULT_LOCALE
    insert_separator: bool = False
    annotations: List[AnnotationSpec] = []

    @model_validator(mode="after")
    def check_source(self):
        if (self.segments is None) == (self.array_id is None):
            raise ValueError("exactly one of 'segments' or 'array_id' must be provided")
        return self


router = APIRouter()


def get_string_arrays_storage(request: Request) -> StringArraysStorage:
    return request.app.state.string_arrays_storage


@router.post("/rich-text")
def post_rich_text(
    request: RichTextRequest,
    string_arrays_storage: StringArraysStorage = Depends(get_string_arrays_storage),
):
    """
    Join segments, apply annotations and return ranges plus rendered HTML
    """
    if request.array_id is not None:
        try:
            segments = string_arrays_storage.get_text_array(request.array_id, locale=request.locale)
        except ResourceNotFound as e:
            raise HTTPException(status_code=404, detail=str(e))
    else:
        segments = request.segments

    builder = SpanBuilder(segments, request.insert_separator)
    try:
        for spec in request.annotations:
            REGISTRARS[spec.kind](builder, spec)
        rich_text = builder.build()
    except (IndexOutOfRange, EmptySegmentSequence, ResourceNotFound) as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {
        "text": rich_text.text,
        "ranges": [
            {
                "start": r.start,
                "end": r.end,
                "annotation": annotation_to_dict(r.annotation),
            }
            for r in rich_text.ranges
        ],
        "html": renderer.render(rich_text),
    }
