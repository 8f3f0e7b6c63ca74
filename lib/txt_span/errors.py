"""Exception hierarchy for the span builder."""


class SpanError(Exception):
    """Base exception for all span builder errors."""


class IndexOutOfRange(SpanError, IndexError):
    """Raised when a segment index falls outside ``[0, size)``."""

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"segment index {index} out of range for {size} segment(s)")


class EmptySegmentSequence(SpanError, ValueError):
    """Raised when building from zero segments."""

    def __init__(self) -> None:
        super().__init__("cannot build rich text from an empty segment sequence")


class ResourceNotFound(SpanError, LookupError):
    """Raised when a resolver does not know a resource id."""

    def __init__(self, resource_id: object, detail: str = "") -> None:
        self.resource_id = resource_id
        msg = f"resource not found: {resource_id!r}"
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg)
