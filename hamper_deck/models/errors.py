from dataclasses import dataclass
from typing import List, Optional


class ExportError(Exception):
    """Raised once per export when no document could be produced."""

    def __init__(self, message: str, failed_slides: Optional[List[str]] = None):
        self.failed_slides = list(failed_slides or [])
        super().__init__(message)


class SlideTypeMismatchError(TypeError):
    """A slide reached the renderer with a type it does not know how to draw."""


@dataclass(frozen=True)
class ImageLoadFailure:
    """Returned instead of an image when fetching or decoding fails."""

    url: str
    reason: str
