import logging
import os
import tempfile
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Sequence

from PIL import Image

from hamper_deck.constants import page as P
from hamper_deck.constants.templates import PREFIX_TEMPLATE_SLIDES, SUFFIX_TEMPLATE_SLIDES
from hamper_deck.models.errors import ExportError, SlideTypeMismatchError
from hamper_deck.models.presentation import BaseSlide, PresentationDetails, TemplateSlideRecord
from hamper_deck.services.image_loader import ImageLoaderService
from hamper_deck.services.slide_renderer import SlideRenderer
from hamper_deck.utils.asset_directory_utils import get_exports_directory
from hamper_deck.utils.layout_utils import build_export_filename

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportPage:
    slide: BaseSlide
    option_number: Optional[int]


@dataclass(frozen=True)
class ExportResult:
    path: str
    filename: str
    page_count: int


def build_export_sequence(
    user_slides: Sequence[BaseSlide],
    prefix: Sequence[BaseSlide] = PREFIX_TEMPLATE_SLIDES,
    suffix: Sequence[BaseSlide] = SUFFIX_TEMPLATE_SLIDES,
) -> List[ExportPage]:
    """
    prefix + user slides + suffix, one page each.
    "Option N" counts non-template slides only, so template pages never shift the numbering.
    """
    pages = []
    option_number = 0
    for slide in [*prefix, *user_slides, *suffix]:
        if isinstance(slide, TemplateSlideRecord):
            pages.append(ExportPage(slide=slide, option_number=None))
        else:
            option_number += 1
            pages.append(ExportPage(slide=slide, option_number=option_number))
    return pages


class DocumentCompositor:
    """
    Walks the full export sequence, renders each page and writes one PDF.

    A failed page does not stop the walk; every page is attempted and the
    failures are reported together as a single ExportError, in which case
    no file is written.
    """

    def __init__(
        self,
        renderer: Optional[SlideRenderer] = None,
        image_loader: Optional[ImageLoaderService] = None,
        page_width: int = P.PAGE_WIDTH,
        page_height: int = P.PAGE_HEIGHT,
    ):
        self._image_loader = image_loader or ImageLoaderService()
        self._renderer = renderer or SlideRenderer(self._image_loader)
        self._page_width = page_width
        self._page_height = page_height

    async def close(self) -> None:
        await self._image_loader.close()

    async def render_pages(
        self,
        slides: Sequence[BaseSlide],
        details: PresentationDetails,
    ) -> List[Image.Image]:
        pages: List[Image.Image] = []
        failed: List[str] = []

        for export_page in build_export_sequence(slides):
            slide = export_page.slide
            try:
                page = await self._renderer.render_slide(
                    slide,
                    self._page_width,
                    self._page_height,
                    details=details,
                    option_number=export_page.option_number,
                )
            except SlideTypeMismatchError:
                raise
            except Exception:
                logger.error("Rendering slide %s failed", slide.id, exc_info=True)
                failed.append(slide.id)
                continue
            pages.append(page)

        if failed:
            raise ExportError(f"{len(failed)} slide(s) could not be rendered", failed_slides=failed)
        return pages

    async def generate_document(
        self,
        slides: Sequence[BaseSlide],
        client_name: str,
        details: PresentationDetails,
        output_directory: Optional[str] = None,
        today: Optional[date] = None,
    ) -> ExportResult:
        # render from a private copy; the live deck may keep changing meanwhile
        slides = [slide.model_copy(deep=True) for slide in slides]
        details = details.model_copy(deep=True)

        pages = await self.render_pages(slides, details)

        filename = build_export_filename(client_name, today)
        path = os.path.join(get_exports_directory(output_directory), filename)
        save_pdf(pages, path)

        logger.info("Exported %d pages to %s", len(pages), path)
        return ExportResult(path=path, filename=filename, page_count=len(pages))


def save_pdf(pages: List[Image.Image], path: str, resolution: float = P.PDF_RESOLUTION) -> None:
    """
    Write the pages as one PDF. The document is written next to the target
    and moved into place, so a failed save leaves no partial file behind.
    """
    if not pages:
        raise ExportError("No pages to write")

    directory = os.path.dirname(path) or "."
    fd, temp_path = tempfile.mkstemp(suffix=".pdf", dir=directory)
    os.close(fd)
    try:
        first, rest = pages[0], pages[1:]
        first.save(temp_path, "PDF", save_all=True, append_images=rest, resolution=resolution)
        os.replace(temp_path, path)
    except Exception:
        if os.path.exists(temp_path):
            os.remove(temp_path)
        raise
