import logging
from datetime import date
from typing import Optional

from PIL import Image

from hamper_deck.models.errors import ExportError, SlideTypeMismatchError
from hamper_deck.models.presentation import Presentation
from hamper_deck.services.document_compositor import (
    DocumentCompositor,
    ExportResult,
    build_export_sequence,
)
from hamper_deck.services.image_loader import ImageLoaderService
from hamper_deck.services.slide_renderer import SlideRenderer
from hamper_deck.utils.export_error_handler import handle_export_exceptions

logger = logging.getLogger(__name__)


async def export_presentation(
    presentation: Presentation,
    output_directory: Optional[str] = None,
    today: Optional[date] = None,
) -> ExportResult:
    """
    Export the deck as "<client> <date>.pdf".

    Steps:
      1. Snapshot the deck so edits made during the export are not picked up
      2. Refuse an empty deck
      3. Render prefix templates, user slides and suffix templates
      4. Write the PDF; on any failure nothing is written and one ExportError is raised
    """
    snapshot = presentation.snapshot()

    if not snapshot.slides:
        raise ExportError("No slides to export")

    compositor = DocumentCompositor(image_loader=ImageLoaderService())
    try:
        return await compositor.generate_document(
            snapshot.slides,
            snapshot.details.client_name,
            snapshot.details,
            output_directory=output_directory,
            today=today,
        )
    except (ExportError, SlideTypeMismatchError):
        raise
    except Exception as e:
        raise handle_export_exceptions(e) from e
    finally:
        await compositor.close()


async def render_slide_preview(
    presentation: Presentation,
    slide_id: Optional[str] = None,
) -> Image.Image:
    """
    Render one user slide exactly as it will appear in the export,
    including its "Option N" number. Defaults to the active slide.
    """
    slide_id = slide_id or presentation.active_slide_id
    if slide_id is None:
        raise ExportError("No slide selected")

    for export_page in build_export_sequence(presentation.slides):
        if export_page.slide.id != slide_id:
            continue
        async with ImageLoaderService() as image_loader:
            renderer = SlideRenderer(image_loader)
            return await renderer.render_slide(
                export_page.slide,
                details=presentation.details,
                option_number=export_page.option_number,
            )

    raise ExportError(f"Slide {slide_id} is not in the deck")
