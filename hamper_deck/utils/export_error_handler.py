import logging

from pydantic import ValidationError

from hamper_deck.models.errors import ExportError

logger = logging.getLogger(__name__)


def handle_export_exceptions(e: Exception) -> ExportError:
    """Convert an unexpected exception from an export into the single error the caller reports."""
    logger.error("Export failed", exc_info=e)

    if isinstance(e, ValidationError):
        return ExportError(f"Invalid presentation data: {e.error_count()} validation error(s)")

    if isinstance(e, OSError):
        return ExportError(f"Could not write the exported document: {e}")

    return ExportError(f"Export failed: {e}")
