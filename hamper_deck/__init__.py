"""Product presentation builder: item and hamper decks rendered to PDF."""

from hamper_deck.models.presentation import (
    HamperSlide,
    Item,
    ItemSlide,
    Presentation,
    PresentationDetails,
    PriceDisplayMode,
    TemplateSlideRecord,
)
from hamper_deck.utils.export_utils import export_presentation, render_slide_preview

__all__ = [
    "HamperSlide",
    "Item",
    "ItemSlide",
    "Presentation",
    "PresentationDetails",
    "PriceDisplayMode",
    "TemplateSlideRecord",
    "export_presentation",
    "render_slide_preview",
]
