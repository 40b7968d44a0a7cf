from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest
from PIL import Image

from hamper_deck.models.presentation import (
    Hamper,
    HamperSlide,
    Item,
    ItemSlide,
    Presentation,
    PresentationDetails,
)
from hamper_deck.services.slide_renderer import SlideRenderer

RED = (220, 20, 60)
GREEN = (34, 139, 34)
BLUE = (30, 144, 255)


def make_image(path: Path, size=(100, 100), color=RED, fmt: str = "PNG") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.new("RGB", size, color).save(path, fmt)
    return path


@pytest.fixture
def assets_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A complete static asset tree: logo, option background and every template slide."""
    root = tmp_path / "static"
    make_image(root / "assets" / "logo.png", (200, 80), BLUE)
    make_image(root / "assets" / "slides" / "option-template.png", (160, 90), GREEN)
    for name in ("welcome", "whyus", "topclients", "steps", "requirements", "contactus"):
        make_image(root / "assets" / "slides" / f"{name}.jpg", (160, 90), (250, 250, 250), "JPEG")
    make_image(root / "assets" / "items" / "mug.png", (300, 200), RED)
    make_image(root / "assets" / "items" / "vase.png", (120, 240), BLUE)
    monkeypatch.setenv("ASSETS_DIRECTORY", str(root))
    return root


@pytest.fixture
def empty_assets_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """No static assets at all: every background and logo load fails."""
    root = tmp_path / "nothing-here"
    root.mkdir()
    monkeypatch.setenv("ASSETS_DIRECTORY", str(root))
    return root


@pytest.fixture
def mug() -> Item:
    return Item(id="mug", name="Ceramic Mug", client_price=100, image_url="/assets/items/mug.png")


@pytest.fixture
def vase() -> Item:
    return Item(id="vase", name="Glass Vase", client_price=40.5, image_url="/assets/items/vase.png")


@pytest.fixture
def details() -> PresentationDetails:
    return PresentationDetails(
        client_name="Acme & Co.",
        purpose="Diwali gifting",
        quantity=250,
        budget_excl_gst=50000,
        budget_incl_gst=59000,
        deadline=date(2025, 1, 5),
        branding_required=True,
        custom_packaging=False,
        delivery_location="Bengaluru",
        remarks="",
    )


@pytest.fixture
def presentation(details: PresentationDetails, mug: Item, vase: Item) -> Presentation:
    deck = Presentation(details=details)
    deck.slides.append(ItemSlide(id="slide-1", content=mug))
    deck.slides.append(HamperSlide(id="slide-2", content=Hamper(id="h1", items=[mug, vase])))
    deck.active_slide_id = "slide-1"
    return deck


class RecordingRenderer(SlideRenderer):
    """Keeps every string drawn so tests can assert on page content."""

    def __init__(self, *args, **kwargs):
        kwargs.setdefault("footer_text", "")
        super().__init__(*args, **kwargs)
        self.texts = []

    def draw_text(self, draw, xy, text, font, fill, anchor="la"):
        self.texts.append(text)
        super().draw_text(draw, xy, text, font, fill, anchor)


@pytest.fixture
def recording_renderer_cls():
    return RecordingRenderer
