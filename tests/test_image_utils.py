from __future__ import annotations

import pytest
from PIL import Image, ImageDraw

from hamper_deck.utils.image_utils import contain_box, draw_placeholder_tile, fit_image, paste_image

from conftest import BLUE, RED


def test_contain_box_letterboxes_wide_image() -> None:
    assert contain_box((400, 100), 200, 200, 100, 100) == (0, 75, 200, 50)


def test_contain_box_never_collapses_to_zero() -> None:
    left, top, width, height = contain_box((10000, 1), 100, 100, 50, 50)
    assert width == 100
    assert height == 1


def test_fit_image_fill_stretches() -> None:
    fitted = fit_image(Image.new("RGB", (10, 40), RED), 80, 20, "fill")
    assert fitted.size == (80, 20)
    assert fitted.mode == "RGBA"


def test_fit_image_contain_leaves_transparent_bands() -> None:
    fitted = fit_image(Image.new("RGB", (100, 50), RED), 100, 100, "contain")
    assert fitted.size == (100, 100)
    assert fitted.getpixel((50, 5))[3] == 0
    assert fitted.getpixel((50, 50))[:3] == RED


def test_fit_image_rejects_unknown_mode() -> None:
    with pytest.raises(ValueError):
        fit_image(Image.new("RGB", (10, 10), RED), 20, 20, "cover")


def test_paste_image_respects_box() -> None:
    page = Image.new("RGB", (50, 50), (255, 255, 255))
    paste_image(page, Image.new("RGB", (5, 5), BLUE), (10, 10, 20, 20))

    assert page.getpixel((15, 15)) == BLUE
    assert page.getpixel((5, 5)) == (255, 255, 255)
    assert page.getpixel((30, 30)) == (255, 255, 255)


def test_placeholder_tile_has_border_and_fill() -> None:
    page = Image.new("RGB", (40, 40), (255, 255, 255))
    draw_placeholder_tile(ImageDraw.Draw(page), (0, 0, 40, 40), (240, 240, 240), (200, 200, 200))

    assert page.getpixel((0, 20)) == (200, 200, 200)
    assert page.getpixel((20, 20)) == (240, 240, 240)
