"""
Pillow helpers used by the slide renderer.
This module does not import the presentation models, only plain values and PIL images.
"""

from typing import Tuple

from PIL import Image, ImageDraw

from hamper_deck.utils.layout_utils import fit_within

Box = Tuple[int, int, int, int]


def to_rgba(image: Image.Image) -> Image.Image:
    """Palette and greyscale sources are converted so alpha can be used as a paste mask."""
    if image.mode == "RGBA":
        return image
    return image.convert("RGBA")


def contain_box(
    image_size: Tuple[int, int],
    box_width: float,
    box_height: float,
    center_x: float,
    center_y: float,
) -> Box:
    """
    Scale to fit inside the box, preserve aspect ratio, centre on (center_x, center_y).
    Returns (left, top, width, height) in whole pixels.
    """
    fitted_width, fitted_height = fit_within(image_size[0], image_size[1], box_width, box_height)
    width = max(1, int(round(fitted_width)))
    height = max(1, int(round(fitted_height)))
    left = int(round(center_x - width / 2))
    top = int(round(center_y - height / 2))
    return left, top, width, height


def fit_image(image: Image.Image, width: int, height: int, object_fit: str = "contain") -> Image.Image:
    """
    Object-fit behaviour, returning an RGBA layer of exactly width x height:
      - "contain": scale to fit inside the box, centred, transparent bands around it
      - "fill": stretch to the box
    """
    fit_mode = (object_fit or "contain").lower()
    if fit_mode not in ("contain", "fill"):
        raise ValueError(f"Unsupported object fit: {object_fit}")

    if fit_mode == "fill":
        return to_rgba(image).resize((width, height), Image.LANCZOS)

    left, top, new_w, new_h = contain_box(image.size, width, height, width / 2, height / 2)
    resized = to_rgba(image).resize((new_w, new_h), Image.LANCZOS)
    canvas = Image.new("RGBA", (width, height), (0, 0, 0, 0))
    canvas.paste(resized, (left, top), resized)
    return canvas


def paste_image(page: Image.Image, image: Image.Image, box: Box) -> None:
    """Resize `image` to the box size and alpha-composite it onto the page."""
    left, top, width, height = box
    resized = to_rgba(image).resize((width, height), Image.LANCZOS)
    page.paste(resized, (left, top), resized)


def draw_placeholder_tile(
    draw: ImageDraw.ImageDraw,
    box: Box,
    fill: Tuple[int, int, int],
    outline: Tuple[int, int, int],
) -> None:
    left, top, width, height = box
    draw.rectangle((left, top, left + width - 1, top + height - 1), fill=fill, outline=outline, width=2)
