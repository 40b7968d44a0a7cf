"""
Font resolution for the slide renderer.

Calibri (regular, bold, light) is looked up in the fonts directory first,
then DejaVu Sans from the system font path, then Pillow's bundled default.
Every candidate is a FreeType font, so text can be measured with real
glyph advances before it is drawn.
"""

import logging
import os
from functools import lru_cache
from typing import List

from PIL import ImageFont

from hamper_deck.utils.asset_directory_utils import get_fonts_directory

logger = logging.getLogger(__name__)

REGULAR = "regular"
BOLD = "bold"
LIGHT = "light"

_CANDIDATES = {
    REGULAR: ["Calibri.ttf", "DejaVuSans.ttf"],
    BOLD: ["Calibri-Bold.ttf", "DejaVuSans-Bold.ttf", "Calibri.ttf", "DejaVuSans.ttf"],
    LIGHT: ["Calibri-Light.ttf", "DejaVuSans-ExtraLight.ttf", "Calibri.ttf", "DejaVuSans.ttf"],
}


def _candidate_paths(weight: str) -> List[str]:
    fonts_directory = get_fonts_directory()
    paths = []
    for name in _CANDIDATES.get(weight, _CANDIDATES[REGULAR]):
        local = os.path.join(fonts_directory, name)
        paths.append(local if os.path.exists(local) else name)
    return paths


@lru_cache(maxsize=64)
def get_font(size: int, weight: str = REGULAR) -> ImageFont.FreeTypeFont:
    for path in _candidate_paths(weight):
        try:
            return ImageFont.truetype(path, size)
        except OSError:
            continue

    logger.warning("No TrueType font found for weight %s, using Pillow default", weight)
    return ImageFont.load_default(size=size)

