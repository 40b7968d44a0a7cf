import re
from datetime import date
from typing import Callable, List, Optional, Sequence

FILENAME_FALLBACK_SEGMENT = "Client"

_DISALLOWED_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9\-_]")
_ALPHANUMERIC = re.compile(r"[A-Za-z0-9]")


def compute_row_origins(
    count: int, item_width: float, spacing: float, center_x: float
) -> List[float]:
    """
    x-origins for a horizontally centred row of equally sized boxes.
    Row width is n*w + (n-1)*s and the row starts at center_x - width/2.
    """
    if count <= 0:
        return []
    total_width = count * item_width + (count - 1) * spacing
    start_x = center_x - total_width / 2
    return [start_x + index * (item_width + spacing) for index in range(count)]


def build_separated_fragments(names: Sequence[str], separator: str = " • ") -> List[str]:
    """["A", "B", "C"] -> ["A • ", "B • ", "C"]"""
    last = len(names) - 1
    return [name + separator if index < last else name for index, name in enumerate(names)]


def layout_centered_segments(
    fragments: Sequence[str],
    measure: Callable[[str], float],
    center_x: float,
) -> List[float]:
    """
    x-origin of each fragment when the sequence is drawn as one centred line.
    Widths come from `measure`, which must return real glyph advances for the font in use.
    """
    widths = [measure(fragment) for fragment in fragments]
    start_x = center_x - sum(widths) / 2

    origins = []
    offset = 0.0
    for width in widths:
        origins.append(start_x + offset)
        offset += width
    return origins


def fit_within(
    width: int, height: int, max_width: float, max_height: float
) -> tuple:
    """Largest (w, h) with the source aspect ratio that fits inside the box."""
    if width <= 0 or height <= 0:
        return 0, 0
    ratio = width / height
    fitted_width = max_width
    fitted_height = max_width / ratio
    if fitted_height > max_height:
        fitted_height = max_height
        fitted_width = max_height * ratio
    return fitted_width, fitted_height


def sanitize_client_name(client_name: Optional[str]) -> str:
    """
    Replace every character outside [A-Za-z0-9-_] with "-", one for one.
    Names that are empty or keep no letter or digit become "Client".
    """
    trimmed = (client_name or "").strip()
    sanitized = _DISALLOWED_FILENAME_CHARS.sub("-", trimmed)
    if not _ALPHANUMERIC.search(sanitized):
        return FILENAME_FALLBACK_SEGMENT
    return sanitized


def build_export_filename(
    client_name: Optional[str], today: Optional[date] = None, extension: str = "pdf"
) -> str:
    today = today or date.today()
    return f"{sanitize_client_name(client_name)} {today.isoformat()}.{extension}"
