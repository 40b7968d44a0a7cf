from __future__ import annotations

from datetime import date

import pytest

from hamper_deck.utils.fonts import get_font
from hamper_deck.utils.layout_utils import (
    build_export_filename,
    build_separated_fragments,
    compute_row_origins,
    fit_within,
    layout_centered_segments,
    sanitize_client_name,
)


@pytest.mark.parametrize("count", [1, 2, 3])
def test_row_origins_follow_centered_row_formula(count: int) -> None:
    w, s, center_x = 220, 40, 960
    origins = compute_row_origins(count, w, s, center_x)

    assert len(origins) == count
    for k, x in enumerate(origins):
        assert x == pytest.approx(center_x - (count * w + (count - 1) * s) / 2 + k * (w + s))


def test_row_is_symmetric_around_center() -> None:
    origins = compute_row_origins(3, 100, 20, 500)
    assert origins[0] - 0 == pytest.approx(500 - 170)
    assert origins[-1] + 100 == pytest.approx(500 + 170)


def test_row_with_no_items_is_empty() -> None:
    assert compute_row_origins(0, 220, 40, 960) == []


def test_separated_fragments_carry_separator_except_last() -> None:
    assert build_separated_fragments(["A", "B", "C"]) == ["A • ", "B • ", "C"]
    assert build_separated_fragments(["Solo"]) == ["Solo"]


def test_centered_segments_use_measured_widths() -> None:
    widths = {"aa • ": 50.0, "b • ": 30.0, "cccc": 40.0}
    origins = layout_centered_segments(list(widths), widths.__getitem__, center_x=500)

    assert origins == [500 - 60, 500 - 60 + 50, 500 - 60 + 80]


def test_centered_segments_with_real_font_metrics() -> None:
    font = get_font(36)
    fragments = build_separated_fragments(["Mug", "Wide Glass Vase", "Tea"])
    origins = layout_centered_segments(fragments, font.getlength, center_x=960)

    total = sum(font.getlength(f) for f in fragments)
    assert origins[0] == pytest.approx(960 - total / 2)
    assert origins[1] - origins[0] == pytest.approx(font.getlength(fragments[0]))
    assert origins[2] - origins[1] == pytest.approx(font.getlength(fragments[1]))


def test_fit_within_preserves_aspect_ratio() -> None:
    assert fit_within(400, 200, 800, 560) == (800, 400)
    assert fit_within(100, 400, 800, 560) == (140, 560)
    assert fit_within(0, 10, 800, 560) == (0, 0)


def test_filename_replaces_each_disallowed_character() -> None:
    assert build_export_filename("Acme & Co.", date(2025, 1, 5)) == "Acme---Co- 2025-01-05.pdf"


def test_filename_keeps_dash_and_underscore() -> None:
    assert sanitize_client_name("  big_corp-india ") == "big_corp-india"


@pytest.mark.parametrize("name", ["", "   ", None, "&&&", "...", "---"])
def test_filename_falls_back_for_empty_names(name) -> None:
    assert build_export_filename(name, date(2025, 1, 5)) == "Client 2025-01-05.pdf"
