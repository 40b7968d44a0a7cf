from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image

from hamper_deck.cli import load_presentation, run_cli
from hamper_deck.constants import page as P
from hamper_deck.models.presentation import Presentation


def _write_deck(path: Path, presentation: Presentation) -> Path:
    path.write_text(presentation.model_dump_json(by_alias=True), encoding="utf-8")
    return path


def test_deck_file_round_trips_through_camel_case(tmp_path: Path, presentation: Presentation) -> None:
    deck = load_presentation(str(_write_deck(tmp_path / "deck.json", presentation)))

    assert deck.details.client_name == "Acme & Co."
    assert [slide.type for slide in deck.slides] == ["item", "hamper"]
    assert deck.active_slide_id == "slide-1"


def test_export_command_writes_pdf(assets_dir, tmp_path: Path, presentation: Presentation, capsys) -> None:
    deck = _write_deck(tmp_path / "deck.json", presentation)
    out = tmp_path / "out"

    run_cli(["export", str(deck), "--output-dir", str(out)])

    pdfs = list(out.glob("Acme---Co- *.pdf"))
    assert len(pdfs) == 1
    assert pdfs[0].read_bytes().startswith(b"%PDF")
    assert "8 pages" in capsys.readouterr().out


def test_preview_command_writes_image(assets_dir, tmp_path: Path, presentation: Presentation) -> None:
    deck = _write_deck(tmp_path / "deck.json", presentation)
    target = tmp_path / "slide.png"

    run_cli(["preview", str(deck), str(target), "--slide-id", "slide-2"])

    with Image.open(target) as image:
        assert image.size == (P.PAGE_WIDTH, P.PAGE_HEIGHT)


def test_empty_deck_exits_with_message(tmp_path: Path) -> None:
    deck = _write_deck(tmp_path / "deck.json", Presentation())

    with pytest.raises(SystemExit) as exc:
        run_cli(["export", str(deck), "--output-dir", str(tmp_path / "out")])
    assert "No slides to export" in str(exc.value)


def test_invalid_deck_exits_with_message(tmp_path: Path) -> None:
    deck = tmp_path / "deck.json"
    deck.write_text('{"slides": [{"type": "video"}]}', encoding="utf-8")

    with pytest.raises(SystemExit) as exc:
        run_cli(["export", str(deck)])
    assert "Invalid deck file" in str(exc.value)


def test_help_names_the_asset_tree() -> None:
    from hamper_deck.cli import _build_parser

    help_text = _build_parser().format_help()
    assert "ASSETS_DIRECTORY" in help_text
    assert "--assets-dir" in help_text


def test_assets_dir_flag_points_rendering_at_the_tree(
    assets_dir, tmp_path: Path, presentation: Presentation, monkeypatch: pytest.MonkeyPatch
) -> None:
    deck = _write_deck(tmp_path / "deck.json", presentation)
    monkeypatch.setenv("ASSETS_DIRECTORY", str(tmp_path / "elsewhere"))

    run_cli(["--assets-dir", str(assets_dir), "preview", str(deck), str(tmp_path / "slide.png")])

    # option background from the fixture tree is green, drawn full-bleed
    with Image.open(tmp_path / "slide.png") as image:
        assert image.getpixel((5, P.PAGE_HEIGHT // 2))[:3] == (34, 139, 34)


def test_missing_assets_are_reported(
    empty_assets_dir, tmp_path: Path, presentation: Presentation, caplog: pytest.LogCaptureFixture
) -> None:
    deck = _write_deck(tmp_path / "deck.json", presentation)

    with caplog.at_level("WARNING", logger="hamper_deck.cli"):
        run_cli(["export", str(deck), "--output-dir", str(tmp_path / "out")])

    assert "No assets found" in caplog.text
    assert list((tmp_path / "out").glob("*.pdf"))
