"""Command-line export trigger."""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import traceback
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from hamper_deck.models.errors import ExportError
from hamper_deck.models.presentation import Presentation
from hamper_deck.services.catalog_service import get_default_data_source
from hamper_deck.utils.asset_directory_utils import get_assets_directory
from hamper_deck.utils.export_utils import export_presentation, render_slide_preview

logger = logging.getLogger(__name__)

ASSETS_HELP = (
    "Slides are drawn from a static asset tree: assets/logo.png, "
    "assets/slides/option-template.png and one assets/slides/<name>.jpg per "
    "template page (welcome, whyus, topclients, steps, requirements, contactus). "
    "The package ships none of them; pass --assets-dir or set ASSETS_DIRECTORY. "
    "Missing files are replaced by placeholder text."
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hamper-deck", description="Render product decks to PDF", epilog=ASSETS_HELP
    )
    parser.add_argument("--debug", action="store_true", help="Show full traceback for unexpected errors")
    parser.add_argument("--assets-dir", default=None, help="Static asset tree (overrides ASSETS_DIRECTORY)")
    commands = parser.add_subparsers(dest="command", required=True)

    export = commands.add_parser("export", help="Export a deck JSON file as a PDF")
    export.add_argument("deck", help="Path to the deck JSON (details, slides, activeSlideId)")
    export.add_argument("--output-dir", default=None, help="Directory for the PDF (default: <app data>/exports)")

    preview = commands.add_parser("preview", help="Render one slide of a deck to an image")
    preview.add_argument("deck", help="Path to the deck JSON")
    preview.add_argument("output", help="Image path, e.g. slide.png")
    preview.add_argument("--slide-id", default=None, help="Slide to render (default: the active slide)")

    catalog = commands.add_parser("catalog", help="List catalog items")
    catalog.add_argument("--search", default=None, help="Case-insensitive name filter")

    return parser


def load_presentation(path: str) -> Presentation:
    return Presentation.model_validate_json(Path(path).read_text(encoding="utf-8"))


def _check_assets_directory() -> None:
    assets_directory = get_assets_directory()
    if not os.path.isdir(os.path.join(assets_directory, "assets")):
        logger.warning("No assets found under %s; template pages will show placeholder text", assets_directory)


async def _run(args: argparse.Namespace) -> None:
    if args.command == "export":
        result = await export_presentation(load_presentation(args.deck), output_directory=args.output_dir)
        print(f"{result.path} ({result.page_count} pages)")

    elif args.command == "preview":
        image = await render_slide_preview(load_presentation(args.deck), slide_id=args.slide_id)
        image.save(args.output)
        print(args.output)

    elif args.command == "catalog":
        source = get_default_data_source()
        items = await (source.search_items(args.search) if args.search else source.get_items())
        for item in items:
            print(f"{item.id}\t{item.name}\t{item.client_price:.2f}")


def run_cli(argv: Optional[List[str]] = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)
    if args.assets_dir:
        os.environ["ASSETS_DIRECTORY"] = args.assets_dir
    if args.command in ("export", "preview"):
        _check_assets_directory()

    try:
        asyncio.run(_run(args))
    except ValidationError as e:
        raise SystemExit(f"Invalid deck file:\n{e}") from e
    except ExportError as e:
        raise SystemExit(f"Export failed: {e}") from e
    except Exception as e:
        if args.debug:
            traceback.print_exc()
        raise SystemExit(f"hamper-deck failed: {e}") from e
