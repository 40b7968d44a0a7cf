import os
from typing import Optional

from hamper_deck.utils.get_env import (
    get_app_data_directory_env,
    get_assets_directory_env,
    get_fonts_directory_env,
)


def get_assets_directory() -> str:
    return get_assets_directory_env()


def get_fonts_directory() -> str:
    return get_fonts_directory_env()


def get_exports_directory(base: Optional[str] = None) -> str:
    export_directory = base or os.path.join(get_app_data_directory_env(), "exports")
    os.makedirs(export_directory, exist_ok=True)
    return export_directory


def resolve_asset_path(url: str) -> str:
    """Map a site-relative URL such as "/assets/logo.png" onto the assets directory."""
    return os.path.join(get_assets_directory(), url.lstrip("/"))
