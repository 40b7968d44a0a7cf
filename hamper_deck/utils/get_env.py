import os
from pathlib import Path

_PACKAGE_STATIC_DIRECTORY = str(Path(__file__).resolve().parents[1] / "static")


def get_app_data_directory_env() -> str:
    return os.getenv("APP_DATA_DIRECTORY", "/tmp/app_data")


def get_assets_directory_env() -> str:
    return os.getenv("ASSETS_DIRECTORY", _PACKAGE_STATIC_DIRECTORY)


def get_fonts_directory_env() -> str:
    return os.getenv("FONTS_DIRECTORY", os.path.join(get_assets_directory_env(), "fonts"))


def get_google_service_account_env() -> str:
    return os.getenv("GOOGLE_SERVICE_ACCOUNT", "")


def get_spreadsheet_id_env(default: str) -> str:
    return os.getenv("SPREADSHEET_ID", default)


def get_image_load_timeout_env() -> float:
    try:
        return float(os.getenv("IMAGE_LOAD_TIMEOUT", "30"))
    except ValueError:
        return 30.0


def get_brand_footer_env() -> str:
    return os.getenv("BRAND_FOOTER", "HappyWrap • www.happywrap.in")


def get_hamper_name_summary_env() -> bool:
    return os.getenv("HAMPER_NAME_SUMMARY", "false").lower() in ("1", "true", "yes")
