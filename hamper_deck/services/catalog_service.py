import json
import logging
import math
import re
import time
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

import aiohttp
import jwt

from hamper_deck.constants.catalog import (
    DEFAULT_ITEM_IMAGE_URL,
    DEFAULT_SPREADSHEET_ID,
    DRIVE_THUMBNAIL_URL,
    JWT_BEARER_GRANT,
    OAUTH_TOKEN_URL,
    SAMPLE_ROWS,
    SHEET_RANGE,
    SHEETS_API_URL,
    SHEETS_SCOPE,
)
from hamper_deck.models.presentation import Item
from hamper_deck.utils.get_env import get_google_service_account_env, get_spreadsheet_id_env

logger = logging.getLogger(__name__)

_DRIVE_FILE_ID = re.compile(r"/d/([^/]+)/view")


class ItemDataSource(ABC):
    @abstractmethod
    async def get_items(self) -> List[Item]:
        ...

    async def search_items(self, query: str) -> List[Item]:
        """Case-insensitive substring match on the item name."""
        needle = query.lower()
        return [item for item in await self.get_items() if needle in item.name.lower()]


def _parse_float(value: Optional[str]) -> float:
    try:
        number = float(str(value).replace(",", "").strip())
    except (TypeError, ValueError):
        return 0.0
    # "inf" and "nan" parse as floats but are not prices
    return number if math.isfinite(number) else 0.0


def to_image_url(raw_url: str) -> str:
    """Drive share links become thumbnail URLs; blanks fall back to the logo."""
    match = _DRIVE_FILE_ID.search(raw_url or "")
    if match:
        return DRIVE_THUMBNAIL_URL.format(file_id=match.group(1))
    return raw_url or DEFAULT_ITEM_IMAGE_URL


def map_row_to_item(row: List[str], header_index: Dict[str, int], row_number: int) -> Item:
    def cell(column: str) -> str:
        index = header_index.get(column)
        if index is None or index >= len(row):
            return ""
        return row[index] or ""

    return Item(
        id=cell("ID") or f"row-{row_number}",
        name=cell("Product Name"),
        mrp=_parse_float(cell("MRP")),
        hw_cost=_parse_float(cell("HW Cost")),
        hw_with_gst=_parse_float(cell("HW GST")),
        client_price=_parse_float(cell("Client")),
        client_price_with_gst=_parse_float(cell("Client GST")),
        price_tag=cell("Price Tag"),
        image_url=to_image_url(cell("Image URL")),
        category=cell("Category"),
        sub_category=cell("Sub Category"),
        brand=cell("Brand"),
    )


def rows_to_items(rows: List[List[str]]) -> List[Item]:
    if not rows:
        return []
    header_index = {column: index for index, column in enumerate(rows[0])}
    return [map_row_to_item(row, header_index, number) for number, row in enumerate(rows[1:], start=1)]


class SampleDataSource(ItemDataSource):
    """Fixed offline catalog."""

    async def get_items(self) -> List[Item]:
        return rows_to_items(SAMPLE_ROWS)


class GoogleSheetsDataSource(ItemDataSource):
    """
    Reads the product sheet with a service account. Missing credentials,
    auth failures and fetch failures all fall back to the sample rows.
    """

    def __init__(
        self,
        service_account_json: Optional[str] = None,
        spreadsheet_id: Optional[str] = None,
        timeout: float = 30.0,
    ):
        self._service_account_json = (
            get_google_service_account_env() if service_account_json is None else service_account_json
        )
        self._spreadsheet_id = spreadsheet_id or get_spreadsheet_id_env(DEFAULT_SPREADSHEET_ID)
        self._timeout = aiohttp.ClientTimeout(total=timeout)

    def _load_credentials(self) -> Optional[dict]:
        try:
            credentials = json.loads(self._service_account_json or "{}")
        except json.JSONDecodeError as e:
            logger.warning("Service account credentials are not valid JSON: %s", e)
            return None
        if not credentials.get("client_email") or not credentials.get("private_key"):
            logger.warning("Google service account credentials not found. Using sample data.")
            return None
        return credentials

    def build_assertion(self, credentials: dict, now: Optional[int] = None) -> str:
        now = int(time.time()) if now is None else now
        claims = {
            "iss": credentials["client_email"],
            "scope": SHEETS_SCOPE,
            "aud": OAUTH_TOKEN_URL,
            "exp": now + 3600,
            "iat": now,
        }
        return jwt.encode(claims, credentials["private_key"], algorithm="RS256")

    async def _get_access_token(self, session: aiohttp.ClientSession) -> Optional[str]:
        credentials = self._load_credentials()
        if credentials is None:
            return None

        assertion = self.build_assertion(credentials)
        async with session.post(
            OAUTH_TOKEN_URL,
            data={"grant_type": JWT_BEARER_GRANT, "assertion": assertion},
        ) as response:
            response.raise_for_status()
            payload = await response.json()
        return payload.get("access_token")

    async def _get_sheet_rows(self) -> List[List[str]]:
        try:
            async with aiohttp.ClientSession(trust_env=True, timeout=self._timeout) as session:
                access_token = await self._get_access_token(session)
                if not access_token:
                    return SAMPLE_ROWS

                url = SHEETS_API_URL.format(spreadsheet_id=self._spreadsheet_id, range=SHEET_RANGE)
                async with session.get(url, headers={"Authorization": f"Bearer {access_token}"}) as response:
                    response.raise_for_status()
                    data = await response.json()
        except Exception as e:
            logger.warning("Error fetching Google Sheets data, using sample data: %s", e)
            return SAMPLE_ROWS

        return data.get("values") or SAMPLE_ROWS

    async def get_items(self) -> List[Item]:
        return rows_to_items(await self._get_sheet_rows())


def get_default_data_source() -> ItemDataSource:
    return GoogleSheetsDataSource()
