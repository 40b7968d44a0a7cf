import asyncio
import io
import logging
from typing import Dict, List, Optional, Union

import aiohttp
from PIL import Image

from hamper_deck.models.errors import ImageLoadFailure
from hamper_deck.utils.download_helpers import download_bytes, is_network_url
from hamper_deck.utils.get_env import get_image_load_timeout_env

logger = logging.getLogger(__name__)

LoadResult = Union[Image.Image, ImageLoadFailure]


class ImageLoaderService:
    """
    Loads bitmaps by URL for one render pass.

    Every failure (network, missing file, undecodable bytes, timeout) is
    returned as an ImageLoadFailure so the caller can draw its fallback and
    carry on. Each URL is attempted once per loader; create a new loader
    for a new export to re-attempt everything.
    """

    def __init__(self, session: Optional[aiohttp.ClientSession] = None, timeout: Optional[float] = None):
        self._session = session
        self._owns_session = False
        self._timeout = timeout if timeout is not None else get_image_load_timeout_env()
        self._loads: Dict[str, "asyncio.Task[LoadResult]"] = {}

    async def __aenter__(self) -> "ImageLoaderService":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_session and self._session is not None:
            await self._session.close()
        self._session = None
        self._owns_session = False

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            self._session = aiohttp.ClientSession(trust_env=True)
            self._owns_session = True
        return self._session

    async def load_image(self, url: Optional[str]) -> LoadResult:
        if not url:
            return ImageLoadFailure(url="", reason="no image URL")

        load = self._loads.get(url)
        if load is None:
            load = asyncio.ensure_future(self._fetch_and_decode(url))
            self._loads[url] = load
        return await load

    async def load_images(self, urls: List[Optional[str]]) -> List[LoadResult]:
        """Concurrent loads; results keep the order of `urls`."""
        return list(await asyncio.gather(*[self.load_image(url) for url in urls]))

    async def _fetch_and_decode(self, url: str) -> LoadResult:
        try:
            session = self._get_session() if is_network_url(url) else None
            data = await download_bytes(url, session=session, timeout=self._timeout)
            image = Image.open(io.BytesIO(data))
            image.load()
            return image
        except Exception as e:
            logger.warning("Could not load image %s: %s", _short(url), e)
            return ImageLoadFailure(url=url, reason=str(e) or type(e).__name__)


def _short(url: str, limit: int = 120) -> str:
    return url if len(url) <= limit else url[:limit] + "..."
