import asyncio
import base64
import os
from typing import Optional
from urllib.parse import unquote_to_bytes

import aiohttp

from hamper_deck.utils.asset_directory_utils import resolve_asset_path


def is_network_url(url: str) -> bool:
    return url.startswith("http://") or url.startswith("https://")


def _decode_data_url(url: str) -> bytes:
    header, _, payload = url.partition(",")
    if ";base64" in header:
        return base64.b64decode(payload)
    return unquote_to_bytes(payload)


def _read_local_file(url: str) -> bytes:
    path = url
    if url.startswith("file://"):
        path = url[len("file://"):]
    elif not os.path.isabs(url) or not os.path.exists(url):
        # site-relative asset such as /assets/slides/welcome.jpg
        path = resolve_asset_path(url)
    with open(path, "rb") as f:
        return f.read()


async def download_bytes(
    url: str,
    session: Optional[aiohttp.ClientSession] = None,
    timeout: float = 30.0,
) -> bytes:
    """
    Fetch the raw bytes behind an image URL.
    Supports http(s), data: URIs, file:// and paths relative to the assets directory.
    Raises on any failure; callers decide what a failure means.
    """
    if url.startswith("data:"):
        return _decode_data_url(url)

    if not is_network_url(url):
        return await asyncio.to_thread(_read_local_file, url)

    client_timeout = aiohttp.ClientTimeout(total=timeout)
    if session is None:
        async with aiohttp.ClientSession(trust_env=True, timeout=client_timeout) as own_session:
            return await _get(own_session, url, client_timeout)
    return await _get(session, url, client_timeout)


async def _get(session: aiohttp.ClientSession, url: str, timeout: aiohttp.ClientTimeout) -> bytes:
    async with session.get(url, timeout=timeout) as response:
        response.raise_for_status()
        return await response.read()

