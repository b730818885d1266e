"""
Async media downloads for the renderer.

Downloads the raw bytes of one GIF / preview image with aiohttp.
Decoding is left to the UI layer.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Optional

import aiohttp

from devlife.core.errors import RenderError
from devlife.core.http_client import HttpClient, get_media_headers_with_referer

logger = logging.getLogger(__name__)


class MediaLoader:
    """
    Fetches media bytes over the shared aiohttp session.

    Every failure mode (transport error, timeout, bad status, empty body)
    is raised as RenderError.
    """

    def __init__(self, http_client: Optional[HttpClient] = None, *, timeout: float = 60):
        self._http = http_client or HttpClient()
        self._timeout = timeout

    async def load(self, url: str) -> bytes:
        if not url:
            raise RenderError("Invalid URL")

        logger.debug("Media load requested: %s", url)
        session = await self._http.get_async_session()
        config = self._http.config
        # Per-request timeout replaces the session's, so carry its phase limits over
        timeout = aiohttp.ClientTimeout(
            total=self._timeout,
            connect=config.connect_timeout,
            sock_read=config.read_timeout,
        )
        try:
            async with session.get(
                url,
                headers=get_media_headers_with_referer(url),
                timeout=timeout,
            ) as resp:
                if resp.status != 200:
                    raise RenderError(f"HTTP {resp.status} for {url}")
                data = await resp.read()
        except asyncio.TimeoutError as e:
            raise RenderError(f"Timed out loading {url}") from e
        except aiohttp.ClientError as e:
            raise RenderError(f"Failed to load {url}: {e}") from e
        except ValueError as e:
            # urlparse / yarl reject malformed URLs with ValueError
            raise RenderError(f"Invalid URL {url!r}: {e}") from e

        if not data:
            raise RenderError(f"Empty response for {url}")

        logger.debug("Media load succeeded: %s (%d bytes)", url, len(data))
        return data

    async def close(self) -> None:
        await self._http.close_async_session()
