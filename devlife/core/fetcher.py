"""
Fetcher: one random meme per call, as an awaitable.

The platform client is blocking (requests), so the call runs in the
loop's default executor and only the result comes back to the loop.
"""
from __future__ import annotations

import asyncio
import logging

from devlife.core.api.base import APIError, BaseAPIClient
from devlife.core.dto.meme import MemeDTO
from devlife.core.errors import FetchError

logger = logging.getLogger(__name__)


class MemeFetcher:
    """Single-shot random meme fetcher. Retrying is the user's call."""

    def __init__(self, client: BaseAPIClient):
        self._client = client

    async def fetch_random_item(self) -> MemeDTO:
        loop = asyncio.get_running_loop()
        try:
            payload = await loop.run_in_executor(None, self._client.get_random_meme)
            meme = MemeDTO.from_payload(payload)
        except (APIError, ValueError) as e:
            raise FetchError(str(e)) from e
        logger.debug("Fetched meme %s: %s", meme.id, meme.media)
        return meme
