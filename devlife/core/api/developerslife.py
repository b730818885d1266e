from __future__ import annotations

import logging
from typing import Any, Optional

from devlife.core.api.base import APIError, BaseAPIClient

logger = logging.getLogger(__name__)


class DevelopersLifeClient(BaseAPIClient):
    """
    developerslife.ru client.

    Quirks normalized here:
      - ``id`` arrives as a number; it is exposed as a string
      - ``gifURL`` may be missing, null or blank for still-only posts
      - a non-object body is treated as an error response
    """

    BASE_URL = "https://developerslife.ru"
    PLATFORM = "developerslife"
    RANDOM_PATH = "/random"

    def __init__(self, session=None, *, random_path: Optional[str] = None, **kwargs):
        super().__init__(session, **kwargs)
        if random_path:
            self.RANDOM_PATH = random_path

    def normalize_meme(self, raw: Any) -> dict:
        if not isinstance(raw, dict):
            raise APIError(f"{self.PLATFORM} returned {type(raw).__name__}, expected an object")

        meme_id = raw.get("id")
        if meme_id is None or str(meme_id).strip() == "":
            raise APIError(f"{self.PLATFORM} meme has no id")

        preview_url = self._clean_url(raw.get("previewURL"))
        if preview_url is None:
            raise APIError(f"{self.PLATFORM} meme {meme_id} has no previewURL")

        return {
            "id": str(meme_id),
            "description": str(raw.get("description") or ""),
            "gif_url": self._clean_url(raw.get("gifURL")),
            "preview_url": preview_url,
        }

    def get_random_meme(self) -> dict:
        raw = self._request("GET", self.RANDOM_PATH, params={"json": "true"})
        meme = self.normalize_meme(raw)
        logger.debug("Random meme: id=%s animated=%s", meme["id"], meme["gif_url"] is not None)
        return meme

    @staticmethod
    def _clean_url(value: Any) -> Optional[str]:
        if not isinstance(value, str):
            return None
        value = value.strip()
        return value or None
