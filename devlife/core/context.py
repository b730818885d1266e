from __future__ import annotations

import logging
from typing import Optional

from devlife.core.api import DevelopersLifeClient
from devlife.core.config import AppConfig
from devlife.core.fetcher import MemeFetcher
from devlife.core.http_client import HttpClient, HttpClientConfig
from devlife.core.media_loader import MediaLoader

logger = logging.getLogger(__name__)


class AppContext:
    """
    Wires the core services from one AppConfig.

    The UI receives the fetcher and media loader from here and never
    builds HTTP sessions itself.
    """

    def __init__(self, config: Optional[AppConfig] = None):
        self.config = config or AppConfig()

        self.http = HttpClient(
            HttpClientConfig(
                connect_timeout=self.config.connect_timeout,
                read_timeout=self.config.read_timeout,
            )
        )
        self.api = DevelopersLifeClient(
            self.http.create_sync_session(),
            base_url=self.config.api_base_url,
            random_path=self.config.random_path,
            timeout=self.http.config.requests_timeout,
        )
        self.fetcher = MemeFetcher(self.api)
        self.media_loader = MediaLoader(self.http, timeout=self.config.media_timeout)
        logger.info("Core context ready (api=%s)", self.api.BASE_URL)

    async def aclose(self) -> None:
        """Close the async media session."""
        await self.media_loader.close()

    def close(self) -> None:
        """Close the sync API session."""
        self.http.close()
        logger.info("Core context closed")
