"""
Centralized HTTP client configuration.

Provides unified session management for both sync (requests) and async (aiohttp)
HTTP clients:
- requests for the JSON API call (run off the event loop)
- aiohttp for media downloads (on the event loop)
- shared headers and timeouts
"""

from __future__ import annotations

import logging
import socket
from typing import Dict, Optional
from urllib.parse import urlparse

import aiohttp
import requests
from aiohttp import ClientTimeout, TCPConnector

logger = logging.getLogger(__name__)


USER_AGENT = "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/144.0.0.0 Safari/537.36"

# Headers for API requests (JSON expected)
API_HEADERS = {
    "User-Agent": USER_AGENT,
    "Accept": "application/json",
    "Accept-Language": "en-US,en;q=0.9,ru;q=0.8",
    "Accept-Encoding": "gzip, deflate",
}

# Headers for media downloads (GIF / preview images)
MEDIA_HEADERS = {
    "User-Agent": USER_AGENT,
    "Accept": "image/avif,image/webp,image/apng,image/gif,image/*,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9,ru;q=0.8",
    "Accept-Encoding": "identity;q=1, *;q=0",
}


def get_media_headers_with_referer(url: str) -> dict:
    """
    Get media headers with a Referer header derived from the URL.
    Many CDNs check Referer to prevent hotlinking.
    """
    headers = MEDIA_HEADERS.copy()
    parsed = urlparse(url)
    if parsed.scheme and parsed.hostname:
        headers["Referer"] = f"{parsed.scheme}://{parsed.hostname}/"
        headers["Origin"] = f"{parsed.scheme}://{parsed.hostname}"
    return headers


class HttpClientConfig:
    """Connection limits and timeouts shared by the API and media sessions."""

    def __init__(
        self,
        max_connections_per_host: int = 4,
        max_total_connections: int = 10,
        connect_timeout: int = 15,
        read_timeout: int = 30,
    ):
        self.max_connections_per_host = max_connections_per_host
        self.max_total_connections = max_total_connections
        self.connect_timeout = connect_timeout
        self.read_timeout = read_timeout

    @property
    def requests_timeout(self) -> tuple[int, int]:
        """(connect, read) timeout tuple in the form requests expects."""
        return (self.connect_timeout, self.read_timeout)


class HttpClient:
    """
    Centralized HTTP client factory.

    Creates and configures both sync (requests) and async (aiohttp) sessions
    with shared configuration for headers and timeouts.
    """

    def __init__(self, config: Optional[HttpClientConfig] = None):
        self.config = config or HttpClientConfig()
        self._sync_session: Optional[requests.Session] = None
        self._async_session: Optional[aiohttp.ClientSession] = None

    def create_sync_session(self, headers: Optional[Dict[str, str]] = None) -> requests.Session:
        """requests session for the JSON API call, remembered for close()."""
        session = requests.Session()
        session.headers.update(headers or API_HEADERS)
        self._sync_session = session
        return session

    async def create_async_session(
        self,
        headers: Optional[Dict[str, str]] = None,
        total_timeout: Optional[int] = None,
    ) -> aiohttp.ClientSession:
        """aiohttp session for media downloads; one pooled connector per viewer."""
        connector = TCPConnector(
            limit=self.config.max_total_connections,
            limit_per_host=self.config.max_connections_per_host,
            ttl_dns_cache=300,
            family=socket.AF_INET,
            force_close=False,
        )

        timeout = ClientTimeout(
            total=total_timeout,
            connect=self.config.connect_timeout,
            sock_read=self.config.read_timeout,
        )

        session = aiohttp.ClientSession(
            connector=connector,
            timeout=timeout,
            headers=headers or MEDIA_HEADERS,
            raise_for_status=False,
        )

        self._async_session = session
        return session

    async def get_async_session(self) -> aiohttp.ClientSession:
        """Get the open async session or create a new one."""
        if self._async_session is None or self._async_session.closed:
            return await self.create_async_session()
        return self._async_session

    async def close_async_session(self):
        """Close the async session."""
        if self._async_session:
            await self._async_session.close()
            self._async_session = None

    def close(self):
        """Close the sync session."""
        if self._sync_session:
            self._sync_session.close()
            self._sync_session = None
