"""
Platform API contract.

This module is UI-agnostic and DTO-agnostic: clients return plain dict
payloads, DTO creation belongs to the fetcher. Platform quirks are
normalized inside platform clients.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Tuple, Union
from urllib.parse import urlencode

import requests

from devlife.core.http_client import API_HEADERS


class APIError(RuntimeError):
    """Raised for platform HTTP / parsing errors."""


logger = logging.getLogger(__name__)

Timeout = Union[float, Tuple[float, float]]


class BaseAPIClient(ABC):
    """
    Core API contract.

    UI must NOT call platform clients directly; the fetcher does.
    """

    BASE_URL: str  # e.g. https://developerslife.ru
    PLATFORM: str  # "developerslife"

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        *,
        base_url: Optional[str] = None,
        timeout: Timeout = (15, 30),
    ):
        if base_url:
            self.BASE_URL = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        self._configure_session()

    # ------------------------------------------------------------------
    # Session / Request helpers
    # ------------------------------------------------------------------

    def _configure_session(self) -> None:
        self.session.headers.update(API_HEADERS)

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[Timeout] = None,
    ) -> Any:
        url = f"{self.BASE_URL}{path}"

        if params:
            logger.info(f"API Request: {method} {url}?{urlencode(params, doseq=True)}")
        else:
            logger.info(f"API Request: {method} {url}")

        req_headers = dict(self.session.headers)
        if headers:
            req_headers.update(headers)

        try:
            resp = self.session.request(
                method=method,
                url=url,
                params=params,
                headers=req_headers,
                timeout=timeout if timeout is not None else self.timeout,
            )
            if not resp.ok:
                raise APIError(f"{self.PLATFORM} API error {resp.status_code}: {resp.text[:200]}")

            data = resp.json()
        except Exception as e:
            if isinstance(e, APIError):
                raise
            raise APIError(f"{self.PLATFORM} request failed: {e}") from e

        return data

    # ------------------------------------------------------------------
    # Normalization helpers (platform-specific)
    # ------------------------------------------------------------------

    @abstractmethod
    def normalize_meme(self, raw: dict) -> dict:
        """
        Convert raw meme object -> normalized dict.
        Expected normalized keys:
          - id (str)
          - description (str)
          - gif_url (str or None)
          - preview_url (str)
        """

    # ------------------------------------------------------------------
    # Random
    # ------------------------------------------------------------------

    @abstractmethod
    def get_random_meme(self) -> dict:
        """Returns one random meme as a normalized dict."""
