"""MediaLoader against a stubbed aiohttp session (no network)."""

from __future__ import annotations

import asyncio

import aiohttp
import pytest

from devlife.core.errors import RenderError
from devlife.core.http_client import HttpClientConfig
from devlife.core.media_loader import MediaLoader


class FakeResponse:
    def __init__(self, status=200, body=b""):
        self.status = status
        self._body = body

    async def read(self):
        return self._body

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response


class FakeHttpClient:
    def __init__(self, session):
        self.session = session
        self.config = HttpClientConfig(connect_timeout=3, read_timeout=7)
        self.closed = False

    async def get_async_session(self):
        return self.session

    async def close_async_session(self):
        self.closed = True


def make_loader(response=None, error=None):
    session = FakeSession(response=response, error=error)
    return MediaLoader(FakeHttpClient(session), timeout=5), session


@pytest.mark.asyncio
async def test_returns_body_bytes():
    loader, session = make_loader(FakeResponse(body=b"GIF89a..."))
    data = await loader.load("https://static.devli.ru/a.gif")
    assert data == b"GIF89a..."
    url, kwargs = session.calls[0]
    assert url == "https://static.devli.ru/a.gif"
    assert kwargs["headers"]["Referer"] == "https://static.devli.ru/"


@pytest.mark.asyncio
async def test_bad_status_raises_render_error():
    loader, _ = make_loader(FakeResponse(status=404))
    with pytest.raises(RenderError, match="404"):
        await loader.load("https://static.devli.ru/missing.gif")


@pytest.mark.asyncio
async def test_empty_body_raises_render_error():
    loader, _ = make_loader(FakeResponse(body=b""))
    with pytest.raises(RenderError):
        await loader.load("https://static.devli.ru/empty.jpg")


@pytest.mark.asyncio
async def test_client_error_is_wrapped():
    loader, _ = make_loader(error=aiohttp.ClientConnectionError("reset"))
    with pytest.raises(RenderError) as exc_info:
        await loader.load("https://static.devli.ru/a.gif")
    assert isinstance(exc_info.value.__cause__, aiohttp.ClientError)


@pytest.mark.asyncio
async def test_timeout_is_wrapped():
    loader, _ = make_loader(error=asyncio.TimeoutError())
    with pytest.raises(RenderError, match="Timed out"):
        await loader.load("https://static.devli.ru/a.gif")


@pytest.mark.asyncio
async def test_empty_url_is_rejected_without_request():
    loader, session = make_loader(FakeResponse(body=b"x"))
    with pytest.raises(RenderError):
        await loader.load("")
    assert session.calls == []


@pytest.mark.asyncio
async def test_close_closes_async_session():
    http = FakeHttpClient(FakeSession())
    loader = MediaLoader(http)
    await loader.close()
    assert http.closed


@pytest.mark.asyncio
async def test_malformed_url_raises_render_error():
    loader, _ = make_loader(FakeResponse(body=b"x"))
    with pytest.raises(RenderError, match="Invalid URL") as exc_info:
        await loader.load("http://[::1/p.png")
    assert isinstance(exc_info.value.__cause__, ValueError)


@pytest.mark.asyncio
async def test_request_timeout_keeps_connect_and_read_limits():
    loader, session = make_loader(FakeResponse(body=b"x"))
    await loader.load("https://static.devli.ru/a.gif")
    timeout = session.calls[0][1]["timeout"]
    assert timeout.total == 5
    assert timeout.connect == 3
    assert timeout.sock_read == 7
