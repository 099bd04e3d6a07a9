"""
Bundle Sources — fetch raw bundle bytes for a language code.

Sources raise on any failure (missing file, non-2xx response, network error).
The Loader decides what a failure means.
"""

import asyncio
from pathlib import Path
from typing import Protocol

import httpx
import structlog

logger = structlog.get_logger(__name__)


class BundleSource(Protocol):
    """Anything that can fetch the JSON bytes of one language bundle."""

    async def fetch(self, code: str) -> bytes:
        ...


class HttpBundleSource:
    """
    Fetches ``{base_url}/{code}.json`` over HTTP.

    A shared client can be injected (tests pass one with a mock transport);
    otherwise a short-lived client is opened per fetch.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._shared_client = client

    def url_for(self, code: str) -> str:
        return f"{self.base_url}/{code}.json"

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, follow_redirects=True)

    async def fetch(self, code: str) -> bytes:
        url = self.url_for(code)
        if self._shared_client is not None:
            resp = await self._shared_client.get(url)
        else:
            async with self._client() as client:
                resp = await client.get(url)
        resp.raise_for_status()
        logger.debug("bundle_fetched", language=code, url=url, size=len(resp.content))
        return resp.content


class FileBundleSource:
    """Reads ``{directory}/{code}.json`` from disk, off the event loop."""

    def __init__(self, directory: Path | str):
        self.directory = Path(directory)

    def path_for(self, code: str) -> Path:
        return self.directory / f"{code}.json"

    async def fetch(self, code: str) -> bytes:
        path = self.path_for(code)
        data = await asyncio.to_thread(path.read_bytes)
        logger.debug("bundle_read", language=code, path=str(path), size=len(data))
        return data
