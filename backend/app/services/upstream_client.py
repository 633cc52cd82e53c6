from __future__ import annotations

import asyncio
import logging
from typing import Any
from urllib.parse import quote

import aiohttp
from yarl import URL

from app.core.config import Settings
from app.core.errors import DecodeFailure, TransportFailure

logger = logging.getLogger(__name__)


class UpstreamClient:
    """Single-attempt JSON client for the upstream employee service."""

    def __init__(self) -> None:
        self.initialized = False
        self.base_url = ""
        self.connect_timeout = 0.0
        self.read_timeout = 0.0

    async def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        if not settings.EMPLOYEE_API_BASE_URL:
            logger.warning("Employee API base URL missing — UpstreamClient not initialized")
            return

        self.base_url = settings.EMPLOYEE_API_BASE_URL.rstrip("/")
        self.connect_timeout = settings.EMPLOYEE_API_CONNECT_TIMEOUT
        self.read_timeout = settings.EMPLOYEE_API_READ_TIMEOUT
        self.initialized = True
        logger.info("UpstreamClient initialized (base_url=%s)", self.base_url)

    async def close(self) -> None:
        self.initialized = False
        self.base_url = ""

    def _url(self, path: str) -> URL:
        if not path:
            return URL(self.base_url)
        segment = quote(path, safe="")
        # "." and ".." survive quote() and would be resolved as dot segments
        if segment.strip(".") == "":
            segment = segment.replace(".", "%2E")
        return URL(f"{self.base_url}/{segment}", encoded=True)

    async def request(
        self,
        method: str,
        path: str = "",
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        if not self.initialized:
            raise TransportFailure("UpstreamClient not initialized")

        url = self._url(path)
        timeout = aiohttp.ClientTimeout(
            sock_connect=self.connect_timeout,
            sock_read=self.read_timeout,
        )

        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.request(method, url, json=json) as response:
                    if not 200 <= response.status < 300:
                        error_text = await response.text()
                        raise TransportFailure(
                            f"{method} {url} failed: {response.status} - {error_text}",
                            status=response.status,
                        )

                    if response.status == 204:
                        return {}

                    raw = await response.read()
                    if not raw:
                        return {}

                    try:
                        return await response.json(content_type=None)
                    except ValueError as e:
                        raise DecodeFailure(f"{method} {url} returned a non-JSON body") from e
        except asyncio.TimeoutError as e:
            raise TransportFailure(f"{method} {url} timed out") from e
        except aiohttp.ClientError as e:
            raise TransportFailure(f"{method} {url} failed: {e}") from e

    async def check_connection(self) -> bool:
        if not self.initialized:
            return False
        try:
            await self.request("GET")
            return True
        except Exception:
            logger.exception("UpstreamClient connection check failed")
            return False


upstream_client = UpstreamClient()
