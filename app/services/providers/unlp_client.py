from __future__ import annotations

import asyncio
import logging
from typing import Optional

import httpx
from bs4 import BeautifulSoup

from app.core.config import settings
from app.services.html_extraction import parse_html

logger = logging.getLogger(__name__)


class UnlpClient:
    """
    Client for the FCAG-UNLP Davis station dashboard.

    Two pages are published:
    - torre.htm: tower sensors (wind)
    - campo.htm: field sensors (temperature, humidity, pressure, rain)
    """

    def __init__(
        self,
        torre_url: str | None = None,
        campo_url: str | None = None,
        timeout_s: float | None = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.torre_url = (torre_url or settings.unlp_torre_url).strip()
        self.campo_url = (campo_url or settings.unlp_campo_url).strip()
        self.timeout = timeout_s if timeout_s is not None else settings.html_timeout_s
        self.transport = transport

    async def _request_html(self, url: str) -> str:
        async with httpx.AsyncClient(
            timeout=self.timeout,
            verify=settings.upstream_verify_tls,
            transport=self.transport,
        ) as client:
            r = await client.get(url, headers={"user-agent": settings.upstream_user_agent})
            r.raise_for_status()

            # Try the declared encoding first; fallback to latin-1.
            encoding = r.encoding or "utf-8"
            try:
                return r.content.decode(encoding)
            except UnicodeDecodeError:
                return r.content.decode("latin-1")

    async def _get_html(self, url: str) -> str:
        # Bounds the whole exchange; httpx timeouts only apply per phase.
        try:
            return await asyncio.wait_for(self._request_html(url), self.timeout)
        except asyncio.TimeoutError:
            raise httpx.TimeoutException(f"No complete response from {url} within {self.timeout}s") from None

    async def fetch_page(self, url: str) -> BeautifulSoup:
        logger.info("Fetching UNLP page %s", url)
        try:
            html = await self._get_html(url)
        except httpx.HTTPError as e:
            logger.error("Error fetching UNLP page %s: %s", url, e)
            raise
        logger.info("UNLP page fetched from %s", url)
        return parse_html(html)

    async def fetch_torre(self) -> BeautifulSoup:
        return await self.fetch_page(self.torre_url)

    async def fetch_campo(self) -> BeautifulSoup:
        return await self.fetch_page(self.campo_url)
