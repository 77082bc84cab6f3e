from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

import httpx

from app.core.config import settings

logger = logging.getLogger(__name__)


class AysaClient:
    """
    AySA weather stations client.

    Historical variables endpoint:
    GET {base}/{station_id} -> {"estacion", "fechaMedicion", "variables": {...}}

    `variables` holds one time series per variable (VelocidadViento,
    RafagaViento, DireccionViento, ...), oldest reading first.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout_s: float | None = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.aysa_base_url).rstrip("/")
        self.timeout = timeout_s if timeout_s is not None else settings.telemetry_timeout_s
        self.transport = transport

    def station_url(self, station_id: str) -> str:
        return f"{self.base_url}/{station_id}"

    async def _request_json(self, url: str) -> Any:
        async with httpx.AsyncClient(
            timeout=self.timeout,
            verify=settings.upstream_verify_tls,
            transport=self.transport,
        ) as client:
            r = await client.get(
                url,
                headers={"accept": "application/json", "user-agent": settings.upstream_user_agent},
            )
            r.raise_for_status()
            return r.json()

    async def _get_json(self, url: str) -> Any:
        # Bounds the whole exchange; httpx timeouts only apply per phase.
        try:
            return await asyncio.wait_for(self._request_json(url), self.timeout)
        except asyncio.TimeoutError:
            raise httpx.TimeoutException(f"No complete response from {url} within {self.timeout}s") from None

    async def fetch_station(self, station_id: str) -> Any:
        """
        Returns the raw payload for one station. The shape is not checked
        here; see `normalize_telemetry_payload`.
        """
        url = self.station_url(station_id)
        logger.info("Fetching AySA data from %s", url)
        try:
            data = await self._get_json(url)
        except httpx.HTTPError as e:
            logger.error("Error fetching AySA data from %s: %s", url, e)
            raise
        logger.info("AySA data fetched from %s", url)
        return data
