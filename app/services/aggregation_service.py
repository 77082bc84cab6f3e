from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence

import httpx

from app.core.config import settings
from app.schemas.wind import CombinedResponse, StationError, StationResult
from app.services.normalizers import INTERNAL_ERROR, adapt_unlp_wind, normalize_telemetry_payload
from app.services.providers.aysa_client import AysaClient
from app.services.providers.unlp_client import UnlpClient
from app.services.unlp_pages import extract_wind

logger = logging.getLogger(__name__)

TELEMETRY = "telemetry"
HTML = "html"

UNLP_EXTRACTION_ERROR = "error extracting wind data from UNLP page"


@dataclass(frozen=True)
class StationDescriptor:
    """
    One station of the catalogue.

    `kind` selects the pipeline: TELEMETRY stations are fetched from the AySA
    API by `external_id`, HTML stations are scraped from the UNLP pages.
    """

    key: str
    name: str
    kind: str
    external_id: Optional[str] = None


def default_stations() -> List[StationDescriptor]:
    return [
        StationDescriptor("bernal", "Bernal", TELEMETRY, settings.aysa_bernal_id),
        StationDescriptor("berazategui", "Berazategui", TELEMETRY, settings.aysa_berazategui_id),
        StationDescriptor("unlp", "UNLP", HTML),
    ]


def _error_message(e: BaseException) -> str:
    return str(e) or e.__class__.__name__


def _check_unique_keys(stations: Sequence[StationDescriptor]) -> None:
    seen = set()
    for station in stations:
        if station.key in seen:
            raise ValueError(f"Duplicate station key: {station.key!r}")
        seen.add(station.key)


def assemble_response(
    stations: Sequence[StationDescriptor],
    results: Sequence[StationResult],
) -> CombinedResponse:
    """Key each result by its station; the key set is the requested stations."""
    return {station.key: result for station, result in zip(stations, results)}


class AggregationService:
    """
    Fetches and normalizes wind data for a set of stations concurrently.

    Each station runs as an independent task. A task always ends with a
    StationResult: upstream and processing failures are turned into a
    StationError for that station only.
    """

    def __init__(
        self,
        aysa: AysaClient | None = None,
        unlp: UnlpClient | None = None,
        stations: Iterable[StationDescriptor] | None = None,
    ):
        self.aysa = aysa or AysaClient()
        self.unlp = unlp or UnlpClient()
        catalogue = list(stations) if stations is not None else default_stations()
        _check_unique_keys(catalogue)
        self.stations: Dict[str, StationDescriptor] = {s.key: s for s in catalogue}

    def get_station(self, key: str) -> Optional[StationDescriptor]:
        return self.stations.get(key)

    def stations_of_kind(self, kind: str) -> List[StationDescriptor]:
        return [s for s in self.stations.values() if s.kind == kind]

    async def _fetch_telemetry(self, station: StationDescriptor) -> StationResult:
        try:
            payload = await self.aysa.fetch_station(station.external_id)
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Error fetching data for %s: %s", station.name, e)
            return StationError(
                error=f"Error fetching data for {station.name}: {_error_message(e)}",
                station_name=station.name,
            )
        return normalize_telemetry_payload(payload, station.name)

    async def _fetch_html(self, station: StationDescriptor) -> StationResult:
        campo, torre = await asyncio.gather(
            self.unlp.fetch_campo(),
            self.unlp.fetch_torre(),
            return_exceptions=True,
        )

        if isinstance(campo, BaseException) or isinstance(torre, BaseException):
            campo_error = _error_message(campo) if isinstance(campo, BaseException) else None
            torre_error = _error_message(torre) if isinstance(torre, BaseException) else None
            logger.error("Error scraping %s: campo=%s torre=%s", station.name, campo_error, torre_error)
            return StationError(
                error=f"Error scraping {station.name}: Campo ({campo_error}), Torre ({torre_error})",
                station_name=station.name,
            )

        try:
            reading = extract_wind(torre)
        except Exception:
            logger.exception("Error extracting wind data for %s", station.name)
            return StationError(error=UNLP_EXTRACTION_ERROR, station_name=station.name)

        return adapt_unlp_wind(reading, station.name)

    async def fetch_station(self, station: StationDescriptor) -> StationResult:
        """
        Run the pipeline of one station. Never raises.
        """
        try:
            if station.kind == TELEMETRY:
                return await self._fetch_telemetry(station)
            if station.kind == HTML:
                return await self._fetch_html(station)
            raise ValueError(f"Unknown station kind: {station.kind!r}")
        except Exception:
            logger.exception("Unexpected error processing %s", station.name)
            return StationError(error=INTERNAL_ERROR, station_name=station.name)

    async def fetch_stations(self, stations: Sequence[StationDescriptor]) -> CombinedResponse:
        """
        Fetch all `stations` concurrently and wait for every one of them
        before assembling the response.
        """
        _check_unique_keys(stations)
        logger.info("Fetching %d stations: %s", len(stations), ", ".join(s.key for s in stations))

        outcomes = await asyncio.gather(
            *(self.fetch_station(s) for s in stations),
            return_exceptions=True,
        )

        results: List[StationResult] = []
        for station, outcome in zip(stations, outcomes):
            if isinstance(outcome, BaseException):
                logger.error("Task for %s ended with %r", station.name, outcome)
                outcome = StationError(error=INTERNAL_ERROR, station_name=station.name)
            results.append(outcome)

        return assemble_response(stations, results)

    async def combined(self) -> CombinedResponse:
        return await self.fetch_stations(list(self.stations.values()))

    async def telemetry_combined(self) -> CombinedResponse:
        return await self.fetch_stations(self.stations_of_kind(TELEMETRY))
