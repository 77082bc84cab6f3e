from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Optional

from app.schemas.wind import NormalizedStationRecord, StationError, StationResult

logger = logging.getLogger(__name__)

SHAPE_ERROR = "incomplete or unexpected payload shape"
INTERNAL_ERROR = "internal processing error"

SPEED_SERIES = "VelocidadViento"
GUST_SERIES = "RafagaViento"
DIRECTION_SERIES = "DireccionViento"


@dataclass
class WindReading:
    """Wind values read from the tower page. Any of them may be missing."""

    speed: Optional[float] = None
    gust: Optional[float] = None
    direction: Optional[str] = None


def latest_value(variables: dict, series: str) -> Any:
    """
    Last element of a time series (series are ordered oldest -> newest).
    Missing, non-list or empty series give None.
    """
    values = variables.get(series)
    if not isinstance(values, list) or not values:
        return None
    return values[-1]


def _to_float(v: Any) -> Optional[float]:
    if v is None:
        return None
    return float(v)


def normalize_telemetry_payload(payload: Any, station_name: str) -> StationResult:
    """
    Turn a raw AySA payload into a normalized record.

    The payload must carry `estacion`, `fechaMedicion` and a `variables`
    mapping; otherwise a StationError is returned and nothing else is read.
    Values that cannot be converted also produce a StationError instead of
    raising.
    """
    if (
        not isinstance(payload, dict)
        or not payload.get("estacion")
        or not payload.get("fechaMedicion")
        or not isinstance(payload.get("variables"), dict)
    ):
        logger.warning("Unexpected payload shape for %s", station_name)
        return StationError(error=SHAPE_ERROR, station_name=station_name)

    try:
        variables = payload["variables"]

        for series in (SPEED_SERIES, GUST_SERIES, DIRECTION_SERIES):
            if not variables.get(series):
                logger.warning("No %s data for %s", series, station_name)

        speed = _to_float(latest_value(variables, SPEED_SERIES))
        gust = _to_float(latest_value(variables, GUST_SERIES))
        direction = latest_value(variables, DIRECTION_SERIES)

        record = NormalizedStationRecord(
            station_name=station_name,
            external_id=str(payload["estacion"]),
            measured_at=str(payload["fechaMedicion"]),
            wind_speed=speed,
            wind_gust=gust,
            wind_direction=str(direction) if direction is not None else None,
        )
    except Exception:
        logger.exception("Failed to process payload for %s", station_name)
        return StationError(error=INTERNAL_ERROR, station_name=station_name)

    logger.info(
        "%s: speed=%s gust=%s direction=%s",
        station_name, record.wind_speed, record.wind_gust, record.wind_direction,
    )
    return record


def utc_now_iso(now: Optional[datetime] = None) -> str:
    """UTC timestamp in ISO-8601 with millisecond precision and a `Z` suffix."""
    now = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def adapt_unlp_wind(
    reading: WindReading,
    station_name: str,
    now: Optional[datetime] = None,
) -> NormalizedStationRecord:
    """
    Map a tower-page wind reading to the normalized record.

    The page has no per-reading timestamp, so `measured_at` is the fetch
    time. Values are forwarded as extracted.
    """
    return NormalizedStationRecord(
        station_name=station_name,
        external_id=None,
        measured_at=utc_now_iso(now),
        wind_speed=reading.speed,
        wind_gust=reading.gust,
        wind_direction=reading.direction,
    )
