from typing import Dict, Optional, Union

from pydantic import BaseModel, Field


class NormalizedStationRecord(BaseModel):
    """
    Latest wind reading of one station, in the shape shared by every source.
    """

    station_name: str = Field(..., description="Human-readable station label")
    external_id: Optional[str] = Field(
        default=None,
        description="Upstream station identifier (telemetry stations only)",
    )
    measured_at: str = Field(
        ...,
        description="ISO-8601 measurement time, or fetch time when the source has none",
        examples=["2024-01-01T00:00:00Z"],
    )
    wind_speed: Optional[float] = Field(default=None, description="Latest wind speed")
    wind_gust: Optional[float] = Field(default=None, description="Latest gust")
    wind_direction: Optional[str] = Field(default=None, description="Latest direction", examples=["NE"])


class StationError(BaseModel):
    """
    Failure entry for a station whose data could not be fetched or processed.
    """

    error: str
    station_name: str


StationResult = Union[NormalizedStationRecord, StationError]

CombinedResponse = Dict[str, StationResult]
