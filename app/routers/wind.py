import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from app.core.dependencies import get_aggregation_service
from app.schemas.wind import CombinedResponse, StationError, StationResult
from app.services.aggregation_service import HTML, TELEMETRY, AggregationService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Wind"])


def _station_response(result: StationResult):
    # Single-station views report an upstream failure as a server error.
    if isinstance(result, StationError):
        return JSONResponse(status_code=500, content=result.model_dump())
    return result


@router.get(
    "/clima/combinado",
    response_model=CombinedResponse,
    summary="Latest wind for all stations",
    description=(
        "Fetches every configured station concurrently (AySA Bernal, AySA Berazategui, UNLP) "
        "and returns one entry per station.\n\n"
        "- Stations that fail are reported inline as `{error, station_name}`.\n"
        "- The response is HTTP 200 as long as the aggregation itself completes."
    ),
)
async def combined_wind(service: AggregationService = Depends(get_aggregation_service)):
    try:
        return await service.combined()
    except Exception as e:
        logger.exception("Combined aggregation failed")
        return JSONResponse(status_code=500, content={"error": f"Aggregation failed: {e}"})


@router.get(
    "/viento",
    response_model=CombinedResponse,
    summary="Latest wind for the AySA stations",
    description="Same as `/api/clima/combinado`, restricted to the AySA telemetry stations.",
)
async def telemetry_wind(service: AggregationService = Depends(get_aggregation_service)):
    try:
        return await service.telemetry_combined()
    except Exception as e:
        logger.exception("Telemetry aggregation failed")
        return JSONResponse(status_code=500, content={"error": f"Aggregation failed: {e}"})


@router.get(
    "/viento/aysa/{station_key}",
    response_model=StationResult,
    summary="Latest wind for one AySA station",
    responses={404: {"description": "Unknown station"}, 500: {"model": StationError}},
)
async def aysa_station_wind(
    station_key: str,
    service: AggregationService = Depends(get_aggregation_service),
):
    station = service.get_station(station_key)
    if station is None or station.kind != TELEMETRY:
        raise HTTPException(status_code=404, detail="Station not found")

    return _station_response(await service.fetch_station(station))


@router.get(
    "/viento/unlp",
    response_model=StationResult,
    summary="Latest wind for the UNLP station",
    responses={500: {"model": StationError}},
)
async def unlp_wind(service: AggregationService = Depends(get_aggregation_service)):
    stations = service.stations_of_kind(HTML)
    if not stations:
        raise HTTPException(status_code=404, detail="Station not found")

    return _station_response(await service.fetch_station(stations[0]))
