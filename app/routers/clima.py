import asyncio
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.core.dependencies import get_unlp_client
from app.schemas.clima import ClimaReport
from app.services.providers.unlp_client import UnlpClient
from app.services.unlp_pages import extract_clima_report

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Weather"])


@router.get(
    "/clima",
    response_model=ClimaReport,
    summary="Full UNLP weather report",
    description=(
        "Scrapes the UNLP field and tower pages and returns temperature, humidity, dew point, "
        "wind chill, pressure, rain and wind as rendered by the dashboard.\n\n"
        "Both pages are required: if either cannot be fetched the endpoint returns HTTP 500."
    ),
)
async def clima_report(client: UnlpClient = Depends(get_unlp_client)):
    pages = [asyncio.ensure_future(client.fetch_campo()), asyncio.ensure_future(client.fetch_torre())]
    try:
        campo, torre = await asyncio.gather(*pages)
        return extract_clima_report(campo, torre)
    except Exception:
        logger.exception("Could not build UNLP weather report")
        # The report is unusable without both pages; stop the other fetch.
        for page in pages:
            page.cancel()
        await asyncio.gather(*pages, return_exceptions=True)
        return JSONResponse(
            status_code=500,
            content={"error": "Could not fetch weather data"},
        )
