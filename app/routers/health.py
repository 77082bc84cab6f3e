from fastapi import APIRouter, Depends

from app.core.config import settings
from app.core.dependencies import get_aggregation_service
from app.services.aggregation_service import AggregationService

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    summary="Service status and station catalogue",
    description=(
        "Reports that the service is up, which stations the combined views will query "
        "and which upstream endpoints they are read from. No upstream is contacted."
    ),
    response_description="Service status",
)
def health(service: AggregationService = Depends(get_aggregation_service)):
    return {
        "status": "ok",
        "service": settings.app_name,
        "environment": settings.environment,
        "stations": [
            {"key": s.key, "name": s.name, "kind": s.kind}
            for s in service.stations.values()
        ],
        "upstreams": {
            "aysa": service.aysa.base_url,
            "unlp_torre": service.unlp.torre_url,
            "unlp_campo": service.unlp.campo_url,
        },
    }
