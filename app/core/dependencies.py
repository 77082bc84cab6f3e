from app.services.aggregation_service import AggregationService
from app.services.providers.unlp_client import UnlpClient


# ---------------------------------------------------------------------
# Dependency injection
# ---------------------------------------------------------------------

def get_unlp_client() -> UnlpClient:
    """
    FastAPI dependency that provides a UNLP dashboard client.
    """
    return UnlpClient()


def get_aggregation_service() -> AggregationService:
    """
    FastAPI dependency that provides the station aggregation service.

    A new service is created for each request; nothing is shared or cached
    between requests. Tests override this dependency to inject fake clients.

    Usage example:
    ```python
    @router.get("/items")
    async def list_items(service: AggregationService = Depends(get_aggregation_service)):
        ...
    ```
    """
    return AggregationService()
