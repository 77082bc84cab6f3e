import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.logging_config import setup_logging
from app.routers.clima import router as clima_router
from app.routers.health import router as health_router
from app.routers.wind import router as wind_router


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    This factory function:
    - Configures logging from `LOG_LEVEL`.
    - Initializes the FastAPI app with metadata and documentation endpoints.
    - Enables CORS for browser clients (GET only).
    - Registers all API routers.

    Returns:
        Configured FastAPI application instance.
    """
    setup_logging()

    app = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        description="Wind API: latest readings from AySA and UNLP stations",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    # Register API routers
    app.include_router(health_router)
    app.include_router(wind_router)
    app.include_router(clima_router)

    return app


# Application entry point
app = create_app()


def run() -> None:
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
