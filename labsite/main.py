from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from labsite.api.site import router as site_router
from labsite.core.config import Settings, get_settings
from labsite.core.logging_config import configure_logging
from labsite.ingest.fetcher import ResourceFetcher, create_fetcher
from labsite.services.site import SiteService


def create_app(
    settings: Optional[Settings] = None,
    fetcher: Optional[ResourceFetcher] = None,
) -> FastAPI:
    """Create and configure FastAPI application."""
    settings = settings or get_settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager: run the load phase once at startup."""
        # Startup
        source_fetcher = fetcher or create_fetcher(settings)
        service = SiteService(source_fetcher, settings)
        app.state.site_service = service
        async with source_fetcher:
            await service.load()
        yield
        # Shutdown
        app.state.site_service = None

    app = FastAPI(
        title=settings.APP_NAME,
        description="Lab site data API",
        version="0.1.0",
        lifespan=lifespan,
        debug=settings.DEBUG,
    )

    # Include routers
    app.include_router(site_router, prefix="/api/v1")

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()
