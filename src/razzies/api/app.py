"""FastAPI application factory.

API layer:
- Parses and validates query parameters
- Reads the catalogue held on app.state
- Forbidden: CSV parsing, interval computation
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Iterable

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from razzies.api.deps import get_catalogue
from razzies.api.errors import register_error_handlers
from razzies.api.middleware import register_request_logging
from razzies.api.routes import movies
from razzies.catalogue.bootstrap import load_catalogue_records
from razzies.catalogue.store import CatalogueStore
from razzies.config import Settings, get_settings
from razzies.logs import configure_logging
from razzies.models.domain import MovieRecord
from razzies.models.types import HealthStatus

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    records: Iterable[MovieRecord] | None = None,
) -> FastAPI:
    """Create FastAPI application.

    Args:
        settings: Optional settings. Defaults to the environment.
        records: Optional movies to serve. When omitted, the catalogue
            is loaded from the configured CSV/database at startup.

    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        settings = get_settings()

    catalogue = CatalogueStore(records if records is not None else ())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.log_level, settings.log_json)
        if records is None:
            catalogue.replace(load_catalogue_records(settings.csv_path, settings.db_path))
        logger.info("Catalogue ready", extra={"movies": len(catalogue)})
        yield

    app = FastAPI(
        title="Razzies API",
        description=(
            "Golden Raspberry Awards nominees and winners.\n"
            "- Movies loaded from the CSV movie list and kept in memory.\n"
            "- Filters by year and winner flag, with pagination.\n"
            "- Producer award intervals (shortest and longest)."
        ),
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.catalogue = catalogue
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    register_request_logging(app)
    register_error_handlers(app)

    # Include routes
    app.include_router(movies.router, prefix="/api", tags=["movies"])

    # Health check endpoint
    @app.get("/health", response_model=HealthStatus)
    def health_check(catalogue: CatalogueStore = Depends(get_catalogue)) -> HealthStatus:
        """Health check endpoint."""
        return HealthStatus(status="ok", movies=len(catalogue))

    return app


# Default app instance
app = create_app()
