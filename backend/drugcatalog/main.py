"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine

from drugcatalog.config import Settings, get_settings
from drugcatalog.database import create_db_engine, create_session_factory
from drugcatalog.logging_config import setup_logging
from drugcatalog.api.companies import router as companies_router
from drugcatalog.api.drugs import router as drugs_router
from drugcatalog.api.seed import router as seed_router

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, engine: Engine | None = None) -> FastAPI:
    """
    Build the API application.

    The engine is created on startup from ``settings`` unless one is passed
    in; either way it lives on ``app.state`` and is handed to request
    handlers through ``get_db``. Logging is configured on startup only when
    the settings come from the environment.
    """
    owns_settings = settings is None
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if owns_settings:
            setup_logging(settings.log_level)
        owns_engine = engine is None
        app.state.engine = engine or create_db_engine(settings)
        app.state.session_factory = create_session_factory(app.state.engine)
        logger.info("Drug Catalog API started (environment=%s)", settings.environment)
        try:
            yield
        finally:
            if owns_engine:
                app.state.engine.dispose()
                logger.info("Database connection pool closed")

    app = FastAPI(
        title="Drug Catalog API",
        description="Drug information database with company filtering",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(companies_router)
    app.include_router(drugs_router)
    app.include_router(seed_router)

    @app.get("/api/health")
    def health_check():
        return {"status": "ok", "service": "Drug Catalog API"}

    return app


app = create_app()
