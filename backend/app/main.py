"""FastAPI application bootstrap: logging, CORS, routers and error handlers."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.errors import register_exception_handlers
from app.api.routers import health, products
from app.core.config import Settings, get_settings
from app.db.session import init_db

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Instantiate the FastAPI app and include top-level routers.

    ``settings`` drives logging, CORS, the API prefix and whether tables are
    created at startup. The database itself is always the module engine in
    ``app.db.session``, built from ``get_settings().database_url``; a
    ``database_url`` on the passed settings is not used.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        if settings.auto_create_tables:
            init_db()
        yield

    app = FastAPI(
        title=settings.app_name,
        description="Product catalogue microservice: CRUD with soft delete and paging",
        version="1.0.0",
        lifespan=lifespan,
    )

    logger.info(f"[CORS] Allowed origins: {settings.cors_origins}")
    logger.info(f"[CORS] Allowed origin regex: {settings.cors_origin_regex}")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_origin_regex=settings.cors_origin_regex,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["Authorization", "Content-Type", "X-Total-Count"],
        max_age=3600,
    )

    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(
        products.router, prefix=f"{settings.api_prefix}/products", tags=["products"]
    )

    return app


app = create_app()
