"""
Main entrypoint for the Space Ships API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, e.g.::

    uvicorn space_ships_api.app.main:app --reload

The application title, version and route prefix are provided via
``Settings`` from ``core.config``.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .core.config import settings
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .core.db import init_db


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create the database file and apply migrations before serving.
    init_db()
    logger.info("%s %s started", settings.project_name, settings.api_version)
    yield
    logger.info("%s shutting down", settings.project_name)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed requests as 400 Bad Request.

    Non-numeric ids, unknown ``shipType``/``order`` tokens, negative
    page parameters and unparsable bodies all end up here.
    """
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that imports below can
    # safely log messages.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.get("/health")
    async def health_check() -> dict:
        return {"status": "healthy", "service": settings.project_name}

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
