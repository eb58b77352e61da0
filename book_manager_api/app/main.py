"""
Main entrypoint for the Book Manager API.

This module assembles the FastAPI application, sets up logging, CORS
and request logging, and includes the API router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Run it with uvicorn
or another ASGI server, e.g.::

    uvicorn book_manager_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
import time

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .core.config import settings
from .core.logging_config import ACCESS_LOGGER, setup_logging
from .api.router import router as api_router
from .core.db import init_db

logger = logging.getLogger(__name__)
access_logger = logging.getLogger(ACCESS_LOGGER)


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = None
        try:
            response = await call_next(request)
            return response
        finally:
            duration_ms = (time.perf_counter() - start) * 1000
            status_code = getattr(response, "status_code", "ERR")
            access_logger.info(
                "%s %s -> %s in %.1fms",
                request.method,
                request.url.path,
                status_code,
                duration_ms,
            )

    # Malformed path parameters and bodies are client errors (400),
    # not FastAPI's default 422.
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning("Malformed request %s %s: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    app.include_router(api_router)

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the database file and table if they do not exist.
        init_db()

    return app


# Created at import time so that uvicorn can discover it without
# calling create_app manually.
app = create_app()
