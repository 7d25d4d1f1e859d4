"""
Application factory for the transport projects API.

Wires settings, storage and the project service into a FastAPI app, renders
every error as {"error": ...} and seeds sample data on startup.
"""
from __future__ import annotations

from contextlib import asynccontextmanager
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from transport_api.core.config import SERVICE_NAME, SERVICE_VERSION, Settings, get_settings
from transport_api.core.logging import configure_logging
from transport_api.repositories.json_storage import ProjectStorage
from transport_api.routers import meta as meta_router
from transport_api.routers import projects as projects_router
from transport_api.services.project_service import ProjectService

logger = logging.getLogger(__name__)


def _bootstrap(app: FastAPI) -> None:
    """Create the data directory and seed sample projects into an empty collection."""
    settings: Settings = app.state.settings
    service: ProjectService = app.state.project_service
    service.storage.ensure_directory()
    if settings.seed_sample_data:
        service.seed_sample_data()
    logger.info("%s %s using %s", SERVICE_NAME, SERVICE_VERSION, service.storage.path)


@asynccontextmanager
async def _lifespan(app: FastAPI):
    _bootstrap(app)
    yield


async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse({"error": exc.detail}, status_code=exc.status_code, headers=getattr(exc, "headers", None))


async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse({"error": "Request body must be a JSON object"}, status_code=422)


async def _unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse({"error": "Internal server error"}, status_code=500)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the API application; uvicorn/gunicorn use the module-level `app`."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title=SERVICE_NAME, version=SERVICE_VERSION, lifespan=_lifespan)
    app.state.settings = settings
    app.state.project_service = ProjectService(ProjectStorage(settings.data_file))

    origins = list(settings.cors_origins) or ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(Exception, _unhandled_error)

    app.include_router(meta_router.router)
    app.include_router(projects_router.router)
    return app


app = create_app()
