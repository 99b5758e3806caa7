import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.api.health import router as health_router
from app.api.router import router as api_router
from app.core.config import settings
from app.core.errors import ReferenceDataError
from app.core.logging import setup_logging
from app.core.telemetry import setup_telemetry
from app.core.versioning import (
    API_PREFIX,
    SUPPORTED_VERSIONS_HEADER,
    register_version_docs,
    supported_versions_value,
)
from app.schemas.common import ErrorResponse


log = logging.getLogger(__name__)


async def reference_data_error_handler(request: Request, exc: ReferenceDataError) -> JSONResponse:
    log.exception("reference data unavailable: path=%s", exc.path, exc_info=exc)
    body = ErrorResponse(code="reference_data_unavailable", message=exc.message)
    return JSONResponse(status_code=500, content=body.model_dump())


def create_app() -> FastAPI:
    setup_logging()

    dev = settings.env == "dev"
    app = FastAPI(
        title="Geo Reference API",
        version="2.0.0",
        docs_url="/docs" if dev else None,
        redoc_url=None,
        openapi_url="/openapi.json" if dev else None,
    )

    @app.middleware("http")
    async def report_api_versions(request: Request, call_next):
        response = await call_next(request)
        if request.url.path.startswith(API_PREFIX):
            response.headers[SUPPORTED_VERSIONS_HEADER] = supported_versions_value()
        return response

    app.add_exception_handler(ReferenceDataError, reference_data_error_handler)

    setup_telemetry(app)
    app.include_router(health_router, tags=["health"])
    app.include_router(api_router)

    if dev:
        register_version_docs(app)

    log.info("app ready: env=%s data_dir=%s", settings.env, settings.data_dir)
    return app


app = create_app()
