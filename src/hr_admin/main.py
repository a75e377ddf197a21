import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from hr_admin.api.v1.router import api_v1_router
from hr_admin.core.config import get_settings
from hr_admin.core.database import engine
from hr_admin.core.exceptions import AppError, StorageError, ValidationError
from hr_admin.core.logging import configure_logging
from hr_admin.schemas import ErrorResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Startup
    yield
    # Shutdown
    await engine.dispose()


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(detail=exc.detail, kind=exc.kind).model_dump(),
        headers=exc.headers,
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": "Request validation failed",
            "kind": ValidationError.kind,
            "errors": jsonable_encoder(exc.errors()),
        },
    )


async def storage_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Storage failure on %s %s", request.method, request.url.path, exc_info=exc)
    error = StorageError()
    return JSONResponse(
        status_code=error.status_code,
        content=ErrorResponse(detail=error.detail, kind=error.kind).model_dump(),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(detail="Internal server error", kind=AppError.kind).model_dump(),
    )


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level, sql_echo=settings.debug)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, storage_error_handler)
    # Driver connection faults (refused, reset, timed out) surface as OSError
    app.add_exception_handler(OSError, storage_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(api_v1_router, prefix="/api/v1")
    return app


def run() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "hr_admin.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
