import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.cors import CORSMiddleware

from backoffice.core.exceptions import BaseApplicationException
from backoffice.core.pydantic_error_formatter import format_validation_errors
from backoffice.core.service_response import ServiceResponse
from backoffice.core.settings import AppSettings, get_settings
from backoffice.database import Database
from backoffice.middleware.request_logging import RequestLoggingMiddleware
from backoffice.routers import report, upload

logger = logging.getLogger(__name__)


def configure_logging(settings: AppSettings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Ogni errore che sfugge ai servizi viene restituito nell'envelope standard"""

    @app.exception_handler(BaseApplicationException)
    async def application_exception_handler(request: Request, exc: BaseApplicationException):
        log = logger.error if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR else logger.warning
        log(f"Application exception: {exc.error_code} - {exc.message}", extra={
            "error_code": exc.error_code,
            "details": exc.details,
            "path": str(request.url),
            "method": request.method
        })
        return ServiceResponse.build_failure(exc.message, None, exc.status_code).to_json_response()

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        message = format_validation_errors(exc.errors())
        logger.warning(f"Request validation error: {message}", extra={
            "path": str(request.url),
            "method": request.method
        })
        return ServiceResponse.build_failure(message, None, status.HTTP_400_BAD_REQUEST).to_json_response()

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        logger.info(f"HTTP exception: {exc.status_code} - {exc.detail}", extra={
            "status_code": exc.status_code,
            "path": str(request.url)
        })
        return ServiceResponse.build_failure(str(exc.detail), None, exc.status_code).to_json_response()

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {str(exc)}", extra={
            "path": str(request.url),
            "method": request.method
        }, exc_info=exc)
        return ServiceResponse.build_failure(
            "Internal server error", None, status.HTTP_500_INTERNAL_SERVER_ERROR
        ).to_json_response()


def create_app(settings: Optional[AppSettings] = None, database: Optional[Database] = None) -> FastAPI:
    """
    Costruisce l'applicazione.

    Args:
        settings: Configurazione, default da ambiente/.env
        database: Contesto database già costruito (es. SQLite in memoria nei test),
            default costruito da ``settings.database_url``
    """
    settings = settings or get_settings()
    database = database or Database.from_settings(settings)
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        database.create_tables()
        logger.info(f"{settings.app_name} started ({settings.environment})")
        yield
        database.dispose()
        logger.info("Database connections closed")

    app = FastAPI(
        title=settings.app_name,
        description="Import CSV di clienti e ordini e report di spesa",
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(
        RequestLoggingMiddleware,
        slow_request_threshold=settings.slow_request_threshold,
        verbose=settings.is_development
    )

    register_exception_handlers(app)

    app.include_router(upload.router)
    app.include_router(report.router)

    @app.get("/health", tags=["Health"])
    async def health():
        return {"status": "ok"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=get_settings().host, port=get_settings().port)
