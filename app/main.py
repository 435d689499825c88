"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.v1.router import api_router
from app.core.config import settings
from app.core.logging import configure_logging
from app.db.init_db import init_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    if settings.AUTO_CREATE_TABLES:
        init_db()
    logger.info("%s %s started", settings.PROJECT_NAME, settings.VERSION)
    yield


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies and parameters as 400 Bad Request."""
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST,
                        content={"detail": "Invalid input", "issues": jsonable_encoder(exc.errors())}, )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                        content={"detail": "Internal server error"}, )


def create_app() -> FastAPI:
    application = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description=settings.DESCRIPTION,
        debug=settings.DEBUG,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan)

    application.add_middleware(CORSMiddleware,
                               allow_origins=settings.CORS_ORIGINS,
                               allow_credentials=False,
                               allow_methods=["*"],
                               allow_headers=["*"])

    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.add_exception_handler(Exception, unhandled_exception_handler)

    # Include API router
    application.include_router(api_router, prefix=settings.API_PREFIX)

    @application.get("/", include_in_schema=False)
    async def root():
        """Root endpoint - service banner."""
        return {
            "message": settings.PROJECT_NAME,
            "version": settings.VERSION,
            "status": "healthy"
        }

    return application


app = create_app()
