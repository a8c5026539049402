import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from molo.core.config import settings, DEFAULT_JWT_SECRET
from molo.core.exceptions import MoloError
from molo.core.logging import setup_logging
from molo.api.api import api_router
from molo.api.errors import (
    molo_exception_handler,
    http_exception_handler,
    validation_exception_handler,
    general_exception_handler,
    success_envelope
)
from molo.db.database import init_db, close_db
from molo.middleware.request_logging import RequestLoggingMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    if settings.JWT_SECRET == DEFAULT_JWT_SECRET:
        logger.warning("JWT_SECRET is not set; using the built-in development secret")

    await init_db()

    yield

    # Shutdown
    await close_db()


def create_app() -> FastAPI:
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="Molo Diary API",
        description="PIN-gated personal diary backend",
        version=settings.VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc"
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"]
    )
    app.add_middleware(RequestLoggingMiddleware)

    # Add exception handlers
    app.add_exception_handler(MoloError, molo_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    # Include API routes
    app.include_router(api_router)

    @app.get("/")
    async def root():
        return success_envelope({
            "message": settings.APP_NAME,
            "version": settings.VERSION,
            "status": "operational",
            "docs_url": "/docs"
        })

    return app


app = create_app()
