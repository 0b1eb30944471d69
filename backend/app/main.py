# app/main.py
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.analysis.factory import AnalysisBackendFactory
from app.core.config import Settings, settings
from app.core.logging_config import configure_logging
from app.middleware.request_logging import RequestLoggingMiddleware
from app.routers.health import router as health_router
from app.routers.documents import router as documents_router
from app.routers.root import router as root_router
from app.core.exception_handlers import (
    app_error_handler,
    unhandled_exception_handler,
    validation_error_handler,
)
from app.core import AppError

configure_logging()


def _split_csv(value: str | None) -> list[str]:
    if not value:
        return []
    return [v.strip() for v in value.split(",") if v.strip()]


def create_app(cfg: Settings | None = None) -> FastAPI:
    cfg = cfg or settings
    # Fails fast on a misconfigured ANALYSIS_BACKEND.
    backend = AnalysisBackendFactory.create(cfg)

    app = FastAPI(title=getattr(cfg, "app_name", "API"))
    app.state.settings = cfg
    app.state.analysis_backend = backend

    app.add_middleware(RequestLoggingMiddleware)

    # ---- CORS (env-driven) ----
    # CORS_ALLOW_ORIGINS="http://localhost:5173,https://yourapp.example"
    allow_origins = _split_csv(getattr(cfg, "CORS_ALLOW_ORIGINS", None))
    if not allow_origins:
        allow_origins = ["http://localhost:5173", "http://localhost:3000"]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Content-Disposition", "x-request-id"],
    )

    # Exception handlers
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Routers
    app.include_router(root_router)
    app.include_router(health_router)
    app.include_router(documents_router)

    return app


app = create_app()
