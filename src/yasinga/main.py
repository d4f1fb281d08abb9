from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import IntegrityError

from yasinga.api.middleware.error_handler import (
    handle_expense_tracker_error,
    handle_generic_error,
    handle_integrity_error,
    handle_validation_error,
)
from yasinga.api.middleware.logging import RequestLoggingMiddleware, setup_logging
from yasinga.api.v1 import router as v1_router
from yasinga.api.v1.health import router as health_router
from yasinga.config import settings
from yasinga.core.exceptions import ExpenseTrackerError


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level, json_output=settings.app_env == "production")
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.project_name,
        description="M-Pesa expense tracking and reporting for small businesses",
        version=settings.version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(RequestLoggingMiddleware)

    # Most specific first
    app.add_exception_handler(ExpenseTrackerError, handle_expense_tracker_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(IntegrityError, handle_integrity_error)
    app.add_exception_handler(Exception, handle_generic_error)

    app.include_router(health_router)
    app.include_router(v1_router)

    return app


app = create_app()
