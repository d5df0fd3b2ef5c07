"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from diet_tracker.api.meals import router as meals_router
from diet_tracker.api.users import router as users_router
from diet_tracker.app_logging import configure_logging
from diet_tracker.containers import AppContainer
from diet_tracker.errors import DietTrackerError

logger = logging.getLogger(__name__)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)

    app = FastAPI(title="Diet Tracker")
    app.state.container = container

    app.add_exception_handler(DietTrackerError, _domain_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)

    app.include_router(users_router)
    app.include_router(meals_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


async def _domain_error_handler(
    request: Request, exc: DietTrackerError
) -> JSONResponse:
    if exc.http_status >= 500:
        logger.error(
            "Request failed",
            extra={"path": request.url.path, "error": type(exc).__name__},
        )
    return JSONResponse(status_code=exc.http_status, content=exc.to_dict())


async def _validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={
            "message": "Validation error",
            "issues": jsonable_encoder(exc.errors()),
        },
    )
