"""FastAPI app entry: config, logging, health, and error handling."""

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from tidyoutput.config.logging import configure_logging, get_logger
from tidyoutput.config.settings import get_settings
from tidyoutput.controllers.routes.clean import router as clean_router
from tidyoutput.services.cleanup.registry import available_strategies

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: config, logging, and a report of the strategies this runtime can use."""
    settings = get_settings()
    configure_logging()
    logger.info("Application starting", extra={"app_name": settings.app_name, "environment": settings.environment})
    strategies = [d.name for d in available_strategies()]
    logger.info("Cleanup strategies available", extra={"strategies": strategies})
    yield
    logger.info("Shutdown complete")


app = FastAPI(
    title="Tidy Output",
    description="Repair, reformat and re-indent HTML fragments and pages",
    version="1.0.0",
    debug=get_settings().debug,
    lifespan=lifespan,
)
app.include_router(clean_router)


@app.get("/health")
async def health() -> dict[str, Any]:
    """Liveness: service is up."""
    return {"status": "ok"}


@app.exception_handler(Exception)
async def global_exception_handler(_request: Request, exc: Exception):
    """Centralized error handling: do not leak stack traces or internal details to the client."""
    logger.exception("Unhandled error", extra={"error": type(exc).__name__})
    return JSONResponse(
        content={"detail": "An internal error occurred."},
        status_code=500,
    )
