# backend/player_profile/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# --- Setup Logging First ---
from player_profile.core.logging_config import setup_logging

setup_logging()

# Get a logger for this module *after* setup is complete.
logger = logging.getLogger(__name__)

from player_profile.api.v1.api_router import api_router as v1_api_router
from player_profile.core.config import settings
from player_profile.core.context import AppContext


@asynccontextmanager
async def lifespan(app: FastAPI):
    # --- STARTUP ---
    logger.info("--- Player Profile Service Startup Initiated ---")
    logger.info(
        f"Database: {settings.DATABASE_URL} | Redis: {settings.REDIS_ADDR or '<disabled>'}"
    )
    app.state.context = AppContext.from_settings(settings)
    logger.info("--- Application Startup Complete ---")

    yield  # The application is now running and accepting requests

    # --- SHUTDOWN ---
    logger.info("--- Application Shutdown Initiated ---")
    app.state.context.close()
    app.state.context = None
    logger.info("--- Application Shutdown Complete ---")


app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)


# --- ERROR RENDERING ---
# Every error leaves the service as {"error": "<message>"}.
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.error(f"Failed to decode request body for {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "invalid request body"},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": str(exc) or "internal server error"},
    )


# --- ROUTERS ---
app.include_router(v1_api_router, prefix=settings.API_V1_STR)


@app.get("/health")
async def health():
    return {"status": "ok"}
