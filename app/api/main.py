"""
FastAPI application entry point for the Movie Credits API.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.api.config import (
    get_api_host,
    get_api_port,
    get_log_file,
    get_log_level,
    get_warm_on_startup,
)
from app.api.dependencies import get_catalog_service
from app.api.routers import movies, credits, stats, system
from app.core.exceptions import DatasetError
from app.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the datasets before serving so a broken dataset fails startup."""
    setup_logging(log_file=get_log_file(), level=get_log_level())
    if get_warm_on_startup():
        app.dependency_overrides.get(get_catalog_service, get_catalog_service)().warm_up()
    yield


app = FastAPI(
    title="Movie Credits API",
    description="Movie metadata, cast/crew credits and crew role statistics",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(movies.router)
app.include_router(credits.router)
app.include_router(stats.router)
app.include_router(system.router)


@app.exception_handler(DatasetError)
async def dataset_error_handler(request: Request, exc: DatasetError):
    logger.error(f"Dataset unavailable while serving {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(status_code=503, content={"detail": f"Dataset unavailable: {exc}"})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error while serving {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


@app.get("/")
def root():
    """Root endpoint."""
    return {
        "message": "Movie Credits API",
        "docs": "/docs",
        "health": "/api/health",
        "endpoints": ["/movies", "/credits", "/stats", "/old-movies"],
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.api.main:app", host=get_api_host(), port=get_api_port())
