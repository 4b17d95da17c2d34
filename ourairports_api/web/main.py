#!/usr/bin/env python3

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional
import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles
import uvicorn

from ..errors import OurAirportsError
from ..sources.base import DatasetSource
from ..store import OurAirportsData
from . import config
from .api import airport_frequencies, airports, common, countries, navaids, regions, runways
from .api.models import HealthResponse

# Configure logging
logging.basicConfig(level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO), format=config.LOG_FORMAT)
logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"


def create_app(source: Optional[DatasetSource] = None) -> FastAPI:
    """
    Build the API application.

    Args:
        source: Where to load the datasets from at startup; defaults to the
                source described by the environment (see ``config``).
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Load every dataset before serving; a failed load aborts startup."""
        logger.info("Starting up OurAirports API...")
        try:
            data = OurAirportsData.load(source or config.build_source())
        except OurAirportsError as e:
            logger.error(f"Failed to load OurAirports data: {e}")
            raise
        logger.info(f"Loaded {data.counts()}")

        # Make data available to API routes
        common.set_data(data)
        app.state.data = data
        logger.info("Application startup complete")

        yield

        logger.info("Shutting down OurAirports API...")
        common.set_data(None)

    app = FastAPI(
        title="OurAirports API",
        description="Read-only JSON API over the OurAirports datasets",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Add security headers middleware
    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response = await call_next(request)
        for header, value in config.SECURITY_HEADERS.items():
            response.headers[header] = value
        return response

    # Add request logging middleware
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time

        client_ip = request.client.host if request.client else "unknown"
        logger.info(
            f"{request.method} {request.url.path} - "
            f"{response.status_code} - {process_time:.3f}s - {client_ip}"
        )
        return response

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.ALLOWED_ORIGINS,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=config.GZIP_MINIMUM_SIZE)

    # Include API routes
    app.include_router(airports.router, prefix="/api/v1/airports", tags=["airports"])
    app.include_router(runways.router, prefix="/api/v1/runways", tags=["runways"])
    app.include_router(navaids.router, prefix="/api/v1/navaids", tags=["navaids"])
    app.include_router(airport_frequencies.router, prefix="/api/v1/airport-frequencies", tags=["airport-frequencies"])
    app.include_router(countries.router, prefix="/api/v1/countries", tags=["countries"])
    app.include_router(regions.router, prefix="/api/v1/regions", tags=["regions"])

    @app.get("/", include_in_schema=False)
    async def read_root():
        """Redirect to the static home page."""
        return RedirectResponse(url="/index.html", status_code=301)

    @app.get("/health", response_model=HealthResponse)
    async def health_check(request: Request):
        """Health check endpoint."""
        data: OurAirportsData = request.app.state.data
        return HealthResponse(
            status="healthy",
            loaded_at=data.loaded_at.isoformat(),
            counts=data.counts(),
        )

    # Static files come last so that they never shadow API routes
    if STATIC_DIR.exists():
        app.mount("/", StaticFiles(directory=STATIC_DIR, html=True), name="static")

    return app


app = create_app()


def run(host: str = config.HOST, port: int = config.PORT):
    """Serve the API with uvicorn."""
    uvicorn.run(app, host=host, port=port, log_level=config.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
