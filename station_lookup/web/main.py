"""
FastAPI application serving station lookups and the weather relays.
"""

import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from station_lookup import config
from station_lookup.exceptions import NotFound, StationLookupError
from station_lookup.relay.forecast import ForecastRelay
from station_lookup.relay.proxy import WeatherProxy
from station_lookup.resolver import StationResolver
from station_lookup.web.api import relay, station

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app."""
    # Startup
    logger.info("Starting up station lookup service...")

    resolver = StationResolver.from_config()
    if not resolver.airports_file.exists() or not resolver.runways_file.exists():
        logger.warning(f"Reference data missing in {config.get_data_dir()}, lookups will fail until installed")

    # Make collaborators available to API routes
    station.set_resolver(resolver)
    relay.set_proxy(WeatherProxy())
    relay.set_forecast(ForecastRelay())

    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Shutting down station lookup service...")
    resolver.close()
    station.set_resolver(None)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Station Lookup",
        description="Airport, runway and radio frequency lookup",
        version="1.0.0",
        lifespan=lifespan,
    )

    @app.exception_handler(StationLookupError)
    async def station_error_handler(request: Request, exc: StationLookupError):
        if isinstance(exc, NotFound):
            logger.info(f"{request.url.path}: {exc.message}")
        else:
            logger.warning(f"{request.url.path}: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": "Invalid request parameters"})

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
        allow_origins=config.get_allowed_origins(),
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # Include API routes
    app.include_router(station.router, prefix="/api/station", tags=["station"])
    app.include_router(relay.router, prefix="/api", tags=["relay"])

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat()
        }

    return app


app = create_app()


def run(host: str = "0.0.0.0", port: int = 8000) -> None:
    """Run the service under uvicorn."""
    logging.basicConfig(level=config.get_log_level(), format=config.LOG_FORMAT)
    uvicorn.run(app, host=host, port=port, log_level=logging.getLevelName(config.get_log_level()).lower())
