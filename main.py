import sys
import time
from contextlib import asynccontextmanager
from typing import Optional

import httpx
import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api import api_router
from src.config.config import Config, config
from src.exceptions.weather import InternalError
from src.services.weather_service import WeatherService, build_timeout
from src.utils.logging_config import setup_logging

# Configure logging
setup_logging(config)
logger = structlog.get_logger(__name__)


def create_app(settings: Optional[Config] = None, weather_service: Optional[WeatherService] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Application settings, defaults to the environment-derived config
        weather_service: Pre-built weather service; when omitted the lifespan
            creates one backed by a shared HTTP client

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or config

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan manager.

        Opens the shared upstream HTTP client on startup and closes it on shutdown.
        """
        logger.info("Starting Weather Proxy application", environment=settings.environment)

        if not settings.is_weather_configured:
            logger.warning("OPENWEATHER_API_KEY is not set; weather lookups will fail")

        client = None
        if weather_service is None:
            client = httpx.AsyncClient(timeout=build_timeout(settings))
            app.state.weather_service = WeatherService(settings, client)

        logger.info("Weather Proxy application started successfully")
        try:
            yield
        finally:
            logger.info("Shutting down Weather Proxy")
            if client is not None:
                await client.aclose()

    app = FastAPI(
        title="Weather Proxy API",
        description="Proxies current weather lookups to OpenWeatherMap and returns a reduced payload.",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings
    if weather_service is not None:
        app.state.weather_service = weather_service

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Request logging middleware
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log all HTTP requests with timing information."""
        start_time = time.time()

        logger.info(
            "HTTP request started",
            method=request.method,
            path=request.url.path,
            client_ip=request.client.host if request.client else "unknown",
        )

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "HTTP request failed",
                method=request.method,
                path=request.url.path,
                error=str(e),
                process_time=time.time() - start_time,
            )
            raise

        process_time = time.time() - start_time
        logger.info(
            "HTTP request completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            process_time=process_time,
        )

        response.headers["X-Process-Time"] = str(process_time)
        return response

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions globally."""
        logger.error(
            "Unhandled exception",
            method=request.method,
            path=request.url.path,
            error=str(exc),
            exc_info=exc,
        )

        return JSONResponse(
            status_code=500,
            content={"error": InternalError.public_message},
        )

    # HTTP exception handler
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """Render HTTP exceptions as a single error field."""
        logger.warning(
            "HTTP exception",
            method=request.method,
            path=request.url.path,
            status_code=exc.status_code,
            detail=exc.detail,
        )

        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    app.include_router(api_router)

    return app


# Create the application instance
app = create_app()


def main():
    logger.info(
        f"Starting Weather Proxy server in {config.environment} environment",
        host=config.api_host,
        port=config.api_port,
    )

    try:
        uvicorn.run(
            app,
            host=config.api_host,
            port=config.api_port,
            log_level=config.log_level.lower(),
            access_log=True,
            server_header=False,
            date_header=False,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested")
    except Exception as e:
        logger.error("Server failed to start", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
