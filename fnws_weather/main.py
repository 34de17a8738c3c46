from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from fnws_weather.api.v1.endpoints.weather import router as weather_router
from fnws_weather.api.v1.router import api_v1_router
from fnws_weather.core.config import get_settings
from fnws_weather.core.errors import WeatherAdapterError
from fnws_weather.core.http import close_http_client, create_http_client, set_http_client


logger = logging.getLogger(__name__)


async def weather_adapter_error_handler(request: Request, exc: WeatherAdapterError) -> JSONResponse:
    logger.warning("%s %s failed: %s", request.method, request.url.path, exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    client = create_http_client(settings)
    set_http_client(client)
    app.state.settings = settings
    logger.info("Upstream client ready for %s", settings.open_meteo_url)

    try:
        yield
    finally:
        await close_http_client()


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)

    limiter = Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit])

    app = FastAPI(
        title="fnws weather",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)
    app.add_exception_handler(WeatherAdapterError, weather_adapter_error_handler)

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["GET"],
            allow_headers=["*"],
        )

    # Watch faces call /weather directly.
    app.include_router(weather_router, tags=["legacy"])
    app.include_router(api_v1_router, prefix="/api/v1")
    return app


app = create_app()
