from __future__ import annotations

from typing import Optional

import httpx

from fnws_weather.core.config import Settings


USER_AGENT = "fnws-weather/0.1"

_client: Optional[httpx.AsyncClient] = None


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    """Pooled client for Open-Meteo. Shared by all requests; holds no response state."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        limits=httpx.Limits(
            max_keepalive_connections=settings.http_max_keepalive_connections,
            max_connections=settings.http_max_connections,
        ),
        headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
    )


def set_http_client(client: httpx.AsyncClient) -> None:
    global _client
    _client = client


async def close_http_client() -> None:
    global _client
    client, _client = _client, None
    if client is not None:
        await client.aclose()


def get_http_client() -> httpx.AsyncClient:
    if _client is None:
        raise RuntimeError("Upstream client is not open; create_app() lifespan has not started.")
    return _client
