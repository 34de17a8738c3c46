import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from fnws_weather.core.http import get_http_client
from fnws_weather.main import create_app


def make_provider_document(days: int = 1, *, current_code: int = 0) -> dict:
    dates = [f"2025-03-{25 + i:02d}" for i in range(days)]
    return {
        "latitude": 40.71,
        "longitude": -74.01,
        "timezone": "America/New_York",
        "daily": {
            "time": dates,
            "temperature_2m_min": [50.2 + i for i in range(days)],
            "temperature_2m_max": [69.8 + i for i in range(days)],
            "apparent_temperature_min": [47.0 + i for i in range(days)],
            "sunrise": [f"{d}T05:56" for d in dates],
            "sunset": [f"{d}T18:28" for d in dates],
            "precipitation_probability_max": [0 for _ in dates],
            "weather_code": [0 for _ in dates],
        },
        "current": {
            "time": "2025-03-25T14:15",
            "interval": 900,
            "temperature_2m": 61.4,
            "wind_speed_10m": 7.9,
            "wind_direction_10m": 348,
            "weather_code": current_code,
        },
    }


@pytest.fixture
def provider_document() -> dict:
    return make_provider_document()


@pytest_asyncio.fixture
async def api_client():
    app = create_app()
    async with httpx.AsyncClient() as upstream:
        app.dependency_overrides[get_http_client] = lambda: upstream
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            yield client


@pytest.fixture
def provider_document_factory():
    return make_provider_document
