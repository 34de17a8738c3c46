import httpx
from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from fnws_weather.core.http import get_http_client
from fnws_weather.schemas.weather import WeatherQuery
from fnws_weather.services.weather.open_meteo import get_weather_report


router = APIRouter()


@router.get("/weather", name="get_weather_forecast")
async def weather_forecast(
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
    units: str | None = Query(None),
    client: httpx.AsyncClient = Depends(get_http_client),
) -> JSONResponse:
    report = await get_weather_report(client, query=WeatherQuery(latitude=lat, longitude=lon, units=units))
    return JSONResponse(report.to_document())
