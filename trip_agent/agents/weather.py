import logging
from typing import Optional

import httpx

from ..config import settings
from ..errors import WeatherUnavailableError
from ..models import WeatherResult
from .geocode import resolve, use_client

logger = logging.getLogger(__name__)


def parse_current_weather(data: dict, place_name: str) -> WeatherResult:
    current = data["current"]
    temp = current["temperature_2m"]
    if temp is None:
        raise ValueError("temperature_2m missing from current weather")
    prob = current.get("precipitation_probability")
    return WeatherResult(
        temperature_celsius=float(temp),
        precipitation_probability_percent=int(prob or 0),
        place_name=place_name,
    )


async def fetch_weather(place_name: str, client: Optional[httpx.AsyncClient] = None) -> WeatherResult:
    try:
        async with use_client(client) as c:
            location = await resolve(place_name, client=c)
            params = {
                "latitude": location.latitude,
                "longitude": location.longitude,
                "current": "temperature_2m,precipitation_probability",
                "timezone": "auto",
            }
            r = await c.get(settings.open_meteo_url, params=params)
            r.raise_for_status()
            return parse_current_weather(r.json(), place_name)
    except Exception as e:
        logger.warning("Weather lookup failed for %r: %s", place_name, e)
        raise WeatherUnavailableError(place_name) from e
