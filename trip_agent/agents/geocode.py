# trip_agent/agents/geocode.py
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import httpx

from ..config import settings
from ..errors import GeocodeLookupError, PlaceNotFoundError
from ..models import Coordinate

logger = logging.getLogger(__name__)


@asynccontextmanager
async def use_client(client: Optional[httpx.AsyncClient] = None) -> AsyncIterator[httpx.AsyncClient]:
    """Yield the caller's client, or a short-lived one closed on exit."""
    if client is not None:
        yield client
        return
    async with httpx.AsyncClient(timeout=settings.http_timeout, headers=settings.headers) as own:
        yield own


async def resolve(place_name: str, client: Optional[httpx.AsyncClient] = None) -> Coordinate:
    """
    Resolve a free-text place name to its best-ranked Nominatim match.

    Raises PlaceNotFoundError when nothing matches and GeocodeLookupError
    when the lookup itself fails. Results are never cached.
    """
    place_name = (place_name or "").strip()
    if not place_name:
        raise PlaceNotFoundError(place_name)

    params = {"q": place_name, "format": "json", "limit": 1}
    try:
        async with use_client(client) as c:
            r = await c.get(settings.nominatim_url, params=params, headers=settings.headers)
            r.raise_for_status()
            data = r.json()
    except httpx.HTTPStatusError as e:
        raise GeocodeLookupError(
            f"Geocoding error {e.response.status_code} for {place_name!r}"
        ) from e
    except httpx.HTTPError as e:
        raise GeocodeLookupError(f"Network error while geocoding {place_name!r}: {e}") from e
    except ValueError as e:
        raise GeocodeLookupError(f"Malformed geocoding response for {place_name!r}") from e

    if not data:
        raise PlaceNotFoundError(place_name)

    try:
        first = data[0]
        coord = Coordinate(
            latitude=float(first["lat"]),
            longitude=float(first["lon"]),
            display_name=first.get("display_name") or place_name,
        )
    except (KeyError, IndexError, TypeError, ValueError) as e:
        raise GeocodeLookupError(f"Malformed geocoding response for {place_name!r}") from e

    logger.debug("Resolved %r to %s,%s", place_name, coord.latitude, coord.longitude)
    return coord
