import logging
from typing import Iterable, List, Optional

import httpx

from ..config import settings
from ..errors import PlacesUnavailableError
from ..models import PlacesResult
from .geocode import resolve, use_client

logger = logging.getLogger(__name__)

NO_PLACES_NOTE = "No major tourist attractions found in database"
CATEGORY_FILTERS = (
    '["tourism"="attraction"]',
    '["tourism"="museum"]',
    '["historic"]',
    '["leisure"="park"]',
)


def build_query(lat: float, lon: float, radius: int) -> str:
    nodes = "\n".join(
        f"  node{tag}(around:{radius},{lat},{lon});" for tag in CATEGORY_FILTERS
    )
    return f"[out:json][timeout:25];\n(\n{nodes}\n);\nout body 20;\n"


def collect_place_names(elements: Iterable[dict], limit: int = 5) -> List[str]:
    """Named elements only, first occurrence of each name wins, at most `limit`."""
    names: List[str] = []
    seen = set()
    for el in elements:
        tags = el.get("tags") or {}
        name = tags.get("name")
        if not name or name in seen:
            continue
        seen.add(name)
        names.append(name)
        if len(names) >= limit:
            break
    return names


async def fetch_places(place_name: str, client: Optional[httpx.AsyncClient] = None) -> PlacesResult:
    """
    Query Overpass for attractions, museums, historic features and parks
    around the place. An empty neighbourhood is a result with a note, not an error.
    """
    try:
        async with use_client(client) as c:
            location = await resolve(place_name, client=c)
            query = build_query(location.latitude, location.longitude, settings.places_radius_m)
            r = await c.post(settings.overpass_url, data={"data": query}, headers=settings.headers)
            r.raise_for_status()
            elements = r.json()["elements"]
            names = collect_place_names(elements, limit=settings.places_limit)
    except Exception as e:
        logger.warning("Places lookup failed for %r: %s", place_name, e)
        raise PlacesUnavailableError(place_name) from e

    if not names:
        return PlacesResult(names=[], place_name=place_name, note=NO_PLACES_NOTE)
    return PlacesResult(names=names, place_name=place_name)
