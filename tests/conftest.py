from urllib.parse import parse_qs

import httpx

PARIS = [{"lat": "48.8566", "lon": "2.3522", "display_name": "Paris, Île-de-France, France"}]
PARIS_WEATHER = {"current": {"temperature_2m": 18.4, "precipitation_probability": 35}}
PARIS_ELEMENTS = {
    "elements": [
        {"type": "node", "tags": {"name": "Louvre", "tourism": "museum"}},
        {"type": "node", "tags": {"tourism": "attraction"}},
        {"type": "node", "tags": {"name": "Eiffel Tower", "tourism": "attraction"}},
        {"type": "node", "tags": {"name": "Louvre", "historic": "building"}},
        {"type": "node"},
        {"type": "node", "tags": {"name": "Jardin du Luxembourg", "leisure": "park"}},
    ]
}


def fake_upstream(geocode=PARIS, weather=PARIS_WEATHER, places=PARIS_ELEMENTS, calls=None):
    """
    Build an httpx handler standing in for Nominatim, Open-Meteo and Overpass.
    A value may be JSON data, an int status code, or an exception to raise.
    """

    def reply(request, value):
        if isinstance(value, Exception):
            raise value
        if isinstance(value, int):
            return httpx.Response(value, request=request)
        return httpx.Response(200, json=value, request=request)

    def handler(request: httpx.Request) -> httpx.Response:
        host = request.url.host
        if calls is not None:
            calls.append(request)
        if "nominatim" in host:
            return reply(request, geocode)
        if "open-meteo" in host:
            return reply(request, weather)
        if "overpass" in host:
            return reply(request, places)
        return httpx.Response(404, request=request)

    return handler


def mock_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def overpass_query(request: httpx.Request) -> str:
    return parse_qs(request.content.decode())["data"][0]
