import logging
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

NOMINATIM_URL = "https://nominatim.openstreetmap.org/search"
OPEN_METEO_URL = "https://api.open-meteo.com/v1/forecast"
OVERPASS_URL = "https://overpass-api.de/api/interpreter"
DEFAULT_USER_AGENT = "trip-agent/1.0 (contact: trip-agent@example.com)"


class Settings:
    """Environment-backed settings, read once at import time."""

    def __init__(self) -> None:
        self.nominatim_url: str = os.getenv("NOMINATIM_URL", NOMINATIM_URL)
        self.open_meteo_url: str = os.getenv("OPEN_METEO_URL", OPEN_METEO_URL)
        self.overpass_url: str = os.getenv("OVERPASS_URL", OVERPASS_URL)
        self.user_agent: str = os.getenv("USER_AGENT", DEFAULT_USER_AGENT)
        self.http_timeout: float = float(os.getenv("HTTP_TIMEOUT", "20.0"))
        self.places_radius_m: int = int(os.getenv("PLACES_RADIUS_M", "15000"))
        self.places_limit: int = int(os.getenv("PLACES_LIMIT", "5"))
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def headers(self) -> dict:
        return {"User-Agent": self.user_agent, "Accept-Language": "en"}


settings = Settings()


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
