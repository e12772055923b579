"""
Keyword heuristics that turn a free-text travel request into an Intent.

Only the first word left after stripping filler phrases is kept as the place
name, so "New York" comes out as "New". That is a known limitation of the
heuristic, not something to patch here.
"""
import re
from typing import Optional

from ..models import Intent

WEATHER_KEYWORDS = ("weather", "temperature", "rain", "climate")
PLACES_KEYWORDS = ("place", "visit", "attraction", "trip", "plan", "see", "go to")

# Order matters: longer phrases must go before the phrases they contain.
FILLER_PATTERNS = [
    re.compile(p, re.IGNORECASE)
    for p in (
        r"i'm going to ",
        r"i am going to ",
        r"going to ",
        r"visit ",
        r"trip to ",
        r"plan my trip",
        r"let's plan",
        r"what is the temperature",
        r"what are the places",
        r"can i visit",
        r"what is the weather",
        r"\bthere\b",
        r"\?",
        r",",
    )
]


def wants_weather(text: str) -> bool:
    lower = text.lower()
    return any(k in lower for k in WEATHER_KEYWORDS)


def wants_places(text: str) -> bool:
    lower = text.lower()
    return any(k in lower for k in PLACES_KEYWORDS)


def extract_place_name(text: str) -> str:
    clean = text
    for pattern in FILLER_PATTERNS:
        clean = pattern.sub("", clean)
    clean = clean.strip()
    words = clean.split()
    return words[0] if words else clean


def extract(text: Optional[str]) -> Intent:
    text = text or ""
    weather = wants_weather(text)
    places = wants_places(text)
    if not weather and not places:
        # nothing asked for explicitly: show everything
        weather = places = True
    return Intent(
        place_name=extract_place_name(text),
        wants_weather=weather,
        wants_places=places,
    )
