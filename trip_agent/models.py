from enum import Enum
from pydantic import BaseModel, Field
from typing import List, Optional


class Facet(str, Enum):
    WEATHER = "weather"
    PLACES = "places"


class Phase(str, Enum):
    IDLE = "idle"
    EXTRACTING = "extracting"
    DISPATCHING = "dispatching"
    JOINING = "joining"
    DONE = "done"
    ERRORED = "errored"


class PlanRequest(BaseModel):
    query: str  # e.g. "I'm going to Paris, what is the temperature there?"


class Intent(BaseModel):
    place_name: str
    wants_weather: bool
    wants_places: bool

    @property
    def facets(self) -> List[Facet]:
        facets = []
        if self.wants_weather:
            facets.append(Facet.WEATHER)
        if self.wants_places:
            facets.append(Facet.PLACES)
        return facets


class Coordinate(BaseModel):
    latitude: float
    longitude: float
    display_name: str


class WeatherResult(BaseModel):
    temperature_celsius: float
    precipitation_probability_percent: int = 0
    place_name: str


class PlacesResult(BaseModel):
    names: List[str] = Field(default_factory=list)
    place_name: str
    note: Optional[str] = None


class FacetReport(BaseModel):
    facet: Facet
    ok: bool
    error: Optional[str] = None


class AggregateOutcome(BaseModel):
    place_name: Optional[str] = None
    weather: Optional[WeatherResult] = None
    places: Optional[PlacesResult] = None
    error: Optional[str] = None
    reports: List[FacetReport] = Field(default_factory=list)
    phase: Phase = Phase.IDLE

    @property
    def all_failed(self) -> bool:
        return bool(self.reports) and not any(r.ok for r in self.reports)


class PlanResponse(BaseModel):
    ok: bool
    text: str
    outcome: AggregateOutcome


class PlannerStatus(BaseModel):
    busy: bool
    phase: Phase
