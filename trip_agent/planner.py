"""
Turns one free-text submission into an AggregateOutcome.

The planner extracts the intent, runs the requested facet fetchers side by
side and joins whatever settled. A facet that fails is reported and left
empty; it never takes the other facet down with it.
"""
import asyncio
import logging
from typing import Awaitable, Callable, Dict, Optional

import httpx

from .agents.intent import extract
from .agents.places import fetch_places
from .agents.weather import fetch_weather
from .config import settings
from .errors import EmptyQueryError, NoFacetRequestedError, PlannerBusyError
from .models import AggregateOutcome, Facet, FacetReport, Phase

logger = logging.getLogger(__name__)

UNKNOWN_PLACE_MESSAGE = "I don't know if this place exists. Please try another location."

Fetcher = Callable[..., Awaitable]


class TripPlanner:
    """Runs at most one plan() at a time; overlapping calls raise PlannerBusyError."""

    def __init__(
        self,
        weather_fetcher: Fetcher = fetch_weather,
        places_fetcher: Fetcher = fetch_places,
        client_factory: Optional[Callable[[], httpx.AsyncClient]] = None,
    ):
        self.fetchers: Dict[Facet, Fetcher] = {
            Facet.WEATHER: weather_fetcher,
            Facet.PLACES: places_fetcher,
        }
        self.client_factory = client_factory or (
            lambda: httpx.AsyncClient(timeout=settings.http_timeout, headers=settings.headers)
        )
        self.phase = Phase.IDLE
        self._busy = False

    @property
    def busy(self) -> bool:
        return self._busy

    async def plan(self, query: str) -> AggregateOutcome:
        if self._busy:
            raise PlannerBusyError()
        self._busy = True
        try:
            outcome = await self._plan(query)
        except BaseException:
            self.phase = Phase.ERRORED
            raise
        finally:
            self._busy = False
        self.phase = outcome.phase
        return outcome

    async def _plan(self, query: str) -> AggregateOutcome:
        if not (query or "").strip():
            return AggregateOutcome(error=str(EmptyQueryError()), phase=Phase.ERRORED)

        self.phase = Phase.EXTRACTING
        try:
            intent = extract(query)
        except Exception:
            logger.exception("Intent extraction failed for %r", query)
            return AggregateOutcome(error=UNKNOWN_PLACE_MESSAGE, phase=Phase.ERRORED)

        facets = intent.facets or [Facet.WEATHER, Facet.PLACES]
        place_name = intent.place_name
        # unreachable while the default above holds
        if not facets:
            return AggregateOutcome(
                place_name=place_name,
                error=str(NoFacetRequestedError()),
                phase=Phase.ERRORED,
            )

        self.phase = Phase.DISPATCHING
        logger.info("Planning %r: facets=%s", place_name, [f.value for f in facets])
        async with self.client_factory() as client:
            coros = [self.fetchers[f](place_name, client=client) for f in facets]
            self.phase = Phase.JOINING
            settled = await asyncio.gather(*coros, return_exceptions=True)

        results = {}
        reports = []
        for facet, res in zip(facets, settled):
            if isinstance(res, BaseException):
                logger.warning("%s facet failed for %r: %s", facet.value, place_name, res)
                reports.append(FacetReport(facet=facet, ok=False, error=str(res)))
            else:
                results[facet] = res
                reports.append(FacetReport(facet=facet, ok=True))

        return AggregateOutcome(
            place_name=place_name,
            weather=results.get(Facet.WEATHER),
            places=results.get(Facet.PLACES),
            reports=reports,
            phase=Phase.DONE,
        )


default_planner = TripPlanner()


async def plan(query: str) -> AggregateOutcome:
    return await default_planner.plan(query)
