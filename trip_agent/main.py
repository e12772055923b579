from fastapi import FastAPI, HTTPException

from .config import configure_logging
from .errors import PlannerBusyError
from .models import AggregateOutcome, PlanRequest, PlanResponse, PlannerStatus
from .planner import UNKNOWN_PLACE_MESSAGE, default_planner

configure_logging()

EXAMPLE_QUERIES = [
    "I'm going to Bangalore, let's plan my trip",
    "I'm going to Paris, what is the temperature there?",
    "I'm going to Tokyo, what is the weather and what places can I visit?",
]

app = FastAPI(title="Trip Planning Agent")
planner = default_planner


def format_reply(outcome: AggregateOutcome) -> str:
    if outcome.error:
        return outcome.error
    if outcome.all_failed:
        return UNKNOWN_PLACE_MESSAGE

    place = outcome.place_name
    parts = []

    # Weather
    w = outcome.weather
    if w is not None:
        parts.append(
            f"In {place} it's currently {w.temperature_celsius}°C"
            f" with a chance of {w.precipitation_probability_percent}% to rain."
        )

    # Places
    p = outcome.places
    if p is not None:
        if p.names:
            names = "\n".join(f"- {name}" for name in p.names)
            parts.append(f"And these are the places you can go:\n{names}")
        else:
            parts.append("I couldn't find tourist places nearby.")

    return " ".join(parts)


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/examples")
def examples():
    return {"examples": EXAMPLE_QUERIES}


@app.get("/status", response_model=PlannerStatus)
def status():
    return PlannerStatus(busy=planner.busy, phase=planner.phase)


@app.post("/plan", response_model=PlanResponse)
async def plan(req: PlanRequest):
    try:
        outcome = await planner.plan(req.query)
    except PlannerBusyError as e:
        raise HTTPException(status_code=409, detail=str(e))

    ok = outcome.error is None and not outcome.all_failed
    return PlanResponse(ok=ok, text=format_reply(outcome), outcome=outcome)
