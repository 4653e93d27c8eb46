"""Application service for journey generation use-cases.

The engine never retries. This is the caller that does: when no candidate
lies inside the reachable area it asks the engine again, which draws a new
bearing from the same random source.
"""

from __future__ import annotations

import random
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from journey.adapters.tool_factory import get_isochrone_tool, get_place_tool
from journey.config.settings import EngineSettings, load_engine_settings
from journey.domain.constants import MAX_BUDGET_MINUTES
from journey.domain.exceptions import DomainError, NoCandidateError
from journey.domain.models import Coordinate, Journey
from journey.infrastructure.logging import StructuredLogger
from journey.planner.engine import JourneyEngine, effective_budget
from journey.shared.exceptions import ProviderError


class JourneyRequest(BaseModel):
    origin: Coordinate
    is_one_way: bool = True
    duration_minutes: int = Field(default=30, ge=1, le=120)
    category: str = Field(default="coffee", min_length=1, max_length=64)
    seed: Optional[int] = None

    @model_validator(mode="after")
    def _budget_within_reach(self) -> "JourneyRequest":
        budget = effective_budget(self.duration_minutes, self.is_one_way)
        if budget > MAX_BUDGET_MINUTES:
            raise ValueError(
                f"outbound budget of {budget:g} minutes exceeds {MAX_BUDGET_MINUTES}; "
                "use a round trip or a shorter duration"
            )
        return self


def build_engine(settings: EngineSettings | None = None) -> JourneyEngine:
    settings = settings or load_engine_settings()
    return JourneyEngine(
        get_isochrone_tool(),
        get_place_tool(),
        travel_mode=settings.travel_mode,
        candidate_limit=settings.candidate_limit,
    )


async def generate_journey(
    request: JourneyRequest,
    *,
    engine: JourneyEngine | None = None,
    rng: random.Random | None = None,
    max_attempts: int | None = None,
    logger: StructuredLogger | None = None,
) -> Journey:
    """Run the engine, retrying with a fresh bearing on ``NoCandidateError``."""
    engine = engine or build_engine()
    rng = rng or random.Random(request.seed)
    attempts = max(1, max_attempts if max_attempts is not None else load_engine_settings().max_attempts)
    log = logger or StructuredLogger()

    log.start(
        "journey",
        origin=str(request.origin),
        is_one_way=request.is_one_way,
        duration_minutes=request.duration_minutes,
        category=request.category,
        max_attempts=attempts,
    )
    last_error: NoCandidateError | None = None
    for attempt in range(1, attempts + 1):
        try:
            journey = await engine.generate(
                request.origin,
                request.is_one_way,
                request.duration_minutes,
                request.category,
                rng=rng,
            )
        except NoCandidateError as exc:
            last_error = exc
            log.warning("journey", str(exc), attempt=attempt)
            continue
        except (DomainError, ProviderError) as exc:
            log.error("journey", str(exc), error_type=type(exc).__name__, attempts=attempt)
            raise
        log.end(
            "journey",
            attempts=attempt,
            bearing=round(journey.bearing, 3),
            destination=journey.destination_poi.place_name,
        )
        return journey

    log.error("journey", str(last_error), error_type="NoCandidateError", attempts=attempts)
    raise last_error  # type: ignore[misc]


__all__ = ["JourneyRequest", "build_engine", "generate_journey"]
