"""Journey generation: reachable area -> bearing -> boundary point -> destination."""

from __future__ import annotations

import asyncio
import random
from collections.abc import Awaitable
from typing import Optional, TypeVar

from journey.domain.constants import DEFAULT_CANDIDATE_LIMIT, DEFAULT_TRAVEL_MODE
from journey.domain.enums import TravelMode
from journey.domain.exceptions import GeometryError, NoCandidateError, UnreachableAreaError
from journey.domain.models import Coordinate, Journey
from journey.planner.geometry import (
    assemble_polygon,
    contains,
    points_within_polygon,
    ray_intersect,
    sample_bearing,
)
from journey.shared.exceptions import ProviderError, ProviderResponseError, ProviderTransportError
from journey.tools.interfaces import IsochroneInput, IsochroneTool, PlaceSearchInput, PlaceTool

T = TypeVar("T")


def effective_budget(duration_minutes: int, is_one_way: bool) -> float:
    """Outbound time budget.

    A round trip must get there and back inside ``duration_minutes``, so the
    reachable area is queried with exactly half of it.
    """
    if is_one_way:
        return float(duration_minutes)
    return duration_minutes / 2


async def _call_provider(name: str, call: Awaitable[T]) -> T:
    try:
        return await call
    except ProviderError:
        raise
    except (OSError, asyncio.TimeoutError) as exc:
        raise ProviderTransportError(name, f"{type(exc).__name__}: {exc}") from exc
    except (KeyError, TypeError, ValueError) as exc:
        raise ProviderResponseError(name, f"malformed response: {type(exc).__name__}: {exc}") from exc


class JourneyEngine:
    """Composes the reachable-area and candidate providers into one Journey.

    The engine holds no per-request state; concurrent ``generate`` calls are
    independent as long as they do not share an unsynchronized ``rng``.
    """

    def __init__(
        self,
        isochrone_tool: IsochroneTool,
        place_tool: PlaceTool,
        *,
        travel_mode: TravelMode = DEFAULT_TRAVEL_MODE,
        candidate_limit: int = DEFAULT_CANDIDATE_LIMIT,
    ) -> None:
        self._isochrone_tool = isochrone_tool
        self._place_tool = place_tool
        self.travel_mode = TravelMode(travel_mode)
        self.candidate_limit = candidate_limit

    async def generate(
        self,
        origin: Coordinate,
        is_one_way: bool,
        duration_minutes: int,
        category: str,
        *,
        rng: Optional[random.Random] = None,
    ) -> Journey:
        if isinstance(duration_minutes, bool) or not isinstance(duration_minutes, int) or duration_minutes <= 0:
            raise ValueError(f"duration_minutes must be a positive integer, got {duration_minutes!r}")
        category = str(category or "").strip()
        if not category:
            raise ValueError("category must be a non-empty string")
        rng = rng or random.Random()

        budget = effective_budget(duration_minutes, is_one_way)
        features = await _call_provider(
            "isochrone",
            self._isochrone_tool.fetch_isochrone(
                IsochroneInput(origin=origin, mode=self.travel_mode, minutes=budget)
            ),
        )
        if not features:
            raise UnreachableAreaError(
                f"no reachable-area boundary for {budget:g} min by {self.travel_mode.value} from {origin}"
            )
        try:
            contour = assemble_polygon(features)
        except GeometryError as exc:
            raise UnreachableAreaError(f"reachable-area boundary is unusable: {exc}") from exc
        if not contains(contour, origin):
            raise UnreachableAreaError(f"reachable-area boundary does not contain the origin {origin}")

        bearing = sample_bearing(rng)
        bearing_point = ray_intersect(origin, bearing, contour)

        bounds = contour.bounds()
        raw_candidates = await _call_provider(
            "places",
            self._place_tool.search_places(
                PlaceSearchInput(
                    category=category,
                    proximity=bearing_point,
                    bbox=bounds,
                    limit=self.candidate_limit,
                )
            ),
        )
        candidates = points_within_polygon(raw_candidates, contour, key=lambda c: c.coordinate)
        if not candidates:
            raise NoCandidateError(category, bearing_point, bounds)

        chosen = rng.choice(candidates)
        return Journey(
            origin_point=origin,
            contour_ring=contour,
            bearing=bearing,
            bearing_point=bearing_point,
            destination_point=chosen.coordinate,
            destination_poi=chosen,
            travel_mode=self.travel_mode,
            budget_minutes=budget,
        )


__all__ = ["JourneyEngine", "effective_budget"]
