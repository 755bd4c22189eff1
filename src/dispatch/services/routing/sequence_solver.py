"""Nearest-neighbor sequencing for a single delivery route.

The first stop in the input is the starting point and always stays first.
From there the route repeatedly moves to the closest stop not yet visited,
using a precomputed haversine distance matrix. This is a greedy heuristic:
fast and deterministic, but not guaranteed to find the shortest route.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

from ...models.domain import Stop
from ..geospatial import haversine_km
from .duration import SINGLE_STOP_DURATION_MIN, estimate_duration_minutes
from .matrix import build_distance_matrix
from .models import NEAREST_NEIGHBOR, OptimizedRoute

logger = logging.getLogger(__name__)


def _round_km(value: float) -> float:
    return round(value * 100) / 100


def optimize_route_nearest_neighbor(stops: Sequence[Stop]) -> OptimizedRoute:
    """Order ``stops`` greedily by nearest unvisited neighbor.

    Args:
        stops: Stops with coordinates. The first one is treated as the depot.

    Returns:
        OptimizedRoute with identifiers in visiting order, total distance in
        kilometers (2 decimals) and the estimated duration in minutes.
    """
    if not stops:
        return OptimizedRoute(
            sequence=(),
            total_distance=0.0,
            estimated_duration=0,
            algorithm_name=NEAREST_NEIGHBOR,
        )

    if len(stops) == 1:
        return OptimizedRoute(
            sequence=(stops[0].identifier,),
            total_distance=0.0,
            estimated_duration=SINGLE_STOP_DURATION_MIN,
            algorithm_name=NEAREST_NEIGHBOR,
        )

    logger.info(f"Optimizing route with {len(stops)} stops")

    distance_matrix = build_distance_matrix(stops)
    count = len(stops)

    visited = [False] * count
    order: list[int] = [0]
    visited[0] = True
    current = 0
    total_distance = 0.0
    logger.debug(f"Start: {stops[0].label}")

    while len(order) < count:
        nearest_index = -1
        nearest_distance = math.inf

        for candidate in range(count):
            if visited[candidate]:
                continue
            distance = distance_matrix[current][candidate]
            # Strict comparison keeps the earliest stop on ties.
            if distance < nearest_distance:
                nearest_index = candidate
                nearest_distance = distance

        visited[nearest_index] = True
        order.append(nearest_index)
        total_distance += nearest_distance
        logger.debug(f"-> {stops[nearest_index].label} (+{nearest_distance:.2f} km)")
        current = nearest_index

    estimated_duration = estimate_duration_minutes(total_distance, count)
    logger.info(f"Optimization complete: {total_distance:.2f} km, {estimated_duration} min")

    return OptimizedRoute(
        sequence=tuple(stops[index].identifier for index in order),
        total_distance=_round_km(total_distance),
        estimated_duration=estimated_duration,
        algorithm_name=NEAREST_NEIGHBOR,
    )


def calculate_route_distance(stops: Sequence[Stop], sequence: Sequence[str]) -> float:
    """Total haversine distance along ``sequence``, rounded to 2 decimals.

    Consecutive pairs where either identifier is unknown contribute nothing;
    the gap is not bridged to the next known stop.
    """
    if len(sequence) <= 1:
        return 0.0

    lookup = {stop.identifier: stop for stop in stops}
    total_distance = 0.0

    for from_id, to_id in zip(sequence, sequence[1:]):
        origin = lookup.get(from_id)
        destination = lookup.get(to_id)
        if origin is None or destination is None:
            continue
        total_distance += haversine_km(
            origin.latitude,
            origin.longitude,
            destination.latitude,
            destination.longitude,
        )

    return _round_km(total_distance)
