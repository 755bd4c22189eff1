"""Pairwise great-circle distance matrix for a list of stops."""

from __future__ import annotations

from typing import Sequence

from ...models.domain import Stop
from ..geospatial import haversine_km


def build_distance_matrix(stops: Sequence[Stop]) -> list[list[float]]:
    """Return an N x N matrix of haversine distances in kilometers.

    The diagonal is set to exactly ``0.0`` rather than computed, so a stop's
    distance to itself never carries floating point noise.
    """
    count = len(stops)
    matrix = [[0.0] * count for _ in range(count)]

    for i, origin in enumerate(stops):
        for j, destination in enumerate(stops):
            if i == j:
                continue
            matrix[i][j] = haversine_km(
                origin.latitude,
                origin.longitude,
                destination.latitude,
                destination.longitude,
            )

    return matrix
