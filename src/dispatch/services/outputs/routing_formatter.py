"""Serializers for optimized route outputs."""

from __future__ import annotations

import csv
import io
from typing import Sequence

from ...models.domain import Stop
from ..routing.models import OptimizedRoute


def optimized_route_to_json(result: OptimizedRoute, route_id: str | None = None) -> dict:
    return {
        "route_id": route_id,
        "algorithm": result.algorithm_name,
        "total_distance_km": result.total_distance,
        "estimated_duration_min": result.estimated_duration,
        "stop_count": result.stop_count,
        "sequence": list(result.sequence),
    }


def optimized_route_to_csv(result: OptimizedRoute, stops: Sequence[Stop]) -> str:
    buffer = io.StringIO()
    fieldnames = [
        "sequence",
        "identifier",
        "label",
        "address",
        "latitude",
        "longitude",
    ]
    writer = csv.DictWriter(buffer, fieldnames=fieldnames)
    writer.writeheader()
    lookup = {stop.identifier: stop for stop in stops}
    for position, identifier in enumerate(result.sequence, start=1):
        stop = lookup[identifier]
        writer.writerow(
            {
                "sequence": position,
                "identifier": stop.identifier,
                "label": stop.label,
                "address": stop.address or "",
                "latitude": stop.latitude,
                "longitude": stop.longitude,
            }
        )
    return buffer.getvalue()
