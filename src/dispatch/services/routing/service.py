"""Routing orchestration service."""

from __future__ import annotations

import logging
from typing import Sequence

from ...models.domain import Stop
from ...persistence.filesystem import FileStorage
from ...schemas.routing import (
    OptimizeRequest,
    OptimizeResponse,
    RouteDistanceRequest,
    RouteDistanceResponse,
    StopModel,
)
from ..outputs.routing_formatter import optimized_route_to_csv, optimized_route_to_json
from .sequence_solver import calculate_route_distance, optimize_route_nearest_neighbor


def _split_by_coordinates(stops: Sequence[StopModel]) -> tuple[list[Stop], list[str]]:
    located: list[Stop] = []
    skipped: list[str] = []
    for stop in stops:
        if not stop.has_coordinates:
            skipped.append(stop.identifier)
            continue
        located.append(
            Stop(
                identifier=stop.identifier,
                label=stop.label or stop.identifier,
                latitude=stop.latitude,
                longitude=stop.longitude,
                address=stop.address,
            )
        )
    return located, skipped


def optimize_stops(payload: OptimizeRequest) -> OptimizeResponse:
    if not payload.stops:
        raise ValueError("Cannot optimize route with no stops")

    stops, skipped = _split_by_coordinates(payload.stops)
    if not stops:
        raise ValueError("No stops have GPS coordinates. Please add coordinates to orders first.")
    if skipped:
        logging.warning(f"{len(skipped)} stops missing coordinates were left out of optimization")

    result = optimize_route_nearest_neighbor(stops)

    metadata: dict = {
        "status": "complete",
        "algorithm": result.algorithm_name,
    }
    if payload.route_id:
        metadata["route_id"] = payload.route_id
    if payload.run_label:
        metadata["run_label"] = payload.run_label

    if payload.persist:
        storage = FileStorage()
        run_dir = storage.make_run_directory(prefix=f"route_{payload.route_id or 'adhoc'}")
        summary = optimized_route_to_json(result, route_id=payload.route_id)
        if payload.run_label:
            summary["run_label"] = payload.run_label
        if skipped:
            summary["skipped_stop_ids"] = skipped
        storage.write_json(run_dir / "summary.json", summary)
        storage.write_csv(run_dir / "sequence.csv", optimized_route_to_csv(result, stops))
        metadata["output_dir"] = str(run_dir)
        logging.info(f"Saved optimization outputs to {run_dir}")

    return OptimizeResponse(
        route_id=payload.route_id,
        sequence=list(result.sequence),
        total_distance=result.total_distance,
        estimated_duration=result.estimated_duration,
        algorithm=result.algorithm_name,
        stops_optimized=result.stop_count,
        skipped_stop_ids=skipped,
        metadata=metadata,
    )


def evaluate_route_distance(payload: RouteDistanceRequest) -> RouteDistanceResponse:
    stops, _ = _split_by_coordinates(payload.stops)
    return RouteDistanceResponse(
        total_distance=calculate_route_distance(stops, payload.sequence),
        hops=max(len(payload.sequence) - 1, 0),
    )
