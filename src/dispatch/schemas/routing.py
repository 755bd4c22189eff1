"""Routing request/response schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, FiniteFloat, field_validator, model_validator


class StopModel(BaseModel):
    identifier: str = Field(..., min_length=1, description="Caller reference, e.g. an order ID.")
    label: str = Field(default="", description="Human-readable reference such as the order number.")
    address: Optional[str] = None
    latitude: Optional[FiniteFloat] = None
    longitude: Optional[FiniteFloat] = None

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None


def _ensure_unique_identifiers(stops: List[StopModel]) -> None:
    seen: set[str] = set()
    duplicates: list[str] = []
    for stop in stops:
        if stop.identifier in seen and stop.identifier not in duplicates:
            duplicates.append(stop.identifier)
        seen.add(stop.identifier)
    if duplicates:
        raise ValueError(f"Duplicate stop identifiers: {', '.join(duplicates)}")


class OptimizeRequest(BaseModel):
    route_id: Optional[str] = Field(
        default=None,
        pattern=r"^[A-Za-z0-9_.-]+$",
        description="Route record the stops belong to, e.g. RT-000001.",
    )
    stops: List[StopModel] = Field(
        default_factory=list,
        description="Stops in their current order. The first stop with coordinates is the starting point.",
    )
    persist: bool = Field(default=False, description="Write summary.json and sequence.csv for this run.")
    run_label: Optional[str] = Field(default=None, description="Friendly name for persisted outputs.")

    @field_validator("route_id")
    @classmethod
    def _no_parent_reference(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and ".." in value:
            raise ValueError("route_id must not contain '..'")
        return value

    @model_validator(mode="after")
    def _unique_stops(self) -> "OptimizeRequest":
        _ensure_unique_identifiers(self.stops)
        return self


class OptimizeResponse(BaseModel):
    route_id: Optional[str] = None
    sequence: List[str]
    total_distance: float
    estimated_duration: int
    algorithm: str
    stops_optimized: int
    skipped_stop_ids: List[str] = Field(default_factory=list)
    metadata: dict = Field(default_factory=dict)


class RouteDistanceRequest(BaseModel):
    stops: List[StopModel]
    sequence: List[str]

    @model_validator(mode="after")
    def _unique_stops(self) -> "RouteDistanceRequest":
        _ensure_unique_identifiers(self.stops)
        return self


class RouteDistanceResponse(BaseModel):
    total_distance: float
    hops: int
