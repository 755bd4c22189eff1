"""Routing domain models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

NEAREST_NEIGHBOR = "nearest_neighbor"


@dataclass(frozen=True, slots=True)
class OptimizedRoute:
    sequence: Tuple[str, ...]
    total_distance: float
    estimated_duration: int
    algorithm_name: str = NEAREST_NEIGHBOR

    @property
    def stop_count(self) -> int:
        return len(self.sequence)
