"""Travel time estimate for a sequenced route."""

from __future__ import annotations

# Urban delivery assumptions. Stored routes were computed with these values.
AVERAGE_SPEED_KMH = 40
SERVICE_TIME_PER_STOP_MIN = 5
SINGLE_STOP_DURATION_MIN = 10


def estimate_duration_minutes(total_distance_km: float, stop_count: int) -> int:
    """Driving time at the average speed plus a fixed service time per stop."""

    travel_minutes = (total_distance_km / AVERAGE_SPEED_KMH) * 60
    service_minutes = stop_count * SERVICE_TIME_PER_STOP_MIN
    return round(travel_minutes + service_minutes)
