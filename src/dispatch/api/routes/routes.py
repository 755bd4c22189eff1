"""Routing endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from ...schemas.routing import OptimizeRequest, OptimizeResponse, RouteDistanceRequest, RouteDistanceResponse
from ...services.routing.service import evaluate_route_distance, optimize_stops

router = APIRouter(prefix="/routes", tags=["routes"])


@router.post("/optimize", response_model=OptimizeResponse, status_code=status.HTTP_200_OK)
def optimize(payload: OptimizeRequest) -> OptimizeResponse:
    try:
        return optimize_stops(payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception(f"Error optimizing route: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to optimize route: {str(exc)}"
        ) from exc


@router.post("/distance", response_model=RouteDistanceResponse, status_code=status.HTTP_200_OK)
def distance(payload: RouteDistanceRequest) -> RouteDistanceResponse:
    """Total great-circle distance of a given stop sequence."""
    try:
        return evaluate_route_distance(payload)
    except Exception as exc:
        logging.exception(f"Error calculating route distance: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to calculate route distance: {str(exc)}"
        ) from exc
