from src.dispatch.models.domain import Stop
from src.dispatch.services.geospatial import haversine_km
from src.dispatch.services.routing.matrix import build_distance_matrix


def _stop(sid: str, lat: float, lon: float) -> Stop:
    return Stop(identifier=sid, label=f"ORD-{sid}", latitude=lat, longitude=lon)


def test_empty_matrix():
    assert build_distance_matrix([]) == []


def test_single_stop_matrix():
    assert build_distance_matrix([_stop("A", 21.5, 39.2)]) == [[0.0]]


def test_matrix_entries_match_distance_function():
    stops = [_stop("A", 21.5, 39.2), _stop("B", 21.55, 39.25), _stop("C", 21.6, 39.1)]
    matrix = build_distance_matrix(stops)

    assert len(matrix) == 3
    assert all(len(row) == 3 for row in matrix)
    for i, origin in enumerate(stops):
        for j, destination in enumerate(stops):
            if i == j:
                continue
            assert matrix[i][j] == haversine_km(
                origin.latitude, origin.longitude, destination.latitude, destination.longitude
            )


def test_matrix_diagonal_is_exactly_zero():
    stops = [
        _stop("A", 21.123456789, 39.987654321),
        _stop("B", -33.8688, 151.2093),
        _stop("C", 0.0000001, -0.0000001),
        _stop("D", 89.99999, 179.99999),
    ]
    matrix = build_distance_matrix(stops)
    for i in range(len(stops)):
        assert matrix[i][i] == 0.0


def test_duplicate_locations_have_zero_distance():
    stops = [_stop("A", 21.5, 39.2), _stop("B", 21.5, 39.2)]
    matrix = build_distance_matrix(stops)
    assert matrix[0][1] < 1e-9
    assert matrix[1][0] < 1e-9
