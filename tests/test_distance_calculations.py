import numpy as np
import pytest

from common.types import GeographicCoordinate as G
from geospatial.distance_calculations import (
    distance_in,
    geodesic_distance,
    haversine_distance,
    haversine_distance_batch,
    polygon_perimeter,
)

SANTO_DOMINGO = G(18.4861, -69.9312)
SANTIAGO = G(19.4517, -70.6970)


def test_known_city_distance():
    assert haversine_distance(SANTO_DOMINGO, SANTIAGO) == pytest.approx(134_212, abs=5)


def test_one_degree_of_longitude_on_equator():
    assert haversine_distance(G(0, 0), G(0, 1)) == pytest.approx(111_194.93, abs=0.01)


def test_symmetry():
    assert haversine_distance(SANTO_DOMINGO, SANTIAGO) == haversine_distance(SANTIAGO, SANTO_DOMINGO)


def test_identity():
    assert haversine_distance(SANTO_DOMINGO, SANTO_DOMINGO) == 0.0


def test_antipodal_points_are_half_circumference():
    d = haversine_distance(G(0, 0), G(0, 180))
    assert d == pytest.approx(np.pi * 6_371_000)


def test_batch_matches_scalar():
    lat1 = np.array([18.4861, 0.0, 18.0])
    lon1 = np.array([-69.9312, 0.0, -70.0])
    lat2 = np.array([19.4517, 0.0, 18.0])
    lon2 = np.array([-70.6970, 1.0, -70.0])
    batch = haversine_distance_batch(lat1, lon1, lat2, lon2)
    for i in range(3):
        assert batch[i] == pytest.approx(haversine_distance(G(lat1[i], lon1[i]), G(lat2[i], lon2[i])))


def test_batch_broadcasts_one_point_to_many():
    d = haversine_distance_batch(18.4861, -69.9312, np.array([18.4861, 19.4517]), np.array([-69.9312, -70.6970]))
    assert d.shape == (2,)
    assert d[0] == 0.0


def test_spherical_and_ellipsoidal_distances_are_close():
    spherical = haversine_distance(SANTO_DOMINGO, SANTIAGO)
    ellipsoidal = geodesic_distance(SANTO_DOMINGO, SANTIAGO)
    assert abs(spherical - ellipsoidal) / ellipsoidal < 0.005


def test_polygon_perimeter_closes_the_ring():
    square = [G(0, 0), G(0, 1), G(1, 1), G(1, 0)]
    edge_equator = haversine_distance(G(0, 0), G(0, 1))
    edge_meridian = haversine_distance(G(0, 0), G(1, 0))
    edge_top = haversine_distance(G(1, 0), G(1, 1))
    assert polygon_perimeter(square) == pytest.approx(edge_equator + 2 * edge_meridian + edge_top)


def test_polygon_perimeter_degenerate():
    assert polygon_perimeter([]) == 0.0
    assert polygon_perimeter([SANTIAGO]) == 0.0


def test_distance_in_other_units():
    meters = haversine_distance(SANTO_DOMINGO, SANTIAGO)
    assert distance_in(SANTO_DOMINGO, SANTIAGO, "km") == pytest.approx(meters / 1000)
    assert distance_in(SANTO_DOMINGO, SANTIAGO) == pytest.approx(meters)


def test_distance_in_rejects_non_length_unit():
    with pytest.raises(ValueError):
        distance_in(SANTO_DOMINGO, SANTIAGO, "second")
