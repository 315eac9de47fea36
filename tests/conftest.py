import numpy as np
import pytest

from common.types import GeographicCoordinate, UTMCoordinate


@pytest.fixture
def dominican_grid():
    """Geographic points covering the Dominican Republic bounding region."""
    lats = np.linspace(17.5, 20.0, 11)
    lons = np.linspace(-72.0, -68.0, 17)
    return [GeographicCoordinate(float(lat), float(lon)) for lat in lats for lon in lons]


@pytest.fixture
def permit_vertices():
    """Vertex records as the extraction pipeline returns them."""
    return [
        {"x": 561063, "y": 2066147, "zone": "19Q", "label": "Vértice 1"},
        {"x": 561047, "y": 2066132, "zone": "19Q", "label": "Vértice 2"},
        {"x": 561019, "y": 2066142, "zone": "19Q", "label": "Vértice 3"},
    ]


@pytest.fixture
def anchor_utm():
    return UTMCoordinate(easting=561063, northing=2066147, zone="19Q")
