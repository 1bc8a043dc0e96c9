"""
Parcel geometry tests.

Tests the flat-earth area approximation, centroid, zoom thresholds and
path encodings.
"""

import pytest

from core.logic.geometry import (
    DEGREE_TO_METERS,
    calculate_polygon_area,
    calculate_centroid,
    calculate_bounds,
    calculate_zoom_level,
    encode_path,
    encode_polyline,
    coordinates_to_geojson,
    geojson_to_coordinates,
    build_ring,
)
from core.models import GeographicCoordinate


def _ring(*lat_lng):
    return [GeographicCoordinate(id=f"P{i}", latitude=lat, longitude=lng) for i, (lat, lng) in enumerate(lat_lng)]


def _decode_polyline(encoded):
    """Decode a polyline string back to (lat, lng) pairs."""
    values = []
    index = 0
    while index < len(encoded):
        result = shift = 0
        while True:
            byte = ord(encoded[index]) - 63
            index += 1
            result |= (byte & 0x1f) << shift
            shift += 5
            if byte < 0x20:
                break
        values.append(~(result >> 1) if result & 1 else result >> 1)
    points = []
    lat = lng = 0
    for d_lat, d_lng in zip(values[0::2], values[1::2]):
        lat += d_lat
        lng += d_lng
        points.append((lat / 1e5, lng / 1e5))
    return points


# ============================================================================
# AREA
# ============================================================================

class TestPolygonArea:

    def test_right_triangle_over_unit_box(self):
        coords = _ring((0, 0), (0, 1), (1, 0))
        assert calculate_polygon_area(coords) == round(0.5 * DEGREE_TO_METERS ** 2)

    def test_unit_square(self):
        coords = _ring((0, 0), (0, 1), (1, 1), (1, 0))
        assert calculate_polygon_area(coords) == DEGREE_TO_METERS ** 2

    def test_orientation_does_not_matter(self):
        clockwise = _ring((0, 0), (1, 0), (1, 1), (0, 1))
        counter = list(reversed(clockwise))
        assert calculate_polygon_area(clockwise) == calculate_polygon_area(counter)

    @pytest.mark.parametrize("count", [0, 1, 2])
    def test_fewer_than_three_points_is_zero(self, count):
        coords = _ring(*[(i * 0.001, i * 0.002) for i in range(count)])
        assert calculate_polygon_area(coords) == 0

    def test_collinear_points_zero(self):
        assert calculate_polygon_area(_ring((0, 0), (1, 1), (2, 2))) == 0

    def test_small_parcel_rounded_half_up(self):
        # 0.0001 x 0.0001 degree square -> 123.21 m²
        coords = _ring((-2.2, 113.9), (-2.2, 113.9001), (-2.1999, 113.9001), (-2.1999, 113.9))
        assert calculate_polygon_area(coords) == 123


# ============================================================================
# CENTROID, BOUNDS, ZOOM
# ============================================================================

class TestCentroid:

    def test_vertex_mean(self):
        assert calculate_centroid(_ring((0, 0), (0, 2), (2, 2), (2, 0))) == (1.0, 1.0)

    def test_empty_is_origin(self):
        assert calculate_centroid([]) == (0.0, 0.0)


class TestBounds:

    def test_bounds(self):
        bounds = calculate_bounds(_ring((-2.3, 113.8), (-2.1, 114.0), (-2.2, 113.9)))
        assert bounds == pytest.approx({'min_lat': -2.3, 'max_lat': -2.1, 'min_lng': 113.8, 'max_lng': 114.0})

    def test_empty_is_none(self):
        assert calculate_bounds([]) is None


class TestZoomLevel:

    @pytest.mark.parametrize("spread,zoom", [
        (0.2, 12),
        (0.1, 13),
        (0.06, 13),
        (0.03, 14),
        (0.015, 15),
        (0.007, 16),
        (0.005, 17),
        (0.001, 17),
    ])
    def test_thresholds(self, spread, zoom):
        coords = _ring((0, 0), (spread, 0), (0, spread / 2))
        assert calculate_zoom_level(coords) == zoom

    def test_longitude_spread_counts(self):
        coords = _ring((0, 0), (0.001, 0), (0, 0.2))
        assert calculate_zoom_level(coords) == 12

    @pytest.mark.parametrize("count", [0, 1])
    def test_fewer_than_two_points(self, count):
        assert calculate_zoom_level(_ring(*[(5, 5)] * count)) == 17


# ============================================================================
# ENCODING
# ============================================================================

class TestEncodePath:

    def test_closed_lat_lng_pairs(self):
        coords = _ring((-2.2, 113.9), (-2.21, 113.9), (-2.21, 113.91))
        assert encode_path(coords) == "-2.2,113.9|-2.21,113.9|-2.21,113.91|-2.2,113.9"

    def test_empty(self):
        assert encode_path([]) == ""


class TestEncodePolyline:

    def test_reference_example(self):
        # Reference points from the published polyline algorithm description
        coords = _ring((38.5, -120.2), (40.7, -120.95), (43.252, -126.453))
        encoded = encode_polyline(coords)
        assert encoded.startswith("_p~iF~ps|U_ulLnnqC_mqNvxq`@")

    def test_closing_point_appended(self):
        coords = _ring((38.5, -120.2), (40.7, -120.95), (43.252, -126.453))
        decoded = _decode_polyline(encode_polyline(coords))
        assert decoded == [(38.5, -120.2), (40.7, -120.95), (43.252, -126.453), (38.5, -120.2)]

    def test_empty(self):
        assert encode_polyline([]) == ""


# ============================================================================
# GEOJSON
# ============================================================================

class TestGeoJSON:

    def test_polygon_is_closed_lng_lat(self):
        geojson = coordinates_to_geojson(_ring((-2.2, 113.9), (-2.21, 113.9), (-2.21, 113.91)))
        assert geojson["type"] == "Polygon"
        ring = geojson["coordinates"][0]
        assert ring[0] == [113.9, -2.2]
        assert ring[0] == ring[-1]
        assert len(ring) == 4

    def test_too_few_points_is_none(self):
        assert coordinates_to_geojson(_ring((0, 0), (1, 1))) is None

    def test_back_to_open_ring(self):
        coords = _ring((-2.2, 113.9), (-2.21, 113.9), (-2.21, 113.91))
        restored = geojson_to_coordinates(coordinates_to_geojson(coords))
        assert [(c.latitude, c.longitude) for c in restored] == [(c.latitude, c.longitude) for c in coords]

    def test_restored_ids_share_ring_prefix(self):
        restored = geojson_to_coordinates(coordinates_to_geojson(_ring((0, 0), (0, 1), (1, 1))))
        prefixes = {c.id.rsplit("-", 1)[0] for c in restored}
        assert len(prefixes) == 1
        assert [c.id.rsplit("-", 1)[1] for c in restored] == ["0", "1", "2"]

    def test_multipolygon_uses_first_polygon(self):
        geojson = {
            "type": "MultiPolygon",
            "coordinates": [
                [[[0, 0], [1, 0], [1, 1], [0, 0]]],
                [[[5, 5], [6, 5], [6, 6], [5, 5]]],
            ],
        }
        restored = geojson_to_coordinates(geojson)
        assert [(c.longitude, c.latitude) for c in restored] == [(0, 0), (1, 0), (1, 1)]

    @pytest.mark.parametrize("geojson", [
        None,
        {},
        {"type": "Point", "coordinates": [1, 2]},
        {"type": "Polygon", "coordinates": [[[0, 0], [1, 1]]]},
        {"type": "Polygon"},
        {"type": "Polygon", "coordinates": [[[0, 95], [1, 95], [1, 96], [0, 95]]]},
    ], ids=["none", "empty", "point", "short-ring", "no-coordinates", "out-of-range"])
    def test_invalid_input_gives_empty_list(self, geojson):
        assert geojson_to_coordinates(geojson) == []


class TestBuildRing:

    def test_closing_duplicate_dropped(self):
        ring = build_ring([(113.9, -2.2), (113.91, -2.2), (113.91, -2.21), (113.9, -2.2)])
        assert len(ring) == 3
        assert (ring[0].longitude, ring[0].latitude) == (113.9, -2.2)
