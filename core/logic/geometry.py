# ============================================================================
# PARCEL GEOMETRY UTILITIES
# ============================================================================
# STATUS: Core - Pure geometry functions over parcel rings
# PURPOSE: Area, centroid, bounds, zoom, path/polyline encoding, GeoJSON conversion
# EXPORTS: DEGREE_TO_METERS, calculate_polygon_area, calculate_centroid,
#          calculate_bounds, calculate_zoom_level, encode_path, encode_polyline,
#          coordinates_to_geojson, geojson_to_coordinates, build_ring
# DEPENDENCIES: shapely
# ============================================================================
"""
Parcel Geometry Utilities.

A parcel ring is an ordered list of GeographicCoordinate, open (first point
not repeated). Planar computations treat longitude as x and latitude as y.

Area uses a flat-earth approximation: one degree is taken as 111,000 m on
both axes. It is not a geodesic area.

Exports:
    DEGREE_TO_METERS: Metres per degree used by the area approximation
    calculate_polygon_area: Approximate area in square metres
    calculate_centroid: Arithmetic mean of the vertices
    calculate_bounds: Bounding box of the vertices
    calculate_zoom_level: Static map zoom for the ring's spread
    encode_path: Plain "lat,lng|..." path, closed
    encode_polyline: Google encoded polyline, closed
    coordinates_to_geojson: Closed GeoJSON Polygon
    geojson_to_coordinates: Open ring from a GeoJSON Polygon
    build_ring: Ring with generated vertex ids from (lng, lat) pairs
"""

import math
import uuid
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from shapely.errors import ShapelyError
from shapely.geometry import MultiPoint, Polygon, mapping, shape

from ..models.geo import GeographicCoordinate
from util_logger import LoggerFactory, ComponentType

logger = LoggerFactory.create_logger(ComponentType.CODEC, "Geometry")

DEGREE_TO_METERS = 111000

# (spread threshold in degrees, zoom) - first threshold exceeded wins
_ZOOM_THRESHOLDS = (
    (0.1, 12),
    (0.05, 13),
    (0.02, 14),
    (0.01, 15),
    (0.005, 16),
)
_MAX_ZOOM = 17


def _xy(coords: Sequence[GeographicCoordinate]) -> List[Tuple[float, float]]:
    return [(c.longitude, c.latitude) for c in coords]


def _closed(coords: Sequence[GeographicCoordinate]) -> List[GeographicCoordinate]:
    return list(coords) + [coords[0]]


# ============================================================================
# MEASUREMENT
# ============================================================================

def calculate_polygon_area(coords: Sequence[GeographicCoordinate]) -> int:
    """
    Approximate parcel area in square metres.

    Planar shoelace area in square degrees, scaled by DEGREE_TO_METERS
    squared and rounded half-up.

    Args:
        coords: Open ring

    Returns:
        Area in m², 0 for fewer than 3 points
    """
    if len(coords) < 3:
        return 0
    area_deg = Polygon(_xy(coords)).area
    return int(math.floor(area_deg * DEGREE_TO_METERS * DEGREE_TO_METERS + 0.5))


def calculate_centroid(coords: Sequence[GeographicCoordinate]) -> Tuple[float, float]:
    """
    Arithmetic mean of the vertices as (lat, lng).

    This is the vertex mean, not the area centroid; (0, 0) for an empty ring.
    """
    if not coords:
        return (0.0, 0.0)
    lat = sum(c.latitude for c in coords) / len(coords)
    lng = sum(c.longitude for c in coords) / len(coords)
    return (lat, lng)


def calculate_bounds(coords: Sequence[GeographicCoordinate]) -> Optional[Dict[str, float]]:
    """
    Bounding box of the vertices.

    Returns:
        Dict with min_lat, max_lat, min_lng, max_lng; None for an empty ring
    """
    if not coords:
        return None
    min_lng, min_lat, max_lng, max_lat = MultiPoint(_xy(coords)).bounds
    return {
        'min_lat': min_lat,
        'max_lat': max_lat,
        'min_lng': min_lng,
        'max_lng': max_lng,
    }


def calculate_zoom_level(coords: Sequence[GeographicCoordinate]) -> int:
    """
    Static map zoom level for the ring's spread.

    Spread is the larger of the latitude and longitude extents in degrees.

    Returns:
        12 (widest) through 17 (closest); 17 for fewer than 2 points
    """
    if len(coords) < 2:
        return _MAX_ZOOM
    bounds = calculate_bounds(coords)
    spread = max(bounds['max_lat'] - bounds['min_lat'], bounds['max_lng'] - bounds['min_lng'])
    for threshold, zoom in _ZOOM_THRESHOLDS:
        if spread > threshold:
            return zoom
    return _MAX_ZOOM


# ============================================================================
# ENCODING
# ============================================================================

def encode_path(coords: Sequence[GeographicCoordinate]) -> str:
    """
    Plain static-map path: "lat,lng" pairs joined by "|", closed.

    Returns:
        Encoded path; "" for an empty ring
    """
    if not coords:
        return ""
    return "|".join(f"{c.latitude},{c.longitude}" for c in _closed(coords))


def _encode_signed(value: int) -> str:
    value = ~(value << 1) if value < 0 else value << 1
    chunks = []
    while value >= 0x20:
        chunks.append(chr((0x20 | (value & 0x1f)) + 63))
        value >>= 5
    chunks.append(chr(value + 63))
    return "".join(chunks)


def encode_polyline(coords: Sequence[GeographicCoordinate]) -> str:
    """
    Google encoded polyline (1e5 precision) of the closed ring.

    Shorter than encode_path for rings with many vertices.
    """
    if not coords:
        return ""
    result = []
    prev_lat = prev_lng = 0
    for c in _closed(coords):
        lat = int(round(c.latitude * 1e5))
        lng = int(round(c.longitude * 1e5))
        result.append(_encode_signed(lat - prev_lat))
        result.append(_encode_signed(lng - prev_lng))
        prev_lat, prev_lng = lat, lng
    return "".join(result)


# ============================================================================
# GEOJSON
# ============================================================================

def build_ring(points: Iterable[Tuple[float, float]]) -> List[GeographicCoordinate]:
    """
    Build an open ring from (lng, lat) pairs with generated vertex ids.

    Ids have the form C-<uuid>-<index>; the uuid is shared by one ring.
    A trailing point equal to the first one is dropped.

    Raises:
        pydantic.ValidationError: Latitude or longitude out of range
    """
    pairs = list(points)
    if len(pairs) > 1 and pairs[0] == pairs[-1]:
        pairs = pairs[:-1]
    ring_id = uuid.uuid4().hex
    return [
        GeographicCoordinate(id=f"C-{ring_id}-{i}", latitude=lat, longitude=lng)
        for i, (lng, lat) in enumerate(pairs)
    ]


def coordinates_to_geojson(coords: Sequence[GeographicCoordinate]) -> Optional[Dict[str, Any]]:
    """
    Closed GeoJSON Polygon ([lng, lat] order) for the ring.

    Returns:
        GeoJSON geometry dict, None for fewer than 3 points
    """
    if len(coords) < 3:
        return None
    geometry = mapping(Polygon(_xy(coords)))
    return {
        'type': geometry['type'],
        'coordinates': [[list(point) for point in ring] for ring in geometry['coordinates']],
    }


def geojson_to_coordinates(geojson: Optional[Dict[str, Any]]) -> List[GeographicCoordinate]:
    """
    Open ring from the exterior of a GeoJSON Polygon.

    A MultiPolygon contributes its first polygon. Missing or unreadable
    input yields an empty list.
    """
    if not geojson:
        return []
    try:
        geometry = shape(geojson)
        if geometry.geom_type == 'MultiPolygon':
            geometry = geometry.geoms[0]
        if geometry.geom_type != 'Polygon' or geometry.is_empty:
            logger.debug(f"Ignoring GeoJSON geometry of type {geometry.geom_type}")
            return []
        return build_ring((x, y) for x, y, *_ in geometry.exterior.coords)
    except (ShapelyError, ValueError, TypeError, KeyError, AttributeError, IndexError) as e:
        logger.debug(f"Unreadable GeoJSON polygon: {e}")
        return []
