# ============================================================================
# KMZ/KML COORDINATE IMPORT
# ============================================================================
# STATUS: Service - Parcel polygon import from Google Earth files
# PURPOSE: Extract the parcel ring from an uploaded KMZ (zipped KML) or KML
# EXPORTS: KMZParseResult, PolygonValidation, parse_kmz_bytes,
#          parse_kml_coordinates, validate_polygon_coordinates
# DEPENDENCIES: zipfile, xml.etree.ElementTree, core.logic.geometry
# ============================================================================
"""
KMZ/KML Coordinate Import.

Applicants may upload the parcel boundary drawn in Google Earth instead of
typing coordinates. A KMZ is a zip archive holding one KML document; the
first LinearRing with coordinates is taken as the parcel boundary.

KML coordinates are whitespace-separated "lng,lat[,alt]" tuples; the ring
is closed in KML and returned open here.

Exports:
    KMZParseResult: Outcome of an import (never raised)
    PolygonValidation: Outcome of the polygon sanity check
    parse_kmz_bytes: Import from KMZ bytes
    parse_kml_coordinates: Import from KML text
    validate_polygon_coordinates: Point count and duplicate vertex check
"""

import io
import zipfile
import zlib
import xml.etree.ElementTree as ET
from typing import List, Optional, Sequence

from pydantic import BaseModel, Field, ValidationError

from core.logic.geometry import build_ring
from core.models.geo import GeographicCoordinate
from util_logger import LoggerFactory, ComponentType

logger = LoggerFactory.create_logger(ComponentType.CODEC, "KMZParser")

MIN_POLYGON_POINTS = 3
MAX_POLYGON_POINTS = 100

KML_NOT_FOUND_MESSAGE = "File KML tidak ditemukan dalam KMZ"
KMZ_UNREADABLE_MESSAGE = "Gagal membaca file KMZ"
KML_INVALID_MESSAGE = "Format KML tidak valid"


class KMZParseResult(BaseModel):
    """Import outcome; error is set when success is False."""

    success: bool
    coordinates: List[GeographicCoordinate] = Field(default_factory=list)
    error: Optional[str] = None


class PolygonValidation(BaseModel):
    valid: bool
    error: Optional[str] = None


def _local_name(tag: str) -> str:
    # "{http://www.opengis.net/kml/2.2}LinearRing" -> "LinearRing"
    return tag.rsplit("}", 1)[-1]


def _parse_tuple(text: str) -> Optional[tuple]:
    parts = text.split(",")
    if len(parts) < 2:
        return None
    try:
        return float(parts[0]), float(parts[1])
    except ValueError:
        return None


def parse_kml_coordinates(kml_content: str) -> List[GeographicCoordinate]:
    """
    Parcel ring from KML text.

    Args:
        kml_content: KML document

    Returns:
        Open ring from the first LinearRing with readable coordinates;
        empty list if there is none

    Raises:
        ValueError: Malformed XML or coordinates out of range
    """
    try:
        root = ET.fromstring(kml_content)
    except ET.ParseError as e:
        raise ValueError(f"{KML_INVALID_MESSAGE}: {e}") from e

    for ring in root.iter():
        if _local_name(ring.tag) != "LinearRing":
            continue
        for element in ring.iter():
            if _local_name(element.tag) != "coordinates":
                continue
            points = [p for p in (_parse_tuple(t) for t in (element.text or "").split()) if p]
            if points:
                try:
                    return build_ring(points)
                except ValidationError as e:
                    raise ValueError(f"{KML_INVALID_MESSAGE}: koordinat di luar jangkauan") from e
    return []


def parse_kmz_bytes(data: bytes) -> KMZParseResult:
    """
    Import the parcel ring from a KMZ archive.

    Never raises; failures are reported in the result.
    """
    try:
        with zipfile.ZipFile(io.BytesIO(data)) as zf:
            kml_name = next(
                (name for name in zf.namelist() if name.lower().endswith(".kml")),
                None
            )
            if kml_name is None:
                logger.warning("KMZ archive contains no KML document")
                return KMZParseResult(success=False, error=KML_NOT_FOUND_MESSAGE)
            kml_content = zf.read(kml_name).decode("utf-8-sig")
    except (zipfile.BadZipFile, zlib.error, RuntimeError, NotImplementedError,
            EOFError, UnicodeDecodeError) as e:
        logger.warning(f"Unreadable KMZ upload: {e}")
        return KMZParseResult(success=False, error=KMZ_UNREADABLE_MESSAGE)

    try:
        coordinates = parse_kml_coordinates(kml_content)
    except ValueError as e:
        logger.warning(f"Invalid KML in KMZ upload: {e}")
        return KMZParseResult(success=False, error=KML_INVALID_MESSAGE)

    logger.info(f"Imported {len(coordinates)} coordinates from KMZ")
    return KMZParseResult(success=True, coordinates=coordinates)


def validate_polygon_coordinates(coords: Sequence[GeographicCoordinate]) -> PolygonValidation:
    """
    Sanity check an imported or typed ring.

    Rejects fewer than 3 or more than 100 points and consecutive duplicate
    vertices. Self-intersection is not checked.
    """
    if len(coords) < MIN_POLYGON_POINTS:
        return PolygonValidation(
            valid=False,
            error="Minimal 3 titik koordinat diperlukan untuk membentuk polygon"
        )
    if len(coords) > MAX_POLYGON_POINTS:
        return PolygonValidation(valid=False, error="Maksimal 100 titik koordinat")
    for current, following in zip(coords, coords[1:]):
        if current.latitude == following.latitude and current.longitude == following.longitude:
            return PolygonValidation(valid=False, error="Ditemukan koordinat duplikat yang berurutan")
    return PolygonValidation(valid=True)
