"""
Projection and Normalization Services - Explicit Exports

Every service is imported here explicitly. If you don't see it below,
it's not part of the public service surface.

Services:
    dashboard_filters: Query parameters -> canonical submission list filter
    draft_payload: Draft -> fixed-key persistence payload
    static_map: Static map URL builder / image downloader (caller-owned client)
    spptg_document: Draft + village data -> certificate document data
    overlap_results: Spatial overlap query rows -> typed results
    kmz_parser: KMZ/KML upload -> parcel ring

All services are stateless except StaticMapClient, which owns an HTTP
session and must be closed by its caller.
"""

from .dashboard_filters import (
    parse_dashboard_filters,
    build_dashboard_search_params,
    to_query_string
)
from .draft_payload import DRAFT_PAYLOAD_KEYS, build_draft_save_payload
from .static_map import StaticMapClient
from .spptg_document import build_spptg_pdf_data, build_boundary_data
from .overlap_results import NormalizedOverlapResult, normalize_overlap_rows
from .kmz_parser import (
    KMZParseResult,
    PolygonValidation,
    parse_kmz_bytes,
    parse_kml_coordinates,
    validate_polygon_coordinates
)

__all__ = [
    # Dashboard filters
    'parse_dashboard_filters',
    'build_dashboard_search_params',
    'to_query_string',

    # Draft persistence
    'DRAFT_PAYLOAD_KEYS',
    'build_draft_save_payload',

    # Certificate
    'StaticMapClient',
    'build_spptg_pdf_data',
    'build_boundary_data',

    # Overlap results
    'NormalizedOverlapResult',
    'normalize_overlap_rows',

    # KMZ import
    'KMZParseResult',
    'PolygonValidation',
    'parse_kmz_bytes',
    'parse_kml_coordinates',
    'validate_polygon_coordinates',
]
