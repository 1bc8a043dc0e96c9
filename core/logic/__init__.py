"""
Core Business Logic Package.

Contains rule functions that operate on pure data models.
Separated from models to maintain clean architecture.

Exports:
    Access scoping: require_assigned_village_id, get_submission_scope_for_user,
        can_access_draft, can_access_submission, assert_can_access_*
    Geometry: calculate_polygon_area, calculate_centroid, calculate_zoom_level, encode_path
    Terbilang: number_to_indonesian_words
    Certificate numbers: generate_certificate_number, parse_certificate_number,
        generate_next_certificate_number
"""

# Access scoping
from .access import (
    is_superadmin,
    is_viewer,
    is_privileged_processor,
    require_assigned_village_id,
    get_submission_scope_for_user,
    can_access_draft,
    can_access_submission,
    assert_can_access_draft,
    assert_can_access_submission
)

# Geometry
from .geometry import (
    DEGREE_TO_METERS,
    calculate_polygon_area,
    calculate_centroid,
    calculate_bounds,
    calculate_zoom_level,
    encode_path,
    encode_polyline,
    coordinates_to_geojson,
    geojson_to_coordinates,
    build_ring
)

# Terbilang
from .terbilang import number_to_indonesian_words

# Certificate numbers
from .certificate_number import (
    generate_certificate_number,
    parse_certificate_number,
    extract_sequence_number,
    generate_next_certificate_number
)

__all__ = [
    # Access scoping
    'is_superadmin',
    'is_viewer',
    'is_privileged_processor',
    'require_assigned_village_id',
    'get_submission_scope_for_user',
    'can_access_draft',
    'can_access_submission',
    'assert_can_access_draft',
    'assert_can_access_submission',

    # Geometry
    'DEGREE_TO_METERS',
    'calculate_polygon_area',
    'calculate_centroid',
    'calculate_bounds',
    'calculate_zoom_level',
    'encode_path',
    'encode_polyline',
    'coordinates_to_geojson',
    'geojson_to_coordinates',
    'build_ring',

    # Terbilang
    'number_to_indonesian_words',

    # Certificate numbers
    'generate_certificate_number',
    'parse_certificate_number',
    'extract_sequence_number',
    'generate_next_certificate_number',
]
