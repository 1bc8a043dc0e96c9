"""
Core Data Models Package.

Contains pure data structures without business logic.
All business logic is in the core.logic package and in services.

Exports:
    UserRole, SubmissionStatus, DashboardStatus, BoundaryDirection: Enums
    AppUser, DraftAccessRecord, SubmissionAccessRecord, SubmissionScope: Access models
    SubmissionDraft and nested records: Draft models
    VillageData, SPPTGPDFData, CertificateNumberParts: Certificate models
    DashboardFilters, DashboardFilterPatch: List filter models
    GeographicCoordinate: Polygon vertex
"""

# Enums
from .enums import (
    UserRole,
    SubmissionStatus,
    DashboardStatus,
    BoundaryDirection,
    CoordinateSystem,
    OverlapSource
)

# Geometry
from .geo import GeographicCoordinate

# Access models
from .user import (
    AppUser,
    DraftAccessRecord,
    SubmissionAccessRecord,
    SubmissionScope
)

# Draft models
from .draft import (
    UploadedDocument,
    ResearchTeamMember,
    BoundaryWitness,
    OverlapResult,
    FeedbackData,
    SubmissionDraft
)

# Certificate models
from .certificate import (
    VillageData,
    SPPTGPDFData,
    CertificateNumberParts,
    BOUNDARY_FIELD_NAMES
)

# Filter models
from .filters import (
    DashboardFilters,
    DashboardFilterPatch
)

__all__ = [
    # Enums
    'UserRole',
    'SubmissionStatus',
    'DashboardStatus',
    'BoundaryDirection',
    'CoordinateSystem',
    'OverlapSource',

    # Geometry
    'GeographicCoordinate',

    # Access
    'AppUser',
    'DraftAccessRecord',
    'SubmissionAccessRecord',
    'SubmissionScope',

    # Draft
    'UploadedDocument',
    'ResearchTeamMember',
    'BoundaryWitness',
    'OverlapResult',
    'FeedbackData',
    'SubmissionDraft',

    # Certificate
    'VillageData',
    'SPPTGPDFData',
    'CertificateNumberParts',
    'BOUNDARY_FIELD_NAMES',

    # Filters
    'DashboardFilters',
    'DashboardFilterPatch',
]
