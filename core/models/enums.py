"""
Pure Enumeration Types for the Governance Core.

Defines roles, statuses and the closed vocabularies used by drafts.
No business logic - pure type definitions only.

Exports:
    UserRole: Staff/applicant role
    SubmissionStatus: Persisted submission workflow status
    DashboardStatus: Status values accepted by the dashboard filter
    BoundaryDirection: The eight compass directions of a boundary witness
    CoordinateSystem: Coordinate input system of a draft
    OverlapSource: Origin of an overlap hit
"""

from enum import Enum


class UserRole(str, Enum):
    """
    Roles supplied by the identity provider.

    Access rules:
    - SUPERADMIN: unrestricted
    - ADMIN / VERIFIKATOR: restricted to their assigned village
    - VIEWER: restricted to records they own
    """

    SUPERADMIN = "Superadmin"
    ADMIN = "Admin"
    VERIFIKATOR = "Verifikator"
    VIEWER = "Viewer"


class SubmissionStatus(str, Enum):
    """
    Workflow status stored on drafts and submissions.

    Step 3 (verification) sets TERDATA/TERDAFTAR or DITOLAK/DITINJAU_ULANG;
    step 4 (issuance) sets TERBIT.
    """

    TERDATA = "SPPTG terdata"
    TERDAFTAR = "SPPTG terdaftar"
    DITOLAK = "Ditolak"
    DITINJAU_ULANG = "Ditinjau Ulang"
    TERBIT = "Terbit SPPTG"


class DashboardStatus(str, Enum):
    """
    Status values accepted by the dashboard list filter.

    ALL is the default and means "no status restriction".
    """

    ALL = "all"
    TERDAFTAR = "SPPTG terdaftar"
    TERDATA = "SPPTG terdata"
    DITOLAK = "SPPTG ditolak"
    DITINJAU_ULANG = "SPPTG ditinjau ulang"


class BoundaryDirection(str, Enum):
    """Compass directions in clockwise order starting from north."""

    UTARA = "Utara"
    TIMUR_LAUT = "Timur Laut"
    TIMUR = "Timur"
    TENGGARA = "Tenggara"
    SELATAN = "Selatan"
    BARAT_DAYA = "Barat Daya"
    BARAT = "Barat"
    BARAT_LAUT = "Barat Laut"


class CoordinateSystem(str, Enum):
    """Coordinate input system chosen in step 2."""

    GEOGRAFIS = "geografis"
    UTM = "utm"


class OverlapSource(str, Enum):
    """Which layer an overlap hit came from."""

    PROHIBITED_AREA = "ProhibitedArea"
    SUBMISSION = "Submission"
