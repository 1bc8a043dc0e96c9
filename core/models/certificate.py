# ============================================================================
# SPPTG CERTIFICATE MODELS
# ============================================================================
# STATUS: Core - Inputs and outputs of certificate assembly
# PURPOSE: Village reference data, resolved certificate data, certificate number parts
# EXPORTS: VillageData, SPPTGPDFData, CertificateNumberParts, BOUNDARY_FIELD_NAMES
# DEPENDENCIES: pydantic
# ============================================================================
"""
SPPTG Certificate Models.

SPPTGPDFData is the flat, fully resolved structure a document renderer
needs to lay out the certificate. It is built once at issuance by
services.spptg_document and is read-only afterwards.

Boundary slots:
    Each of the eight compass directions has a `batas_<dir>` field holding
    the direction label and a `penggunaan_batas_<dir>` field holding the
    land use on that side. Sides without a witness stay None.
"""

from typing import Optional, List, Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .enums import BoundaryDirection
from .draft import BoundaryWitness
from .geo import GeographicCoordinate


# Direction -> (label field, land-use field)
BOUNDARY_FIELD_NAMES: Dict[BoundaryDirection, Tuple[str, str]] = {
    BoundaryDirection.UTARA: ("batas_utara", "penggunaan_batas_utara"),
    BoundaryDirection.TIMUR_LAUT: ("batas_timur_laut", "penggunaan_batas_timur_laut"),
    BoundaryDirection.TIMUR: ("batas_timur", "penggunaan_batas_timur"),
    BoundaryDirection.TENGGARA: ("batas_tenggara", "penggunaan_batas_tenggara"),
    BoundaryDirection.SELATAN: ("batas_selatan", "penggunaan_batas_selatan"),
    BoundaryDirection.BARAT_DAYA: ("batas_barat_daya", "penggunaan_batas_barat_daya"),
    BoundaryDirection.BARAT: ("batas_barat", "penggunaan_batas_barat"),
    BoundaryDirection.BARAT_LAUT: ("batas_barat_laut", "penggunaan_batas_barat_laut"),
}


class VillageData(BaseModel):
    """Staff-maintained reference data for a village (authoritative over draft text)."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True, extra="ignore")

    nama_desa: Optional[str] = None
    nama_kepala_desa: Optional[str] = None
    kecamatan: Optional[str] = None
    kabupaten: Optional[str] = None


class CertificateNumberParts(BaseModel):
    """Components of SPPTG/{kode_kabupaten}/{nomor_urut}/{tahun}."""

    model_config = ConfigDict(frozen=True)

    kode_kabupaten: str
    nomor_urut: str
    tahun: str


class SPPTGPDFData(BaseModel):
    """
    Resolved certificate data consumed by the document renderer.

    Constructed once; frozen afterwards.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    # Applicant
    nama_pemohon: Optional[str] = None
    nik: Optional[str] = None
    tempat_lahir: Optional[str] = None
    tanggal_lahir: Optional[str] = None
    pekerjaan: Optional[str] = None
    alamat_ktp: Optional[str] = Field(default=None, alias="alamatKTP")

    # Land
    luas_manual: Optional[float] = None
    luas_terbilang: str = ""
    luas_lahan: Optional[float] = None
    penggunaan_lahan: Optional[str] = None
    tahun_awal_garap: Optional[int] = None

    # Location
    nama_jalan: Optional[str] = None
    nama_gang: Optional[str] = None
    nomor_persil: Optional[str] = None
    rtrw: Optional[str] = None
    dusun: Optional[str] = None
    nama_desa: str = ""
    kecamatan: str = ""
    kabupaten: str = ""

    # Boundaries (4 cardinal + 4 intercardinal)
    batas_utara: Optional[str] = None
    penggunaan_batas_utara: Optional[str] = None
    batas_timur_laut: Optional[str] = None
    penggunaan_batas_timur_laut: Optional[str] = None
    batas_timur: Optional[str] = None
    penggunaan_batas_timur: Optional[str] = None
    batas_tenggara: Optional[str] = None
    penggunaan_batas_tenggara: Optional[str] = None
    batas_selatan: Optional[str] = None
    penggunaan_batas_selatan: Optional[str] = None
    batas_barat_daya: Optional[str] = None
    penggunaan_batas_barat_daya: Optional[str] = None
    batas_barat: Optional[str] = None
    penggunaan_batas_barat: Optional[str] = None
    batas_barat_laut: Optional[str] = None
    penggunaan_batas_barat_laut: Optional[str] = None

    # Witnesses
    saksi_list: List[BoundaryWitness] = Field(default_factory=list)

    # Administrative
    nomor_spptg: str = Field(default="", alias="nomorSPPTG")
    tanggal_pernyataan: str = ""
    nama_kepala_desa: Optional[str] = None

    # Map
    coordinates_geografis: List[GeographicCoordinate] = Field(default_factory=list)
    map_image_url: Optional[str] = None

    def boundaries(self) -> List[Tuple[str, str]]:
        """Populated sides in compass order as (label, land use) pairs."""
        result = []
        for label_field, usage_field in BOUNDARY_FIELD_NAMES.values():
            label = getattr(self, label_field)
            if label:
                result.append((label, getattr(self, usage_field) or ""))
        return result
