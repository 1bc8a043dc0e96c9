# ============================================================================
# SUBMISSION DRAFT MODELS
# ============================================================================
# STATUS: Core - Multi-step SPPTG application draft
# PURPOSE: Partial record accumulated across the four workflow steps
# EXPORTS: UploadedDocument, ResearchTeamMember, BoundaryWitness, OverlapResult,
#          FeedbackData, SubmissionDraft
# DEPENDENCIES: pydantic
# ============================================================================
"""
Submission Draft Models.

A draft spans four workflow steps:
    1. Applicant identity and identity documents
    2. Land location, geometry, witnesses, field team and field documents
    3. Verification outcome
    4. Certificate issuance

Nothing is required at any single step; fields accumulate as the
applicant and staff progress. Web clients send camelCase keys
(`namaPemohon`, `saksiList`, ...); snake_case field names are accepted too.

List-valued fields are Optional: a client may omit them or send null, and
projections substitute an empty list.
"""

from typing import Optional, List, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .enums import CoordinateSystem, OverlapSource, SubmissionStatus
from .geo import GeographicCoordinate


_CAMEL_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    extra="ignore",
)


# ============================================================================
# NESTED RECORDS
# ============================================================================

class UploadedDocument(BaseModel):
    """Reference to a file already stored by the upload service."""

    model_config = _CAMEL_CONFIG

    name: str
    size: int = Field(..., ge=0)
    url: Optional[str] = None
    uploaded_at: Optional[str] = None
    document_id: Optional[int] = None


class ResearchTeamMember(BaseModel):
    """Member of the field verification team."""

    model_config = _CAMEL_CONFIG

    nama: str
    jabatan: str
    instansi: Optional[str] = None
    nomor_hp: Optional[str] = Field(default=None, alias="nomorHP")


class BoundaryWitness(BaseModel):
    """
    Adjoining-landowner declaration (saksi).

    `sisi` is kept as free text: only the eight canonical BoundaryDirection
    labels reach the certificate, anything else is ignored there.
    """

    model_config = _CAMEL_CONFIG

    id: Optional[str] = None
    nama: str = ""
    sisi: str = ""
    penggunaan_lahan_batas: Optional[str] = None


class OverlapResult(BaseModel):
    """Intersection of the parcel with a prohibited area or another submission."""

    model_config = _CAMEL_CONFIG

    kawasan_id: Union[int, str]
    nama_kawasan: str
    jenis_kawasan: str
    luas_overlap: float = 0.0
    percentage_overlap: Optional[float] = None
    sumber: Optional[OverlapSource] = None


class FeedbackData(BaseModel):
    """Verifier feedback attached to a rejection or a review request."""

    model_config = _CAMEL_CONFIG

    alasan_terpilih: List[str] = Field(default_factory=list)
    dokumen_tidak_lengkap: Optional[List[str]] = None
    detail_feedback: str = ""
    tanggal_tenggat: Optional[str] = None
    lampiran_feedback: Optional[UploadedDocument] = None
    timestamp: Optional[str] = None
    pemberi: str = ""


# ============================================================================
# SUBMISSION DRAFT
# ============================================================================

class SubmissionDraft(BaseModel):
    """
    In-progress SPPTG application.

    Every field is optional; see services.draft_payload for the stable
    persistence projection.
    """

    model_config = _CAMEL_CONFIG

    id: Optional[int] = None
    current_step: int = Field(default=1, ge=1, le=4)
    last_saved: Optional[str] = None

    # ------------------------------------------------------------------
    # Step 1: Applicant
    # ------------------------------------------------------------------
    nama_pemohon: Optional[str] = None
    nik: Optional[str] = None
    tempat_lahir: Optional[str] = None
    tanggal_lahir: Optional[str] = None
    pekerjaan: Optional[str] = None
    alamat_ktp: Optional[str] = Field(default=None, alias="alamatKTP")
    persetujuan_data: Optional[bool] = None

    dokumen_ktp: Optional[UploadedDocument] = Field(default=None, alias="dokumenKTP")
    dokumen_kk: Optional[UploadedDocument] = Field(default=None, alias="dokumenKK")
    dokumen_kwitansi: Optional[UploadedDocument] = None
    dokumen_permohonan: Optional[UploadedDocument] = None
    dokumen_sk_kepala_desa: Optional[UploadedDocument] = Field(default=None, alias="dokumenSKKepalaDesa")

    # ------------------------------------------------------------------
    # Step 2: Land location & details
    # ------------------------------------------------------------------
    village_id: Optional[int] = None
    nama_jalan: Optional[str] = None
    nama_gang: Optional[str] = None
    nomor_persil: Optional[str] = None
    rtrw: Optional[str] = None
    dusun: Optional[str] = None
    kecamatan: Optional[str] = None
    kabupaten: Optional[str] = None
    penggunaan_lahan: Optional[str] = None
    tahun_awal_garap: Optional[int] = None
    nama_kepala_desa: Optional[str] = None

    saksi_list: Optional[List[BoundaryWitness]] = None
    coordinates_geografis: Optional[List[GeographicCoordinate]] = None
    coordinate_system: Optional[CoordinateSystem] = None
    foto_lahan: Optional[List[UploadedDocument]] = None
    overlap_results: Optional[List[OverlapResult]] = None
    luas_lahan: Optional[float] = None
    luas_manual: Optional[float] = None
    keliling_lahan: Optional[float] = None

    # Field team
    juru_ukur: Optional[ResearchTeamMember] = None
    pihak_bpd: Optional[ResearchTeamMember] = Field(default=None, alias="pihakBPD")
    kepala_dusun: Optional[ResearchTeamMember] = None
    rt_setempat: Optional[ResearchTeamMember] = None

    # Field documents
    dokumen_berita_acara: Optional[UploadedDocument] = None
    dokumen_pernyataan_jual_beli: Optional[UploadedDocument] = None
    dokumen_asal_usul: Optional[UploadedDocument] = None
    dokumen_tidak_sengketa: Optional[UploadedDocument] = None

    # ------------------------------------------------------------------
    # Step 3: Verification outcome
    # ------------------------------------------------------------------
    status: Optional[SubmissionStatus] = None
    alasan_status: Optional[str] = None
    verifikator: Optional[int] = None
    tanggal_keputusan: Optional[str] = None
    feedback: Optional[FeedbackData] = None

    # ------------------------------------------------------------------
    # Step 4: Issuance
    # ------------------------------------------------------------------
    dokumen_spptg: Optional[UploadedDocument] = Field(default=None, alias="dokumenSPPTG")
    nomor_spptg: Optional[str] = Field(default=None, alias="nomorSPPTG")
    tanggal_terbit: Optional[str] = None
