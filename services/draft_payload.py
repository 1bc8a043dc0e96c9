"""
Draft Persistence Projector.

Builds the complete payload stored for a draft at every step transition.
The key set is fixed: every key in DRAFT_PAYLOAD_KEYS is always present,
whether or not the applicant has reached that step, so a save from an
earlier step can never silently drop data entered in a later one.

Unset scalars are None; the list fields default to empty lists. Nested
records are dumped to JSON-ready dicts and enums to their values.

Exports:
    DRAFT_PAYLOAD_KEYS: Ordered tuple of persisted draft keys
    DRAFT_LIST_KEYS: Keys whose missing value becomes []
    build_draft_save_payload: Project a draft onto the fixed key set
"""

from typing import Any, Dict, Mapping, Union

from core.models.draft import SubmissionDraft
from util_logger import LoggerFactory, ComponentType

logger = LoggerFactory.create_logger(ComponentType.SERVICE, "DraftPayload")


DRAFT_PAYLOAD_KEYS = (
    # Step 1: Applicant
    'nama_pemohon',
    'nik',
    'tempat_lahir',
    'tanggal_lahir',
    'pekerjaan',
    'alamat_ktp',
    'persetujuan_data',

    # Step 2: Land location & details
    'village_id',
    'nama_jalan',
    'nama_gang',
    'nomor_persil',
    'rtrw',
    'dusun',
    'kecamatan',
    'kabupaten',
    'penggunaan_lahan',
    'tahun_awal_garap',
    'nama_kepala_desa',
    'saksi_list',
    'coordinates_geografis',
    'coordinate_system',
    'foto_lahan',
    'overlap_results',
    'luas_lahan',
    'luas_manual',
    'keliling_lahan',

    # Applicant documents
    'dokumen_ktp',
    'dokumen_kk',
    'dokumen_kwitansi',
    'dokumen_permohonan',
    'dokumen_sk_kepala_desa',

    # Field team
    'juru_ukur',
    'pihak_bpd',
    'kepala_dusun',
    'rt_setempat',

    # Field documents
    'dokumen_berita_acara',
    'dokumen_pernyataan_jual_beli',
    'dokumen_asal_usul',
    'dokumen_tidak_sengketa',

    # Step 3: Verification outcome
    'status',
    'alasan_status',
    'verifikator',
    'tanggal_keputusan',
    'feedback',

    # Step 4: Issuance
    'dokumen_spptg',
    'nomor_spptg',
    'tanggal_terbit',
)

DRAFT_LIST_KEYS = frozenset({
    'saksi_list',
    'coordinates_geografis',
    'foto_lahan',
    'overlap_results',
})


def build_draft_save_payload(draft: Union[SubmissionDraft, Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Project a draft onto the fixed persistence key set.

    Args:
        draft: SubmissionDraft, or a mapping with camelCase/snake_case keys

    Returns:
        Dict whose keys equal DRAFT_PAYLOAD_KEYS, in that order

    Raises:
        pydantic.ValidationError: A mapping that is not a valid draft
    """
    if not isinstance(draft, SubmissionDraft):
        draft = SubmissionDraft.model_validate(draft)

    dumped = draft.model_dump(mode="json")
    payload = {}
    for key in DRAFT_PAYLOAD_KEYS:
        value = dumped.get(key)
        if value is None and key in DRAFT_LIST_KEYS:
            value = []
        payload[key] = value

    logger.debug(
        "Built draft save payload",
        extra={'custom_dimensions': {'draft_id': draft.id, 'current_step': draft.current_step}}
    )
    return payload
