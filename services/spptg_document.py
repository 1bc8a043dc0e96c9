# ============================================================================
# SPPTG CERTIFICATE DOCUMENT PROJECTOR
# ============================================================================
# STATUS: Service - Draft -> certificate data
# PURPOSE: Resolve every field the certificate renderer needs from a draft
# EXPORTS: build_spptg_pdf_data, build_boundary_data, MapUrlGenerator
# DEPENDENCIES: core.logic.terbilang, services.static_map
# ============================================================================
"""
SPPTG Certificate Document Projector.

Resolution rules:
    Location:  village reference data wins over text typed into the draft.
               nama_desa comes only from the village ("" without one);
               kecamatan/kabupaten fall back to the draft, then "".
    Area:      manual measurement wins over the computed area; the chosen
               value is also spelled out in words (terbilang).
    Boundary:  each witness fills the slot of its compass side; later
               witnesses for the same side overwrite earlier ones and
               non-canonical side labels are ignored.
    Map:       a URL is requested only for a polygon of 3 or more points.
    Dates:     the statement date is the issuance date, else today (UTC).

Exports:
    build_spptg_pdf_data: Build the frozen SPPTGPDFData for a draft
    build_boundary_data: Boundary slot values from a witness list
    MapUrlGenerator: Signature of an injectable map URL builder
"""

from datetime import date, datetime, timezone
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from core.logic.terbilang import number_to_indonesian_words
from core.models.certificate import BOUNDARY_FIELD_NAMES, SPPTGPDFData, VillageData
from core.models.draft import BoundaryWitness, SubmissionDraft
from core.models.enums import BoundaryDirection
from core.models.geo import GeographicCoordinate
from services.static_map import StaticMapClient
from util_logger import LoggerFactory, ComponentType

logger = LoggerFactory.create_logger(ComponentType.SERVICE, "SPPTGDocument")

MapUrlGenerator = Callable[[Sequence[GeographicCoordinate]], Optional[str]]

_DIRECTIONS_BY_LABEL = {direction.value: direction for direction in BoundaryDirection}
_MIN_MAP_POINTS = 3


def _default_map_url(coords: Sequence[GeographicCoordinate]) -> Optional[str]:
    with StaticMapClient.from_config() as client:
        return client.generate_static_map_url(coords)


def build_boundary_data(saksi_list: Optional[Iterable[BoundaryWitness]]) -> Dict[str, str]:
    """
    Boundary slot values keyed by SPPTGPDFData field name.

    Args:
        saksi_list: Witnesses in entry order (None treated as empty)

    Returns:
        {"batas_<dir>": label, "penggunaan_batas_<dir>": land use or ""}
        for every side that has a witness
    """
    boundary_data = {}
    for saksi in saksi_list or []:
        direction = _DIRECTIONS_BY_LABEL.get(saksi.sisi)
        if direction is None:
            logger.debug(f"Ignoring witness with non-canonical side {saksi.sisi!r}")
            continue
        label_field, usage_field = BOUNDARY_FIELD_NAMES[direction]
        boundary_data[label_field] = direction.value
        boundary_data[usage_field] = saksi.penggunaan_lahan_batas or ""
    return boundary_data


def build_spptg_pdf_data(
    draft: Union[SubmissionDraft, Mapping[str, Any]],
    village_data: Optional[Union[VillageData, Mapping[str, Any]]] = None,
    map_url_generator: Optional[MapUrlGenerator] = None,
    today: Optional[date] = None
) -> SPPTGPDFData:
    """
    Resolve certificate data from a draft and its village reference data.

    Args:
        draft: Draft being issued
        village_data: Reference data of the draft's village, if known
        map_url_generator: Map URL builder (default: configured StaticMapClient)
        today: Date used when the draft has no issuance date (default: today, UTC)

    Returns:
        Frozen SPPTGPDFData
    """
    if not isinstance(draft, SubmissionDraft):
        draft = SubmissionDraft.model_validate(draft)
    if village_data is not None and not isinstance(village_data, VillageData):
        village_data = VillageData.model_validate(village_data)
    village = village_data or VillageData()
    generate_map_url = map_url_generator or _default_map_url

    # Area
    luas_value = draft.luas_manual or draft.luas_lahan or 0
    luas_terbilang = number_to_indonesian_words(luas_value) if luas_value else ""

    # Map
    coordinates: List[GeographicCoordinate] = list(draft.coordinates_geografis or [])
    map_image_url = None
    if len(coordinates) >= _MIN_MAP_POINTS:
        map_image_url = generate_map_url(coordinates) or None

    # Statement date
    if today is None:
        today = datetime.now(timezone.utc).date()
    tanggal_pernyataan = draft.tanggal_terbit or today.isoformat()

    saksi_list = list(draft.saksi_list or [])

    data = SPPTGPDFData(
        # Applicant
        nama_pemohon=draft.nama_pemohon,
        nik=draft.nik,
        tempat_lahir=draft.tempat_lahir,
        tanggal_lahir=draft.tanggal_lahir,
        pekerjaan=draft.pekerjaan,
        alamat_ktp=draft.alamat_ktp,

        # Land
        luas_manual=luas_value or None,
        luas_terbilang=luas_terbilang,
        luas_lahan=draft.luas_lahan,
        penggunaan_lahan=draft.penggunaan_lahan,
        tahun_awal_garap=draft.tahun_awal_garap,

        # Location
        nama_jalan=draft.nama_jalan,
        nama_gang=draft.nama_gang,
        nomor_persil=draft.nomor_persil,
        rtrw=draft.rtrw,
        dusun=draft.dusun,
        nama_desa=village.nama_desa or "",
        kecamatan=village.kecamatan or draft.kecamatan or "",
        kabupaten=village.kabupaten or draft.kabupaten or "",

        # Boundaries and witnesses
        **build_boundary_data(saksi_list),
        saksi_list=saksi_list,

        # Administrative
        nomor_spptg=draft.nomor_spptg or "",
        tanggal_pernyataan=tanggal_pernyataan,
        nama_kepala_desa=village.nama_kepala_desa or draft.nama_kepala_desa or None,

        # Map
        coordinates_geografis=coordinates,
        map_image_url=map_image_url
    )

    logger.info(
        "Built SPPTG certificate data",
        extra={'custom_dimensions': {
            'draft_id': draft.id,
            'village_id': draft.village_id,
            'boundary_sides': len(data.boundaries()),
            'has_map': map_image_url is not None
        }}
    )
    return data
