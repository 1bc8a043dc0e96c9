"""
Randomized model factories: anti-overfitting design.

Every factory call generates randomized non-identity fields
(names, addresses, ids) so tests cannot rely on specific default values.
Factories return plain dicts suitable for Model(**result), except the
coordinate helpers, which return model instances.
"""

import random
import string
import uuid


def _random_suffix(length: int = 6) -> str:
    """Generate random alphanumeric suffix."""
    return "".join(random.choices(string.ascii_lowercase + string.digits, k=length))


def _random_id() -> int:
    return random.randint(1, 10_000)


def make_user(role=None, **overrides):
    """
    Build an AppUser with randomized non-identity fields.

    Args:
        role: Optional fixed role (default: Viewer)
        **overrides: Any field override (e.g. assigned_village_id)

    Returns:
        dict suitable for AppUser(**result)
    """
    from core.models.enums import UserRole

    suffix = _random_suffix()
    base = {
        "id": _random_id(),
        "role": role or UserRole.VIEWER,
        "assigned_village_id": None,
        "nama": f"Pengguna {suffix}",
        "email": f"user-{suffix}@example.go.id",
    }
    base.update(overrides)
    return base


def make_draft_access(user_id: int = None, village_id: int = None, **overrides):
    """Build a DraftAccessRecord dict."""
    base = {
        "user_id": user_id if user_id is not None else _random_id(),
        "village_id": village_id,
    }
    base.update(overrides)
    return base


def make_submission_access(owner_user_id: int = None, village_id: int = None, **overrides):
    """Build a SubmissionAccessRecord dict."""
    base = {
        "owner_user_id": owner_user_id,
        "village_id": village_id if village_id is not None else _random_id(),
    }
    base.update(overrides)
    return base


def make_coordinates(count: int = 4, lat: float = -6.2, lng: float = 106.8, size: float = 0.001):
    """
    Build an open ring of GeographicCoordinate around (lat, lng).

    Vertices lie on a circle of radius `size` degrees, in order, with
    unique ids.
    """
    import math
    from core.models.geo import GeographicCoordinate

    ring_id = uuid.uuid4().hex[:8]
    coords = []
    for i in range(count):
        angle = 2 * math.pi * i / count
        coords.append(GeographicCoordinate(
            id=f"C-{ring_id}-{i}",
            latitude=round(lat + size * math.sin(angle), 7),
            longitude=round(lng + size * math.cos(angle), 7),
        ))
    return coords


def make_witness(sisi: str, penggunaan: str = None, **overrides):
    """Build a BoundaryWitness dict for one side."""
    suffix = _random_suffix()
    base = {
        "id": f"S-{suffix}",
        "nama": f"Saksi {suffix}",
        "sisi": sisi,
        "penggunaan_lahan_batas": penggunaan if penggunaan is not None else f"Kebun {suffix}",
    }
    base.update(overrides)
    return base


def make_document(**overrides):
    """Build an UploadedDocument dict."""
    suffix = _random_suffix()
    base = {
        "name": f"dokumen-{suffix}.pdf",
        "size": random.randint(1_000, 2_000_000),
        "url": f"https://files.example.go.id/{suffix}.pdf",
        "uploaded_at": "2025-01-15T08:30:00Z",
        "document_id": _random_id(),
    }
    base.update(overrides)
    return base


def make_step1_draft(**overrides):
    """
    Build a SubmissionDraft dict with only step 1 (applicant) filled.

    Keys are camelCase, as sent by the web client.
    """
    suffix = _random_suffix()
    base = {
        "id": _random_id(),
        "currentStep": 1,
        "namaPemohon": f"Pemohon {suffix}",
        "nik": "".join(random.choices(string.digits, k=16)),
        "tempatLahir": random.choice(["Palangka Raya", "Sampit", "Kuala Kapuas"]),
        "tanggalLahir": "1980-05-17",
        "pekerjaan": random.choice(["Petani", "Pekebun", "Wiraswasta"]),
        "alamatKTP": f"Jl. Merdeka No. {random.randint(1, 99)}",
        "persetujuanData": True,
        "dokumenKTP": make_document(),
    }
    base.update(overrides)
    return base


def make_full_draft(**overrides):
    """
    Build a SubmissionDraft dict filled through step 4 (issued).

    Keys are camelCase, as sent by the web client.
    """
    from core.models.enums import SubmissionStatus

    suffix = _random_suffix()
    base = make_step1_draft()
    base.update({
        "currentStep": 4,
        "villageId": _random_id(),
        "namaJalan": f"Jl. Sawit {suffix}",
        "namaGang": f"Gg. {suffix}",
        "nomorPersil": str(random.randint(100, 999)),
        "rtrw": "002/003",
        "dusun": f"Dusun {suffix}",
        "kecamatan": f"Kecamatan Draft {suffix}",
        "kabupaten": f"Kabupaten Draft {suffix}",
        "penggunaanLahan": "Perkebunan",
        "tahunAwalGarap": random.randint(1990, 2020),
        "namaKepalaDesa": f"Kades Draft {suffix}",
        "saksiList": [make_witness("Utara"), make_witness("Selatan")],
        "coordinatesGeografis": [c.model_dump() for c in make_coordinates(4)],
        "coordinateSystem": "geografis",
        "fotoLahan": [make_document()],
        "overlapResults": [],
        "luasLahan": float(random.randint(500, 20_000)),
        "kelilingLahan": float(random.randint(100, 800)),
        "juruUkur": {"nama": f"Juru {suffix}", "jabatan": "Juru Ukur"},
        "status": SubmissionStatus.TERBIT.value,
        "verifikator": _random_id(),
        "nomorSPPTG": f"SPPTG/12.34/{random.randint(1, 999):03d}/2025",
        "tanggalTerbit": "2025-02-01",
    })
    base.update(overrides)
    return base
