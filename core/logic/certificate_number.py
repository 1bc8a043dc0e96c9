# ============================================================================
# SPPTG CERTIFICATE NUMBER CODEC
# ============================================================================
# STATUS: Core - Certificate identifier formatting and parsing
# PURPOSE: Format SPPTG/{kode}/{nnn}/{yyyy}, parse it back, derive the next one
# EXPORTS: generate_certificate_number, parse_certificate_number,
#          extract_sequence_number, generate_next_certificate_number
# DEPENDENCIES: config.defaults
# ============================================================================
"""
SPPTG Certificate Number Codec.

Format:
    SPPTG/{kode_kabupaten}/{nomor_urut}/{tahun}
    e.g. SPPTG/12.34/001/2025

The sequence restarts at 1 every year and is zero-padded to three digits;
sequences above 999 simply grow wider.

generate_next_certificate_number only derives a candidate from numbers the
caller already knows about. Two concurrent callers can derive the same
candidate, so the persistence layer must allocate atomically (unique
constraint plus retry, or a database sequence).

Exports:
    generate_certificate_number: Format a number for a sequence and year
    parse_certificate_number: Split a number into CertificateNumberParts
    extract_sequence_number: Sequence component as int
    generate_next_certificate_number: Next number after the known ones of a year
"""

import re
from datetime import date
from typing import Iterable, Optional

from config.defaults import CertificateDefaults
from ..models.certificate import CertificateNumberParts

CERTIFICATE_NUMBER_PATTERN = re.compile(r"SPPTG/([0-9.]+)/([0-9]+)/([0-9]{4})")


def generate_certificate_number(
    sequence: int,
    kode_kabupaten: str = CertificateDefaults.KODE_KABUPATEN,
    year: Optional[int] = None
) -> str:
    """
    Format a certificate number.

    Args:
        sequence: Sequence within the year, starting at 1
        kode_kabupaten: Regency code
        year: Issuance year (default: current year)

    Returns:
        e.g. "SPPTG/12.34/001/2025"
    """
    if year is None:
        year = date.today().year
    nomor_urut = str(sequence).zfill(CertificateDefaults.SEQUENCE_WIDTH)
    return f"{CertificateDefaults.PREFIX}/{kode_kabupaten}/{nomor_urut}/{year}"


def parse_certificate_number(certificate_number: str) -> Optional[CertificateNumberParts]:
    """Split a certificate number into its parts; None if malformed."""
    match = CERTIFICATE_NUMBER_PATTERN.fullmatch(certificate_number or "")
    if not match:
        return None
    return CertificateNumberParts(
        kode_kabupaten=match.group(1),
        nomor_urut=match.group(2),
        tahun=match.group(3)
    )


def extract_sequence_number(certificate_number: str) -> Optional[int]:
    parts = parse_certificate_number(certificate_number)
    if parts is None:
        return None
    return int(parts.nomor_urut)


def generate_next_certificate_number(
    existing_numbers: Iterable[str],
    kode_kabupaten: str = CertificateDefaults.KODE_KABUPATEN,
    year: Optional[int] = None
) -> str:
    """
    Derive the next certificate number for a year.

    Only well-formed numbers of the given year count; numbers of other
    years and unparseable strings are ignored. The regency code of the
    existing numbers is not compared.

    Args:
        existing_numbers: Certificate numbers already issued
        kode_kabupaten: Regency code for the new number
        year: Issuance year (default: current year)

    Returns:
        Number with sequence max(existing) + 1, or 1 if none
    """
    if year is None:
        year = date.today().year
    year_text = str(year)

    sequences = []
    for number in existing_numbers:
        parts = parse_certificate_number(number)
        if parts is not None and parts.tahun == year_text:
            sequences.append(int(parts.nomor_urut))

    next_sequence = max(sequences) + 1 if sequences else 1
    return generate_certificate_number(next_sequence, kode_kabupaten, year)
