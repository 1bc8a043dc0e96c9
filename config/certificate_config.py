"""
SPPTG Certificate Configuration.

Exports:
    CertificateConfig: Pydantic certificate numbering configuration model
"""

import os

from pydantic import BaseModel, Field

from config.defaults import CertificateDefaults


class CertificateConfig(BaseModel):
    """Certificate numbering settings for the regency this deployment serves."""

    kode_kabupaten: str = Field(
        default=CertificateDefaults.KODE_KABUPATEN,
        pattern=r"^[0-9]+(\.[0-9]+)*$",
        description="Regency code written into SPPTG/{kode}/{nnn}/{yyyy}",
        examples=["12.34", "00.00"]
    )

    @classmethod
    def from_environment(cls):
        """Load from environment variables."""
        return cls(
            kode_kabupaten=os.environ.get("SPPTG_KODE_KABUPATEN", CertificateDefaults.KODE_KABUPATEN)
        )
