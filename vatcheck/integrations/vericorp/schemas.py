"""Pydantic schemas for the VeriCorp VAT validation API."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, field_serializer, field_validator


class VatStatus(str, Enum):
    """Registration status confirmed by the tax authority.

    UNKNOWN only arises when no answer was obtained for the number.
    """

    VALID = "valid"
    INVALID = "invalid"
    UNKNOWN = "unknown"

    @classmethod
    def from_flag(cls, flag: bool | None) -> VatStatus:
        if flag is None:
            return cls.UNKNOWN
        return cls.VALID if flag else cls.INVALID

    def to_flag(self) -> bool | None:
        if self is VatStatus.UNKNOWN:
            return None
        return self is VatStatus.VALID


class ValidationResult(BaseModel):
    """One validated VAT number, as returned by the API or synthesized on failure.

    On the wire ``vat_valid`` is ``true``/``false``/``null``; in Python it is
    a VatStatus so "no answer" never reads as "confirmed invalid".
    """

    model_config = {"frozen": True}

    tax_id: str
    country: str
    format_valid: bool
    vat_valid: VatStatus = VatStatus.UNKNOWN
    company_name: str | None = None

    @field_validator("vat_valid", mode="before")
    @classmethod
    def parse_vat_valid(cls, v: object) -> object:
        """Accept the API's nullable boolean."""
        if v is None or isinstance(v, bool):
            return VatStatus.from_flag(v)
        return v

    @field_serializer("vat_valid")
    def serialize_vat_valid(self, v: VatStatus) -> bool | None:
        return v.to_flag()

    @classmethod
    def fallback(cls, tax_id: str) -> ValidationResult:
        """Result used when the API call for ``tax_id`` failed.

        ``country`` is the first two characters of the number, which is
        shorter (or empty) for numbers under two characters.
        """
        return cls(
            tax_id=tax_id,
            country=tax_id[:2],
            format_valid=False,
            vat_valid=VatStatus.UNKNOWN,
            company_name=None,
        )
