"""Aggregate of one validation run."""

from __future__ import annotations

from pydantic import BaseModel, TypeAdapter

from vatcheck.integrations.vericorp.schemas import ValidationResult, VatStatus

_RESULTS_ADAPTER = TypeAdapter(list[ValidationResult])


def is_valid(result: ValidationResult) -> bool:
    return result.vat_valid is VatStatus.VALID


def is_invalid(result: ValidationResult) -> bool:
    """Format rejected or registration denied.

    A result with a valid format and an UNKNOWN registration is neither
    valid nor invalid.
    """
    return not result.format_valid or result.vat_valid is VatStatus.INVALID


class BatchReport(BaseModel):
    """Ordered results of a run with their valid/invalid counts."""

    model_config = {"frozen": True}

    results: tuple[ValidationResult, ...] = ()

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def valid_count(self) -> int:
        return sum(1 for r in self.results if is_valid(r))

    @property
    def invalid_count(self) -> int:
        return sum(1 for r in self.results if is_invalid(r))

    def results_json(self) -> str:
        """Compact JSON array of the results, ``vat_valid`` as true/false/null."""
        return _RESULTS_ADAPTER.dump_json(list(self.results)).decode()
