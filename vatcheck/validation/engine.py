"""Batch engine: validate numbers one by one and fold them into a report.

Calls are strictly sequential. Each step yields an ``Outcome`` holding either
the API result or the client error; failed steps become fallback results, so
one bad number never aborts the batch.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from vatcheck.errors import TransportError, VatCheckError
from vatcheck.host.reporter import Reporter
from vatcheck.integrations.vericorp.client import VatValidator
from vatcheck.integrations.vericorp.schemas import ValidationResult, VatStatus
from vatcheck.schemas.report import BatchReport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Outcome:
    """Result of validating one number: exactly one of result/error is set."""

    tax_id: str
    result: ValidationResult | None = None
    error: VatCheckError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def resolve(self) -> ValidationResult:
        """The API result, or the fallback result when the call failed."""
        if self.result is not None:
            return self.result
        return ValidationResult.fallback(self.tax_id)


def classify(result: ValidationResult) -> str:
    """Short status used in the per-number log line."""
    if result.vat_valid is VatStatus.VALID:
        return "valid"
    if result.format_valid:
        return "format ok, VAT not confirmed"
    return "invalid"


async def attempt(client: VatValidator, tax_id: str) -> Outcome:
    """Validate one number, capturing any client failure in the Outcome."""
    try:
        result = await client.validate(tax_id)
    except VatCheckError as exc:
        return Outcome(tax_id=tax_id, error=exc)
    except Exception as exc:
        logger.warning("Unmapped client error for %s", tax_id[:4], exc_info=True)
        return Outcome(tax_id=tax_id, error=TransportError(str(exc) or type(exc).__name__, tax_id))
    return Outcome(tax_id=tax_id, result=result)


async def validate_batch(
    tax_ids: Iterable[str],
    client: VatValidator,
    reporter: Reporter,
) -> BatchReport:
    """Validate every number in order and return the aggregated report.

    No client failure escapes; errors raised by the reporter do.
    """
    results: list[ValidationResult] = []

    for tax_id in tax_ids:
        reporter.info(f"  Checking {tax_id}...")
        outcome = await attempt(client, tax_id)

        if outcome.ok:
            reporter.info(f"  {tax_id}: {classify(outcome.resolve())}")
        else:
            logger.debug("Validation of %s failed: %r", tax_id[:4], outcome.error)
            reporter.warning(f"Failed to validate {tax_id}: {outcome.error}")

        results.append(outcome.resolve())

    report = BatchReport(results=tuple(results))
    logger.debug(
        "Batch done: total=%d valid=%d invalid=%d",
        report.total,
        report.valid_count,
        report.invalid_count,
    )
    return report
