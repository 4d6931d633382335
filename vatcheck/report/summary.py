"""Render a BatchReport as a markdown table and summary line.

Pure functions: same input, byte-identical output.
"""

from __future__ import annotations

from collections.abc import Sequence

from vatcheck.integrations.vericorp.schemas import ValidationResult
from vatcheck.report.formatters import format_flag, format_status, format_text
from vatcheck.schemas.report import BatchReport

SUMMARY_HEADING = "VAT Validation Results"

_HEADER = "| VAT Number | Country | Format | VAT Valid | Company |"
_SEPARATOR = "|------------|---------|--------|-----------|---------|"


def format_row(result: ValidationResult) -> str:
    cells = [
        format_text(result.tax_id),
        format_text(result.country),
        format_flag(result.format_valid),
        format_status(result.vat_valid),
        format_text(result.company_name),
    ]
    return "| " + " | ".join(cells) + " |"


def build_summary_table(results: Sequence[ValidationResult]) -> str:
    """Header, separator, then one row per result in input order."""
    lines = [_HEADER, _SEPARATOR]
    lines.extend(format_row(r) for r in results)
    return "\n".join(lines)


def build_summary_line(report: BatchReport, *, emphasis: bool = False) -> str:
    """``"2 valid, 0 invalid out of 2 checked."``, counts in bold with emphasis."""
    valid = f"{report.valid_count} valid"
    invalid = f"{report.invalid_count} invalid"
    if emphasis:
        valid, invalid = f"**{valid}**", f"**{invalid}**"
    return f"{valid}, {invalid} out of {report.total} checked."


def build_job_summary(report: BatchReport) -> str:
    """Heading, table and summary line for the job summary page."""
    return (
        f"## {SUMMARY_HEADING}\n\n"
        f"{build_summary_table(report.results)}\n\n"
        f"{build_summary_line(report, emphasis=True)}\n"
    )
