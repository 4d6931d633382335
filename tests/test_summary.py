"""Tests for the results table and summary line."""

from __future__ import annotations

import re

from vatcheck.integrations.vericorp.schemas import ValidationResult, VatStatus
from vatcheck.report.formatters import format_flag, format_status, format_text
from vatcheck.report.summary import build_job_summary, build_summary_line, build_summary_table
from vatcheck.schemas.report import BatchReport

# ── Helpers ──────────────────────────────────────────────────────────


def _results() -> list[ValidationResult]:
    return [
        ValidationResult(
            tax_id="DE123456789",
            country="DE",
            format_valid=True,
            vat_valid=VatStatus.VALID,
            company_name="Beispiel GmbH",
        ),
        ValidationResult(tax_id="FR987654321", country="FR", format_valid=True, vat_valid=VatStatus.INVALID),
        ValidationResult.fallback("XX000000000"),
    ]


def _cells(row: str) -> list[str]:
    # A pipe inside a cell is written as \| for markdown; only bare pipes delimit fields
    assert row.startswith("| ") and row.endswith(" |")
    return re.split(r"(?<!\\)\|", row)[1:-1]


# ── Formatters ───────────────────────────────────────────────────────


class TestFormatters:
    def test_flag(self) -> None:
        assert format_flag(True) == "Valid"
        assert format_flag(False) == "Invalid"

    def test_status(self) -> None:
        assert format_status(VatStatus.VALID) == "Valid"
        assert format_status(VatStatus.INVALID) == "Invalid"
        assert format_status(VatStatus.UNKNOWN) == "N/A"

    def test_text_placeholder(self) -> None:
        assert format_text(None) == "—"
        assert format_text("") == "—"

    def test_text_stays_in_one_cell(self) -> None:
        assert format_text("Foo | Bar\nLtd") == "Foo \\| Bar Ltd"
        assert format_text("Foo\r\nBar\rLtd") == "Foo Bar Ltd"

    def test_text_keeps_inner_spacing(self) -> None:
        assert format_text("DE 123  456") == "DE 123  456"
        assert format_text("A\tB") == "A\tB"


# ── Table ────────────────────────────────────────────────────────────


class TestBuildSummaryTable:
    def test_exact_rendering(self) -> None:
        assert build_summary_table(_results()) == "\n".join([
            "| VAT Number | Country | Format | VAT Valid | Company |",
            "|------------|---------|--------|-----------|---------|",
            "| DE123456789 | DE | Valid | Valid | Beispiel GmbH |",
            "| FR987654321 | FR | Valid | Invalid | — |",
            "| XX000000000 | XX | Invalid | N/A | — |",
        ])

    def test_line_count_and_columns(self) -> None:
        results = _results() + [
            ValidationResult(tax_id="IT1", country="IT", format_valid=True, company_name="A | B\nC"),
        ]
        lines = build_summary_table(results).split("\n")

        assert len(lines) == len(results) + 2
        for row in lines[2:]:
            assert len(_cells(row)) == 5

    def test_number_echoed_as_given(self) -> None:
        result = ValidationResult.fallback("DE 123  456")
        row = build_summary_table([result]).split("\n")[2]

        assert _cells(row)[0].strip() == result.tax_id

    def test_empty_sequence_is_header_only(self) -> None:
        assert len(build_summary_table([]).split("\n")) == 2

    def test_rendering_is_deterministic(self) -> None:
        assert build_summary_table(_results()) == build_summary_table(_results())


# ── Summary line ─────────────────────────────────────────────────────


class TestSummaryLine:
    def test_plain(self) -> None:
        report = BatchReport(results=tuple(_results()))
        assert build_summary_line(report) == "1 valid, 2 invalid out of 3 checked."

    def test_emphasis(self) -> None:
        report = BatchReport(results=tuple(_results()))
        assert build_summary_line(report, emphasis=True) == "**1 valid**, **2 invalid** out of 3 checked."

    def test_job_summary(self) -> None:
        report = BatchReport(results=tuple(_results()))
        markdown = build_job_summary(report)

        assert markdown.startswith("## VAT Validation Results\n\n| VAT Number |")
        assert markdown.endswith("\n\n**1 valid**, **2 invalid** out of 3 checked.\n")
        assert build_summary_table(report.results) in markdown
