"""Cell formatters for the results table."""

from __future__ import annotations

from vatcheck.integrations.vericorp.schemas import VatStatus

MISSING = "—"


def format_flag(value: bool) -> str:
    """Format check: True -> "Valid", False -> "Invalid"."""
    return "Valid" if value else "Invalid"


def format_status(value: VatStatus) -> str:
    """Registration status, with "N/A" when the API gave no answer."""
    if value is VatStatus.VALID:
        return "Valid"
    if value is VatStatus.INVALID:
        return "Invalid"
    return "N/A"


def format_text(value: str | None) -> str:
    """Text safe for a single markdown table cell.

    Line breaks become spaces and pipes are escaped as ``\\|``; all other
    characters, repeated spaces included, are kept as given.
    """
    if not value:
        return MISSING
    for line_break in ("\r\n", "\r", "\n"):
        value = value.replace(line_break, " ")
    return value.replace("|", "\\|")
