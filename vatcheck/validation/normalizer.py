"""Turn the raw ``vat-numbers`` input into an ordered list of numbers."""

from __future__ import annotations


def parse_vat_numbers(raw: str) -> list[str]:
    """Split on newlines, trim (which also drops a trailing \\r), drop blank lines.

    Order is kept and repeated numbers are not collapsed.
    """
    return [line.strip() for line in raw.split("\n") if line.strip()]
