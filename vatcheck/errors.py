"""Error taxonomy for a validation run.

Per-identifier errors (RemoteStatusError, TransportError, DecodeError) are
contained by the batch engine. ConfigurationError ends the run.
"""

from __future__ import annotations


class VatCheckError(Exception):
    """Base class for all expected failures."""


class ConfigurationError(VatCheckError):
    """Raised when a required input is missing or yields no identifiers."""


class RemoteStatusError(VatCheckError):
    """Raised when the validation API answers with a non-2xx status."""

    def __init__(self, status_code: int, tax_id: str) -> None:
        super().__init__(f"API returned {status_code} for {tax_id}")
        self.status_code = status_code
        self.tax_id = tax_id


class TransportError(VatCheckError):
    """Raised when the request never produced a usable response."""

    def __init__(self, message: str, tax_id: str) -> None:
        super().__init__(message)
        self.tax_id = tax_id


class DecodeError(TransportError):
    """Raised when a 2xx body is not JSON or not a validation result."""
