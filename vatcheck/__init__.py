"""VAT number validation step for CI pipelines."""

__version__ = "0.1.0"
