"""Input parsing and the sequential batch engine."""

from vatcheck.validation.engine import classify, validate_batch
from vatcheck.validation.normalizer import parse_vat_numbers

__all__ = ["classify", "parse_vat_numbers", "validate_batch"]
