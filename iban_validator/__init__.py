"""
IBAN Validator: ISO 7064 MOD-97-10 checksum validation for bank account numbers.

Architecture: Strip → Length lookup → Rotate → Base-36 expansion → MOD-97
Philosophy:  Answer yes or no. Explain why only when asked.
"""

from .pipeline import IbanValidationPipeline, validate_iban
from .validators import is_valid

__version__ = "1.0.0"

__all__ = ["IbanValidationPipeline", "is_valid", "validate_iban"]
