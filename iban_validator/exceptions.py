"""
Custom exception hierarchy for IBAN validation.

These are raised by the internal building blocks (country lookup, digit
expansion) and never escape the public API: the validators collapse them
into a boolean or a ValidationFinding carrying the same machine-readable code.
"""

from __future__ import annotations


class IbanValidationError(Exception):
    """Base exception for all IBAN validation failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class UnknownCountryError(IbanValidationError):
    """The two-letter prefix is not an IBAN-participating country."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNKNOWN_COUNTRY_CODE", message, details)


class InvalidCharacterError(IbanValidationError):
    """A character cannot be expanded to a base-36 digit."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_CHARACTER", message, details)
