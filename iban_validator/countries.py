"""
Country length table: the total IBAN length for every participating country.

The values encode the external IBAN registry, so they are reproduced exactly.
Lookups are case-sensitive; the table only holds uppercase codes and a
lowercase prefix is treated as unknown.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .exceptions import UnknownCountryError

# ─── Country → Total IBAN Length ─────────────────────────────────────

COUNTRY_LENGTHS: Mapping[str, int] = MappingProxyType({
    "AL": 28, "AD": 24, "AT": 20, "AZ": 28, "BE": 16, "BH": 22,
    "BA": 20, "BR": 29, "BG": 22, "CR": 21, "HR": 21, "CY": 28,
    "CZ": 24, "DK": 18, "DO": 28, "EE": 20, "FO": 18, "FI": 18,
    "FR": 27, "GE": 22, "DE": 22, "GI": 23, "GR": 27, "GL": 18,
    "GT": 28, "HU": 28, "IS": 26, "IE": 22, "IL": 23, "IT": 27,
    "KZ": 20, "KW": 30, "LV": 21, "LB": 28, "LI": 21, "LT": 20,
    "LU": 20, "MK": 19, "MT": 31, "MR": 27, "MU": 30, "MC": 27,
    "MD": 24, "ME": 22, "NL": 18, "NO": 15, "PK": 24, "PS": 29,
    "PL": 28, "PT": 25, "RO": 24, "SM": 27, "SA": 24, "RS": 22,
    "SK": 24, "SI": 19, "ES": 24, "SE": 24, "CH": 21, "TN": 24,
    "TR": 26, "AE": 23, "GB": 22, "VG": 24,
})


# ─── Public API ──────────────────────────────────────────────────────


def country_length(country_code: str) -> int | None:
    """Return the expected IBAN length for a country, or None if unknown.

    Args:
        country_code: Exactly two characters, as sliced from the IBAN.
            No case normalization is applied.
    """
    return COUNTRY_LENGTHS.get(country_code)


def require_country_length(country_code: str) -> int:
    """Strict variant of country_length() for callers that want an exception."""
    length = country_length(country_code)
    if length is None:
        raise UnknownCountryError(
            f"'{country_code}' is not a recognized IBAN country code.",
            details={"country_code": country_code},
        )
    return length
