"""
Deterministic IBAN checks: the MOD-97-10 validation engine.

Each validate_* function:
  - Takes a whitespace-stripped character sequence
  - Returns a list of ValidationFinding objects (empty = all clear)
  - Is independently testable

is_valid() is the public contract: the same five checks, short-circuiting
to a plain boolean with no findings built along the way.
"""

from __future__ import annotations

from .countries import country_length, require_country_length
from .exceptions import InvalidCharacterError, UnknownCountryError
from .expander import expand_digits, mod97
from .models import Severity, ValidationFinding

# ─── Constants ───────────────────────────────────────────────────────

MIN_LENGTH = 2  # Enough for a country code
ROTATION = 4  # Country code + check digits
EXPECTED_REMAINDER = 1

# str.isspace() also matches the ASCII information separators, which are
# not Unicode White_Space and must survive stripping.
_NOT_WHITESPACE: frozenset[str] = frozenset("\x1c\x1d\x1e\x1f")


# ─── Public Contract ─────────────────────────────────────────────────


def is_valid(iban_text: str) -> bool:
    """Return True if ``iban_text`` is a well-formed, checksum-correct IBAN."""
    # 1. Strip whitespace
    iban = strip_whitespace(iban_text)
    if len(iban) < MIN_LENGTH:
        return False

    # 2. Country length
    if country_length(iban[:2]) != len(iban):
        return False

    # 3 + 4. Rotate and expand
    try:
        digits = expand_digits(rotate(iban))
    except InvalidCharacterError:
        return False

    # 5. Checksum
    try:
        return mod97(digits) == EXPECTED_REMAINDER
    except ValueError:
        return False


# ─── Normalization ───────────────────────────────────────────────────


def strip_whitespace(text: str) -> str:
    """Remove every Unicode White_Space character, keeping order and case."""
    return "".join(
        char for char in text if not char.isspace() or char in _NOT_WHITESPACE
    )


def rotate(iban: str) -> str:
    """Move the country code and check digits behind the BBAN."""
    return iban[ROTATION:] + iban[:ROTATION]


def checksum_remainder(iban: str) -> int:
    """MOD-97 remainder of the rearranged, expanded IBAN.

    Raises:
        InvalidCharacterError: If a character is not alphanumeric.
        ValueError: If the expansion is empty.
    """
    return mod97(expand_digits(rotate(iban)))


# ─── Individual Validators ───────────────────────────────────────────


def validate_length(iban: str) -> list[ValidationFinding]:
    """The total length must match the registry entry for the country code.

    The country code is taken verbatim: "gb82..." is an unknown country,
    not Great Britain.
    """
    findings: list[ValidationFinding] = []

    if len(iban) < MIN_LENGTH:
        findings.append(
            ValidationFinding(
                severity=Severity.ERROR,
                code="IBAN_TOO_SHORT",
                field="iban",
                message=(
                    f"IBAN has {len(iban)} non-whitespace character(s); at least "
                    f"{MIN_LENGTH} are needed to read a country code."
                ),
                details={"length": len(iban)},
            )
        )
        return findings

    country_code = iban[:2]

    try:
        expected = require_country_length(country_code)
    except UnknownCountryError as exc:
        findings.append(
            ValidationFinding(
                severity=Severity.ERROR,
                code=exc.code,
                field="country_code",
                message=str(exc),
                details=exc.details,
            )
        )
        return findings

    if expected != len(iban):
        findings.append(
            ValidationFinding(
                severity=Severity.ERROR,
                code="LENGTH_MISMATCH",
                field="iban",
                message=(
                    f"{country_code} IBANs are {expected} characters long, "
                    f"got {len(iban)}."
                ),
                details={
                    "country_code": country_code,
                    "expected_length": expected,
                    "actual_length": len(iban),
                },
            )
        )

    return findings


def validate_characters(iban: str) -> list[ValidationFinding]:
    """Every character must expand to a base-36 digit (0-9, A-Z)."""
    findings: list[ValidationFinding] = []

    try:
        expand_digits(iban)
    except InvalidCharacterError as exc:
        findings.append(
            ValidationFinding(
                severity=Severity.ERROR,
                code=exc.code,
                field="iban",
                message=str(exc),
                details=exc.details,
            )
        )

    return findings


def validate_checksum(
    iban: str, remainder: int | None = None
) -> list[ValidationFinding]:
    """The rearranged, expanded IBAN must leave remainder 1 modulo 97.

    Args:
        iban: Whitespace-stripped IBAN.
        remainder: Precomputed checksum_remainder(iban), if the caller
            already has it.

    Assumes validate_characters() passed; a non-alphanumeric character is
    still reported rather than raised.
    """
    findings: list[ValidationFinding] = []

    if remainder is None:
        try:
            remainder = checksum_remainder(iban)
        except InvalidCharacterError:
            return validate_characters(iban)
        except ValueError as exc:
            findings.append(
                ValidationFinding(
                    severity=Severity.ERROR,
                    code="CHECKSUM_UNCOMPUTABLE",
                    field="check_digits",
                    message=f"Checksum could not be computed: {exc}",
                )
            )
            return findings

    if remainder != EXPECTED_REMAINDER:
        findings.append(
            ValidationFinding(
                severity=Severity.ERROR,
                code="CHECKSUM_MISMATCH",
                field="check_digits",
                message=(
                    f"MOD-97 remainder is {remainder}, expected "
                    f"{EXPECTED_REMAINDER}. Check digits '{iban[2:4]}' do not "
                    f"match the account number."
                ),
                details={"remainder": remainder, "check_digits": iban[2:4]},
            )
        )

    return findings
