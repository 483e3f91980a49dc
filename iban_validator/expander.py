"""
Base-36 digit expansion and the incremental MOD-97 remainder.

The MOD-97-10 check works on a purely numeric string, so every letter of the
rearranged IBAN is replaced by its base-36 value:

    "0" … "9"  → themselves          (one digit)
    "A" … "Z"  → "10" … "35"         (two digits, case-insensitive)

    "WEST12GB82" → "3214282912" + "1611" + "82"

Only ASCII is accepted. Python's str.isdigit() and int() both accept Unicode
digits such as "²" or "٣", so classification is done against explicit ASCII
tables instead.
"""

from __future__ import annotations

import string
from typing import Iterable

from .exceptions import InvalidCharacterError

# ─── Lookup Tables ───────────────────────────────────────────────────

_DIGITS: frozenset[str] = frozenset(string.digits)

_LETTER_VALUES: dict[str, str] = {
    letter: str(value)
    for value, letter in enumerate(string.ascii_uppercase, start=10)
}

MODULUS = 97


# ─── Expansion ───────────────────────────────────────────────────────


def expand_digits(chars: Iterable[str]) -> str:
    """Expand alphanumeric characters into a single decimal-digit string.

    Args:
        chars: Characters in rotation order (a str or any iterable of
            single characters).

    Returns:
        The concatenated decimal digits, in input order.

    Raises:
        InvalidCharacterError: On the first character that is neither an
            ASCII digit nor an ASCII letter. No partial result is returned.
    """
    parts: list[str] = []

    for position, char in enumerate(chars):
        if char in _DIGITS:
            parts.append(char)
            continue

        value = _LETTER_VALUES.get(char.upper()) if char.isascii() else None
        if value is None:
            raise InvalidCharacterError(
                f"Character {char!r} at position {position} is not alphanumeric.",
                details={"character": char, "position": position},
            )
        parts.append(value)

    return "".join(parts)


# ─── Checksum ────────────────────────────────────────────────────────


def mod97(digits: str) -> int:
    """Reduce a decimal-digit string modulo 97 without building a big integer.

    Horner's method keeps the accumulator below 97, so IBANs of any length
    (60+ digits after expansion) are handled in constant space.

    Raises:
        ValueError: If ``digits`` is empty or contains a non-ASCII-digit.
    """
    if not digits:
        raise ValueError("Empty digit string")

    remainder = 0
    for char in digits:
        if char not in _DIGITS:
            raise ValueError(f"Unrecognized digit: {char!r}")
        remainder = (remainder * 10 + ord(char) - ord("0")) % MODULUS

    return remainder
