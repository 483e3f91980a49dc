#!/usr/bin/env python3
"""
IBAN Validator: Entry Point
===========================

Validates a sample British IBAN and prints the verdict.

Usage:
    python main.py
"""

from __future__ import annotations

import logging

from iban_validator import is_valid

# ─── The Sample IBAN ────────────────────────────────────────────────

SAMPLE_IBAN = "GB82 WEST 1234 5698 7654 32"

VALID_MESSAGE = "IBAN correctly validated!"
INVALID_MESSAGE = "Invalid IBAN!"


# ─── Main ────────────────────────────────────────────────────────────


def main() -> int:
    """Validate the sample IBAN and print one line. Always returns 0."""
    logging.basicConfig(level=logging.WARNING)

    if is_valid(SAMPLE_IBAN):
        print(VALID_MESSAGE)
    else:
        print(INVALID_MESSAGE)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
