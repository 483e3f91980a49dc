"""
Validation pipeline. Runs every IBAN check in order and explains the result.

Flow:
  ┌───────────┐
  │ Raw input │
  └─────┬─────┘
        │
  ┌─────▼─────┐
  │   Strip   │   ← Drop all whitespace
  └─────┬─────┘
        │
  ┌─────▼─────┐
  │  Length   │   ← Country code lookup
  └─────┬─────┘
        │
  ┌─────▼─────┐
  │ Characters│   ← Base-36 expansion must succeed
  └─────┬─────┘
        │
  ┌─────▼─────┐
  │ Checksum  │   ← Rotate, expand, MOD-97 == 1
  └─────┬─────┘
        │
  ┌─────▼─────┐
  │  Report   │   ← Typed findings + pass/fail
  └───────────┘

Each stage short-circuits: a report contains the findings of the first
failing stage only, so its verdict always agrees with is_valid(). Every
finding a stage emits is an ERROR; any finding rejects the IBAN.
"""

from __future__ import annotations

import logging

from .countries import country_length
from .models import ValidationFinding, ValidationReport
from .validators import (
    MIN_LENGTH,
    checksum_remainder,
    strip_whitespace,
    validate_characters,
    validate_checksum,
    validate_length,
)

logger = logging.getLogger(__name__)


class IbanValidationPipeline:
    """Orchestrates the full IBAN validation workflow.

    Usage:
        pipeline = IbanValidationPipeline()
        report = pipeline.run("GB82 WEST 1234 5698 7654 32")
        if not report.is_valid:
            for finding in report.findings:
                print(finding.code, finding.message)
    """

    def run(self, raw_text: str) -> ValidationReport:
        """Execute every check on a raw IBAN string.

        Args:
            raw_text: Candidate IBAN, optionally grouped with whitespace.

        Returns:
            ValidationReport with findings and pass/fail verdict.
        """
        # ── Step 1: Normalize ───────────────────────────────────────
        iban = strip_whitespace(raw_text)
        country_code = iban[:2] if len(iban) >= MIN_LENGTH else None
        expected_length = country_length(country_code) if country_code else None

        # ── Step 2: Length / country ────────────────────────────────
        findings = validate_length(iban)
        if findings:
            return self._reject(iban, country_code, expected_length, findings)

        # ── Step 3: Character set ───────────────────────────────────
        findings = validate_characters(iban)
        if findings:
            return self._reject(iban, country_code, expected_length, findings)

        # ── Step 4: Checksum ────────────────────────────────────────
        remainder = checksum_remainder(iban)
        findings = validate_checksum(iban, remainder)
        if findings:
            return self._reject(
                iban, country_code, expected_length, findings, remainder
            )

        logger.debug("IBAN %s passed all checks", iban)
        return ValidationReport(
            iban=iban,
            is_valid=True,
            country_code=country_code,
            expected_length=expected_length,
            remainder=remainder,
        )

    # ─── Rejection ───────────────────────────────────────────────────

    def _reject(
        self,
        iban: str,
        country_code: str | None,
        expected_length: int | None,
        findings: list[ValidationFinding],
        remainder: int | None = None,
    ) -> ValidationReport:
        """Build a failing report from the findings of one stage."""
        for finding in findings:
            logger.debug("IBAN %r rejected: [%s] %s", iban, finding.code, finding.message)

        return ValidationReport(
            iban=iban,
            is_valid=False,
            country_code=country_code,
            expected_length=expected_length,
            remainder=remainder,
            findings=findings,
        )


def validate_iban(raw_text: str) -> ValidationReport:
    """Convenience wrapper: run a fresh pipeline on one IBAN."""
    return IbanValidationPipeline().run(raw_text)
