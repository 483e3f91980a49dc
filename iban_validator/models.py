"""
Pydantic models for IBAN validation results.

The public is_valid() contract is a plain boolean; these models carry the
explanation for callers that ask for a full report.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


# ─── Severity Levels ────────────────────────────────────────────────


class Severity(str, Enum):
    """Severity of a validation finding."""

    ERROR = "ERROR"  # The IBAN is invalid
    WARNING = "WARNING"  # Accepted, but worth a second look
    INFO = "INFO"  # Informational observation


# ─── Validation Finding ─────────────────────────────────────────────


class ValidationFinding(BaseModel):
    """A single validation finding with severity, machine-readable code, and details."""

    severity: Severity
    code: str  # Machine-readable, e.g. "CHECKSUM_MISMATCH"
    field: str  # Which part of the IBAN this relates to
    message: str  # Human-readable explanation
    details: dict = Field(default_factory=dict)


# ─── Validation Report ──────────────────────────────────────────────


class ValidationReport(BaseModel):
    """The final output of the validation pipeline."""

    iban: str  # Whitespace-stripped input
    is_valid: bool
    country_code: Optional[str] = None
    expected_length: Optional[int] = None
    remainder: Optional[int] = None  # MOD-97 remainder, when it was reached
    findings: list[ValidationFinding] = Field(default_factory=list)
