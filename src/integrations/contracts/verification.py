"""
Verification provider contracts.

Defines the shapes exchanged with the identity-verification provider:
- the parameter schema describing which applicant fields exist
- the applicant record posted for evaluation
- the decision document returned by an evaluation

Both the API layer (which relays these documents) and the form layer (which
interprets them) use these models.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


class FieldValidation(BaseModel):
    model_config = ConfigDict(extra="allow")

    pattern: Optional[str] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None


class FieldSchema(BaseModel):
    """One applicant-data field as described by the provider."""

    model_config = ConfigDict(extra="allow")

    name: str
    type: str = "string"
    required: bool = False
    description: Optional[str] = None
    validation: Optional[FieldValidation] = None


SchemaMap = Dict[str, FieldSchema]
ApplicantRecord = Dict[str, str]


class DecisionSummary(BaseModel):
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    outcome: str = ""
    outcome_reasons: List[str] = Field(default_factory=list)


class DecisionResult(BaseModel):
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    summary: DecisionSummary = Field(default_factory=DecisionSummary)
    application_token: str = ""
    evaluation_token: Optional[str] = None


class OutcomeKind(str, Enum):
    APPROVED = "APPROVED"
    MANUAL_REVIEW = "MANUAL_REVIEW"
    DENIED = "DENIED"
    UNKNOWN = "UNKNOWN"


_OUTCOME_ALIASES = {
    "approved": OutcomeKind.APPROVED,
    "manual review": OutcomeKind.MANUAL_REVIEW,
    "deny": OutcomeKind.DENIED,
    "denied": OutcomeKind.DENIED,
}


class Outcome(BaseModel):
    """Decision category; `raw` keeps the provider's string for display."""

    model_config = ConfigDict(frozen=True)

    kind: OutcomeKind
    raw: str = ""

    @classmethod
    def parse(cls, value: Optional[str]) -> "Outcome":
        raw = value or ""
        kind = _OUTCOME_ALIASES.get(raw.strip().lower(), OutcomeKind.UNKNOWN)
        return cls(kind=kind, raw=raw)


def build_applicant_record(schema: Mapping[str, Any], values: Optional[Mapping[str, Any]] = None) -> ApplicantRecord:
    """
    Build the document sent for evaluation.

    Every schema key is present (empty string when unset). Keys outside the
    schema are passed through after the schema keys; the provider decides
    what to do with them.
    """
    values = values or {}
    record: ApplicantRecord = {}
    for key in schema:
        value = values.get(key)
        record[key] = "" if value is None else str(value)
    for key, value in values.items():
        if key not in record:
            record[key] = "" if value is None else str(value)
    return record


__all__ = [
    "ApplicantRecord",
    "DecisionResult",
    "DecisionSummary",
    "FieldSchema",
    "FieldValidation",
    "Outcome",
    "OutcomeKind",
    "SchemaMap",
    "build_applicant_record",
]
