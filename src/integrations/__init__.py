"""
Integrations layer.
This package contains all code used to communicate with the identity-verification provider:
- contracts: the parameter schema, applicant record and decision shapes
- clients/real_http: the HTTP client that calls the provider with Basic auth
- policy: normalizers that turn provider JSON into contract models

Key rule:
- API endpoints and the form MUST NOT build provider payloads ad hoc.
- They go through the contracts and the real HTTP client.
"""

from .contracts.verification import (
    ApplicantRecord,
    DecisionResult,
    DecisionSummary,
    FieldSchema,
    FieldValidation,
    Outcome,
    OutcomeKind,
    SchemaMap,
    build_applicant_record,
)

__all__ = [
    "ApplicantRecord", "DecisionResult", "DecisionSummary",
    "FieldSchema", "FieldValidation", "Outcome", "OutcomeKind",
    "SchemaMap", "build_applicant_record",
]
