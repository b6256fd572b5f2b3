"""
Intake form session.

Holds everything one applicant's page view needs and moves it through the
form phases:

    LOADING_SCHEMA -> AWAITING_SUBMISSION <-> SUBMITTING -> AWAITING_SUBMISSION | SHOWING_OUTCOME

The session knows nothing about widgets; the Streamlit page reads its state
and calls `update_field`, `submit` and `reset`.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Optional

from src.error_handler import IntakeError
from src.fallback_handler import FallbackHandler
from src.form.api_client import IntakeApiClient
from src.form.field_rendering import FieldPresentation, normalize_input, present_field
from src.form.layout import FieldGroups, group_fields
from src.form.outcomes import OutcomeScreen, build_outcome_screen
from src.form.validation import FormValidationError, validate_applicant_record
from src.integrations.contracts.verification import (
    ApplicantRecord,
    DecisionResult,
    SchemaMap,
    build_applicant_record,
)
from src.integrations.policy.response_wrappers import (
    IntegrationResponseError,
    normalize_decision_response,
    parse_schema_map,
)

logger = logging.getLogger(__name__)

SUBMIT_FAILED_MESSAGE = "Failed to submit application. Please try again."


class FormPhase(str, Enum):
    LOADING_SCHEMA = "LOADING_SCHEMA"
    AWAITING_SUBMISSION = "AWAITING_SUBMISSION"
    SUBMITTING = "SUBMITTING"
    SHOWING_OUTCOME = "SHOWING_OUTCOME"


class FormSession:
    def __init__(
        self,
        api: IntakeApiClient,
        fallback_handler: Optional[FallbackHandler] = None,
        default_country: str = "US",
    ) -> None:
        self.api = api
        self.fallback_handler = fallback_handler or FallbackHandler()
        self.default_country = default_country

        self.phase = FormPhase.LOADING_SCHEMA
        self.schema: SchemaMap = {}
        self.record: ApplicantRecord = {}
        self.schema_source: Optional[str] = None
        self.error: Optional[str] = None
        self.field_errors: Dict[str, str] = {}
        self.result: Optional[DecisionResult] = None

    # ------------------------------------------------------------------ #
    # Loading
    # ------------------------------------------------------------------ #
    def load_schema(self) -> SchemaMap:
        fetched: Optional[SchemaMap] = None
        reason: Optional[str] = None
        try:
            fetched = parse_schema_map(self.api.get_parameters())
        except IntakeError as e:
            reason = f"parameters_api_failed: {e}"
        except IntegrationResponseError as e:
            reason = f"unparseable_parameters: {e}"
        except Exception as e:
            logger.exception("Unexpected error loading parameters")
            reason = f"parameters_load_error: {e}"

        self.schema = self.fallback_handler.resolve_schema(fetched, reason=reason)
        self.schema_source = "provider" if self.schema is fetched else "fallback"
        self.record = self.fallback_handler.initial_record(self.schema, self.default_country)
        self.phase = FormPhase.AWAITING_SUBMISSION
        logger.info("Form ready with %d fields from %s schema", len(self.schema), self.schema_source)
        return self.schema

    # ------------------------------------------------------------------ #
    # Editing
    # ------------------------------------------------------------------ #
    def presentations(self) -> Dict[str, FieldPresentation]:
        return {name: present_field(field) for name, field in self.schema.items()}

    def groups(self) -> FieldGroups:
        return group_fields(self.schema)

    def update_field(self, name: str, raw_value: Optional[str]) -> str:
        value = normalize_input(name, raw_value)
        self.record[name] = value
        return value

    # ------------------------------------------------------------------ #
    # Submitting
    # ------------------------------------------------------------------ #
    @property
    def is_submitting(self) -> bool:
        return self.phase is FormPhase.SUBMITTING

    def submit(self) -> FormPhase:
        if self.phase is not FormPhase.AWAITING_SUBMISSION:
            logger.warning("Ignoring submit while %s", self.phase.value)
            return self.phase

        try:
            validate_applicant_record(self.schema, self.record)
        except FormValidationError as e:
            self.error = e.message
            self.field_errors = dict(e.field_errors)
            return self.phase

        self.phase = FormPhase.SUBMITTING
        self.error = None
        self.field_errors = {}
        self.result = None

        payload = build_applicant_record(self.schema, self.record)
        try:
            result = normalize_decision_response(self.api.submit_application(payload))
        except (IntakeError, IntegrationResponseError) as e:
            logger.warning("Application submission failed: %s", e)
            self.error = SUBMIT_FAILED_MESSAGE
            self.phase = FormPhase.AWAITING_SUBMISSION
            return self.phase
        except Exception:
            logger.exception("Unexpected error submitting application")
            self.error = SUBMIT_FAILED_MESSAGE
            self.phase = FormPhase.AWAITING_SUBMISSION
            return self.phase

        logger.info("Decision received: outcome=%s", result.summary.outcome)
        self.result = result
        self.phase = FormPhase.SHOWING_OUTCOME
        return self.phase

    # ------------------------------------------------------------------ #
    # Outcome
    # ------------------------------------------------------------------ #
    def outcome_screen(self) -> Optional[OutcomeScreen]:
        if self.result is None:
            return None
        return build_outcome_screen(self.result)

    def reset(self) -> None:
        """Back to the form; the applicant's entries are kept."""
        self.result = None
        self.error = None
        self.field_errors = {}
        if self.phase is not FormPhase.LOADING_SCHEMA:
            self.phase = FormPhase.AWAITING_SUBMISSION
