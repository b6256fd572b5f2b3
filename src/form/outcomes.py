"""Outcome screens shown after the provider returns a decision."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from src.integrations.contracts.verification import DecisionResult, Outcome, OutcomeKind

SUBMIT_ANOTHER = "Submit Another Application"


@dataclass(frozen=True)
class OutcomeScreen:
    outcome: Outcome
    title: str
    message: str
    application_token: str
    tone: str  # success / warning / error / neutral
    notes: List[str] = field(default_factory=list)
    action_label: str = SUBMIT_ANOTHER


def build_outcome_screen(result: DecisionResult) -> OutcomeScreen:
    outcome = Outcome.parse(result.summary.outcome)
    token = result.application_token

    if outcome.kind is OutcomeKind.APPROVED:
        return OutcomeScreen(
            outcome=outcome,
            title="Success!",
            message="Congratulations! You have successfully created an account with our service.",
            application_token=token,
            tone="success",
        )

    if outcome.kind is OutcomeKind.MANUAL_REVIEW:
        return OutcomeScreen(
            outcome=outcome,
            title="Under Review",
            message="Thanks for submitting your application! We'll be in touch shortly with next steps.",
            application_token=token,
            tone="warning",
            notes=["Please save this token for your records. Our team will contact you within 1-2 business days."],
        )

    if outcome.kind is OutcomeKind.DENIED:
        return OutcomeScreen(
            outcome=outcome,
            title="Application Not Approved",
            message="Sorry, your application was not successful.",
            application_token=token,
            tone="error",
            notes=["If you believe this decision was made in error, please contact our support team."],
            action_label="Try Again",
        )

    return OutcomeScreen(
        outcome=outcome,
        title="Application Processed",
        message=f"Application processed. Outcome: {outcome.raw}",
        application_token=token,
        tone="neutral",
    )
