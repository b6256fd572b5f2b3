import pytest

from src.form.outcomes import build_outcome_screen
from src.integrations.contracts.verification import DecisionResult, Outcome, OutcomeKind
from src.integrations.policy.response_wrappers import IntegrationResponseError, normalize_decision_response


@pytest.mark.parametrize(
    "raw, kind",
    [
        ("Approved", OutcomeKind.APPROVED),
        ("APPROVED", OutcomeKind.APPROVED),
        ("Manual Review", OutcomeKind.MANUAL_REVIEW),
        ("manual review", OutcomeKind.MANUAL_REVIEW),
        ("Deny", OutcomeKind.DENIED),
        ("Denied", OutcomeKind.DENIED),
        ("Escalate", OutcomeKind.UNKNOWN),
        ("", OutcomeKind.UNKNOWN),
        (None, OutcomeKind.UNKNOWN),
    ],
)
def test_outcome_parse(raw, kind):
    assert Outcome.parse(raw).kind is kind


def test_deny_screen_shows_token_and_support_note():
    result = normalize_decision_response(
        {"summary": {"outcome": "Deny", "outcome_reasons": []}, "application_token": "A-1"}
    )
    screen = build_outcome_screen(result)

    assert screen.title == "Application Not Approved"
    assert screen.application_token == "A-1"
    assert screen.action_label == "Try Again"
    assert any("contact our support team" in n for n in screen.notes)


def test_manual_review_screen_mentions_business_days():
    result = normalize_decision_response({"summary": {"outcome": "MANUAL REVIEW"}, "application_token": "A-2"})
    screen = build_outcome_screen(result)

    assert screen.title == "Under Review"
    assert screen.application_token == "A-2"
    assert any("1-2 business days" in n for n in screen.notes)


def test_approved_screen():
    screen = build_outcome_screen(DecisionResult(summary={"outcome": "approved"}, application_token="A-3"))

    assert screen.title == "Success!"
    assert screen.tone == "success"
    assert screen.action_label == "Submit Another Application"


def test_unknown_outcome_shows_raw_string():
    screen = build_outcome_screen(DecisionResult(summary={"outcome": "Escalate"}, application_token="A-4"))

    assert screen.outcome.kind is OutcomeKind.UNKNOWN
    assert screen.message == "Application processed. Outcome: Escalate"
    assert screen.application_token == "A-4"


def test_missing_summary_is_tolerated():
    result = normalize_decision_response({"application_token": "A-5", "evaluation_token": "L-5"})

    assert result.summary.outcome == ""
    assert result.evaluation_token == "L-5"
    assert build_outcome_screen(result).outcome.kind is OutcomeKind.UNKNOWN


def test_non_object_decision_is_rejected():
    with pytest.raises(IntegrationResponseError):
        normalize_decision_response(["Approved"])


def test_numeric_tokens_are_kept_as_strings():
    result = normalize_decision_response(
        {"summary": {"outcome": "Approved"}, "application_token": 12345, "evaluation_token": 678}
    )

    assert result.application_token == "12345"
    assert result.evaluation_token == "678"
    assert build_outcome_screen(result).application_token == "12345"
