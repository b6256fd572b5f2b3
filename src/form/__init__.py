"""
Intake form layer.

Everything the applicant-facing form needs that does not depend on a UI
toolkit: field presentation, grouping, validation, outcome screens, the
client for the local intake API, and the session state machine.

The Streamlit page in src/ui only renders what FormSession exposes.
"""

from .api_client import IntakeApiClient
from .outcomes import OutcomeScreen, build_outcome_screen
from .session import FormPhase, FormSession
from .validation import FormValidationError

__all__ = [
    "FormPhase",
    "FormSession",
    "FormValidationError",
    "IntakeApiClient",
    "OutcomeScreen",
    "build_outcome_screen",
]
