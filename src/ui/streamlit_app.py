"""
Identity Verification Intake - Schema-Driven Form

The fields come from the verification provider's parameter schema (via the
intake API), falling back to a fixed applicant field set. The decision
returned on submission selects one of the outcome screens.

Usage:
    uvicorn src.api.main:app --port 8000
    streamlit run src/ui/streamlit_app.py
"""

import logging

import streamlit as st

from src.form.api_client import IntakeApiClient
from src.form.field_rendering import FieldPresentation
from src.form.session import FormPhase, FormSession
from src.utils.config_loader import load_intake_config

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

TONE_ALERTS = {
    "success": st.success,
    "warning": st.warning,
    "error": st.error,
    "neutral": st.info,
}


def _widget_key(name: str) -> str:
    return f"field_{name}"


def _get_session() -> FormSession:
    if "form_session" not in st.session_state:
        cfg = load_intake_config()
        api = IntakeApiClient(cfg.ui.api_base_url, timeout_seconds=cfg.ui.timeout_seconds)
        st.session_state.form_session = FormSession(api, default_country=cfg.ui.default_country)
    return st.session_state.form_session


def _on_field_change(session: FormSession, name: str) -> None:
    key = _widget_key(name)
    # Write the normalised value back so the widget shows it (digits only, uppercase).
    st.session_state[key] = session.update_field(name, st.session_state.get(key, ""))


def _render_field(session: FormSession, presentation: FieldPresentation) -> None:
    key = _widget_key(presentation.name)
    if key not in st.session_state:
        st.session_state[key] = session.record.get(presentation.name, "")

    st.text_input(
        presentation.label,
        key=key,
        placeholder=presentation.placeholder,
        max_chars=presentation.max_length,
        autocomplete="email" if presentation.input_type == "email" else None,
        on_change=_on_field_change,
        args=(session, presentation.name),
    )
    field_error = session.field_errors.get(presentation.name)
    if field_error:
        st.caption(f":red[{field_error}]")


def _render_form(session: FormSession) -> None:
    st.subheader("Financial Application")
    st.markdown("Please provide your information for identity verification and fraud prevention screening")

    presentations = session.presentations()
    groups = session.groups()

    if groups.name_fields:
        cols = st.columns(2)
        for i, (name, _) in enumerate(groups.name_fields):
            with cols[i % 2]:
                _render_field(session, presentations[name])

    if groups.address_fields:
        for name, _ in groups.address_single_fields:
            _render_field(session, presentations[name])
        row = groups.address_row_fields
        if row:
            cols = st.columns(3)
            for i, (name, _) in enumerate(row):
                with cols[i % 3]:
                    _render_field(session, presentations[name])

    for name, _ in groups.personal_fields:
        _render_field(session, presentations[name])

    if session.error:
        st.error(session.error)

    label = "Processing Application..." if session.is_submitting else "Submit Application"
    if st.button(label, type="primary", use_container_width=True, disabled=session.is_submitting):
        with st.spinner("Processing Application..."):
            session.submit()
        st.rerun()


def _render_outcome(session: FormSession) -> None:
    screen = session.outcome_screen()
    if screen is None:
        session.reset()
        st.rerun()
        return

    st.header(screen.title)
    st.markdown(screen.message)
    TONE_ALERTS.get(screen.tone, st.info)(f"**Application Token:** {screen.application_token}")
    for note in screen.notes:
        st.markdown(note)

    if st.button(screen.action_label):
        session.reset()
        st.rerun()


st.set_page_config(page_title="Identity Verification", layout="centered")
st.title("Identity Verification")
st.markdown("Fast, secure identity verification with real-time decisions.")
st.markdown("---")

form_session = _get_session()

if form_session.phase is FormPhase.LOADING_SCHEMA:
    with st.spinner("Loading application form..."):
        form_session.load_schema()

if form_session.phase is FormPhase.SHOWING_OUTCOME:
    _render_outcome(form_session)
else:
    _render_form(form_session)
