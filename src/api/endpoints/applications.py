"""
Application submission: relays an applicant record to the provider's
evaluation endpoint and returns the decision document untouched.
"""

import json
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from src.api.dependencies import get_verification_client
from src.error_handler import ConfigurationError, EndpointError, IntakeError, UpstreamError
from src.integrations.clients.real_http.verification import VerificationClient

logger = logging.getLogger(__name__)

api = APIRouter()
applications_api = api

PROCESS_FAILED = "Failed to process application"

# Last name the provider sandbox maps to a Deny decision.
SANDBOX_DENY_LAST_NAME = "Deny"


async def _read_body(request: Request) -> Dict[str, Any]:
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise EndpointError(f"Invalid JSON body: {e}", status_code=500, public_message=PROCESS_FAILED) from e
    if not isinstance(body, dict):
        raise EndpointError(
            f"Application body must be an object; got {type(body).__name__}",
            status_code=500,
            public_message=PROCESS_FAILED,
        )
    return body


def _log_application_summary(body: Dict[str, Any]) -> None:
    logger.info("Application received with fields: %s", list(body.keys()))
    if body.get("name_first") and body.get("name_last"):
        logger.info("Applicant: %s %s", body["name_first"], body["name_last"])
    if body.get("email_address"):
        logger.info("Email: %s", body["email_address"])
    if body.get("address_line_1") and body.get("address_city") and body.get("address_state"):
        logger.info("Address: %s, %s, %s", body["address_line_1"], body["address_city"], body["address_state"])
    if body.get("birth_date"):
        logger.info("Birth date: %s", body["birth_date"])
    if body.get("document_ssn"):
        logger.info("SSN provided: yes")
    if body.get("name_last") == SANDBOX_DENY_LAST_NAME:
        logger.info("Sandbox persona detected: last name '%s' should trigger a deny outcome", SANDBOX_DENY_LAST_NAME)


def _log_decision(decision: Any) -> None:
    if not isinstance(decision, dict):
        logger.warning("Provider decision is not an object: %s", type(decision).__name__)
        return
    summary = decision.get("summary") if isinstance(decision.get("summary"), dict) else {}
    logger.info("Application token: %s", decision.get("application_token"))
    logger.info("Evaluation token: %s", decision.get("evaluation_token"))
    logger.info("Summary outcome: %s", summary.get("outcome"))
    logger.info("Summary outcome reasons: %s", summary.get("outcome_reasons"))
    if summary.get("outcome") == "Deny":
        logger.info("Deny outcome confirmed: application was denied")


@api.post("/submit-application", tags=["Applications"])
async def submit_application(request: Request, client: VerificationClient = Depends(get_verification_client)):
    body = await _read_body(request)
    _log_application_summary(body)

    try:
        decision = await client.submit_evaluation(body)
    except ConfigurationError:
        raise
    except UpstreamError as e:
        raise EndpointError(str(e), status_code=e.status_code, public_message=PROCESS_FAILED) from e
    except IntakeError as e:
        raise EndpointError(str(e), status_code=500, public_message=PROCESS_FAILED) from e
    except Exception as e:
        logger.exception("Unexpected error submitting application")
        raise EndpointError(str(e), status_code=500, public_message=PROCESS_FAILED) from e

    _log_decision(decision)
    return JSONResponse(content=decision)
