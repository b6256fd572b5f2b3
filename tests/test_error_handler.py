import json

from src.error_handler import ConfigurationError, EndpointError, ErrorHandler, UpstreamError


def test_configuration_error_payload():
    eh = ErrorHandler()
    out = eh.to_payload(ConfigurationError("Missing API credentials"))
    assert out == {"error": "API credentials not configured"}


def test_endpoint_error_keeps_chosen_status_and_message():
    eh = ErrorHandler()
    try:
        raise EndpointError("boom", status_code=418, public_message="Failed to process application") from UpstreamError(418)
    except EndpointError as exc:
        response = eh.to_response(exc)

    assert response.status_code == 418
    assert json.loads(response.body) == {"error": "Failed to process application"}


def test_upstream_error_message_carries_status_not_public_text():
    exc = UpstreamError(503, "Service Unavailable")
    assert exc.status_code == 503
    assert "503" in str(exc)
    assert exc.detail == "Service Unavailable"
