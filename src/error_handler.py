"""Error types and response rendering for the intake API."""
from typing import Any, Dict, Optional
import logging

from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class IntakeError(Exception):
    """Base error. `public_message` is what the caller sees; str(exc) is for logs."""

    status_code: int = 500
    public_message: str = "Internal server error"

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        status_code: Optional[int] = None,
        public_message: Optional[str] = None,
    ) -> None:
        super().__init__(message or public_message or self.public_message)
        if status_code is not None:
            self.status_code = status_code
        if public_message is not None:
            self.public_message = public_message


class ConfigurationError(IntakeError):
    public_message = "API credentials not configured"


class UpstreamError(IntakeError):
    """Provider (or local API, from the client's side) answered with a non-success status."""

    public_message = "Upstream service error"

    def __init__(self, status_code: int, detail: str = "") -> None:
        message = f"Upstream returned {status_code}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message, status_code=status_code)
        self.detail = detail


class TransportError(IntakeError):
    public_message = "Upstream service unreachable"


class EndpointError(IntakeError):
    """Raised by an endpoint once it has decided what to tell the caller."""


class ErrorHandler:
    def to_payload(self, exc: IntakeError, context: Dict[str, Any] = None) -> Dict[str, Any]:
        if exc.__cause__ is not None:
            logger.error("%s (%s): caused by %s", exc.public_message, exc.status_code, exc.__cause__)
        else:
            logger.error("%s (%s): %s", exc.public_message, exc.status_code, exc)
        if context:
            logger.debug("Error context: %s", context)
        return {"error": exc.public_message}

    def to_response(self, exc: IntakeError, context: Dict[str, Any] = None) -> JSONResponse:
        return JSONResponse(self.to_payload(exc, context), status_code=exc.status_code)
