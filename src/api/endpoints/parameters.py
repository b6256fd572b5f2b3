import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from src.api.dependencies import get_verification_client
from src.error_handler import ConfigurationError, EndpointError, IntakeError
from src.integrations.clients.real_http.verification import VerificationClient

logger = logging.getLogger(__name__)

api = APIRouter()
parameters_api = api

FETCH_FAILED = "Failed to fetch parameters"


@api.get("/parameters", tags=["Parameters"])
async def get_parameters(client: VerificationClient = Depends(get_verification_client)):
    """Provider field schema, relayed verbatim."""
    logger.info("Fetching provider parameters...")
    try:
        data = await client.fetch_parameters()
    except ConfigurationError:
        raise
    except IntakeError as e:
        # Upstream status is logged, callers always get a 500.
        raise EndpointError(str(e), status_code=500, public_message=FETCH_FAILED) from e
    except Exception as e:
        logger.exception("Unexpected error fetching parameters")
        raise EndpointError(str(e), status_code=500, public_message=FETCH_FAILED) from e

    count = len(data) if isinstance(data, dict) else 0
    logger.info("Parameters fetched successfully: %d parameters", count)
    return JSONResponse(content=data)
