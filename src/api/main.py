"""
FastAPI application - Main entry point

Run with:
  uvicorn src.api.main:app --host 127.0.0.1 --port 8000
"""

from dotenv import load_dotenv

load_dotenv()

import logging
from datetime import datetime

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from src.api.dependencies import get_config, get_credentials
from src.api.endpoints.applications import applications_api
from src.api.endpoints.parameters import parameters_api
from src.error_handler import ErrorHandler, IntakeError
from src.utils.config_loader import ProviderCredentials

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SERVICE_NAME = "Identity Intake API"
SERVICE_VERSION = "1.0.0"

# Initialize FastAPI app
app = FastAPI(
    title=SERVICE_NAME,
    description="Identity-verification intake: provider parameter schema and application decisioning",
    version=SERVICE_VERSION,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

error_handler = ErrorHandler()


@app.exception_handler(IntakeError)
async def intake_error_handler(request: Request, exc: IntakeError):
    return error_handler.to_response(exc, context={"path": request.url.path, "method": request.method})


app.include_router(parameters_api, prefix="/api")
app.include_router(applications_api, prefix="/api")


# ============================================================================
# ENDPOINTS
# ============================================================================
@app.get("/", tags=["Health"])
async def root():
    """Health check endpoint."""
    return {"service": SERVICE_NAME, "status": "healthy", "version": SERVICE_VERSION, "timestamp": datetime.now().isoformat()}


@app.get("/health", tags=["Health"])
async def health_check(credentials: ProviderCredentials = Depends(get_credentials)):
    """Detailed health check (credential presence only, never values)."""
    return {
        "service": SERVICE_NAME,
        "status": "healthy",
        "version": SERVICE_VERSION,
        "credentials_configured": credentials.configured,
        "timestamp": datetime.now().isoformat(),
    }


# ============================================================================
# STARTUP/SHUTDOWN EVENTS
# ============================================================================
@app.on_event("startup")
async def startup_event():
    """Initialize on startup"""
    logger.info("Starting %s...", SERVICE_NAME)
    cfg = get_config()
    logger.info("Provider base URL: %s", cfg.provider.base_url)


@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown"""
    logger.info("Shutting down %s...", SERVICE_NAME)
