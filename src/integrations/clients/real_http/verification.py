"""
Verification provider HTTP client.

Purpose:
- Lists the provider's applicant parameters (GET /v1/parameters/)
- Posts applicant records for evaluation (POST /v1/evaluations/)

Both calls authenticate with HTTP Basic auth built from the API token and
secret. Credentials are checked before any request is made. Responses are
returned as parsed JSON without interpretation; the API layer relays them.
"""

from __future__ import annotations

import base64
import logging
from typing import Any, Dict, Mapping, Optional

import httpx

from src.error_handler import TransportError, UpstreamError
from src.utils.config_loader import ProviderConfig, ProviderCredentials

logger = logging.getLogger(__name__)


def basic_auth_header(token: str, secret: str) -> str:
    encoded = base64.b64encode(f"{token}:{secret}".encode("utf-8")).decode("ascii")
    return f"Basic {encoded}"


class VerificationClient:
    def __init__(
        self,
        config: ProviderConfig,
        credentials: ProviderCredentials,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.config = config
        self.credentials = credentials
        self.base_url = config.base_url.rstrip("/")
        self.transport = transport

    def _headers(self) -> Dict[str, str]:
        creds = self.credentials.require()
        return {
            "Authorization": basic_auth_header(creds.token, creds.secret),
            "Content-Type": "application/json",
        }

    async def fetch_parameters(self) -> Any:
        headers = self._headers()
        url = f"{self.base_url}{self.config.parameters_path}"
        logger.info("Fetching provider parameters from %s", url)
        return await self._request("GET", url, headers=headers)

    async def submit_evaluation(self, body: Mapping[str, Any]) -> Any:
        headers = self._headers()
        url = f"{self.base_url}{self.config.evaluations_path}"
        logger.info("Submitting evaluation to %s", url)
        return await self._request("POST", url, headers=headers, json=dict(body))

    async def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        try:
            async with httpx.AsyncClient(timeout=self.config.timeout_seconds, transport=self.transport) as client:
                response = await client.request(method, url, **kwargs)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Provider error: %s %s -> %s %s",
                method,
                url,
                e.response.status_code,
                e.response.reason_phrase,
            )
            raise UpstreamError(e.response.status_code, e.response.reason_phrase) from e
        except httpx.RequestError as e:
            logger.error("Request error connecting to provider: %s", e)
            raise TransportError(str(e)) from e
        except ValueError as e:
            logger.error("Provider returned a non-JSON body for %s %s: %s", method, url, e)
            raise TransportError(f"Invalid JSON from provider: {e}") from e
