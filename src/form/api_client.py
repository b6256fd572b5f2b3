"""
Client the intake form uses to reach the local intake API.

GET  /api/parameters          -> provider field schema
POST /api/submit-application  -> provider decision
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import httpx

from src.error_handler import TransportError, UpstreamError

logger = logging.getLogger(__name__)


class IntakeApiClient:
    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.transport = transport

    def get_parameters(self) -> Any:
        return self._request("GET", "/api/parameters")

    def submit_application(self, record: Mapping[str, str]) -> Any:
        return self._request("POST", "/api/submit-application", json=dict(record))

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        url = f"{self.base_url}{path}"
        try:
            with httpx.Client(timeout=self.timeout_seconds, transport=self.transport) as client:
                response = client.request(method, url, **kwargs)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as e:
            logger.warning("Intake API %s %s returned %s", method, path, e.response.status_code)
            raise UpstreamError(e.response.status_code, e.response.text[:200]) from e
        except httpx.RequestError as e:
            logger.warning("Intake API %s %s unreachable: %s", method, path, e)
            raise TransportError(str(e)) from e
        except ValueError as e:
            logger.warning("Intake API %s %s returned invalid JSON: %s", method, path, e)
            raise TransportError(f"Invalid JSON: {e}") from e
