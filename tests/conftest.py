"""Pytest fixtures for the intake API and form tests."""

import json

import httpx
import pytest
from fastapi.testclient import TestClient

from src.api.dependencies import get_config, get_verification_client
from src.api.main import app
from src.integrations.clients.real_http.verification import VerificationClient
from src.utils.config_loader import IntakeConfig, ProviderConfig, ProviderCredentials


class RecordingProvider:
    """Stands in for the provider; answers with a canned status/body and records every request."""

    def __init__(self, status_code=200, body=None):
        self.status_code = status_code
        self.body = {} if body is None else body
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.body, (dict, list)):
            return httpx.Response(self.status_code, json=self.body)
        return httpx.Response(self.status_code, content=self.body)

    @property
    def last_json(self):
        return json.loads(self.requests[-1].content)


@pytest.fixture
def provider_config():
    return ProviderConfig(base_url="https://provider.test")


@pytest.fixture
def credentials():
    return ProviderCredentials(token="tok", secret="sec")


@pytest.fixture
def provider():
    return RecordingProvider()


@pytest.fixture
def make_api_client(provider_config):
    """TestClient whose verification client talks to the given fake provider."""

    def _make(provider: RecordingProvider, credentials: ProviderCredentials) -> TestClient:
        client = VerificationClient(provider_config, credentials, transport=httpx.MockTransport(provider))
        app.dependency_overrides[get_config] = lambda: IntakeConfig(provider=provider_config)
        app.dependency_overrides[get_verification_client] = lambda: client
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()
