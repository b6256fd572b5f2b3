import base64

import httpx
import pytest

from src.error_handler import ConfigurationError, TransportError, UpstreamError
from src.integrations.clients.real_http.verification import VerificationClient, basic_auth_header
from src.utils.config_loader import ProviderCredentials


def test_basic_auth_header_encodes_token_and_secret():
    header = basic_auth_header("my-token", "my:secret")
    assert header.startswith("Basic ")
    assert base64.b64decode(header[len("Basic "):]).decode() == "my-token:my:secret"


@pytest.mark.asyncio
async def test_fetch_parameters_uses_configured_path(provider_config, credentials, provider):
    provider.body = {"email_address": {"name": "email_address"}}
    client = VerificationClient(provider_config, credentials, transport=httpx.MockTransport(provider))

    data = await client.fetch_parameters()

    assert data == provider.body
    assert provider.requests[0].url.path == "/v1/parameters/"


@pytest.mark.asyncio
async def test_submit_evaluation_posts_json(provider_config, credentials, provider):
    provider.body = {"summary": {"outcome": "Approved"}}
    client = VerificationClient(provider_config, credentials, transport=httpx.MockTransport(provider))

    data = await client.submit_evaluation({"name_first": "Ada"})

    assert data["summary"]["outcome"] == "Approved"
    assert provider.last_json == {"name_first": "Ada"}


@pytest.mark.asyncio
async def test_missing_secret_raises_before_any_request(provider_config, provider):
    client = VerificationClient(
        provider_config,
        ProviderCredentials(token="tok"),
        transport=httpx.MockTransport(provider),
    )

    with pytest.raises(ConfigurationError):
        await client.submit_evaluation({"name_first": "Ada"})
    assert provider.requests == []


@pytest.mark.asyncio
async def test_non_success_status_raises_upstream_error(provider_config, credentials, provider):
    provider.status_code = 503
    client = VerificationClient(provider_config, credentials, transport=httpx.MockTransport(provider))

    with pytest.raises(UpstreamError) as exc_info:
        await client.fetch_parameters()
    assert exc_info.value.status_code == 503


@pytest.mark.asyncio
async def test_network_failure_raises_transport_error(provider_config, credentials):
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = VerificationClient(provider_config, credentials, transport=httpx.MockTransport(refuse))

    with pytest.raises(TransportError):
        await client.fetch_parameters()
