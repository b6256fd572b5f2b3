from functools import lru_cache

from fastapi import Depends

from src.integrations.clients.real_http.verification import VerificationClient
from src.utils.config_loader import (
    IntakeConfig,
    ProviderCredentials,
    load_intake_config,
    load_provider_credentials,
)


@lru_cache(maxsize=1)
def get_config() -> IntakeConfig:
    return load_intake_config()


def get_credentials(config: IntakeConfig = Depends(get_config)) -> ProviderCredentials:
    # Read on every request.
    return load_provider_credentials(config.provider)


def get_verification_client(
    config: IntakeConfig = Depends(get_config),
    credentials: ProviderCredentials = Depends(get_credentials),
) -> VerificationClient:
    return VerificationClient(config.provider, credentials)
