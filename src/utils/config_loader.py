"""
Configuration loader for the intake service and form
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from src.error_handler import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "intake_config.yml"


class ProviderConfig(BaseModel):
    """Verification provider endpoints"""

    base_url: str = "https://sandbox.alloy.co"
    parameters_path: str = "/v1/parameters/"
    evaluations_path: str = "/v1/evaluations/"
    timeout_seconds: float = Field(default=30.0, gt=0)
    token_env: str = "ALLOY_API_TOKEN"
    secret_env: str = "ALLOY_API_SECRET"


class UIConfig(BaseModel):
    """Form client settings"""

    api_base_url: str = "http://localhost:8000"
    timeout_seconds: float = Field(default=30.0, gt=0)
    default_country: str = Field(default="US", min_length=2, max_length=2)


class IntakeConfig(BaseModel):
    provider: ProviderConfig = Field(default_factory=ProviderConfig)
    ui: UIConfig = Field(default_factory=UIConfig)


class ProviderCredentials(BaseModel):
    token: str = ""
    secret: str = ""

    @property
    def configured(self) -> bool:
        return bool(self.token) and bool(self.secret)

    def require(self) -> "ProviderCredentials":
        if not self.configured:
            raise ConfigurationError("Missing API credentials")
        return self


def load_intake_config(config_path: Optional[Path] = None) -> IntakeConfig:
    """
    Load and validate intake configuration from YAML file

    Args:
        config_path: Path to config file. Defaults to $INTAKE_CONFIG_PATH,
            then config/intake_config.yml

    Returns:
        Validated IntakeConfig object

    Raises:
        FileNotFoundError: If an explicitly requested config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    explicit = config_path is not None or bool(os.getenv("INTAKE_CONFIG_PATH"))
    if config_path is None:
        env_path = os.getenv("INTAKE_CONFIG_PATH")
        config_path = Path(env_path) if env_path else DEFAULT_CONFIG_PATH

    if not config_path.exists():
        if explicit:
            raise FileNotFoundError(f"Intake config file not found: {config_path}")
        logger.warning("Intake config not found at %s, using defaults", config_path)
        data = {}
    else:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

    try:
        cfg = IntakeConfig(**data)
    except ValidationError as e:
        logger.error("Intake config validation failed: %s", e)
        raise

    api_url = os.getenv("INTAKE_API_URL")
    if api_url:
        cfg.ui.api_base_url = api_url
    logger.info("Loaded intake config (provider=%s)", cfg.provider.base_url)
    return cfg


def load_provider_credentials(provider: ProviderConfig) -> ProviderCredentials:
    """Read the provider secrets named by the config from the environment."""
    credentials = ProviderCredentials(
        token=os.getenv(provider.token_env, "").strip(),
        secret=os.getenv(provider.secret_env, "").strip(),
    )
    logger.info(
        "Provider credentials: token=%s secret=%s",
        "set" if credentials.token else "missing",
        "set" if credentials.secret else "missing",
    )
    return credentials
