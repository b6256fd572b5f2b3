"""
Utility modules for the intake service
"""
from .config_loader import load_intake_config, load_provider_credentials

__all__ = [
    'load_intake_config',
    'load_provider_credentials',
]
