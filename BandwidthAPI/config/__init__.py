"""
API Configuration Module

Centralized configuration for both API generations. Each API has its own
configuration file with connection defaults, required credentials and the
environment variables its client reads.
"""

from typing import Dict, Any, List, Mapping, Optional
import logging
import os

from dotenv import load_dotenv

from .catapult import CATAPULT_CONFIG
from .numbers import NUMBERS_CONFIG

logger = logging.getLogger(__name__)

# Registry of all supported API generations
API_REGISTRY: Dict[str, Dict[str, Any]] = {
    "Catapult": {
        "config": CATAPULT_CONFIG
    },
    "Numbers": {
        "config": NUMBERS_CONFIG
    }
}


def get_api_config(api_name: str) -> Dict[str, Any]:
    """
    Get configuration for a specific API

    Args:
        api_name: Name of the API ("Catapult" or "Numbers")

    Returns:
        API configuration dictionary

    Raises:
        KeyError: If the API is not registered
    """
    if api_name not in API_REGISTRY:
        available = ", ".join(API_REGISTRY.keys())
        raise KeyError(f"API '{api_name}' not found. Available: {available}")

    return API_REGISTRY[api_name]["config"]


def validate_credentials(api_name: str, credentials: Mapping[str, Optional[str]]) -> List[str]:
    """
    Validate credentials for an API

    Args:
        api_name: Name of the API
        credentials: Credential values keyed by field name

    Returns:
        Names of required fields that are missing or empty (empty list if valid)
    """
    config = get_api_config(api_name)
    return [
        field for field in config["required_credentials"]
        if not credentials.get(field)
    ]


def load_env_settings(api_name: str, dotenv_path: Optional[str] = None) -> Dict[str, str]:
    """
    Read the environment variables mapped in an API's ``env_vars``

    A ``.env`` file is loaded first; variables already set in the process
    environment take precedence over it.

    Returns:
        Values keyed by setting name, for variables that are set and non-empty
    """
    load_dotenv(dotenv_path)
    config = get_api_config(api_name)

    settings = {}
    for setting, env_var in config["env_vars"].items():
        value = os.getenv(env_var)
        if value:
            settings[setting] = value

    logger.debug(f"Loaded {len(settings)} {api_name} setting(s) from environment")
    return settings


__all__ = [
    "API_REGISTRY",
    "CATAPULT_CONFIG",
    "NUMBERS_CONFIG",
    "get_api_config",
    "validate_credentials",
    "load_env_settings"
]
