"""
Numbers (v2) API Configuration

Connection settings for the XML API generation
"""

from typing import Dict, Any

NUMBERS_CONFIG: Dict[str, Any] = {
    "api_name": "Numbers",
    "base_url": "https://dashboard.bandwidth.com",

    "timeout_seconds": 30,
    "verify_ssl": True,
    "user_agent": "bandwidth-api-python/v2/numbers",

    # Authentication requirements
    "required_credentials": ["account_id", "username", "password"],

    # Environment variables consulted by NumbersClient.from_env()
    "env_vars": {
        "account_id": "BANDWIDTH_ACCOUNT_ID",
        "username": "BANDWIDTH_USERNAME",
        "password": "BANDWIDTH_PASSWORD",
        "base_url": "BANDWIDTH_NUMBERS_ENDPOINT"
    },

    "endpoints": {
        "account": "",
        "addresses": "addresses",
        "applications": "applications",
        "available_numbers": "availableNumbers",
        "orders": "orders",
        "disconnects": "disconnects"
    }
}
