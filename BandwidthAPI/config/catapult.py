"""
Catapult (v1) API Configuration

Connection settings for the JSON API generation
"""

from typing import Dict, Any

CATAPULT_CONFIG: Dict[str, Any] = {
    "api_name": "Catapult",
    "base_url": "https://api.catapult.inetwork.com",
    "api_version": "v1",

    "timeout_seconds": 30,
    "verify_ssl": True,
    "user_agent": "bandwidth-api-python-v{version}",

    # Authentication requirements
    "required_credentials": ["user_id", "api_token", "api_secret"],

    # Environment variables consulted by CatapultClient.from_env()
    "env_vars": {
        "user_id": "BANDWIDTH_USER_ID",
        "api_token": "BANDWIDTH_API_TOKEN",
        "api_secret": "BANDWIDTH_API_SECRET",
        "base_url": "BANDWIDTH_API_ENDPOINT",
        "api_version": "BANDWIDTH_API_VERSION"
    },

    "endpoints": {
        "media": "media"
    }
}
