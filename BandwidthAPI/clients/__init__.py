"""
API Client Layer for BandwidthAPI

One request pipeline (base_client) shared by the JSON Catapult client and the
XML Numbers client, with a codec per wire format and a common error hierarchy.
"""

from .base_client import BaseAPIClient, HTTPMethod, encode_query
from .catapult_client import CatapultClient
from .numbers_client import NumbersClient
from .codecs import Codec, JSONCodec, XMLCodec
from .exceptions import (
    APIClientError,
    AuthenticationError,
    ConfigurationError,
    EncodingError,
    InvalidResponseError,
    NetworkError,
    RequestTimeoutError,
    ServerError,
    ServiceError
)

__all__ = [
    "BaseAPIClient",
    "HTTPMethod",
    "encode_query",
    "CatapultClient",
    "NumbersClient",
    "Codec",
    "JSONCodec",
    "XMLCodec",
    "APIClientError",
    "AuthenticationError",
    "ConfigurationError",
    "EncodingError",
    "InvalidResponseError",
    "NetworkError",
    "RequestTimeoutError",
    "ServerError",
    "ServiceError"
]
