"""
API Client Exceptions

Custom exceptions for API client operations. Each failure stage of the request
pipeline (construction, encoding, transport, decoding, service response) has
its own exception type so callers can branch on the kind of failure.
"""

from typing import Optional, Dict, Any


class APIClientError(Exception):
    """Base exception for all API client errors"""

    def __init__(self, message: str, status_code: Optional[int] = None,
                 response_data: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_data = response_data or {}


class ConfigurationError(APIClientError):
    """Raised when client configuration or credentials are invalid"""

    def __init__(self, message: str = "Configuration error",
                 missing_fields: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.missing_fields = missing_fields or []


class EncodingError(APIClientError):
    """Raised when a payload cannot be serialized for the wire"""

    def __init__(self, message: str = "Payload encoding failed",
                 content_type: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.content_type = content_type


class NetworkError(APIClientError):
    """Raised when no response was obtained from the server"""

    def __init__(self, message: str = "Network error", **kwargs):
        super().__init__(message, **kwargs)


class RequestTimeoutError(NetworkError):
    """Raised when API requests timeout"""

    def __init__(self, message: str = "Request timeout",
                 timeout_duration: Optional[float] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.timeout_duration = timeout_duration


class InvalidResponseError(APIClientError):
    """Raised when a response body cannot be decoded into the expected shape"""

    def __init__(self, message: str = "Invalid response format",
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.expected_format = expected_format


class ServiceError(APIClientError):
    """Raised when the service answers with a status code of 400 or above"""

    def __init__(self, message: Optional[str] = None, status_code: int = 0,
                 code: Optional[str] = None, description: Optional[str] = None,
                 **kwargs):
        super().__init__(message or f"HTTP error {status_code}",
                         status_code=status_code, **kwargs)
        self.code = code
        self.description = description


class AuthenticationError(ServiceError):
    """Raised when the service rejects the credentials (401/403)"""


class ServerError(ServiceError):
    """Raised when the service returns a 5xx error"""
