"""
Base API Client

Shared request pipeline for every Bandwidth API client:
URL building -> request encoding -> transport -> response decoding.

Wire-format specifics live in a Codec (JSON or XML); subclasses only choose a
codec, a path prefix and their credentials. Every call is a single round trip.
Errors are raised to the caller and never retried.
"""

from abc import ABC, abstractmethod
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Dict, Any, Optional, List, Mapping, Tuple, Type, TypeVar, Union
import base64
import logging
from urllib.parse import quote

import httpx
from pydantic import BaseModel

from .codecs import Codec
from .exceptions import (
    AuthenticationError,
    ConfigurationError,
    EncodingError,
    NetworkError,
    RequestTimeoutError,
    ServerError,
    ServiceError
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

_TIMEOUT_PHASES = (
    (httpx.ConnectTimeout, "connect"),
    (httpx.ReadTimeout, "read"),
    (httpx.WriteTimeout, "write"),
    (httpx.PoolTimeout, "pool")
)


class HTTPMethod(Enum):
    """Supported HTTP methods"""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"


def quote_segment(value: Any) -> str:
    """Percent-encode a caller-supplied value for use as one path segment"""
    return quote(str(value), safe="")


def _query_value(key: str, value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (str, int, float, Decimal)):
        return str(value)
    raise EncodingError(
        f"Query parameter '{key}' has unsupported type {type(value).__name__}"
    )


def encode_query(payload: Union[Mapping[str, Any], BaseModel]) -> List[Tuple[str, str]]:
    """
    Flatten a read-operation payload into query parameters

    Models are dumped by alias. None values are omitted and list values are
    repeated under the same key.

    Raises:
        EncodingError: If the payload is not flat
    """
    if isinstance(payload, BaseModel):
        items = payload.model_dump(by_alias=True, exclude_none=True)
    elif isinstance(payload, Mapping):
        items = dict(payload)
    else:
        raise EncodingError(
            f"Query payload must be a mapping or model, got {type(payload).__name__}"
        )

    params: List[Tuple[str, str]] = []
    for key, value in items.items():
        if value is None:
            continue
        values = value if isinstance(value, (list, tuple)) else [value]
        for item in values:
            params.append((str(key), _query_value(key, item)))
    return params


class BaseAPIClient(ABC):
    """
    Abstract base class for the Bandwidth API clients.

    Holds the immutable endpoint configuration and Basic auth credentials and
    runs the request pipeline. No per-call state is stored on the instance,
    so one client can serve concurrent callers.
    """

    codec: Codec

    def __init__(self,
                 base_url: str,
                 username: str,
                 password: str,
                 user_agent: str,
                 timeout: float = 30,
                 verify_ssl: bool = True,
                 custom_headers: Optional[Dict[str, str]] = None,
                 http_client: Optional[httpx.AsyncClient] = None):
        """
        Initialize base API client

        Args:
            base_url: Base URL for the API
            username: Basic auth identity
            password: Basic auth secret
            user_agent: Value of the User-Agent header
            timeout: Request timeout in seconds, used when no http_client is given
            verify_ssl: Whether to verify SSL certificates
            custom_headers: Additional headers to include in requests
            http_client: Shared httpx client; a short-lived one is created per call if omitted
        """
        self.base_url = (base_url or "").rstrip('/')
        self._username = username
        self._password = password
        self.user_agent = user_agent
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self.custom_headers = dict(custom_headers or {})
        self.http_client = http_client

        self.validate_configuration()

        self.client_config = {
            "timeout": httpx.Timeout(timeout),
            "verify": verify_ssl,
            "follow_redirects": True
        }

        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @abstractmethod
    def get_path_prefix(self) -> str:
        """
        Path segments inserted between the base URL and the resource path

        Returns:
            Prefix without leading or trailing separators (may be empty)
        """
        pass

    def validate_configuration(self) -> None:
        """
        Validate client configuration

        Raises:
            ConfigurationError: If configuration is invalid
        """
        if not self.base_url:
            raise ConfigurationError("Base URL is required", missing_fields=["base_url"])

        if not self.base_url.startswith(("http://", "https://")):
            raise ConfigurationError("Base URL must start with http:// or https://")

        if self.timeout is not None and self.timeout <= 0:
            raise ConfigurationError("Timeout must be positive")

    def get_authentication_headers(self) -> Dict[str, str]:
        """Basic auth header for the bound credentials"""
        token = base64.b64encode(f"{self._username}:{self._password}".encode("utf-8")).decode("ascii")
        return {"Authorization": f"Basic {token}"}

    def _build_url(self, path: str) -> str:
        """Build full URL from base URL, path prefix and resource path"""
        url = self.base_url
        prefix = self.get_path_prefix().strip('/')
        if prefix:
            url = f"{url}/{prefix}"

        path = (path or "").lstrip('/')
        if path:
            url = f"{url}/{path}"
        return url

    def _merge_headers(self, additional_headers: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        """Merge authentication, negotiation, custom, and additional headers"""
        headers = {}

        headers.update(self.get_authentication_headers())

        headers["Accept"] = self.codec.content_type
        headers["User-Agent"] = self.user_agent

        headers.update(self.custom_headers)

        if additional_headers:
            headers.update(additional_headers)

        return headers

    def build_request(self,
                      method: Union[HTTPMethod, str],
                      path: str,
                      payload: Any = None,
                      *,
                      content: Optional[bytes] = None,
                      content_type: Optional[str] = None) -> httpx.Request:
        """
        Build the outbound request without performing any I/O

        GET payloads become query parameters. Payloads of any other method are
        serialized by the codec into the body. Raw ``content`` bypasses the
        codec and is sent with ``content_type``.

        Raises:
            EncodingError: If the payload cannot be serialized
        """
        method_name = method.value if isinstance(method, HTTPMethod) else str(method).upper()
        url = self._build_url(path)
        headers = self._merge_headers()

        params = None
        body = None
        if content is not None:
            body = content
            headers["Content-Type"] = content_type or "application/octet-stream"
        elif payload is not None:
            if method_name == HTTPMethod.GET.value:
                params = encode_query(payload)
            else:
                body = self.codec.encode(payload)
                headers["Content-Type"] = self.codec.content_type

        timeout = self.http_client.timeout if self.http_client is not None else self.client_config["timeout"]

        return httpx.Request(
            method_name,
            url,
            params=params,
            headers=headers,
            content=body,
            extensions={"timeout": timeout.as_dict()}
        )

    @staticmethod
    def _applied_timeout(request: httpx.Request, error: httpx.TimeoutException) -> Optional[float]:
        """Timeout, in seconds, of the phase that expired for this request"""
        timeouts = request.extensions.get("timeout") or {}
        for error_class, phase in _TIMEOUT_PHASES:
            if isinstance(error, error_class):
                return timeouts.get(phase)
        return timeouts.get("read")

    async def send(self, request: httpx.Request) -> httpx.Response:
        """
        Send a prepared request once and return the fully read response

        Raises:
            RequestTimeoutError: If the request timed out
            NetworkError: If no response was obtained
        """
        self.logger.debug(f"Making {request.method} request to {request.url}")

        try:
            if self.http_client is not None:
                response = await self.http_client.send(request)
            else:
                async with httpx.AsyncClient(**self.client_config) as client:
                    response = await client.send(request)
        except httpx.TimeoutException as e:
            applied = self._applied_timeout(request, e)
            raise RequestTimeoutError(
                f"Request timeout after {applied} seconds",
                timeout_duration=applied
            ) from e
        except httpx.RequestError as e:
            raise NetworkError(f"Network error: {e}") from e

        self.logger.debug(f"Received {response.status_code} for {request.method} {request.url}")
        return response

    def _service_error(self, status_code: int, body: bytes) -> ServiceError:
        details = self.codec.decode_error(body, status_code)

        if status_code in (401, 403):
            error_class = AuthenticationError
        elif status_code >= 500:
            error_class = ServerError
        else:
            error_class = ServiceError

        return error_class(
            details.message,
            status_code=status_code,
            code=details.code,
            description=details.description,
            response_data=details.data
        )

    def raise_for_status(self, response: httpx.Response) -> None:
        """
        Raise the decoded ServiceError for a status code of 400 or above

        Raises:
            ServiceError: For failure statuses
            InvalidResponseError: If the error body cannot be decoded
        """
        if 200 <= response.status_code < 400:
            return
        raise self._service_error(response.status_code, response.content)

    def parse_response(self, response: httpx.Response, response_type: Optional[Type[T]] = None) -> Optional[T]:
        """
        Decode a response into ``response_type``

        Returns:
            The decoded value, or None for an empty success body

        Raises:
            ServiceError: For failure statuses
            InvalidResponseError: If the body cannot be decoded
        """
        self.raise_for_status(response)

        body = response.content
        if not body:
            return None
        return self.codec.decode(body, response_type)

    async def request(self,
                      method: Union[HTTPMethod, str],
                      path: str,
                      payload: Any = None,
                      response_type: Optional[Type[T]] = None) -> Optional[T]:
        """
        Run one request through the pipeline

        Args:
            method: HTTP method to use
            path: Resource path relative to the client's prefix
            payload: Query mapping/model for GET, body model for other methods
            response_type: Shape to decode a success body into

        Returns:
            Decoded response, or None when the body is empty
        """
        request = self.build_request(method, path, payload)
        response = await self.send(request)
        return self.parse_response(response, response_type)

    async def get(self, path: str, query: Any = None,
                  response_type: Optional[Type[T]] = None) -> Optional[T]:
        """Convenience method for GET requests"""
        return await self.request(HTTPMethod.GET, path, query, response_type)

    async def post(self, path: str, data: Any = None,
                   response_type: Optional[Type[T]] = None) -> Optional[T]:
        """Convenience method for POST requests"""
        return await self.request(HTTPMethod.POST, path, data, response_type)

    async def put(self, path: str, data: Any = None,
                  response_type: Optional[Type[T]] = None) -> Optional[T]:
        """Convenience method for PUT requests"""
        return await self.request(HTTPMethod.PUT, path, data, response_type)

    async def delete(self, path: str, data: Any = None,
                     response_type: Optional[Type[T]] = None) -> Optional[T]:
        """Convenience method for DELETE requests"""
        return await self.request(HTTPMethod.DELETE, path, data, response_type)

    async def __aenter__(self):
        """Async context manager entry"""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit - the injected http_client belongs to the caller"""
        pass
