"""
Base Codec Interface

A codec is the serialize/deserialize strategy bound to one client. The shared
request pipeline only talks to this interface, so the JSON and XML API
generations reuse the same URL building, authentication and status handling.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class ErrorDetails:
    """Error information decoded from a failed response body"""
    message: Optional[str] = None
    code: Optional[str] = None
    description: Optional[str] = None
    data: Dict[str, Any] = field(default_factory=dict)


class Codec(ABC):
    """Abstract serialize/deserialize strategy for one wire format"""

    #: Value used for both the Accept and Content-Type headers
    content_type: str = ""

    @abstractmethod
    def encode(self, payload: Any) -> bytes:
        """
        Serialize an outbound payload into a request body

        Raises:
            EncodingError: If the payload cannot be represented in this format
        """
        pass

    @abstractmethod
    def decode(self, body: bytes, response_type: Optional[Any] = None) -> Any:
        """
        Deserialize a success body into ``response_type``

        When ``response_type`` is None the parsed document is returned as is.

        Raises:
            InvalidResponseError: If the body cannot be parsed or validated
        """
        pass

    @abstractmethod
    def decode_error(self, body: bytes, status_code: int) -> ErrorDetails:
        """
        Deserialize an error body into ErrorDetails

        Raises:
            InvalidResponseError: If the body is not the expected error shape
        """
        pass
