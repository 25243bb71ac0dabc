"""
JSON Codec

Wire format of the v1 (Catapult) API. Outbound payloads may be pydantic models
or plain JSON-compatible values; inbound bodies are validated with a pydantic
TypeAdapter so any model, list of models or builtin type can be requested.
"""

import json
from collections.abc import Mapping
from functools import lru_cache
from typing import Any, Optional

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_json

from .base import Codec, ErrorDetails
from ..exceptions import EncodingError, InvalidResponseError


def _drop_none(value: Any) -> Any:
    """Remove None entries from mappings, at any depth, as exclude_none does for models"""
    if isinstance(value, Mapping):
        return {key: _drop_none(item) for key, item in value.items() if item is not None}
    if isinstance(value, (list, tuple)):
        return [_drop_none(item) for item in value]
    return value


@lru_cache(maxsize=None)
def _type_adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


class JSONCodec(Codec):
    """JSON serialize/deserialize strategy"""

    content_type = "application/json"

    def encode(self, payload: Any) -> bytes:
        try:
            return to_json(_drop_none(payload), by_alias=True, exclude_none=True)
        except (PydanticSerializationError, TypeError, ValueError) as e:
            raise EncodingError(
                f"Cannot encode {type(payload).__name__} as JSON: {e}",
                content_type=self.content_type
            ) from e

    def _parse(self, body: bytes, status_code: Optional[int] = None) -> Any:
        try:
            return json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise InvalidResponseError(
                f"Response body is not valid JSON: {e}",
                expected_format="json",
                status_code=status_code
            ) from e

    def decode(self, body: bytes, response_type: Optional[Any] = None) -> Any:
        data = self._parse(body)
        if response_type is None:
            return data

        try:
            return _type_adapter(response_type).validate_python(data)
        except ValidationError as e:
            raise InvalidResponseError(
                f"Response does not match {getattr(response_type, '__name__', response_type)}: {e}",
                expected_format="json",
                response_data=data if isinstance(data, dict) else {"content": data}
            ) from e

    def decode_error(self, body: bytes, status_code: int) -> ErrorDetails:
        if not body:
            return ErrorDetails()

        data = self._parse(body, status_code)
        if not isinstance(data, dict):
            raise InvalidResponseError(
                f"Expected a JSON object in error response, got {type(data).__name__}",
                expected_format="json",
                status_code=status_code
            )

        code = data.get("code")
        code = str(code) if code not in (None, "") else None
        message = data.get("message") or code
        return ErrorDetails(
            message=str(message) if message else None,
            code=code,
            data=data
        )
