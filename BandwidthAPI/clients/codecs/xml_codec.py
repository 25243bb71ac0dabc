"""
XML Codec

Wire format of the v2 (Numbers) API. Payload and response shapes are
``XMLModel`` subclasses: pydantic models whose class declares the root element
name in ``xml_tag`` and whose field aliases name the child element. An alias
of the form ``"Wrapper>Item"`` maps a field to ``Item`` elements nested in a
``Wrapper`` element, e.g. ``<TelephoneNumberList><TelephoneNumber/>...``.

Mapping rules:
- ``None`` values are not written
- list fields produce one element per item
- bool is written as ``true``/``false``, datetime as ISO 8601
- missing or empty elements leave the field at its default on decode
"""

import inspect
import re
import types
import xml.etree.ElementTree as ET
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Type, Union, get_args, get_origin

from pydantic import ValidationError

from BandwidthAPI.schemas.base import XMLModel
from .base import Codec, ErrorDetails
from ..exceptions import EncodingError, InvalidResponseError

_UNION_TYPES = tuple(t for t in (Union, getattr(types, "UnionType", None)) if t is not None)

# Characters outside the XML 1.0 Char production
_INVALID_XML_CHARS = re.compile("[^\u0009\u000A\u000D\u0020-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]")


def _element_path(name: str, field_info: Any) -> List[str]:
    return (field_info.alias or name).split(">")


def _unwrap(annotation: Any) -> Tuple[bool, Any]:
    """Return (is_list, item_type) for a field annotation, ignoring Optional"""
    origin = get_origin(annotation)
    if origin in _UNION_TYPES:
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return _unwrap(args[0])
        return False, annotation
    if origin in (list, List):
        args = get_args(annotation)
        return True, args[0] if args else str
    return False, annotation


def _is_xml_model(item_type: Any) -> bool:
    return inspect.isclass(item_type) and issubclass(item_type, XMLModel)


def _to_text(value: Any) -> str:
    text = _format_text(value)
    invalid = _INVALID_XML_CHARS.search(text)
    if invalid:
        raise EncodingError(
            f"Cannot encode character {invalid.group()!r} as XML text",
            content_type=XMLCodec.content_type
        )
    return text


def _format_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (str, int, float, Decimal)):
        return str(value)
    raise EncodingError(
        f"Cannot encode value of type {type(value).__name__} as XML text",
        content_type=XMLCodec.content_type
    )


def _wrapper(parent: ET.Element, tag: str) -> ET.Element:
    existing = parent.find(tag)
    if existing is not None:
        return existing
    return ET.SubElement(parent, tag)


def _write_model(model: XMLModel, tag: str, parent: Optional[ET.Element] = None) -> ET.Element:
    element = ET.Element(tag) if parent is None else ET.SubElement(parent, tag)

    for name, field_info in type(model).model_fields.items():
        value = getattr(model, name)
        if value is None:
            continue

        items = value if isinstance(value, list) else [value]
        if not items:
            continue

        path = _element_path(name, field_info)
        target = element
        for segment in path[:-1]:
            target = _wrapper(target, segment)

        for item in items:
            if isinstance(item, XMLModel):
                _write_model(item, path[-1], target)
            else:
                ET.SubElement(target, path[-1]).text = _to_text(item)

    return element


def _read_value(element: ET.Element, item_type: Any) -> Any:
    if _is_xml_model(item_type):
        return _read_model(element, item_type)

    text = element.text or ""
    if item_type is str:
        return text
    text = text.strip()
    return text or None


def _read_model(element: ET.Element, model_cls: Type[XMLModel]) -> XMLModel:
    values: Dict[str, Any] = {}

    for name, field_info in model_cls.model_fields.items():
        path = _element_path(name, field_info)
        is_list, item_type = _unwrap(field_info.annotation)

        parents = [element]
        for segment in path[:-1]:
            parents = [child for parent in parents for child in parent.findall(segment)]

        matches = [match for parent in parents for match in parent.findall(path[-1])]
        if not matches:
            continue

        converted = [_read_value(match, item_type) for match in matches]
        converted = [value for value in converted if value is not None]
        if is_list:
            values[name] = converted
        elif converted:
            values[name] = converted[0]

    return model_cls.model_validate(values)


class XMLCodec(Codec):
    """XML serialize/deserialize strategy for XMLModel shapes"""

    content_type = "application/xml"

    def encode(self, payload: Any) -> bytes:
        if not isinstance(payload, XMLModel) or not payload.xml_tag:
            raise EncodingError(
                f"Cannot encode {type(payload).__name__} as XML: expected an XMLModel with xml_tag",
                content_type=self.content_type
            )
        root = _write_model(payload, payload.xml_tag)
        return ET.tostring(root, encoding="unicode").encode("utf-8")

    def _parse(self, body: bytes, status_code: Optional[int] = None) -> ET.Element:
        try:
            return ET.fromstring(body)
        except ET.ParseError as e:
            raise InvalidResponseError(
                f"Response body is not valid XML: {e}",
                expected_format="xml",
                status_code=status_code
            ) from e

    def decode(self, body: bytes, response_type: Optional[Any] = None) -> Any:
        root = self._parse(body)
        if response_type is None:
            return root

        if not _is_xml_model(response_type):
            raise InvalidResponseError(
                f"Cannot decode XML into {response_type!r}: expected an XMLModel subclass",
                expected_format="xml"
            )
        if response_type.xml_tag and root.tag != response_type.xml_tag:
            raise InvalidResponseError(
                f"Expected element <{response_type.xml_tag}> but got <{root.tag}>",
                expected_format="xml"
            )

        try:
            return _read_model(root, response_type)
        except ValidationError as e:
            raise InvalidResponseError(
                f"Response does not match {response_type.__name__}: {e}",
                expected_format="xml"
            ) from e

    def decode_error(self, body: bytes, status_code: int) -> ErrorDetails:
        if not body:
            return ErrorDetails()

        root = self._parse(body, status_code)
        error = root if root.tag == "Error" else root.find(".//Error")
        if error is None:
            return ErrorDetails()

        code = (error.findtext("Code") or "").strip() or None
        description = (error.findtext("Description") or "").strip() or None

        if code and description:
            message = f"{code}: {description}"
        else:
            message = code

        data = {}
        if code:
            data["Code"] = code
        if description:
            data["Description"] = description

        return ErrorDetails(message=message, code=code, description=description, data=data)
