"""
JSON and XML codecs for request and response bodies.

Each codec encodes a value to bytes and decodes bytes into an output
("sink"): a dict or list filled in place, a dataclass instance whose
fields are assigned, or a type (dataclass, dict, list) that a new value is
built from.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import dataclasses
import json
import re
import types
import typing
import xml.etree.ElementTree as ET
from collections.abc import Mapping
from typing import Any

from httpchain.constants import Format
from httpchain.errors import DecodeError


# =============================================================================
# Sinks
# =============================================================================

def fill(out: Any, value: Any, from_text: bool = False) -> Any:
    """
    Store a decoded value into the output and return the output.

    Args:
        out: Output sink (see module docstring)
        value: Decoded value (dict, list or scalar)
        from_text: Leaf values are untyped strings (XML) and are coerced
            to the annotated field types of dataclass sinks

    Returns:
        The filled sink, or the newly built value when ``out`` is a type
    """
    if isinstance(out, type):
        if dataclasses.is_dataclass(out):
            return _build_dataclass(out, value, from_text)
        if issubclass(out, dict):
            return out(_expect_mapping(value, out))
        if issubclass(out, list):
            return out(_expect_list(value, out))
        raise DecodeError(f"cannot decode into type {out.__name__}")

    if dataclasses.is_dataclass(out):
        mapping = _expect_mapping(value, type(out))
        hints = _type_hints(type(out))
        try:
            for f in dataclasses.fields(out):
                if f.name in mapping:
                    setattr(out, f.name, _convert(hints.get(f.name, Any), mapping[f.name], from_text))
        except dataclasses.FrozenInstanceError as e:
            raise DecodeError(f"cannot decode into frozen {type(out).__name__}") from e
        return out

    if isinstance(out, dict):
        out.update(_expect_mapping(value, type(out)))
        return out

    if isinstance(out, list):
        out[:] = _expect_list(value, type(out))
        return out

    raise DecodeError(f"cannot decode into {type(out).__name__}")


def _expect_mapping(value: Any, target: type) -> Mapping:
    if not isinstance(value, Mapping):
        raise DecodeError(f"cannot decode {type(value).__name__} into {target.__name__}")
    return value


def _expect_list(value: Any, target: type) -> list:
    if not isinstance(value, list):
        raise DecodeError(f"cannot decode {type(value).__name__} into {target.__name__}")
    return value


def _type_hints(cls: type) -> dict[str, Any]:
    try:
        return typing.get_type_hints(cls)
    except (NameError, TypeError):
        # Unresolvable forward references: fall back to untyped assignment
        return {}


def _build_dataclass(cls: type, value: Any, from_text: bool) -> Any:
    mapping = _expect_mapping(value, cls)
    hints = _type_hints(cls)
    kwargs = {
        f.name: _convert(hints.get(f.name, Any), mapping[f.name], from_text)
        for f in dataclasses.fields(cls)
        if f.init and f.name in mapping
    }
    try:
        return cls(**kwargs)
    except TypeError as e:
        raise DecodeError(str(e)) from e


def _convert(annotation: Any, value: Any, from_text: bool) -> Any:
    """Convert a decoded value to the annotated field type where possible."""
    if value is None or annotation is Any:
        return value

    origin = typing.get_origin(annotation)
    if origin is typing.Union or origin is types.UnionType:
        args = [a for a in typing.get_args(annotation) if a is not type(None)]
        return _convert(args[0], value, from_text) if len(args) == 1 else value

    if origin is list:
        args = typing.get_args(annotation)
        items = value if isinstance(value, list) else [value]
        return [_convert(args[0], item, from_text) for item in items] if args else items

    if dataclasses.is_dataclass(annotation) and isinstance(annotation, type):
        if from_text and value == "":
            value = {}
        return _build_dataclass(annotation, value, from_text)

    if from_text and isinstance(value, str) and annotation in (int, float, bool):
        try:
            if annotation is bool:
                return value.strip().lower() in ("true", "1")
            return annotation(value.strip())
        except ValueError as e:
            raise DecodeError(str(e)) from e

    return value


# =============================================================================
# Codecs
# =============================================================================

def _json_default(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class JSONCodec:
    """JSON codec (compact output, UTF-8)."""

    format = Format.JSON

    def encode(self, value: Any) -> bytes:
        return json.dumps(value, separators=(",", ":"), default=_json_default).encode("utf-8")

    def decode(self, data: bytes, out: Any) -> Any:
        try:
            value = json.loads(data)
        except ValueError as e:
            raise DecodeError(str(e)) from e
        return fill(out, value)


_NAME_START = (
    r"A-Z_a-z\u00C0-\u00D6\u00D8-\u00F6\u00F8-\u02FF\u0370-\u037D\u037F-\u1FFF"
    r"\u200C-\u200D\u2070-\u218F\u2C00-\u2FEF\u3001-\uD7FF\uF900-\uFDCF"
    r"\uFDF0-\uFFFD\U00010000-\U000EFFFF"
)
# XML 1.0 Name without ":", since no namespace declarations are written
_XML_NAME = re.compile(rf"[{_NAME_START}][{_NAME_START}\-.0-9\u00B7\u0300-\u036F\u203F-\u2040]*")


def _tag(name: Any) -> str:
    tag = str(name)
    if not _XML_NAME.fullmatch(tag):
        raise TypeError(f"{tag!r} is not a valid XML element name")
    return tag


class XMLCodec:
    """
    XML codec over xml.etree.ElementTree.

    A dataclass is written as an element named after its class, a mapping
    as an element named ``root_tag``. Fields and keys become child
    elements, list items repeated child elements, and None values are left
    out. Decoding turns the document element's children back into a
    mapping; an empty element decodes as "".
    """

    format = Format.XML

    def __init__(self, root_tag: str = "root"):
        self.root_tag = root_tag

    def encode(self, value: Any) -> bytes:
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            root = ET.Element(_tag(type(value).__name__))
        elif isinstance(value, Mapping):
            root = ET.Element(_tag(self.root_tag))
        else:
            raise TypeError(f"cannot encode {type(value).__name__} as an XML document")
        self._build(root, value)
        return ET.tostring(root, encoding="unicode").encode("utf-8")

    def _build(self, elem: ET.Element, value: Any) -> None:
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            value = {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
        if isinstance(value, Mapping):
            for key, item in value.items():
                tag = _tag(key)
                items = item if isinstance(item, (list, tuple)) else [item]
                for entry in items:
                    if entry is not None:
                        self._build(ET.SubElement(elem, tag), entry)
        elif isinstance(value, (list, tuple)):
            for entry in value:
                if entry is not None:
                    self._build(ET.SubElement(elem, "item"), entry)
        elif isinstance(value, bool):
            elem.text = "true" if value else "false"
        else:
            elem.text = str(value)

    def decode(self, data: bytes, out: Any) -> Any:
        try:
            root = ET.fromstring(data)
        except ET.ParseError as e:
            raise DecodeError(str(e)) from e
        if len(root) == 0 and not (root.text and root.text.strip()):
            value: Any = {}
        else:
            value = self._parse(root)
        return fill(out, value, from_text=True)

    def _parse(self, elem: ET.Element) -> Any:
        if len(elem) == 0:
            return elem.text or ""
        result: dict[str, Any] = {}
        for child in elem:
            value = self._parse(child)
            if child.tag not in result:
                result[child.tag] = value
            elif isinstance(result[child.tag], list):
                result[child.tag].append(value)
            else:
                result[child.tag] = [result[child.tag], value]
        return result


_CODECS = {
    Format.JSON: JSONCodec(),
    Format.XML: XMLCodec(),
}


def codec_for(fmt: Format) -> JSONCodec | XMLCodec:
    """Get the codec for a body format."""
    return _CODECS[fmt]
