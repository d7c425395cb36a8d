"""Strict XML property-list decoding and encoding.

MoneyMoney answers AppleScript export commands with XML plists. The
standard library's plistlib turns ``<real>`` into float, which cannot carry
currency amounts exactly, so this module parses the XML itself and keeps
reals as Decimal.
"""

import base64
import binascii
import logging
import xml.etree.ElementTree as ET
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Union

from dateutil import parser as date_parser

from moneymoney.bridge.nodes import (
    ArrayNode,
    BooleanNode,
    DataNode,
    DateNode,
    DictNode,
    IntegerNode,
    Node,
    RealNode,
    StringNode,
)
from moneymoney.domain.errors import EmptyResponseError, MalformedResponseError

logger = logging.getLogger(__name__)

PLIST_HEADER = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" '
    '"http://www.apple.com/DTDs/PropertyList-1.0.dtd">\n'
)

_SCALAR_TAGS = {"string", "integer", "real", "true", "false", "date", "data"}


def decode_plist(raw: Union[str, bytes, None]) -> Node:
    """Decode raw executor output into a node tree.

    Args:
        raw: XML plist text or bytes as returned by the executor

    Returns:
        The root node below ``<plist>``

    Raises:
        EmptyResponseError: If there is no output or the plist holds no value
        MalformedResponseError: If the output is not a valid XML plist
    """
    if raw is None:
        raise EmptyResponseError("MoneyMoney returned no output")

    if isinstance(raw, str):
        raw = raw.encode("utf-8")

    if not raw.strip():
        raise EmptyResponseError("MoneyMoney returned no output")

    if raw.startswith(b"bplist"):
        raise MalformedResponseError("Binary property lists are not supported")

    try:
        root = ET.fromstring(raw)
    except ET.ParseError as e:
        raise MalformedResponseError(f"Invalid plist XML: {e}") from e

    if root.tag != "plist":
        raise MalformedResponseError(f"Expected <plist> root element, got <{root.tag}>")

    children = list(root)
    if not children:
        raise EmptyResponseError("MoneyMoney returned an empty plist")
    if len(children) > 1:
        raise MalformedResponseError("A plist must contain exactly one top-level value")

    node = _decode_element(children[0])
    logger.debug("Decoded plist with top-level %s", node.kind)
    return node


def _decode_element(element: ET.Element) -> Node:
    tag = element.tag

    if tag in _SCALAR_TAGS and len(element):
        raise MalformedResponseError(f"<{tag}> must not contain child elements")

    if tag == "dict":
        return _decode_dict(element)
    if tag == "array":
        return ArrayNode(tuple(_decode_element(child) for child in element))
    if tag == "string":
        return StringNode(element.text or "")
    if tag == "integer":
        return IntegerNode(_parse_integer(element.text))
    if tag == "real":
        return RealNode(_parse_real(element.text))
    if tag == "true":
        return BooleanNode(True)
    if tag == "false":
        return BooleanNode(False)
    if tag == "date":
        return DateNode(_parse_date(element.text))
    if tag == "data":
        return DataNode(_parse_data(element.text))

    raise MalformedResponseError(f"Unknown plist element <{tag}>")


def _decode_dict(element: ET.Element) -> DictNode:
    children = list(element)
    if len(children) % 2:
        raise MalformedResponseError("<dict> has a key without a value")

    entries: dict[str, Node] = {}
    for key_element, value_element in zip(children[::2], children[1::2]):
        if key_element.tag != "key":
            raise MalformedResponseError(
                f"Expected <key> in <dict>, got <{key_element.tag}>"
            )
        key = key_element.text or ""
        if key in entries:
            raise MalformedResponseError(f"Duplicate key '{key}' in <dict>")
        if value_element.tag == "key":
            raise MalformedResponseError(f"Key '{key}' has no value")
        entries[key] = _decode_element(value_element)

    return DictNode(entries)


def _parse_integer(text: str | None) -> int:
    try:
        return int((text or "").strip())
    except ValueError:
        raise MalformedResponseError(f"Invalid <integer> value '{text}'") from None


def _parse_real(text: str | None) -> Decimal:
    try:
        value = Decimal((text or "").strip())
    except InvalidOperation:
        raise MalformedResponseError(f"Invalid <real> value '{text}'") from None
    if not value.is_finite():
        raise MalformedResponseError(f"Non-finite <real> value '{text}'")
    return value


def _parse_date(text: str | None) -> datetime:
    try:
        value = date_parser.isoparse((text or "").strip())
    except (ValueError, OverflowError):
        raise MalformedResponseError(f"Invalid <date> value '{text}'") from None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def _parse_data(text: str | None) -> bytes:
    compact = "".join((text or "").split())
    try:
        return base64.b64decode(compact, validate=True)
    except (binascii.Error, ValueError):
        raise MalformedResponseError("Invalid base64 in <data>") from None


def encode_plist(node: Node) -> str:
    """Encode a node tree as XML plist text.

    Args:
        node: Root node

    Returns:
        Complete XML plist document
    """
    root = ET.Element("plist", version="1.0")
    root.append(_encode_node(node))
    return PLIST_HEADER + ET.tostring(root, encoding="unicode") + "\n"


def _encode_node(node: Node) -> ET.Element:
    if isinstance(node, DictNode):
        element = ET.Element("dict")
        for key, value in node.entries.items():
            ET.SubElement(element, "key").text = key
            element.append(_encode_node(value))
        return element
    if isinstance(node, ArrayNode):
        element = ET.Element("array")
        element.extend(_encode_node(item) for item in node.items)
        return element
    if isinstance(node, BooleanNode):
        return ET.Element("true" if node.value else "false")

    element = ET.Element(node.kind)
    if isinstance(node, StringNode):
        element.text = node.value
    elif isinstance(node, IntegerNode):
        element.text = str(node.value)
    elif isinstance(node, RealNode):
        element.text = format(node.value, "f")
    elif isinstance(node, DateNode):
        value = node.value
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        element.text = value.strftime("%Y-%m-%dT%H:%M:%SZ")
    elif isinstance(node, DataNode):
        element.text = base64.b64encode(node.value).decode("ascii")
    else:
        raise TypeError(f"Cannot encode {type(node).__name__}")
    return element
