"""Typed accessors for fields of a decoded plist record.

Each accessor either returns a Python value or raises MissingFieldError or
TypeMismatchError naming the field. Optional accessors treat an absent key,
an empty string and an empty record alike as "no value".
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from moneymoney.bridge.nodes import (
    ArrayNode,
    BooleanNode,
    DateNode,
    DictNode,
    IntegerNode,
    Node,
    RealNode,
    StringNode,
)
from moneymoney.domain.currency import Currency
from moneymoney.domain.errors import MissingFieldError, TypeMismatchError


def expect_record(node: Node, name: str) -> DictNode:
    """Return node as a record or raise TypeMismatchError."""
    if not isinstance(node, DictNode):
        raise TypeMismatchError(name, "dict", node.kind)
    return node


def expect_array(node: Node, name: str) -> ArrayNode:
    """Return node as an array or raise TypeMismatchError."""
    if not isinstance(node, ArrayNode):
        raise TypeMismatchError(name, "array", node.kind)
    return node


def require(record: DictNode, key: str) -> Node:
    node = record.get(key)
    if node is None:
        raise MissingFieldError(key)
    return node


def require_string(record: DictNode, key: str) -> str:
    return _as_string(require(record, key), key)


def optional_string(record: DictNode, key: str) -> Optional[str]:
    node = record.get(key)
    if node is None:
        return None
    value = _as_string(node, key)
    return value or None


def string_or_empty(record: DictNode, key: str) -> str:
    return optional_string(record, key) or ""


def require_bool(record: DictNode, key: str) -> bool:
    return _as_bool(require(record, key), key)


def bool_or_default(record: DictNode, key: str, default: bool) -> bool:
    node = record.get(key)
    if node is None:
        return default
    return _as_bool(node, key)


def require_int(record: DictNode, key: str) -> int:
    return _as_int(require(record, key), key)


def optional_int(record: DictNode, key: str) -> Optional[int]:
    node = record.get(key)
    if node is None:
        return None
    return _as_int(node, key)


def require_decimal(record: DictNode, key: str) -> Decimal:
    return as_decimal(require(record, key), key)


def optional_decimal(record: DictNode, key: str) -> Optional[Decimal]:
    node = record.get(key)
    if node is None:
        return None
    return as_decimal(node, key)


def require_currency(record: DictNode, key: str) -> Currency:
    return Currency.from_code(require_string(record, key))


def require_date(record: DictNode, key: str) -> date:
    return _as_date(require(record, key), key)


def optional_date(record: DictNode, key: str) -> Optional[date]:
    node = record.get(key)
    if node is None or (isinstance(node, StringNode) and not node.value):
        return None
    return _as_date(node, key)


def optional_datetime(record: DictNode, key: str) -> Optional[datetime]:
    node = record.get(key)
    if node is None:
        return None
    if not isinstance(node, DateNode):
        raise TypeMismatchError(key, "date", node.kind)
    return node.value


def optional_record(record: DictNode, key: str) -> Optional[DictNode]:
    node = record.get(key)
    if node is None:
        return None
    node = expect_record(node, key)
    return node if node.entries else None


def as_decimal(node: Node, key: str) -> Decimal:
    # Integers are exact; reals were parsed from text without going through float.
    if isinstance(node, RealNode):
        return node.value
    if isinstance(node, IntegerNode):
        return Decimal(node.value)
    raise TypeMismatchError(key, "real", node.kind)


def _as_string(node: Node, key: str) -> str:
    if not isinstance(node, StringNode):
        raise TypeMismatchError(key, "string", node.kind)
    return node.value


def _as_bool(node: Node, key: str) -> bool:
    if not isinstance(node, BooleanNode):
        raise TypeMismatchError(key, "boolean", node.kind)
    return node.value


def _as_int(node: Node, key: str) -> int:
    if not isinstance(node, IntegerNode):
        raise TypeMismatchError(key, "integer", node.kind)
    return node.value


def _as_date(node: Node, key: str) -> date:
    if isinstance(node, DateNode):
        # MoneyMoney stores local midnight; convert back before dropping the time.
        return node.value.astimezone().date()
    if isinstance(node, StringNode):
        try:
            return date.fromisoformat(node.value)
        except ValueError:
            raise TypeMismatchError(key, "date", f"string '{node.value}'") from None
    raise TypeMismatchError(key, "date", node.kind)

