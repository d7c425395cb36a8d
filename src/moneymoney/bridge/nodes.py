"""Generic property-list node tree.

Decoded responses are represented with exactly these eight node types.
Mappers dispatch on them with ``isinstance`` and treat anything else as a
type mismatch.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal


class Node:
    """Base class for decoded property-list values."""

    kind = "node"


@dataclass(frozen=True)
class IntegerNode(Node):
    value: int
    kind = "integer"


@dataclass(frozen=True)
class RealNode(Node):
    value: Decimal
    kind = "real"


@dataclass(frozen=True)
class StringNode(Node):
    value: str
    kind = "string"


@dataclass(frozen=True)
class BooleanNode(Node):
    value: bool
    kind = "boolean"


@dataclass(frozen=True)
class DateNode(Node):
    value: datetime
    kind = "date"


@dataclass(frozen=True)
class DataNode(Node):
    value: bytes
    kind = "data"


@dataclass(frozen=True)
class ArrayNode(Node):
    items: tuple[Node, ...] = ()
    kind = "array"


@dataclass(frozen=True)
class DictNode(Node):
    entries: dict[str, Node] = field(default_factory=dict, hash=False)
    kind = "dict"

    def get(self, key: str) -> Node | None:
        return self.entries.get(key)

    def __contains__(self, key: str) -> bool:
        return key in self.entries
