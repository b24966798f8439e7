"""Operation types for deltas.

An op is one of Insert, Delete or Retain. Ops are immutable values: their
attribute maps are copied on construction and exposed read-only, so splitting
or merging ops inside a Delta never touches a caller's dict.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

AttributeMap = Mapping[str, str]


class OpType(Enum):
    """Kinds of delta operations."""

    INSERT = "insert"
    DELETE = "delete"
    RETAIN = "retain"


def _freeze(attributes: AttributeMap | None) -> AttributeMap:
    return MappingProxyType(dict(attributes or {}))


class _OpMixin:
    """Shared read-only behaviour of the three op kinds."""

    type: OpType
    attributes: AttributeMap

    def length(self) -> int | float:
        raise NotImplementedError

    def is_insert(self) -> bool:
        return self.type is OpType.INSERT

    def is_delete(self) -> bool:
        return self.type is OpType.DELETE

    def is_retain(self) -> bool:
        return self.type is OpType.RETAIN

    def _repr_attributes(self) -> str:
        return f", {dict(self.attributes)!r}" if self.attributes else ""


@dataclass(frozen=True)
class Insert(_OpMixin):
    """Insert `text` at the cursor."""

    text: str
    attributes: AttributeMap = field(default_factory=dict, hash=False)

    type = OpType.INSERT

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", _freeze(self.attributes))

    def length(self) -> int:
        return len(self.text)

    def __repr__(self) -> str:
        return f"Insert({self.text!r}{self._repr_attributes()})"


@dataclass(frozen=True)
class Delete(_OpMixin):
    """Remove `count` units of the pre-image document.

    Attributes are accepted for symmetry but carry no meaning.
    """

    count: int | float
    attributes: AttributeMap = field(default_factory=dict, hash=False)

    type = OpType.DELETE

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", _freeze(self.attributes))

    def length(self) -> int | float:
        return self.count

    def __repr__(self) -> str:
        return f"Delete({self.count!r}{self._repr_attributes()})"


@dataclass(frozen=True)
class Retain(_OpMixin):
    """Keep `count` units, re-applying `attributes` when non-empty."""

    count: int | float
    attributes: AttributeMap = field(default_factory=dict, hash=False)

    type = OpType.RETAIN

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", _freeze(self.attributes))

    def length(self) -> int | float:
        return self.count

    def __repr__(self) -> str:
        return f"Retain({self.count!r}{self._repr_attributes()})"


Op = Insert | Delete | Retain
