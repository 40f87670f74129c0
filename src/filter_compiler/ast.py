"""Typed filter nodes produced by the validator and consumed by the emitters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .operators import FilterOperator, Logic, ValueType


@dataclass(frozen=True)
class Condition:
    """A single ``field <operator> value`` comparison."""

    field: str
    operator: FilterOperator
    value: Any
    type: ValueType

    def to_dict(self) -> dict[str, Any]:
        return {
            "field": self.field,
            "operator": self.operator.value,
            "value": self.value,
            "type": self.type.value,
        }


@dataclass(frozen=True)
class Compound:
    """Boolean composition of child nodes.

    A bare top-level list is parsed into an ``AND`` compound.
    """

    logic: Logic
    conditions: tuple[FilterNode, ...]

    def to_dict(self) -> dict[str, Any]:
        return {self.logic.value: [c.to_dict() for c in self.conditions]}


FilterNode = Condition | Compound
