"""
Recursive grammar validation for filter values.

A filter is one of:

- a leaf ``{"field", "operator", "value", "type"}``,
- a compound ``{"and": [...]}`` or ``{"or": [...]}``,
- a non-empty list of filters, equivalent to an ``and`` compound.

Validation is a pre-order walk that stops at the first violation and
returns the typed tree (:mod:`filter_compiler.ast`) on success, so the
emitters never re-derive the node kind from raw input.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from .ast import Compound, Condition, FilterNode
from .exceptions import UnsupportedOperatorError, ValidationError
from .operators import (
    LIST_OPERATORS,
    RANGE_OPERATORS,
    VALID_OPERATORS,
    VALID_TYPES,
    FilterOperator,
    Logic,
    ValueType,
)

ROOT_PATH = "<root>"

_LEAF_KEYS: tuple[str, ...] = ("field", "operator", "value", "type")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def validate_filter(data: Any) -> None:
    """Raise :class:`ValidationError` on the first grammar violation."""
    parse_filter(data)


def parse_filter(data: Any) -> FilterNode:
    """Validate *data* and return it as a typed filter tree."""
    return _parse_node(data, ROOT_PATH)


def load_filter(text: str | bytes) -> FilterNode:
    """Parse a JSON document and build a typed filter tree."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValidationError(f"Invalid JSON: {exc}", path=ROOT_PATH) from exc
    return parse_filter(data)


def is_array(value: Any) -> bool:
    """Lists and tuples are arrays; strings and mappings are not."""
    return isinstance(value, list | tuple)


# ---------------------------------------------------------------------------
# Internal: recursive descent
# ---------------------------------------------------------------------------


def _parse_node(data: Any, path: str) -> FilterNode:
    if is_array(data):
        return _parse_list(data, path)

    if not isinstance(data, Mapping):
        raise ValidationError("Each filter must be a non-null object", path=path)

    if Logic.AND.value in data or Logic.OR.value in data:
        return _parse_compound(data, path)

    return _parse_leaf(data, path)


def _parse_list(data: list[Any] | tuple[Any, ...], path: str) -> Compound:
    if not data:
        raise ValidationError("Filter list must not be empty", path=path)
    children = tuple(
        _parse_node(child, f"{path}[{idx}]") for idx, child in enumerate(data)
    )
    return Compound(Logic.AND, children)


def _parse_compound(data: Mapping[str, Any], path: str) -> Compound:
    logic = Logic.AND if Logic.AND.value in data else Logic.OR
    conditions = data[logic.value]
    if not is_array(conditions):
        raise ValidationError(f'"{logic.value}" must be an array', path=path)

    children = tuple(
        _parse_node(child, f"{path}.{logic.value}[{idx}]")
        for idx, child in enumerate(conditions)
    )

    for key in data:
        if key != logic.value:
            raise ValidationError(
                f'Invalid key "{key}" in "{logic.value}" block', path=path
            )

    if not children:
        raise ValidationError(
            f'"{logic.value}" requires at least one condition', path=path
        )
    return Compound(logic, children)


def _check_leaf_keys(data: Mapping[str, Any], path: str) -> None:
    missing = [k for k in _LEAF_KEYS if k not in data]
    if missing:
        raise ValidationError(
            f"Missing required field(s): {', '.join(missing)}", path=path
        )
    extra = sorted(str(k) for k in data if k not in _LEAF_KEYS)
    if extra:
        raise ValidationError(f"Unexpected field(s): {', '.join(extra)}", path=path)


def _check_value_shape(operator: FilterOperator, value: Any, path: str) -> None:
    if operator in RANGE_OPERATORS and (not is_array(value) or len(value) != 2):
        raise ValidationError(
            f'"{operator.value}" operator requires a 2-element array', path=path
        )
    if operator in LIST_OPERATORS and not is_array(value):
        raise ValidationError(
            f'"{operator.value}" operator requires an array', path=path
        )


def _parse_leaf(data: Mapping[str, Any], path: str) -> Condition:
    _check_leaf_keys(data, path)

    field = data["field"]
    raw_operator = data["operator"]
    value = data["value"]
    raw_type = data["type"]

    if not isinstance(field, str) or not field.strip():
        raise ValidationError('"field" must be a non-empty string', path=path)

    if not isinstance(raw_operator, str) or raw_operator not in VALID_OPERATORS:
        raise UnsupportedOperatorError(
            raw_operator, sorted(VALID_OPERATORS), path=path
        )
    operator = FilterOperator(raw_operator)

    if value is None or (is_array(value) and len(value) == 0):
        raise ValidationError(
            f'"value" is required for operator "{operator.value}"', path=path
        )

    if not isinstance(raw_type, str) or raw_type not in VALID_TYPES:
        raise ValidationError(f'Unsupported "type": {raw_type}', path=path)

    _check_value_shape(operator, value, path)

    if is_array(value):
        value = tuple(value)
    return Condition(field, operator, value, ValueType(raw_type))
