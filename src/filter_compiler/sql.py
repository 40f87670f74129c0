"""
Compile a filter into a parameterized SQL boolean expression.

``build_sql_fragment`` validates the filter and walks it depth-first,
left-to-right, allocating one placeholder per bound value::

    >>> fragment = build_sql_fragment(
    ...     {"field": "age", "operator": "gte", "value": "18", "type": "int"}
    ... )
    >>> fragment.where
    '"age" >= :param1'
    >>> fragment.params
    {'param1': 18}

The result is meant for ``WHERE <where>`` with ``params`` bound by the
caller's SQL layer (see :meth:`SqlFragment.to_text`).
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any

from sqlalchemy import TextClause, text

from .ast import Compound, Condition, FilterNode
from .coercion import coerce_value
from .exceptions import IdentifierError, ValidationError
from .operators import (
    LIST_OPERATORS,
    RANGE_OPERATORS,
    SQL_OPERATORS,
    TYPE_CASTS,
    Logic,
)
from .options import DEFAULT_OPTIONS, CompilerOptions, ParamStyle
from .validation import parse_filter

logger = logging.getLogger(__name__)

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

_LOGIC_KEYWORDS: dict[Logic, str] = {
    Logic.AND: "AND",
    Logic.OR: "OR",
}


@dataclass(frozen=True)
class SqlFragment:
    """
    A SQL boolean expression and the values bound to its placeholders.

    Attributes:
        where: Expression text, e.g. ``("a" = :param1 OR "b" IN (:param2))``.
        params: ``dict`` for named style, ``list`` for numeric style, in
            placeholder order.
        style: The placeholder style used to render ``where``.
    """

    where: str
    params: dict[str, Any] | list[Any]
    style: ParamStyle = ParamStyle.NAMED

    def to_text(self) -> TextClause:
        """Return a SQLAlchemy ``TextClause`` with the parameters bound.

        Only named placeholders can be bound by ``text()``.
        """
        if self.style is not ParamStyle.NAMED or not isinstance(self.params, dict):
            raise ValueError("to_text() requires ParamStyle.NAMED placeholders")
        return text(self.where).bindparams(**self.params)


class _ParameterAllocator:
    """Placeholder counter scoped to one compilation."""

    def __init__(self, options: CompilerOptions) -> None:
        self._options = options
        self._values: list[Any] = []

    def bind(self, value: Any) -> str:
        self._values.append(value)
        index = len(self._values)
        if self._options.param_style is ParamStyle.NUMERIC:
            return f"${index}"
        return f":{self._options.param_prefix}{index}"

    def params(self) -> dict[str, Any] | list[Any]:
        if self._options.param_style is ParamStyle.NUMERIC:
            return list(self._values)
        prefix = self._options.param_prefix
        return {f"{prefix}{i}": v for i, v in enumerate(self._values, start=1)}

    def __len__(self) -> int:
        return len(self._values)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def escape_identifier(name: Any) -> str:
    """Double-quote *name* after checking it is a plain SQL identifier."""
    if not isinstance(name, str) or not _IDENTIFIER_RE.match(name):
        raise IdentifierError(name)
    return f'"{name}"'


def build_sql_fragment(
    data: Any,
    *,
    options: CompilerOptions | None = None,
) -> SqlFragment:
    """
    Validate *data* and compile it into a :class:`SqlFragment`.

    Args:
        data: Filter value (leaf, compound, or list of filters).
        options: Placeholder settings; defaults to named ``:paramN``.

    Raises:
        ValidationError: If the filter does not match the grammar.
        CoercionError: If a value cannot be coerced to its declared type.
        IdentifierError: If a field name is not a plain identifier.
    """
    opts = options or DEFAULT_OPTIONS
    node = parse_filter(data)
    allocator = _ParameterAllocator(opts)
    where = _compile_node(node, allocator)
    logger.debug(
        "Compiled %s filter into SQL fragment with %d parameter(s)",
        type(node).__name__,
        len(allocator),
    )
    return SqlFragment(where=where, params=allocator.params(), style=opts.param_style)


# ---------------------------------------------------------------------------
# Internal compilation
# ---------------------------------------------------------------------------


def _compile_compound(node: Compound, allocator: _ParameterAllocator) -> str:
    keyword = _LOGIC_KEYWORDS[node.logic]
    parts = [_compile_node(c, allocator) for c in node.conditions]
    return "(" + f" {keyword} ".join(parts) + ")"


def _compile_condition(node: Condition, allocator: _ParameterAllocator) -> str:
    column = escape_identifier(node.field) + TYPE_CASTS.get(node.type, "")

    if node.operator in RANGE_OPERATORS:
        low, high = coerce_value(node.value, node.type)
        p1 = allocator.bind(low)
        p2 = allocator.bind(high)
        return f"{column} {RANGE_OPERATORS[node.operator]} {p1} AND {p2}"

    if node.operator in LIST_OPERATORS:
        coerced = coerce_value(node.value, node.type)
        placeholders = [allocator.bind(v) for v in coerced]
        return f"{column} {LIST_OPERATORS[node.operator]} ({', '.join(placeholders)})"

    sql_op = SQL_OPERATORS[node.operator]
    placeholder = allocator.bind(coerce_value(node.value, node.type))
    return f"{column} {sql_op} {placeholder}"


def _compile_node(node: FilterNode, allocator: _ParameterAllocator) -> str:
    if isinstance(node, Compound):
        return _compile_compound(node, allocator)
    if isinstance(node, Condition):
        return _compile_condition(node, allocator)
    raise ValidationError(f"Invalid filter node: {type(node).__name__}")
