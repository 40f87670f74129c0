"""
Compile a filter into an ORM where-tree.

The tree is a nested mapping keyed by :class:`~filter_compiler.operators.Op`
symbols::

    {Op.AND: [{"age": {Op.GTE: 18}}, {Op.OR: [...]}]}

Leaves whose type needs a database-side cast (``date``) cannot be expressed
as a plain ``{field: {op: value}}`` entry, so they are emitted as a
:class:`Where` node comparing two raw :class:`Literal` expressions instead.
The tree is meant to be handed to an ORM layer such as
:func:`filter_compiler.orm.build_sqla_filter`; nothing is executed here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .ast import Compound, Condition, FilterNode
from .coercion import coerce_value
from .exceptions import ValidationError
from .operators import LOGIC_OPERATORS, TYPE_CASTS, WHERE_OPERATORS, Op
from .validation import parse_filter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Literal:
    """A raw SQL expression, embedded verbatim by the ORM layer."""

    sql: str


@dataclass(frozen=True)
class Where:
    """Comparison between raw expressions: ``attribute <operator> value``."""

    attribute: Literal
    operator: Op
    value: Literal | list[Literal]


WhereTree = dict[Any, Any] | Where


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def build_where_tree(data: Any) -> WhereTree:
    """
    Validate *data* and lower it into a where-tree.

    Raises:
        ValidationError: If the filter does not match the grammar.
        CoercionError: If a value cannot be coerced to its declared type.
    """
    node = parse_filter(data)
    tree = _lower_node(node)
    logger.debug("Compiled %s filter into where-tree", type(node).__name__)
    return tree


# ---------------------------------------------------------------------------
# Internal lowering
# ---------------------------------------------------------------------------


def _quote_identifier_literal(field: str) -> str:
    return '"' + field.replace('"', '""') + '"'


def _quote_value_literal(value: Any) -> str:
    return "'" + str(value).replace("'", "''") + "'"


def _lower_condition(node: Condition) -> WhereTree:
    symbol = WHERE_OPERATORS[node.operator]
    parsed = coerce_value(node.value, node.type)
    cast = TYPE_CASTS.get(node.type, "")

    if cast:
        attribute = Literal(f"{_quote_identifier_literal(node.field)}{cast}")
        value: Literal | list[Literal]
        if isinstance(parsed, list):
            value = [Literal(f"{_quote_value_literal(v)}{cast}") for v in parsed]
        else:
            value = Literal(f"{_quote_value_literal(parsed)}{cast}")
        return Where(attribute, symbol, value)

    return {node.field: {symbol: parsed}}


def _lower_node(node: FilterNode) -> WhereTree:
    if isinstance(node, Compound):
        return {LOGIC_OPERATORS[node.logic]: [_lower_node(c) for c in node.conditions]}
    if isinstance(node, Condition):
        return _lower_condition(node)
    raise ValidationError(f"Invalid filter node: {type(node).__name__}")
