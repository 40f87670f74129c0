"""
Compile a where-tree into a SQLAlchemy filter expression.

Uses the strategy pattern: each operator symbol is an isolated class in
``operators/``, registered in a ``SQLAlchemyOperatorRegistry``.
``build_sqla_filter`` walks the tree produced by
:func:`filter_compiler.where.build_where_tree` and delegates every
comparison to the registry.

``{field: {op: value}}`` entries are resolved against the columns of a
mapped model class or a ``Table``. :class:`~filter_compiler.where.Where`
nodes carry their own raw expressions and are rendered with
``literal_column`` on both sides.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from sqlalchemy import and_, literal_column, or_

from filter_compiler.operators import Op
from filter_compiler.where import Literal, Where

from .operators import DEFAULT_SQLA_REGISTRY

if TYPE_CHECKING:
    from collections.abc import Mapping

    from sqlalchemy import ColumnElement

    from .strategy import SQLAlchemyOperatorRegistry

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def build_sqla_filter(
    source: Any,
    tree: Any,
    *,
    registry: SQLAlchemyOperatorRegistry | None = None,
) -> ColumnElement[bool]:
    """
    Build a SQLAlchemy filter expression from a where-tree.

    Args:
        source: A mapped model class or a ``Table`` whose columns the
            tree's field names refer to.
        tree: Where-tree from ``build_where_tree``.
        registry: Optional custom operator registry. Falls back to
            ``DEFAULT_SQLA_REGISTRY``.

    Returns:
        SQLAlchemy Boolean expression.

    Raises:
        AttributeError: If a field is not a column of *source*.
        ValueError: If an operator symbol is not registered.
    """
    reg = registry or DEFAULT_SQLA_REGISTRY
    return _compile_node(source, tree, reg)


# ---------------------------------------------------------------------------
# Internal compilation
# ---------------------------------------------------------------------------


def _resolve_column(source: Any, field: str) -> Any:
    columns = getattr(source, "c", None)
    column = columns.get(field) if columns is not None else getattr(source, field, None)
    if column is None:
        raise AttributeError(f"{source!r} has no column {field!r}")
    return column


def _literal_expression(value: Literal | list[Literal]) -> Any:
    if isinstance(value, list):
        return [literal_column(v.sql) for v in value]
    return literal_column(value.sql)


def _compile_where(node: Where, registry: SQLAlchemyOperatorRegistry) -> Any:
    return registry.apply(
        node.operator,
        literal_column(node.attribute.sql),
        _literal_expression(node.value),
    )


def _compile_field(
    source: Any,
    field: str,
    comparisons: Mapping[Any, Any],
    registry: SQLAlchemyOperatorRegistry,
) -> list[Any]:
    column = _resolve_column(source, field)
    return [registry.apply(Op(op), column, val) for op, val in comparisons.items()]


def _compile_node(
    source: Any,
    node: Any,
    registry: SQLAlchemyOperatorRegistry,
) -> ColumnElement[bool]:
    if isinstance(node, Where):
        return _compile_where(node, registry)

    if not isinstance(node, dict):
        raise ValueError(f"Invalid where-tree node: {node!r}")

    clauses: list[Any] = []
    for key, val in node.items():
        if key == Op.AND:
            clauses.append(and_(*[_compile_node(source, c, registry) for c in val]))
        elif key == Op.OR:
            clauses.append(or_(*[_compile_node(source, c, registry) for c in val]))
        else:
            clauses.extend(_compile_field(source, key, val, registry))

    if not clauses:
        raise ValueError("Empty where-tree node")
    if len(clauses) == 1:
        return cast("ColumnElement[bool]", clauses[0])
    return and_(*clauses)
