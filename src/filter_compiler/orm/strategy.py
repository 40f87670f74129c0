"""
SQLAlchemy operator compilation strategy.

Provides the ``SQLAlchemyOperator`` interface and a registry keyed by
where-tree :class:`~filter_compiler.operators.Op` symbols.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement

    from filter_compiler.operators import Op


class SQLAlchemyOperator(ABC):
    """
    Strategy interface for compiling one where-tree operator symbol
    into a SQLAlchemy ``ColumnElement[bool]``.
    """

    @property
    @abstractmethod
    def name(self) -> Op:
        """The operator symbol this strategy handles."""
        ...

    @abstractmethod
    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        """
        Build a SQLAlchemy filter clause.

        Args:
            column: A SQLAlchemy column, instrumented attribute, or
                literal column expression.
            value: The coerced value (or list of values) from the tree.
        """
        ...


class SQLAlchemyOperatorRegistry:
    """Strategies keyed by the :class:`Op` symbol they handle."""

    def __init__(self) -> None:
        self._operators: dict[Op, SQLAlchemyOperator] = {}

    def register(self, *operators: SQLAlchemyOperator) -> None:
        """Add strategies; a later strategy replaces one with the same symbol."""
        for operator in operators:
            self._operators[operator.name] = operator

    @property
    def supported_operators(self) -> set[Op]:
        return set(self._operators)

    def apply(self, name: Op, column: Any, value: Any) -> ColumnElement[bool]:
        """
        Look up the strategy for *name* and apply it.

        Raises:
            ValueError: If no strategy is registered for *name*.
        """
        try:
            operator = self._operators[name]
        except KeyError:
            raise ValueError(f"Unsupported operator for SQLAlchemy: {name}") from None
        return operator.apply(column, value)
