"""Scalar comparison operators for SQLAlchemy: eq, ne, gt, gte, lt, lte."""

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, cast

from filter_compiler.operators import Op

from ..strategy import SQLAlchemyOperator

if TYPE_CHECKING:
    from sqlalchemy.sql.elements import ColumnElement


class ComparisonOperator(SQLAlchemyOperator):
    """Binary comparison built from a Python operator function."""

    def __init__(self, symbol: Op, compare: Callable[[Any, Any], Any]) -> None:
        self._symbol = symbol
        self._compare = compare

    @property
    def name(self) -> Op:
        return self._symbol

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", self._compare(column, value))


COMPARISON_OPERATORS: tuple[ComparisonOperator, ...] = (
    ComparisonOperator(Op.EQ, operator.eq),
    ComparisonOperator(Op.NE, operator.ne),
    ComparisonOperator(Op.GT, operator.gt),
    ComparisonOperator(Op.GTE, operator.ge),
    ComparisonOperator(Op.LT, operator.lt),
    ComparisonOperator(Op.LTE, operator.le),
)
