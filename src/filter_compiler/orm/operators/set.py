"""Set and range operators for SQLAlchemy: in, notIn, between, notBetween."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from filter_compiler.operators import Op

from ..strategy import SQLAlchemyOperator

if TYPE_CHECKING:
    from sqlalchemy.sql.elements import ColumnElement


class MembershipOperator(SQLAlchemyOperator):
    """``IN`` / ``NOT IN`` over the list of coerced values."""

    def __init__(self, symbol: Op, *, negated: bool = False) -> None:
        self._symbol = symbol
        self._negated = negated

    @property
    def name(self) -> Op:
        return self._symbol

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        values = list(value)
        clause = column.not_in(values) if self._negated else column.in_(values)
        return cast("ColumnElement[bool]", clause)


class RangeOperator(SQLAlchemyOperator):
    """Inclusive ``BETWEEN`` on a ``[low, high]`` pair."""

    def __init__(self, symbol: Op, *, negated: bool = False) -> None:
        self._symbol = symbol
        self._negated = negated

    @property
    def name(self) -> Op:
        return self._symbol

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        low, high = value
        clause = column.between(low, high)
        return cast("ColumnElement[bool]", ~clause if self._negated else clause)


SET_OPERATORS: tuple[SQLAlchemyOperator, ...] = (
    MembershipOperator(Op.IN),
    MembershipOperator(Op.NOT_IN, negated=True),
    RangeOperator(Op.BETWEEN),
    RangeOperator(Op.NOT_BETWEEN, negated=True),
)
