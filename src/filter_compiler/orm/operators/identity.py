"""Identity operators for SQLAlchemy: ``IS`` / ``IS NOT``."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from filter_compiler.operators import Op

from ..strategy import SQLAlchemyOperator

if TYPE_CHECKING:
    from sqlalchemy.sql.elements import ColumnElement


class IdentityOperator(SQLAlchemyOperator):
    def __init__(self, symbol: Op, *, negated: bool = False) -> None:
        self._symbol = symbol
        self._negated = negated

    @property
    def name(self) -> Op:
        return self._symbol

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        clause = column.is_not(value) if self._negated else column.is_(value)
        return cast("ColumnElement[bool]", clause)


IDENTITY_OPERATORS: tuple[IdentityOperator, ...] = (
    IdentityOperator(Op.IS),
    IdentityOperator(Op.NOT, negated=True),
)
