"""Pattern matching operators for SQLAlchemy."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from filter_compiler.operators import Op

from ..strategy import SQLAlchemyOperator

if TYPE_CHECKING:
    from sqlalchemy.sql.elements import ColumnElement


class PatternOperator(SQLAlchemyOperator):
    """
    ``LIKE`` family. The pattern is passed through untouched, so ``%``
    and ``_`` keep their wildcard meaning.
    """

    def __init__(self, symbol: Op, method: str) -> None:
        self._symbol = symbol
        self._method = method

    @property
    def name(self) -> Op:
        return self._symbol

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", getattr(column, self._method)(value))


PATTERN_OPERATORS: tuple[PatternOperator, ...] = (
    PatternOperator(Op.LIKE, "like"),
    PatternOperator(Op.NOT_LIKE, "not_like"),
    PatternOperator(Op.ILIKE, "ilike"),
    PatternOperator(Op.NOT_ILIKE, "not_ilike"),
)
