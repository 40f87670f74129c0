"""
SQLAlchemy operator implementations and default registry.

Usage::

    from filter_compiler.orm.operators import DEFAULT_SQLA_REGISTRY

    expr = DEFAULT_SQLA_REGISTRY.apply(Op.EQ, column, value)
"""

from __future__ import annotations

from ..strategy import SQLAlchemyOperatorRegistry
from .identity import IDENTITY_OPERATORS, IdentityOperator
from .set import SET_OPERATORS, MembershipOperator, RangeOperator
from .standard import COMPARISON_OPERATORS, ComparisonOperator
from .string import PATTERN_OPERATORS, PatternOperator


def build_default_sqla_registry() -> SQLAlchemyOperatorRegistry:
    """Create a registry with every built-in SQLAlchemy operator."""
    registry = SQLAlchemyOperatorRegistry()
    registry.register(
        *COMPARISON_OPERATORS,
        *PATTERN_OPERATORS,
        *SET_OPERATORS,
        *IDENTITY_OPERATORS,
    )
    return registry


DEFAULT_SQLA_REGISTRY: SQLAlchemyOperatorRegistry = build_default_sqla_registry()

__all__ = [
    "DEFAULT_SQLA_REGISTRY",
    "ComparisonOperator",
    "IdentityOperator",
    "MembershipOperator",
    "PatternOperator",
    "RangeOperator",
    "build_default_sqla_registry",
]
