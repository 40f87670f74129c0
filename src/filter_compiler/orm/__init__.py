"""SQLAlchemy integration for where-trees."""

from .compiler import build_sqla_filter
from .operators import DEFAULT_SQLA_REGISTRY, build_default_sqla_registry
from .strategy import SQLAlchemyOperator, SQLAlchemyOperatorRegistry

__all__ = [
    "DEFAULT_SQLA_REGISTRY",
    "SQLAlchemyOperator",
    "SQLAlchemyOperatorRegistry",
    "build_default_sqla_registry",
    "build_sqla_filter",
]
