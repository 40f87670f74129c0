from .ast import Compound, Condition, FilterNode
from .coercion import coerce_value
from .exceptions import (
    CoercionError,
    FilterError,
    IdentifierError,
    UnsupportedOperatorError,
    ValidationError,
)
from .operators import FilterOperator, Logic, Op, ValueType
from .options import CompilerOptions, ParamStyle
from .sql import SqlFragment, build_sql_fragment, escape_identifier
from .validation import load_filter, parse_filter, validate_filter
from .where import Literal, Where, WhereTree, build_where_tree

__all__ = [
    # Entry points
    "build_where_tree",
    "build_sql_fragment",
    "validate_filter",
    "coerce_value",
    # Parsing
    "parse_filter",
    "load_filter",
    "escape_identifier",
    # Typed nodes
    "Condition",
    "Compound",
    "FilterNode",
    # Enums
    "FilterOperator",
    "ValueType",
    "Logic",
    "Op",
    # Emitter output
    "Literal",
    "Where",
    "WhereTree",
    "SqlFragment",
    # Options
    "CompilerOptions",
    "ParamStyle",
    # Exceptions
    "FilterError",
    "ValidationError",
    "UnsupportedOperatorError",
    "CoercionError",
    "IdentifierError",
]
