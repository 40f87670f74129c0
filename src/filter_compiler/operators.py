from enum import Enum


class FilterOperator(str, Enum):
    """Comparison operators accepted in a filter leaf."""

    # Standard comparison
    EQ = "eq"
    NE = "ne"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"

    # String matching
    LIKE = "like"
    NOT_LIKE = "notLike"
    ILIKE = "iLike"
    NOT_ILIKE = "notILike"

    # Set / range
    IN = "in"
    NOT_IN = "notIn"
    BETWEEN = "between"
    NOT_BETWEEN = "notBetween"

    # Identity
    IS = "is"
    NOT = "not"


class ValueType(str, Enum):
    """Declared value types; they drive coercion and casting."""

    STRING = "string"
    NUMBER = "number"
    INT = "int"
    BOOLEAN = "boolean"
    DATE = "date"


class Logic(str, Enum):
    """Boolean composition keys."""

    AND = "and"
    OR = "or"


class Op(str, Enum):
    """Operator symbols used as keys of a where-tree."""

    EQ = "$eq"
    NE = "$ne"
    GT = "$gt"
    GTE = "$gte"
    LT = "$lt"
    LTE = "$lte"
    LIKE = "$like"
    NOT_LIKE = "$notLike"
    ILIKE = "$iLike"
    NOT_ILIKE = "$notILike"
    IN = "$in"
    NOT_IN = "$notIn"
    BETWEEN = "$between"
    NOT_BETWEEN = "$notBetween"
    IS = "$is"
    NOT = "$not"

    # Logical
    AND = "$and"
    OR = "$or"


WHERE_OPERATORS: dict[FilterOperator, Op] = {
    FilterOperator.EQ: Op.EQ,
    FilterOperator.NE: Op.NE,
    FilterOperator.GT: Op.GT,
    FilterOperator.GTE: Op.GTE,
    FilterOperator.LT: Op.LT,
    FilterOperator.LTE: Op.LTE,
    FilterOperator.LIKE: Op.LIKE,
    FilterOperator.NOT_LIKE: Op.NOT_LIKE,
    FilterOperator.ILIKE: Op.ILIKE,
    FilterOperator.NOT_ILIKE: Op.NOT_ILIKE,
    FilterOperator.IN: Op.IN,
    FilterOperator.NOT_IN: Op.NOT_IN,
    FilterOperator.BETWEEN: Op.BETWEEN,
    FilterOperator.NOT_BETWEEN: Op.NOT_BETWEEN,
    FilterOperator.IS: Op.IS,
    FilterOperator.NOT: Op.NOT,
}

LOGIC_OPERATORS: dict[Logic, Op] = {
    Logic.AND: Op.AND,
    Logic.OR: Op.OR,
}

# Infix keywords for scalar comparisons; range and list operators are
# rendered by the SQL emitter itself.
SQL_OPERATORS: dict[FilterOperator, str] = {
    FilterOperator.EQ: "=",
    FilterOperator.NE: "!=",
    FilterOperator.GT: ">",
    FilterOperator.GTE: ">=",
    FilterOperator.LT: "<",
    FilterOperator.LTE: "<=",
    FilterOperator.LIKE: "LIKE",
    FilterOperator.NOT_LIKE: "NOT LIKE",
    FilterOperator.ILIKE: "ILIKE",
    FilterOperator.NOT_ILIKE: "NOT ILIKE",
    FilterOperator.IS: "IS",
    FilterOperator.NOT: "IS NOT",
}

RANGE_OPERATORS: dict[FilterOperator, str] = {
    FilterOperator.BETWEEN: "BETWEEN",
    FilterOperator.NOT_BETWEEN: "NOT BETWEEN",
}

LIST_OPERATORS: dict[FilterOperator, str] = {
    FilterOperator.IN: "IN",
    FilterOperator.NOT_IN: "NOT IN",
}

# Types that need a database-side cast on both sides of the comparison.
TYPE_CASTS: dict[ValueType, str] = {
    ValueType.DATE: "::date",
}

# Pre-compute valid values for validation
VALID_OPERATORS: frozenset[str] = frozenset(m.value for m in FilterOperator)
VALID_TYPES: frozenset[str] = frozenset(m.value for m in ValueType)
