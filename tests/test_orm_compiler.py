"""Tests for lowering where-trees onto SQLAlchemy."""

from __future__ import annotations

import operator

import pytest
from sqlalchemy.dialects import postgresql

from filter_compiler import Op, build_where_tree
from filter_compiler.orm import (
    DEFAULT_SQLA_REGISTRY,
    SQLAlchemyOperatorRegistry,
    build_default_sqla_registry,
    build_sqla_filter,
)
from filter_compiler.orm.operators import ComparisonOperator, PatternOperator

from .models import PersonRecord


def leaf(field="age", operator="eq", value=30, type_="int"):
    return {"field": field, "operator": operator, "value": value, "type": type_}


def compile_tree(data, source=PersonRecord):
    return str(build_sqla_filter(source, build_where_tree(data)).compile())


def test_basic_eq():
    assert compile_tree(leaf()) == "people.age = :age_1"


def test_table_source():
    assert compile_tree(leaf(), PersonRecord.__table__) == "people.age = :age_1"


def test_and_or():
    compiled = compile_tree(
        {"and": [leaf(), {"or": [leaf("name", "eq", "Bob", "string"), leaf()]}]}
    )
    assert "people.age = :age_1 AND" in compiled
    assert "people.name = :name_1 OR people.age = :age_2" in compiled


def test_ilike():
    compiled = compile_tree(leaf("name", "iLike", "john%", "string"))
    assert compiled == "lower(people.name) LIKE lower(:name_1)"


def test_in_and_not_in():
    assert "people.age IN" in compile_tree(leaf(operator="in", value=[1, 2]))
    assert "people.age NOT IN" in compile_tree(leaf(operator="notIn", value=[1, 2]))


def test_between_and_not_between():
    assert compile_tree(leaf(operator="between", value=[1, 2])) == (
        "people.age BETWEEN :age_1 AND :age_2"
    )
    assert "NOT" in compile_tree(leaf(operator="notBetween", value=[1, 2]))


def test_is_and_is_not():
    assert "people.active IS" in compile_tree(leaf("active", "is", True, "boolean"))
    assert "people.active IS NOT" in compile_tree(
        leaf("active", "not", True, "boolean")
    )


def test_bound_values_are_coerced():
    expr = build_sqla_filter(PersonRecord, build_where_tree(leaf(value="41")))
    assert expr.compile().params == {"age_1": 41}


# -- cast leaves -----------------------------------------------------------------


def test_date_comparison_renders_literals():
    tree = build_where_tree(leaf("created_at", "gte", "2023-01-01", "date"))
    expr = build_sqla_filter(PersonRecord, tree)
    compiled = str(expr.compile(dialect=postgresql.dialect()))
    assert compiled == "\"created_at\"::date >= '2023-01-01'::date"


def test_date_between_renders_literals():
    tree = build_where_tree(
        leaf("created_at", "between", ["2023-01-01", "2023-01-31"], "date")
    )
    compiled = str(
        build_sqla_filter(PersonRecord, tree).compile(dialect=postgresql.dialect())
    )
    assert compiled == (
        "\"created_at\"::date BETWEEN '2023-01-01'::date AND '2023-01-31'::date"
    )


def test_date_in_renders_literals():
    tree = build_where_tree(
        leaf("created_at", "in", ["2023-01-01", "2023-01-02"], "date")
    )
    compiled = str(
        build_sqla_filter(PersonRecord, tree).compile(dialect=postgresql.dialect())
    )
    assert "IN" in compiled
    assert "'2023-01-01'::date" in compiled
    assert "'2023-01-02'::date" in compiled


# -- errors / registry -------------------------------------------------------------


def test_unknown_column():
    with pytest.raises(AttributeError, match="no column 'missing'"):
        build_sqla_filter(PersonRecord, build_where_tree(leaf("missing")))


def test_unknown_table_column():
    with pytest.raises(AttributeError):
        build_sqla_filter(PersonRecord.__table__, {"missing": {Op.EQ: 1}})


def test_unregistered_operator():
    registry = SQLAlchemyOperatorRegistry()
    registry.register(ComparisonOperator(Op.GT, operator.gt))
    with pytest.raises(ValueError, match="Unsupported operator for SQLAlchemy"):
        build_sqla_filter(PersonRecord, build_where_tree(leaf()), registry=registry)


def test_invalid_node():
    with pytest.raises(ValueError, match="Invalid where-tree node"):
        build_sqla_filter(PersonRecord, [leaf()])


def test_empty_node():
    with pytest.raises(ValueError, match="Empty where-tree node"):
        build_sqla_filter(PersonRecord, {})


def test_default_registry_covers_all_comparison_symbols():
    expected = {op for op in Op if op not in (Op.AND, Op.OR)}
    assert DEFAULT_SQLA_REGISTRY.supported_operators == expected


def test_raw_string_symbols_accepted():
    expr = build_sqla_filter(PersonRecord, {"age": {"$gt": 3}})
    assert str(expr.compile()) == "people.age > :age_1"


def test_registered_strategy_replaces_default():
    registry = build_default_sqla_registry()
    registry.register(PatternOperator(Op.EQ, "ilike"))
    tree = build_where_tree(leaf("name", "eq", "bob", "string"))

    compiled = str(build_sqla_filter(PersonRecord, tree, registry=registry).compile())
    assert "lower(people.name)" in compiled
    assert "LIKE" in compiled
    assert compile_tree(leaf("name", "eq", "bob", "string")) == "people.name = :name_1"
