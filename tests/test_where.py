"""Tests for the where-tree emitter."""

from __future__ import annotations

import pytest

from filter_compiler import (
    CoercionError,
    Literal,
    Op,
    ValidationError,
    Where,
    build_where_tree,
)
from filter_compiler.where import _lower_node


def leaf(field="a", operator="eq", value=1, type_="number"):
    return {"field": field, "operator": operator, "value": value, "type": type_}


def test_simple_eq(simple_leaf):
    assert build_where_tree(simple_leaf) == {"a": {Op.EQ: 1}}


def test_op_symbols_are_prefixed_strings():
    assert Op.EQ == "$eq"
    assert Op.NOT_ILIKE == "$notILike"
    assert Op.AND == "$and"


def test_value_is_coerced():
    assert build_where_tree(leaf(operator="gte", value="18", type_="int")) == {
        "a": {Op.GTE: 18}
    }


def test_between():
    result = build_where_tree(leaf(operator="between", value=[1, 2]))
    assert result == {"a": {Op.BETWEEN: [1, 2]}}


def test_in():
    result = build_where_tree(leaf(operator="in", value=["1", "2"]))
    assert result == {"a": {Op.IN: [1, 2]}}


@pytest.mark.parametrize(
    ("operator", "symbol"),
    [
        ("ne", Op.NE),
        ("gt", Op.GT),
        ("lt", Op.LT),
        ("lte", Op.LTE),
        ("like", Op.LIKE),
        ("notLike", Op.NOT_LIKE),
        ("iLike", Op.ILIKE),
        ("notILike", Op.NOT_ILIKE),
        ("is", Op.IS),
        ("not", Op.NOT),
    ],
)
def test_scalar_operator_symbols(operator, symbol):
    result = build_where_tree(leaf(operator=operator, value="x", type_="string"))
    assert result == {"a": {symbol: "x"}}


def test_boolean_leaf():
    result = build_where_tree(leaf("active", "is", "true", "boolean"))
    assert result == {"active": {Op.IS: True}}


def test_or_compound():
    result = build_where_tree({"or": [leaf("a"), leaf("b", value=2)]})
    assert result == {Op.OR: [{"a": {Op.EQ: 1}}, {"b": {Op.EQ: 2}}]}


def test_nested_compound():
    data = {"and": [leaf("a"), {"or": [leaf("b", value=2), leaf("c", value=3)]}]}
    assert build_where_tree(data) == {
        Op.AND: [
            {"a": {Op.EQ: 1}},
            {Op.OR: [{"b": {Op.EQ: 2}}, {"c": {Op.EQ: 3}}]},
        ]
    }


def test_list_equivalent_to_and():
    l1, l2 = leaf("a"), leaf("b", value=2)
    assert build_where_tree([l1, l2]) == build_where_tree({"and": [l1, l2]})


def test_field_need_not_be_identifier():
    assert build_where_tree(leaf("bad field")) == {"bad field": {Op.EQ: 1}}


# -- cast leaves ---------------------------------------------------------------


def test_date_leaf_uses_raw_comparison():
    result = build_where_tree(leaf("created_at", "gte", "2023-01-01T10:00:00Z", "date"))
    assert result == Where(
        attribute=Literal('"created_at"::date'),
        operator=Op.GTE,
        value=Literal("'2023-01-01'::date"),
    )


def test_date_between_wraps_each_value():
    result = build_where_tree(
        leaf("created_at", "between", ["2023-01-01", "2023-01-31"], "date")
    )
    assert isinstance(result, Where)
    assert result.operator is Op.BETWEEN
    assert result.value == [
        Literal("'2023-01-01'::date"),
        Literal("'2023-01-31'::date"),
    ]


def test_date_leaf_inside_compound():
    result = build_where_tree(
        {"or": [leaf("a"), leaf("created_at", "lt", "2024-05-01", "date")]}
    )
    assert result[Op.OR][0] == {"a": {Op.EQ: 1}}
    assert isinstance(result[Op.OR][1], Where)


def test_date_field_quotes_are_doubled():
    result = build_where_tree(leaf('odd"name', "eq", "2023-01-01", "date"))
    assert result.attribute == Literal('"odd""name"::date')


# -- errors --------------------------------------------------------------------


def test_validation_error_propagates():
    with pytest.raises(ValidationError, match="Missing required field"):
        build_where_tree({"field": "a", "operator": "eq", "value": 1})


def test_non_object_rejected():
    with pytest.raises(ValidationError):
        build_where_tree(None)


def test_coercion_error_propagates():
    with pytest.raises(CoercionError, match="Invalid date"):
        build_where_tree(leaf("created_at", "eq", "not-a-date", "date"))


def test_lowering_rejects_untyped_nodes():
    with pytest.raises(ValidationError, match="Invalid filter node: dict"):
        _lower_node({"field": "a"})
