from decimal import Decimal

import pytest

from querygen.expression import Assign, Column, Expr
from querygen.pgtypes import (
    XML,
    DateRange,
    Int4Range,
    Int8Range,
    Money,
    NumRange,
    RangeField,
    TsRange,
    TstzRange,
)

RANGE_CLASSES = [DateRange, Int4Range, Int8Range, NumRange, TsRange, TstzRange]

RANGE_OPERATORS = [
    ("overlaps", "&&"),
    ("contains", "@>"),
    ("contained_by", "<@"),
    ("strict_left", "<<"),
    ("strict_right", ">>"),
    ("adjacent", "-|-"),
]


def _col_sql(table, name):
    return Column(table, name).to_sql()


@pytest.mark.parametrize("cls", RANGE_CLASSES)
@pytest.mark.parametrize("method,op", RANGE_OPERATORS)
def test_range_operators(cls, method, op):
    field = cls("booking", "span")
    value = "[1,5)"
    sql, params = getattr(field, method)(value).build()
    assert sql == f"{_col_sql('booking', 'span')} {op} ?"
    assert params == [value]


@pytest.mark.parametrize("cls", RANGE_CLASSES)
def test_range_classes_share_range_operators(cls):
    assert issubclass(cls, RangeField)
    sql, params = cls("", "span").eq("[1,2)").build()
    assert sql == f"{_col_sql('', 'span')} = ?"
    assert params == ["[1,2)"]


def test_range_neq():
    sql, params = TsRange("t", "period").neq("[a,b)").build()
    assert sql == f"{_col_sql('t', 'period')} <> ?"
    assert params == ["[a,b)"]


def test_range_operator_on_derived_expression_keeps_inner_params():
    field = Int4Range.from_expr(Expr("COALESCE(?,?)", (Column("t", "r"), "empty")))
    sql, params = field.contains("[2,3)").build()
    assert sql.endswith(" @> ?")
    assert params == ["empty", "[2,3)"]


@pytest.mark.parametrize(
    "method,op",
    [("eq", "="), ("neq", "<>"), ("gt", ">"), ("gte", ">="), ("lt", "<"), ("lte", "<="),
     ("like", "LIKE")],
)
def test_money_comparisons(method, op):
    amount = Decimal("12.50")
    sql, params = getattr(Money("orders", "total"), method)(amount).build()
    assert sql == f"{_col_sql('orders', 'total')} {op} ?"
    assert params == [amount]


def test_money_in_and_not_in():
    field = Money("orders", "total")
    values = (Decimal("1.00"), Decimal("2.00"))
    in_sql, in_params = field.in_(*values).build()
    not_sql, not_params = field.not_in(*values).build()
    assert in_params == list(values)
    assert not_params == list(values)
    assert not_sql == f"NOT ({in_sql})"


def test_money_between_and_not_between():
    field = Money("", "total")
    low, high = Decimal("1"), Decimal("9")
    sql, params = field.between(low, high).build()
    assert sql == f"{_col_sql('', 'total')} BETWEEN ? AND ?"
    assert params == [low, high]
    not_sql, not_params = field.not_between(low, high).build()
    assert not_sql == f"NOT ({sql})"
    assert not_params == params


def test_money_not_like_negates_like():
    field = Money("", "total")
    like_sql, _ = field.like("%5%").build()
    sql, params = field.not_like("%5%").build()
    assert sql == f"NOT ({like_sql})"
    assert params == ["%5%"]


def test_money_value_assignment():
    assign = Money("", "total").value(Decimal("3.25"))
    assert isinstance(assign, Assign)
    sql, params = assign.build()
    assert sql == f"{_col_sql('', 'total')} = ?"
    assert params == [Decimal("3.25")]


def test_xml_regexp():
    sql, params = XML("docs", "body").regexp("^<a>").build()
    assert sql == f"{_col_sql('docs', 'body')} REGEXP ?"
    assert params == ["^<a>"]


def test_xml_not_regexp_negates_regexp():
    field = XML("docs", "body")
    inner, _ = field.regexp("x+").build()
    sql, params = field.not_regexp("x+").build()
    assert sql == f"NOT ({inner})"
    assert params == ["x+"]


def test_xml_like_and_not_like():
    field = XML("docs", "body")
    sql, params = field.like("%<b>%").build()
    assert sql == f"{_col_sql('docs', 'body')} LIKE ?"
    assert params == ["%<b>%"]
    not_sql, not_params = field.not_like("%<b>%").build()
    assert not_sql == f"NOT ({sql})"
    assert not_params == params


def test_xml_in_and_not_in():
    field = XML("", "body")
    docs = ("<a/>", "<b/>")
    in_sql, in_params = field.in_(*docs).build()
    not_sql, not_params = field.not_in(*docs).build()
    assert in_params == list(docs)
    assert not_sql == f"NOT ({in_sql})"
    assert not_params == in_params


def test_xml_eq_none_is_null():
    sql, params = XML("", "body").eq(None).build()
    assert sql == f"{_col_sql('', 'body')} IS NULL"
    assert params == []