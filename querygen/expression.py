"""SQL expression building blocks shared by every typed field."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Tuple, Union

_MISSING = object()


def _quote(identifier: str) -> str:
    if identifier == "*":
        return identifier
    return '"' + identifier.replace('"', '""') + '"'


@dataclass(frozen=True)
class Column:
    """A table column, optionally qualified by its table name."""

    table: str
    name: str

    def to_sql(self) -> str:
        """Render the column as a quoted identifier."""
        if self.table:
            return f"{_quote(self.table)}.{_quote(self.name)}"
        return _quote(self.name)


@dataclass(frozen=True)
class Expr:
    """A SQL fragment with ``?`` placeholders and the values that fill them."""

    sql: str
    vars: Tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "vars", tuple(self.vars))

    def build(self) -> Tuple[str, list]:
        """Render to SQL text and the list of bound parameters.

        Placeholders without a matching value are kept literally.
        """
        pieces = self.sql.split("?")
        values = iter(self.vars)
        out = [pieces[0]]
        params: list = []
        for piece in pieces[1:]:
            item = next(values, _MISSING)
            if item is _MISSING:
                out.append("?")
            else:
                sql, item_params = _render(item)
                out.append(sql)
                params.extend(item_params)
            out.append(piece)
        return "".join(out), params


@dataclass(frozen=True)
class Assign:
    """An assignment of a value to a column, as used in SET clauses."""

    column: Union[Column, Expr]
    value: Any

    def build(self) -> Tuple[str, list]:
        """Render to ``column = value`` SQL and its parameters."""
        if isinstance(self.column, Column):
            target, params = _quote(self.column.name), []
        else:
            target, params = self.column.build()
        value_sql, value_params = _render(self.value)
        return f"{target} = {value_sql}", params + value_params


def _render(item: Any) -> Tuple[str, list]:
    if isinstance(item, BaseField):
        item = item.raw_expr()
    if isinstance(item, Column):
        return item.to_sql(), []
    if isinstance(item, (Expr, Assign)):
        return item.build()
    return "?", [item]


def compare(op: str, column: Any, value: Any) -> Expr:
    """Build ``column <op> value``; ``None`` turns equality into IS [NOT] NULL."""
    if value is None and op == "=":
        return Expr("? IS NULL", (column,))
    if value is None and op == "<>":
        return Expr("? IS NOT NULL", (column,))
    return Expr(f"? {op} ?", (column, value))


def in_values(column: Any, values: Iterable[Any]) -> Expr:
    """Build ``column IN (...)``; an empty set matches nothing."""
    values = list(values)
    if not values:
        return Expr("? IN (NULL)", (column,))
    placeholders = ",".join("?" for _ in values)
    return Expr(f"? IN ({placeholders})", (column, *values))


def negate(expr: Expr) -> Expr:
    """Wrap an expression in ``NOT (...)``."""
    return Expr("NOT (?)", (expr,))


class BaseField:
    """A typed reference to a column, or to an expression over columns."""

    def __init__(self, table: str, column: str) -> None:
        self._expr: Union[Column, Expr] = Column(table, column)

    @classmethod
    def from_expr(cls, expr: Union[Column, Expr]):
        """Create a field of this type that stands for ``expr``."""
        obj = cls.__new__(cls)
        obj._expr = expr
        return obj

    def raw_expr(self) -> Union[Column, Expr]:
        """The column or expression this field stands for."""
        return self._expr

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._expr!r})"

    def _combine(self, template: str, *values: Any) -> Expr:
        return Expr(template, (self._expr, *values))

    def _derive(self, template: str, *values: Any):
        return type(self).from_expr(self._combine(template, *values))

    def _arith(self, op: str, value: Any):
        return self._derive(f"? {op} ?", value)

    def eq(self, value: Any) -> Expr:
        return compare("=", self._expr, value)

    def neq(self, value: Any) -> Expr:
        return compare("<>", self._expr, value)

    def gt(self, value: Any) -> Expr:
        return compare(">", self._expr, value)

    def gte(self, value: Any) -> Expr:
        return compare(">=", self._expr, value)

    def lt(self, value: Any) -> Expr:
        return compare("<", self._expr, value)

    def lte(self, value: Any) -> Expr:
        return compare("<=", self._expr, value)

    def in_(self, *values: Any) -> Expr:
        return in_values(self._expr, values)

    def not_in(self, *values: Any) -> Expr:
        return negate(self.in_(*values))

    def between(self, left: Any, right: Any) -> Expr:
        return self._combine("? BETWEEN ? AND ?", left, right)

    def not_between(self, left: Any, right: Any) -> Expr:
        return negate(self.between(left, right))

    def like(self, value: Any) -> Expr:
        return compare("LIKE", self._expr, value)

    def not_like(self, value: Any) -> Expr:
        return negate(self.like(value))

    def value(self, value: Any) -> Assign:
        """Assign ``value`` to this column."""
        return Assign(self._expr, value)

    def if_null(self, value: Any) -> Expr:
        return self._combine("COALESCE(?,?)", value)

    def sum(self):
        return self._derive("SUM(?)")