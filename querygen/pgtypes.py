"""PostgreSQL-specific column fields: money, range types and xml."""

from __future__ import annotations

from typing import Any

from querygen.expression import BaseField, Expr, negate


class Money(BaseField):
    """A money column.

    Comparison, set membership, BETWEEN and LIKE come from the base field.
    """


class RangeField(BaseField):
    """A range column supporting the PostgreSQL range operators."""

    def overlaps(self, value: Any) -> Expr:
        """``column && value``: the ranges share at least one point."""
        return self._combine("? && ?", value)

    def contains(self, value: Any) -> Expr:
        """``column @> value``: the range contains the other range."""
        return self._combine("? @> ?", value)

    def contained_by(self, value: Any) -> Expr:
        """``column <@ value``: the range is contained by the other range."""
        return self._combine("? <@ ?", value)

    def strict_left(self, value: Any) -> Expr:
        """``column << value``: the range lies strictly left of the other."""
        return self._combine("? << ?", value)

    def strict_right(self, value: Any) -> Expr:
        """``column >> value``: the range lies strictly right of the other."""
        return self._combine("? >> ?", value)

    def adjacent(self, value: Any) -> Expr:
        """``column -|- value``: the ranges are adjacent."""
        return self._combine("? -|- ?", value)


class DateRange(RangeField):
    """A daterange column."""


class Int4Range(RangeField):
    """An int4range column."""


class Int8Range(RangeField):
    """An int8range column."""


class NumRange(RangeField):
    """A numrange column."""


class TsRange(RangeField):
    """A tsrange column."""


class TstzRange(RangeField):
    """A tstzrange column."""


class XML(BaseField):
    """An xml column, matched on its textual form."""

    def regexp(self, pattern: str) -> Expr:
        """``column REGEXP pattern``."""
        return self._combine("? REGEXP ?", pattern)

    def not_regexp(self, pattern: str) -> Expr:
        return negate(self.regexp(pattern))