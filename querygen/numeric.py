"""Signed integer column fields with arithmetic and bitwise operators."""

from __future__ import annotations

from typing import Any

from querygen.expression import Assign, BaseField


class Int(BaseField):
    """An integer column; arithmetic results keep the field's own type."""

    def add(self, value: Any):
        return self._arith("+", value)

    def sub(self, value: Any):
        return self._arith("-", value)

    def mul(self, value: Any):
        return self._arith("*", value)

    def div(self, value: Any):
        return self._arith("/", value)

    def mod(self, value: Any):
        return self._arith("%", value)

    def floor_div(self, value: Any):
        return self._arith("DIV", value)

    def right_shift(self, value: Any):
        return self._arith(">>", value)

    def left_shift(self, value: Any):
        return self._arith("<<", value)

    def bit_xor(self, value: Any):
        return self._arith("^", value)

    def bit_and(self, value: Any):
        return self._arith("&", value)

    def bit_or(self, value: Any):
        return self._arith("|", value)

    def bit_flip(self):
        return self._derive("~?")

    def zero(self) -> Assign:
        """Assign zero to this column."""
        return self.value(0)

    def field(self, *values: Any):
        """``FIELD(column, v1, v2, ...)``: the position of the value in a list."""
        placeholders = ",".join("?" for _ in range(len(values) + 1))
        return self._derive(f"FIELD({placeholders})", *values)


class Int8(Int):
    """An 8-bit integer column."""


class Int16(Int):
    """A 16-bit integer column."""


class Int32(Int):
    """A 32-bit integer column."""


class Int64(Int):
    """A 64-bit integer column."""