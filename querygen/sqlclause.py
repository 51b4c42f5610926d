"""Helpers that assemble dynamic WHERE, SET and IF clauses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable


@dataclass(frozen=True)
class Cond:
    """A clause fragment that applies only when ``cond`` holds."""

    cond: bool
    result: str


def if_clause(conds: Iterable[Cond]) -> str:
    """Join the results of the true conditions; false ones leave a blank."""
    return " " + " ".join(c.result.strip(" ") if c.cond else "" for c in conds)


def where_clause(conds: Iterable[str]) -> str:
    """Build `` WHERE ...``, joining bare conditions with AND."""
    return _join_clause(conds, "WHERE", _where_value, " ")


def set_clause(conds: Iterable[str]) -> str:
    """Build `` SET ...`` from comma separated assignments."""
    return _join_clause(conds, "SET", _set_value, ",")


def _join_clause(
    conds: Iterable[str], keyword: str, deal: Callable[[str], str], sep: str
) -> str:
    sql = trim_all(sep.join(deal(c) for c in conds))
    if sql:
        sql = f" {keyword} {sql}"
    return sql


def trim_all(text: str) -> str:
    """Drop a leading and a trailing AND/OR/XOR or comma."""
    return _trim_right(_trim_left(text))


def _trim_left(text: str) -> str:
    text = text.strip()
    lower = text.lower()
    if lower.startswith("and "):
        return text[4:]
    if lower.startswith("or "):
        return text[3:]
    if lower.startswith("xor "):
        return text[4:]
    if lower.startswith(","):
        return text[1:]
    return text


def _trim_right(text: str) -> str:
    text = text.strip()
    lower = text.lower()
    if lower.endswith(" and"):
        return text[:-3]
    if lower.endswith(" or"):
        return text[:-2]
    if lower.endswith(" xor"):
        return text[:-3]
    if lower.endswith(","):
        return text[:-1]
    return text


def _where_value(value: str) -> str:
    value = value.strip(" ")
    lower = value.lower()
    if not lower:
        return ""
    if lower.startswith(("and ", "or ", "xor ")):
        return value
    return "AND " + value


def _set_value(value: str) -> str:
    return value.strip(", ")


def join_where(value: str) -> str:
    """Return ``WHERE <value> `` after trimming, or an empty string."""
    value = trim_all(value)
    return f"WHERE {value} " if value else ""


def join_set(value: str) -> str:
    """Return ``SET <value> `` after trimming, or an empty string."""
    value = trim_all(value)
    return f"SET {value} " if value else ""


def join_trim_all(value: str) -> str:
    """Trim connectors from both ends and append a space."""
    return trim_all(value) + " "