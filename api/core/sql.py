"""
Dynamic SQL fragment helpers (asyncpg `$n` placeholders).

Two shapes are supported:
- SET lists for partial updates (`sql_for_partial_update`)
- WHERE conjunctions for list filters (`sql_for_filters`)

Both return a `SqlFragment`. The clause text only ever holds column names,
operators and placeholders; every caller-supplied value goes into `values`,
and `values[k - 1]` is the value bound to `$k`.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from .errors import InvalidInputError, InvalidRangeError

GTE = ">="
LTE = "<="
ILIKE = "ilike"
POSITIVE = "positive"


@dataclass(frozen=True)
class SqlFragment:
    clause: str = ""
    values: list[Any] = field(default_factory=list)

    @property
    def next_index(self) -> int:
        """
        Placeholder index a caller should use for its next bound value.
        """
        return len(self.values) + 1

    def __bool__(self) -> bool:
        return bool(self.clause)


@dataclass(frozen=True)
class FilterRule:
    key: str
    column: str
    op: str


@dataclass(frozen=True)
class FilterSet:
    """
    Filters understood for one table.

    `ranges` lists (lower_key, upper_key) pairs that must satisfy
    lower <= upper when both are given.
    """

    rules: Sequence[FilterRule]
    ranges: Sequence[tuple[str, str]] = ()

    def rule_for(self, key: str) -> FilterRule | None:
        for rule in self.rules:
            if rule.key == key:
                return rule
        return None


def column_for(field_name: str, js_to_sql: Mapping[str, str] | None = None) -> str:
    return (js_to_sql or {}).get(field_name, field_name)


def sql_for_partial_update(data: Mapping[str, Any], js_to_sql: Mapping[str, str] | None = None) -> SqlFragment:
    """
    Build the column list of an UPDATE statement.

        sql_for_partial_update({"firstName": "Aliya", "age": 32}, {"firstName": "first_name"})
        -> clause: '"first_name" = $1, "age" = $2', values: ["Aliya", 32]

    The clause goes right after `SET`; use `fragment.next_index` for the
    WHERE key placeholder.
    """
    if not data:
        raise InvalidInputError()

    columns: list[str] = []
    values: list[Any] = []
    for name, value in data.items():
        values.append(value)
        columns.append(f'"{column_for(name, js_to_sql)}" = ${len(values)}')

    return SqlFragment(clause=", ".join(columns), values=values)


def _check_ranges(criteria: Mapping[str, Any], filter_set: FilterSet) -> None:
    for lower_key, upper_key in filter_set.ranges:
        lower = criteria.get(lower_key)
        upper = criteria.get(upper_key)
        if lower is None or upper is None:
            continue
        if lower > upper:
            raise InvalidRangeError(f"{lower_key} must not be greater than {upper_key}.")


def sql_for_filters(criteria: Mapping[str, Any], filter_set: FilterSet) -> SqlFragment:
    """
    Build a WHERE conjunction (without the WHERE keyword) from `criteria`.

    Keys without a rule in `filter_set` and keys whose value is None are
    skipped. Fragment order follows the order of `criteria`. An empty
    fragment means the caller must not emit WHERE at all.
    """
    _check_ranges(criteria, filter_set)

    parts: list[str] = []
    values: list[Any] = []
    for key, value in criteria.items():
        rule = filter_set.rule_for(key)
        if rule is None or value is None:
            continue

        if rule.op == POSITIVE:
            # Flag filter: only a true value narrows, nothing is bound.
            if value is True:
                parts.append(f'"{rule.column}" > 0')
            continue

        values.append(value)
        idx = len(values)
        if rule.op == ILIKE:
            parts.append(f"\"{rule.column}\" ILIKE '%' || ${idx} || '%'")
        elif rule.op in (GTE, LTE):
            parts.append(f'"{rule.column}" {rule.op} ${idx}')
        else:
            raise ValueError(f"Unsupported filter operator: {rule.op}")

    return SqlFragment(clause=" AND ".join(parts), values=values)


def where(fragment: SqlFragment) -> str:
    return f"WHERE {fragment.clause}" if fragment else ""
