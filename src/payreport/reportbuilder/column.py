"""Report column: source fields, joins, attributes and rendering callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from types import SimpleNamespace
from typing import Any, Callable, Iterable, Mapping

from sqlalchemy import ColumnElement, FromClause
from sqlalchemy.sql.elements import Label

from payreport.domain.enums import ColumnType


@dataclass(frozen=True, eq=False)
class JoinSpec:
    """An outer (by default) join onto the entity's base table."""

    target: FromClause
    onclause: ColumnElement[bool]
    isouter: bool = True

    @property
    def key(self) -> str:
        return self.target.name


def merge_joins(existing: list[JoinSpec], joins: Iterable[JoinSpec]) -> list[JoinSpec]:
    """Append joins whose target is not joined yet, keeping order."""
    seen = {j.key for j in existing}
    merged = list(existing)
    for join in joins:
        if join.key not in seen:
            seen.add(join.key)
            merged.append(join)
    return merged


class Column:
    """A report grid field.

    The first field is the column value; every field is exposed to callbacks
    on the row namespace under its own key (e.g. `row.id`, `row.currency`).
    """

    def __init__(self, name: str, title, entity_name: str) -> None:
        self.name = name
        self.title = title
        self.entity_name = entity_name
        self.type = ColumnType.TEXT
        self.is_sortable = False
        self.attributes: dict[str, str] = {}
        self._fields: list[tuple[str, ColumnElement[Any]]] = []
        self._joins: list[JoinSpec] = []
        self._callbacks: list[tuple[Callable[..., Any], tuple]] = []

    @property
    def unique_identifier(self) -> str:
        return f"{self.entity_name}:{self.name}"

    def set_type(self, column_type: ColumnType) -> Column:
        self.type = ColumnType(column_type)
        return self

    def add_join(self, join: JoinSpec) -> Column:
        self._joins = merge_joins(self._joins, [join])
        return self

    def add_joins(self, joins: Iterable[JoinSpec]) -> Column:
        self._joins = merge_joins(self._joins, joins)
        return self

    def get_joins(self) -> list[JoinSpec]:
        return list(self._joins)

    def add_field(self, expression: ColumnElement[Any], key: str | None = None) -> Column:
        self._fields.append((key or expression.key, expression))
        return self

    def add_fields(self, *expressions: ColumnElement[Any]) -> Column:
        for expression in expressions:
            self.add_field(expression)
        return self

    def add_attributes(self, attributes: Mapping[str, str]) -> Column:
        self.attributes.update(attributes)
        return self

    def set_is_sortable(self, sortable: bool) -> Column:
        self.is_sortable = sortable
        return self

    def add_callback(self, callback: Callable[..., Any], *args: Any) -> Column:
        """Callbacks run in order as `callback(value, row, *args)`; each gets the previous result."""
        self._callbacks.append((callback, args))
        return self

    def _alias(self, key: str) -> str:
        return f"{self.name}__{key}"

    def get_fields(self) -> list[Label[Any]]:
        return [expression.label(self._alias(key)) for key, expression in self._fields]

    def get_sort_field(self) -> ColumnElement[Any]:
        return self._fields[0][1]

    def format_value(self, row: Mapping[str, Any]) -> str:
        values = SimpleNamespace(**{key: row[self._alias(key)] for key, _ in self._fields})
        value = getattr(values, self._fields[0][0])
        if not self._callbacks:
            return "" if value is None else str(value)
        for callback, args in self._callbacks:
            value = callback(value, values, *args)
        return value
