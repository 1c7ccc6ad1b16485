"""BaseEntity: a named bundle of columns, filters and conditions over some tables."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from sqlalchemy import FromClause, MetaData

from payreport.db.session import Base
from payreport.exceptions import (
    DuplicateKeyError,
    UnknownColumnError,
    UnknownFilterError,
    UnknownTableError,
)
from payreport.reportbuilder.column import Column, JoinSpec, merge_joins
from payreport.reportbuilder.filter import Filter


class BaseEntity(ABC):
    """Report entity contract.

    Subclasses declare their tables, aliases and title, and register their
    columns and filters in `initialise()`. Keys are unique per kind.
    """

    metadata: MetaData = Base.metadata

    def __init__(self) -> None:
        self._table_aliases: dict[str, str] = {}
        self._tables: dict[str, FromClause] = {}
        self._title = None
        self._joins: list[JoinSpec] = []
        self._columns: dict[str, Column] = {}
        self._filters: dict[str, Filter] = {}
        self._conditions: dict[str, Filter] = {}

    @abstractmethod
    def get_default_tables(self) -> list[str]: ...

    @abstractmethod
    def get_default_table_aliases(self) -> dict[str, str]: ...

    @abstractmethod
    def get_default_entity_title(self): ...

    @abstractmethod
    def initialise(self) -> BaseEntity: ...

    # ── Naming ──────────────────────────────────────────────────

    def get_entity_name(self) -> str:
        return type(self).__name__.lower().removesuffix("entity")

    def set_entity_title(self, title) -> BaseEntity:
        self._title = title
        return self

    def get_entity_title(self):
        return self._title if self._title is not None else self.get_default_entity_title()

    # ── Tables & joins ──────────────────────────────────────────

    def get_table_alias(self, tablename: str) -> str:
        aliases = {**self.get_default_table_aliases(), **self._table_aliases}
        if tablename not in aliases:
            raise UnknownTableError(f"Entity {self.get_entity_name()} has no table {tablename}")
        return aliases[tablename]

    def set_table_alias(self, tablename: str, alias: str) -> BaseEntity:
        if tablename not in self.get_default_table_aliases():
            raise UnknownTableError(f"Entity {self.get_entity_name()} has no table {tablename}")
        self._table_aliases[tablename] = alias
        self._tables.pop(tablename, None)
        return self

    def get_table(self, tablename: str) -> FromClause:
        """Aliased table; the same object for the entity's lifetime so expressions line up."""
        if tablename not in self._tables:
            alias = self.get_table_alias(tablename)
            if tablename not in self.metadata.tables:
                raise UnknownTableError(f"Table {tablename} is not mapped")
            self._tables[tablename] = self.metadata.tables[tablename].alias(alias)
        return self._tables[tablename]

    def add_join(self, join: JoinSpec) -> BaseEntity:
        self._joins = merge_joins(self._joins, [join])
        return self

    def add_joins(self, joins: Iterable[JoinSpec]) -> BaseEntity:
        self._joins = merge_joins(self._joins, joins)
        return self

    def get_joins(self) -> list[JoinSpec]:
        return list(self._joins)

    # ── Registration ────────────────────────────────────────────

    def add_column(self, column: Column) -> BaseEntity:
        if column.name in self._columns:
            raise DuplicateKeyError(f"Duplicate column {column.unique_identifier}")
        self._columns[column.name] = column
        return self

    def add_filter(self, filter_: Filter) -> BaseEntity:
        if filter_.name in self._filters:
            raise DuplicateKeyError(f"Duplicate filter {filter_.unique_identifier}")
        self._filters[filter_.name] = filter_
        return self

    def add_condition(self, condition: Filter) -> BaseEntity:
        if condition.name in self._conditions:
            raise DuplicateKeyError(f"Duplicate condition {condition.unique_identifier}")
        self._conditions[condition.name] = condition
        return self

    def get_columns(self) -> tuple[Column, ...]:
        return tuple(self._columns.values())

    def get_filters(self) -> tuple[Filter, ...]:
        return tuple(self._filters.values())

    def get_conditions(self) -> tuple[Filter, ...]:
        return tuple(self._conditions.values())

    def get_column(self, name: str) -> Column:
        if name not in self._columns:
            raise UnknownColumnError(f"Unknown column {self.get_entity_name()}:{name}")
        return self._columns[name]

    def get_filter(self, name: str) -> Filter:
        if name not in self._filters:
            raise UnknownFilterError(f"Unknown filter {self.get_entity_name()}:{name}")
        return self._filters[name]

    def get_condition(self, name: str) -> Filter:
        if name not in self._conditions:
            raise UnknownFilterError(f"Unknown condition {self.get_entity_name()}:{name}")
        return self._conditions[name]
