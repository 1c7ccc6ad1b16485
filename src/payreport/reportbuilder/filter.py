"""Report filter: a predicate over one source field, also usable as a condition."""

from __future__ import annotations

from datetime import UTC, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Awaitable, Callable, Iterable, Mapping, Optional
from zoneinfo import ZoneInfo

from sqlalchemy import ColumnElement, and_, func, or_

from payreport.domain.enums import (
    DateOperator,
    DateUnit,
    FilterKind,
    NumberOperator,
    SelectOperator,
    TextOperator,
)
from payreport.exceptions import InvalidConditionValueError, UnsupportedOperatorError
from payreport.reportbuilder import dates
from payreport.reportbuilder.column import JoinSpec, merge_joins
from payreport.reportbuilder.schemas import ConditionValue

OPERATORS: dict[FilterKind, type[Enum]] = {
    FilterKind.TEXT: TextOperator,
    FilterKind.NUMBER: NumberOperator,
    FilterKind.SELECT: SelectOperator,
    FilterKind.DATE: DateOperator,
}

OptionsCallback = Callable[[], Awaitable[Mapping[Any, str]]]


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


def _number(value: Any) -> int | float:
    """Bind numbers as int or float; drivers reject Decimal for integer columns."""
    try:
        d = Decimal(str(value).strip())
    except InvalidOperation:
        raise InvalidConditionValueError(f"Not a number: {value!r}") from None
    if not d.is_finite():
        raise InvalidConditionValueError(f"Not a number: {value!r}")
    return int(d) if d == d.to_integral_value() else float(d)


def _integer(value: Any) -> int:
    try:
        return int(str(value).strip())
    except ValueError:
        raise InvalidConditionValueError(f"Not an integer: {value!r}") from None


class Filter:
    def __init__(
        self,
        kind: FilterKind,
        name: str,
        header,
        entity_name: str,
        field: ColumnElement[Any],
        joins: Iterable[JoinSpec] = (),
        timezone: str = "UTC",
    ) -> None:
        self.kind = FilterKind(kind)
        self.name = name
        self.header = header
        self.entity_name = entity_name
        self.field = field
        # relative date periods start at local midnight of this zone
        self.timezone = ZoneInfo(timezone)
        self._joins: list[JoinSpec] = merge_joins([], joins)
        self._options_callback: Optional[OptionsCallback] = None
        self._limited_operators: Optional[tuple[Enum, ...]] = None

    @property
    def unique_identifier(self) -> str:
        return f"{self.entity_name}:{self.name}"

    def add_join(self, join: JoinSpec) -> Filter:
        self._joins = merge_joins(self._joins, [join])
        return self

    def add_joins(self, joins: Iterable[JoinSpec]) -> Filter:
        self._joins = merge_joins(self._joins, joins)
        return self

    def get_joins(self) -> list[JoinSpec]:
        return list(self._joins)

    def set_options_callback(self, callback: OptionsCallback) -> Filter:
        self._options_callback = callback
        return self

    async def get_options(self) -> dict[Any, str]:
        """Options for select filters, fetched on each call."""
        if self._options_callback is None:
            return {}
        return dict(await self._options_callback())

    def _parse_operator(self, operator: Any) -> Enum:
        enum_cls = OPERATORS[self.kind]
        try:
            return enum_cls(operator)
        except ValueError:
            raise UnsupportedOperatorError(f"{self.kind.value} filter {self.name} has no operator {operator!r}") from None

    def set_limited_operators(self, operators: Iterable[Any]) -> Filter:
        self._limited_operators = tuple(self._parse_operator(op) for op in operators)
        return self

    def get_operators(self) -> tuple[Enum, ...]:
        if self._limited_operators is not None:
            return self._limited_operators
        return tuple(OPERATORS[self.kind])

    def resolve_operator(self, operator: Any) -> Enum:
        """Parse and check that the operator is one this filter exposes."""
        parsed = self._parse_operator(operator)
        if parsed not in self.get_operators():
            raise UnsupportedOperatorError(f"Operator {parsed.value} is not available for filter {self.name}")
        return parsed

    def get_sql(self, condition: ConditionValue, now: Optional[datetime] = None) -> Optional[ColumnElement[bool]]:
        """WHERE clause for the submitted condition, or None when it does not restrict rows."""
        operator = self.resolve_operator(condition.operator)
        if self.kind == FilterKind.TEXT:
            return self._text_sql(operator, condition)
        if self.kind == FilterKind.NUMBER:
            return self._number_sql(operator, condition)
        if self.kind == FilterKind.SELECT:
            return self._select_sql(operator, condition)
        now = (now or datetime.now(UTC)).astimezone(self.timezone)
        return self._date_sql(operator, condition, now)

    def _text_sql(self, operator: Enum, condition: ConditionValue) -> Optional[ColumnElement[bool]]:
        field = self.field
        if operator == TextOperator.ANY:
            return None
        if operator == TextOperator.IS_EMPTY:
            return or_(field.is_(None), field == "")
        if operator == TextOperator.IS_NOT_EMPTY:
            return and_(field.is_not(None), field != "")
        if _blank(condition.value):
            return None
        value = str(condition.value)
        if operator == TextOperator.CONTAINS:
            return field.icontains(value, autoescape=True)
        if operator == TextOperator.DOES_NOT_CONTAIN:
            return ~field.icontains(value, autoescape=True)
        if operator == TextOperator.IS_EQUAL_TO:
            return func.lower(field) == value.lower()
        if operator == TextOperator.IS_NOT_EQUAL_TO:
            return func.lower(field) != value.lower()
        if operator == TextOperator.STARTS_WITH:
            return field.istartswith(value, autoescape=True)
        return field.iendswith(value, autoescape=True)

    def _number_sql(self, operator: Enum, condition: ConditionValue) -> Optional[ColumnElement[bool]]:
        field = self.field
        if operator == NumberOperator.ANY:
            return None
        if operator == NumberOperator.IS_EMPTY:
            return field.is_(None)
        if operator == NumberOperator.IS_NOT_EMPTY:
            return field.is_not(None)
        if operator == NumberOperator.RANGE:
            clauses = []
            if not _blank(condition.value):
                clauses.append(field >= _number(condition.value))
            if not _blank(condition.value2):
                clauses.append(field <= _number(condition.value2))
            return and_(*clauses) if clauses else None
        if _blank(condition.value):
            return None
        value = _number(condition.value)
        if operator == NumberOperator.LESS_THAN:
            return field < value
        if operator == NumberOperator.GREATER_THAN:
            return field > value
        if operator == NumberOperator.EQUAL_TO:
            return field == value
        if operator == NumberOperator.EQUAL_OR_LESS_THAN:
            return field <= value
        return field >= value

    def _select_sql(self, operator: Enum, condition: ConditionValue) -> Optional[ColumnElement[bool]]:
        if operator == SelectOperator.ANY or _blank(condition.value):
            return None
        value = condition.value
        try:
            python_type = self.field.type.python_type
        except NotImplementedError:
            python_type = None
        if python_type is int:
            value = _integer(value)
        if operator == SelectOperator.EQUAL_TO:
            return self.field == value
        return self.field != value

    def _date_sql(self, operator: Enum, condition: ConditionValue, now: datetime) -> Optional[ColumnElement[bool]]:
        field = self.field
        if operator == DateOperator.ANY:
            return None
        if operator == DateOperator.NOT_EMPTY:
            return and_(field.is_not(None), field != 0)
        if operator == DateOperator.EMPTY:
            return or_(field.is_(None), field == 0)
        if operator == DateOperator.RANGE:
            clauses = []
            if not _blank(condition.value):
                clauses.append(field >= _integer(condition.value))
            if not _blank(condition.value2):
                clauses.append(field <= _integer(condition.value2))
            return and_(*clauses) if clauses else None

        unit = condition.unit or DateUnit.DAY
        if operator == DateOperator.CURRENT:
            start, end = dates.current_period(unit, now)
            return and_(field >= start, field < end)

        count = 1 if _blank(condition.value) else _integer(condition.value)
        if operator == DateOperator.PREVIOUS:
            start, end = dates.previous_period(count, unit, now)
            return and_(field >= start, field < end)
        if operator == DateOperator.NEXT:
            start, end = dates.next_period(count, unit, now)
            return and_(field >= start, field < end)
        if operator == DateOperator.BEFORE:
            return field < int(dates.shift(now, unit, -count).timestamp())
        return field > int(dates.shift(now, unit, count).timestamp())
