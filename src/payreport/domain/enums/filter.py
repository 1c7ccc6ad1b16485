from enum import Enum


class FilterKind(str, Enum):
    """Filter widget family. Each kind has its own operator set."""

    SELECT = "select"
    TEXT = "text"
    NUMBER = "number"
    DATE = "date"


class TextOperator(str, Enum):
    ANY = "any"
    CONTAINS = "contains"
    DOES_NOT_CONTAIN = "does_not_contain"
    IS_EQUAL_TO = "is_equal_to"
    IS_NOT_EQUAL_TO = "is_not_equal_to"
    STARTS_WITH = "starts_with"
    ENDS_WITH = "ends_with"
    IS_EMPTY = "is_empty"
    IS_NOT_EMPTY = "is_not_empty"


class NumberOperator(str, Enum):
    ANY = "any"
    IS_NOT_EMPTY = "is_not_empty"
    IS_EMPTY = "is_empty"
    LESS_THAN = "less_than"
    GREATER_THAN = "greater_than"
    EQUAL_TO = "equal_to"
    EQUAL_OR_LESS_THAN = "equal_or_less_than"
    EQUAL_OR_GREATER_THAN = "equal_or_greater_than"
    RANGE = "range"


class SelectOperator(str, Enum):
    ANY = "any"
    EQUAL_TO = "equal_to"
    NOT_EQUAL_TO = "not_equal_to"


class DateOperator(str, Enum):
    ANY = "any"
    NOT_EMPTY = "not_empty"
    EMPTY = "empty"
    RANGE = "range"
    PREVIOUS = "previous"  # last N units up to now
    CURRENT = "current"
    NEXT = "next"
    BEFORE = "before"
    AFTER = "after"


class DateUnit(str, Enum):
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
