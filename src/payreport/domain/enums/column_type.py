from enum import Enum


class ColumnType(str, Enum):
    """Semantic type of a report column; drives default formatting and aggregation."""

    INTEGER = "integer"
    TEXT = "text"
    TIMESTAMP = "timestamp"
    BOOLEAN = "boolean"
    FLOAT = "float"
