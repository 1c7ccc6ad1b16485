from payreport.domain.enums.column_type import ColumnType
from payreport.domain.enums.filter import (
    DateOperator,
    DateUnit,
    FilterKind,
    NumberOperator,
    SelectOperator,
    TextOperator,
)
from payreport.domain.enums.payment_status import PaymentStatus

__all__ = [
    "ColumnType",
    "DateOperator",
    "DateUnit",
    "FilterKind",
    "NumberOperator",
    "PaymentStatus",
    "SelectOperator",
    "TextOperator",
]
