from decimal import Decimal
from typing import Optional, Union

from pydantic import BaseModel, Field

from payreport.domain.enums import DateUnit


class ConditionValue(BaseModel):
    """Operator and operands submitted for one filter or condition."""

    operator: str = "any"
    value: Optional[Union[int, Decimal, str]] = None
    value2: Optional[Union[int, Decimal, str]] = None
    unit: Optional[DateUnit] = None


class ReportRequest(BaseModel):
    columns: Optional[list[str]] = Field(None, description="Column keys to render (all when omitted)")
    conditions: dict[str, ConditionValue] = Field(default_factory=dict)
    sort: Optional[str] = None
    descending: bool = False


class ColumnInfo(BaseModel):
    key: str
    title: str
    type: str
    sortable: bool
    attributes: dict[str, str] = Field(default_factory=dict)


class FilterInfo(BaseModel):
    key: str
    title: str
    kind: str
    operators: list[str]
    options: dict[str, str] = Field(default_factory=dict)


class EntityInfo(BaseModel):
    name: str
    title: str
    columns: list[ColumnInfo]
    filters: list[FilterInfo]
    conditions: list[str]
