"""ReportService: builds the payment entity per request and renders its rows."""

import logging
from datetime import datetime
from typing import Callable, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from payreport.config import Settings, settings as default_settings
from payreport.db.repos.payment_account_repo import PaymentAccountRepo
from payreport.db.schema import SchemaInspector
from payreport.exceptions import EmptySelectionError, UnsortableColumnError
from payreport.lang.strings import StringManager
from payreport.reportbuilder.base import BaseEntity
from payreport.reportbuilder.column import merge_joins
from payreport.reportbuilder.entities.payment import PaymentEntity
from payreport.reportbuilder.schemas import (
    ColumnInfo,
    EntityInfo,
    FilterInfo,
    ReportRequest,
)

logger = logging.getLogger(__name__)


class ReportService:
    """Request-scoped access to the payments report."""

    def __init__(
        self,
        session: AsyncSession,
        strings: StringManager,
        sesskey: Callable[[], str],
        settings: Optional[Settings] = None,
    ) -> None:
        self._session = session
        self._strings = strings
        self._sesskey = sesskey
        self._timezone = (settings or default_settings).timezone

    async def build_entity(self) -> PaymentEntity:
        """Fresh, initialised entity reflecting the tables installed right now."""
        schema = await SchemaInspector(self._session).snapshot()
        accounts = PaymentAccountRepo(self._session)
        entity = PaymentEntity(
            schema=schema,
            strings=self._strings,
            sesskey=self._sesskey,
            account_options=accounts.get_enabled_menu,
            timezone=self._timezone,
        )
        return entity.initialise()

    async def describe(self, entity: BaseEntity) -> EntityInfo:
        """Column and filter metadata for a report UI, with select options resolved."""
        columns = [
            ColumnInfo(
                key=column.name,
                title=str(column.title),
                type=column.type.value,
                sortable=column.is_sortable,
                attributes=dict(column.attributes),
            )
            for column in entity.get_columns()
        ]
        filters = []
        for filter_ in entity.get_filters():
            options = await filter_.get_options()
            filters.append(
                FilterInfo(
                    key=filter_.name,
                    title=str(filter_.header),
                    kind=filter_.kind.value,
                    operators=[op.value for op in filter_.get_operators()],
                    options={str(k): v for k, v in options.items()},
                )
            )
        return EntityInfo(
            name=entity.get_entity_name(),
            title=str(entity.get_entity_title()),
            columns=columns,
            filters=filters,
            conditions=[condition.name for condition in entity.get_conditions()],
        )

    async def fetch_rows(
        self,
        entity: BaseEntity,
        request: Optional[ReportRequest] = None,
        now: Optional[datetime] = None,
    ) -> list[dict[str, str]]:
        """Render selected columns for every payment matching the conditions."""
        request = request or ReportRequest()
        if request.columns is None:
            columns = list(entity.get_columns())
        else:
            columns = [entity.get_column(key) for key in request.columns]
        if not columns:
            raise EmptySelectionError(f"No columns selected for {entity.get_entity_name()}")

        joins = entity.get_joins()
        fields = []
        for column in columns:
            joins = merge_joins(joins, column.get_joins())
            fields.extend(column.get_fields())

        clauses = []
        for key, value in request.conditions.items():
            condition = entity.get_condition(key)
            clause = condition.get_sql(value, now=now)
            if clause is not None:
                joins = merge_joins(joins, condition.get_joins())
                clauses.append(clause)

        order_by = []
        if request.sort is not None:
            sort_column = entity.get_column(request.sort)
            if not sort_column.is_sortable:
                raise UnsortableColumnError(f"Column {sort_column.unique_identifier} is not sortable")
            joins = merge_joins(joins, sort_column.get_joins())
            sort_field = sort_column.get_sort_field()
            order_by.append(sort_field.desc() if request.descending else sort_field.asc())

        base = entity.get_table(entity.get_default_tables()[0])
        order_by.extend(base.primary_key)
        from_clause = base
        for join in joins:
            from_clause = from_clause.join(join.target, join.onclause, isouter=join.isouter)

        stmt = select(*fields).select_from(from_clause).where(*clauses).order_by(*order_by)

        result = await self._session.execute(stmt)
        rows = [{column.name: column.format_value(row) for column in columns} for row in result.mappings().all()]
        logger.info("Rendered %d rows for %s", len(rows), entity.get_entity_name())
        return rows
