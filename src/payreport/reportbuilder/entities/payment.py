"""Payment entity: report columns and filters over the payments table."""

from __future__ import annotations

import logging
from html import escape
from typing import Callable, Iterable, Optional

from sqlalchemy import Subquery

import payreport.db.models  # noqa: F401  registers tables on the metadata
from payreport.domain.enums import ColumnType, DateOperator, FilterKind, PaymentStatus
from payreport.lang.strings import LangString, StringManager
from payreport.payment.helper import get_cost_as_string
from payreport.reportbuilder.base import BaseEntity
from payreport.reportbuilder.column import Column, JoinSpec
from payreport.reportbuilder.filter import Filter, OptionsCallback
from payreport.reportbuilder.format import userdate
from payreport.reportbuilder.gateways import (
    DEFAULT_GATEWAY_SOURCES,
    GatewayStatusSource,
    TableExistence,
    build_status_subquery,
)
from payreport.session.sesskey import cancel_url

logger = logging.getLogger(__name__)

COMPONENT = "report_payments"

# success value -> (string identifier, component, markup)
STATUS_DISPLAY: dict[int, tuple[str, str, str]] = {
    PaymentStatus.UNFINISHED: ("unfinished", "core", '<div class="text-danger">{}</div>'),
    PaymentStatus.SUCCESS: ("success", "core", '<b class="text-success">{}</b>'),
    PaymentStatus.AWAITING_PASSWORD: ("awaitingpassword", COMPONENT, '<b class="text-primary">{}</b>'),
    PaymentStatus.OK: ("ok", "core", "{}"),
}

DATE_OPERATORS = (DateOperator.ANY, DateOperator.RANGE, DateOperator.PREVIOUS, DateOperator.CURRENT)


# ── Render callbacks ────────────────────────────────────────────


def render_recurrent(value: Optional[int], row, strings: StringManager, sesskey: Callable[[], str]) -> str:
    """'Yes' plus a cancel link for recurrent payments, nothing otherwise."""
    if value is None or value <= 0:
        return ""
    url = escape(cancel_url(row.id, sesskey()), quote=True)
    return (
        f'<b class="text-danger">{escape(strings.get_string("yes"))}</b>'
        f'<br><a href="{url}">{escape(strings.get_string("cancel"))}</a>'
    )


def render_success(value: Optional[int], row, strings: StringManager) -> str:
    status = PaymentStatus.UNKNOWN if value is None else value
    if status not in STATUS_DISPLAY:
        return escape(strings.get_string("no"))
    identifier, component, markup = STATUS_DISPLAY[status]
    return markup.format(escape(strings.get_string(identifier, component)))


def render_amount(value, row) -> str:
    return get_cost_as_string(row.amount, row.currency)


# ── Entity ──────────────────────────────────────────────────────


class PaymentEntity(BaseEntity):
    """Payments with account name, gateway status and recurrence.

    Gateway status comes from whichever gateway tables exist in `schema`;
    the rest is read from `payments` (alias `pa`) and `payment_accounts`.
    """

    def __init__(
        self,
        schema: TableExistence,
        strings: StringManager,
        sesskey: Callable[[], str],
        account_options: Optional[OptionsCallback] = None,
        timezone: str = "UTC",
        gateway_sources: Iterable[GatewayStatusSource] = DEFAULT_GATEWAY_SOURCES,
    ) -> None:
        super().__init__()
        self._schema = schema
        self._strings = strings
        self._sesskey = sesskey
        self._account_options = account_options
        self._timezone = timezone
        self._gateway_sources = tuple(gateway_sources)
        self._status: Optional[Subquery] = None

    def get_default_tables(self) -> list[str]:
        return ["payments"]

    def get_default_table_aliases(self) -> dict[str, str]:
        return {"payments": "pa"}

    def get_default_entity_title(self) -> LangString:
        return self._string("payments", COMPONENT)

    def initialise(self) -> PaymentEntity:
        for column in self.get_all_columns():
            self.add_column(column)

        # Every filter doubles as a condition.
        for filter_ in self.get_all_filters():
            self.add_filter(filter_).add_condition(filter_)

        logger.info(
            "Payment entity initialised: %d columns, %d filters",
            len(self.get_columns()),
            len(self.get_filters()),
        )
        return self

    def _string(self, identifier: str, component: str = "core") -> LangString:
        return LangString(self._strings, identifier, component)

    def get_status_subquery(self) -> Subquery:
        """The `rb` subquery, built once per entity from the schema snapshot."""
        if self._status is None:
            self._status = build_status_subquery(self._schema, self._gateway_sources)
        return self._status

    def _status_join(self) -> JoinSpec:
        pa = self.get_table("payments")
        rb = self.get_status_subquery()
        return JoinSpec(rb, rb.c.paymentid == pa.c.id)

    def _account_join(self) -> JoinSpec:
        pa = self.get_table("payments")
        pac = self.metadata.tables["payment_accounts"].alias("pac")
        return JoinSpec(pac, pa.c.accountid == pac.c.id)

    def get_all_columns(self) -> list[Column]:
        pa = self.get_table("payments")
        rb = self.get_status_subquery()
        name = self.get_entity_name()
        status_join = self._status_join()
        account_join = self._account_join()
        columns = []

        columns.append(
            Column("id", self._string("paymentid", COMPONENT), name)
            .add_joins(self.get_joins())
            .set_type(ColumnType.INTEGER)
            .add_field(pa.c.id)
            .set_is_sortable(True)
        )

        columns.append(
            Column("course", self._string("course"), name)
            .add_joins(self.get_joins())
            .add_join(status_join)
            .set_type(ColumnType.TEXT)
            .add_field(rb.c.courseid)
            .set_is_sortable(True)
        )

        columns.append(
            Column("recurrent", self._string("recurrent", COMPONENT), name)
            .add_joins(self.get_joins())
            .add_join(status_join)
            .set_type(ColumnType.INTEGER)
            .add_fields(rb.c.recurrent, pa.c.id)
            .add_attributes({"class": "text-center"})
            .set_is_sortable(True)
            .add_callback(render_recurrent, self._strings, self._sesskey)
        )

        columns.append(
            Column("success", self._string("status"), name)
            .add_joins(self.get_joins())
            .add_join(status_join)
            .set_type(ColumnType.INTEGER)
            .add_field(rb.c.success)
            .add_attributes({"class": "text-center"})
            .set_is_sortable(True)
            .add_callback(render_success, self._strings)
        )

        columns.append(
            Column("accountid", self._string("name", COMPONENT), name)
            .add_joins(self.get_joins())
            .add_join(account_join)
            .set_type(ColumnType.TEXT)
            .add_field(account_join.target.c.name)
            .set_is_sortable(True)
        )

        columns.append(
            Column("component", self._string("plugin"), name)
            .add_joins(self.get_joins())
            .set_type(ColumnType.TEXT)
            .add_field(pa.c.component)
            .set_is_sortable(True)
        )

        columns.append(
            Column("gateway", self._string("type_paygw", "plugin"), name)
            .add_joins(self.get_joins())
            .set_type(ColumnType.TEXT)
            .add_field(pa.c.gateway)
            .set_is_sortable(True)
        )

        columns.append(
            Column("amount", self._string("cost", COMPONENT), name)
            .add_joins(self.get_joins())
            .set_type(ColumnType.INTEGER)
            .add_fields(pa.c.amount, pa.c.currency)
            .add_attributes({"class": "text-right"})
            .add_callback(render_amount)
        )

        columns.append(
            Column("currency", self._string("currency"), name)
            .add_joins(self.get_joins())
            .set_type(ColumnType.TEXT)
            .add_field(pa.c.currency)
            .set_is_sortable(True)
        )

        # Reads timemodified although titled as the payment date.
        columns.append(
            Column("timecreated", self._string("date"), name)
            .add_joins(self.get_joins())
            .set_type(ColumnType.TIMESTAMP)
            .add_field(pa.c.timemodified)
            .set_is_sortable(True)
            .add_callback(
                userdate,
                self._strings.get_string("strftimedatetimeshortaccurate", "core_langconfig"),
                self._timezone,
            )
        )

        return columns

    def get_all_filters(self) -> list[Filter]:
        pa = self.get_table("payments")
        rb = self.get_status_subquery()
        name = self.get_entity_name()
        filters = []

        accounts = Filter(FilterKind.SELECT, "accountid", self._string("name"), name, pa.c.accountid, self.get_joins())
        if self._account_options is not None:
            accounts.set_options_callback(self._account_options)
        filters.append(accounts)

        filters.append(Filter(FilterKind.TEXT, "component", self._string("plugin"), name, pa.c.component, self.get_joins()))
        filters.append(
            Filter(FilterKind.TEXT, "gateway", self._string("type_paygw", "plugin"), name, pa.c.gateway, self.get_joins())
        )
        filters.append(Filter(FilterKind.TEXT, "currency", self._string("currency"), name, pa.c.currency, self.get_joins()))
        filters.append(Filter(FilterKind.NUMBER, "amount", self._string("cost"), name, pa.c.amount, self.get_joins()))
        filters.append(
            Filter(FilterKind.NUMBER, "recurrent", self._string("recurrent", COMPONENT), name, rb.c.recurrent, self.get_joins())
            .add_join(self._status_join())
        )
        filters.append(
            Filter(
                FilterKind.DATE, "timecreated", self._string("date"), name, pa.c.timecreated, self.get_joins(),
                timezone=self._timezone,
            )
            .set_limited_operators(DATE_OPERATORS)
        )

        return filters
