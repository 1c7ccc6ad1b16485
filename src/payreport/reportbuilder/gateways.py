"""Gateway status sources combined into the `rb` auxiliary subquery.

Each optional gateway table contributes (paymentid, courseid, success,
recurrent) rows when it exists in the schema. Gateways without recurrence
tracking contribute a literal 0.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Protocol

from sqlalchemy import Integer, Select, Subquery, Table, literal, select, union

from payreport.db.models.gateway import (
    paygw_cryptocloud,
    paygw_payanyway,
    paygw_robokassa,
    paygw_yookassa,
)

logger = logging.getLogger(__name__)

STATUS_FIELDS = ("paymentid", "courseid", "success", "recurrent")


class TableExistence(Protocol):
    def table_exists(self, name: str) -> bool: ...


@dataclass(frozen=True)
class GatewayStatusSource:
    """One optional gateway table and how to read payment status from it."""

    table: Table
    tracks_recurrent: bool = True

    @property
    def name(self) -> str:
        return self.table.name

    def is_available(self, schema: TableExistence) -> bool:
        return schema.table_exists(self.name)

    def select(self) -> Select:
        c = self.table.c
        recurrent = c.recurrent if self.tracks_recurrent else literal(0, Integer)
        return select(
            c.paymentid.label("paymentid"),
            c.courseid.label("courseid"),
            c.success.label("success"),
            recurrent.label("recurrent"),
        )


DEFAULT_GATEWAY_SOURCES: tuple[GatewayStatusSource, ...] = (
    GatewayStatusSource(paygw_robokassa),
    GatewayStatusSource(paygw_yookassa),
    GatewayStatusSource(paygw_payanyway, tracks_recurrent=False),
    GatewayStatusSource(paygw_cryptocloud, tracks_recurrent=False),
)


def baseline_select() -> Select:
    """Zero row keeping the subquery valid when no gateway table exists."""
    return select(*(literal(0, Integer).label(name) for name in STATUS_FIELDS))


def available_sources(
    schema: TableExistence,
    sources: Iterable[GatewayStatusSource] = DEFAULT_GATEWAY_SOURCES,
) -> list[GatewayStatusSource]:
    found = []
    for source in sources:
        if source.is_available(schema):
            found.append(source)
        else:
            logger.debug("Gateway table %s not installed, skipped", source.name)
    return found


def build_status_subquery(
    schema: TableExistence,
    sources: Iterable[GatewayStatusSource] = DEFAULT_GATEWAY_SOURCES,
    name: str = "rb",
) -> Subquery:
    branches = [baseline_select()] + [source.select() for source in available_sources(schema, sources)]
    if len(branches) == 1:
        return branches[0].subquery(name)
    return union(*branches).subquery(name)
