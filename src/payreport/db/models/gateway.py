"""Status tables owned by payment gateway plugins.

They live on their own MetaData: the report only reads them, and any of them
may be missing from a given installation.
"""

from sqlalchemy import BigInteger, Column, Integer, MetaData, Table

from payreport.db.session import convention

gateway_metadata = MetaData(naming_convention=convention)


def _status_table(name: str, tracks_recurrent: bool) -> Table:
    columns = [
        Column("id", BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True),
        Column("paymentid", BigInteger, nullable=False, index=True),
        Column("courseid", BigInteger, nullable=False),
        Column("userid", BigInteger, nullable=False, default=0),
        Column("success", Integer, nullable=False, default=0),
    ]
    if tracks_recurrent:
        columns.append(Column("recurrent", Integer, nullable=False, default=0))
    return Table(name, gateway_metadata, *columns)


paygw_robokassa = _status_table("paygw_robokassa", tracks_recurrent=True)
paygw_yookassa = _status_table("paygw_yookassa", tracks_recurrent=True)
paygw_payanyway = _status_table("paygw_payanyway", tracks_recurrent=False)
paygw_cryptocloud = _status_table("paygw_cryptocloud", tracks_recurrent=False)
