from decimal import Decimal
from typing import Optional

from sqlalchemy import BigInteger, ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from payreport.db.session import Base, EpochTimestampMixin, IntPrimaryKey


class PaymentAccount(IntPrimaryKey, EpochTimestampMixin, Base):
    """A configured payment account that gateways pay into."""

    __tablename__ = "payment_accounts"

    name: Mapped[str] = mapped_column(String(255))
    idnumber: Mapped[Optional[str]] = mapped_column(String(100), default=None)
    contextid: Mapped[int] = mapped_column(BigInteger, default=1)
    enabled: Mapped[bool] = mapped_column(default=True)
    archived: Mapped[bool] = mapped_column(default=False)

    payments: Mapped[list["Payment"]] = relationship(back_populates="account")


class Payment(IntPrimaryKey, EpochTimestampMixin, Base):
    """One payment made through a gateway for a component's item."""

    __tablename__ = "payments"

    component: Mapped[str] = mapped_column(String(100))
    paymentarea: Mapped[str] = mapped_column(String(50))
    itemid: Mapped[int] = mapped_column(BigInteger)
    userid: Mapped[int] = mapped_column(BigInteger)
    amount: Mapped[Decimal] = mapped_column(Numeric(20, 5))
    currency: Mapped[str] = mapped_column(String(3))
    accountid: Mapped[int] = mapped_column(BigInteger, ForeignKey("payment_accounts.id"))
    gateway: Mapped[str] = mapped_column(String(100))

    account: Mapped["PaymentAccount"] = relationship(back_populates="payments")
