from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from payreport.db.models.payment import PaymentAccount


class PaymentAccountRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, account_id: int) -> Optional[PaymentAccount]:
        result = await self._session.execute(
            select(PaymentAccount).where(PaymentAccount.id == account_id)
        )
        return result.scalar_one_or_none()

    async def get_enabled_menu(self) -> dict[int, str]:
        """Map id -> name for enabled accounts, ordered by name."""
        result = await self._session.execute(
            select(PaymentAccount.id, PaymentAccount.name)
            .where(PaymentAccount.enabled.is_(True))
            .order_by(PaymentAccount.name, PaymentAccount.id)
        )
        return {row[0]: row[1] for row in result.all()}
