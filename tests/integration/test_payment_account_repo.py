from payreport.db.models import PaymentAccount
from payreport.db.repos import PaymentAccountRepo


class TestPaymentAccountRepo:
    async def test_enabled_menu_skips_disabled(self, session):
        session.add_all([
            PaymentAccount(name="Zeta", enabled=True),
            PaymentAccount(name="Alpha", enabled=True),
            PaymentAccount(name="Closed", enabled=False),
        ])
        await session.commit()

        menu = await PaymentAccountRepo(session).get_enabled_menu()

        assert list(menu.values()) == ["Alpha", "Zeta"]
        assert all(isinstance(k, int) for k in menu)

    async def test_enabled_menu_empty(self, session):
        assert await PaymentAccountRepo(session).get_enabled_menu() == {}

    async def test_get_by_id(self, session):
        account = PaymentAccount(name="Main")
        session.add(account)
        await session.commit()

        repo = PaymentAccountRepo(session)
        assert (await repo.get_by_id(account.id)).name == "Main"
        assert await repo.get_by_id(9999) is None
