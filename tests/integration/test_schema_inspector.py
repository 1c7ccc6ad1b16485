from payreport.db.models.gateway import gateway_metadata, paygw_yookassa
from payreport.db.schema import SchemaInspector


class TestSchemaInspector:
    async def test_core_tables_exist(self, session):
        snapshot = await SchemaInspector(session).snapshot()

        assert snapshot.table_exists("payments")
        assert snapshot.table_exists("payment_accounts")
        assert not snapshot.table_exists("paygw_yookassa")

    async def test_sees_installed_gateway_table(self, session):
        conn = await session.connection()
        await conn.run_sync(lambda c: gateway_metadata.create_all(c, tables=[paygw_yookassa]))

        snapshot = await SchemaInspector(session).snapshot()

        assert snapshot.table_exists("paygw_yookassa")
        assert not snapshot.table_exists("paygw_robokassa")
