import pytest

from payreport.db.schema import SchemaSnapshot
from payreport.domain.enums import ColumnType, FilterKind
from payreport.exceptions import DuplicateKeyError, UnknownColumnError, UnknownTableError
from payreport.reportbuilder.entities.payment import PaymentEntity

COLUMN_KEYS = [
    "id", "course", "recurrent", "success", "accountid",
    "component", "gateway", "amount", "currency", "timecreated",
]
FILTER_KEYS = ["accountid", "component", "gateway", "currency", "amount", "recurrent", "timecreated"]


@pytest.fixture()
def entity(strings, session_key) -> PaymentEntity:
    schema = SchemaSnapshot(frozenset({"payments", "payment_accounts", "paygw_robokassa"}))
    return PaymentEntity(schema, strings, session_key.token).initialise()


class TestEntityMetadata:
    def test_default_tables(self, entity):
        assert entity.get_default_tables() == ["payments"]
        assert entity.get_default_table_aliases() == {"payments": "pa"}

    def test_title_and_name(self, entity):
        assert str(entity.get_entity_title()) == "Payments"
        assert entity.get_entity_name() == "payment"

    def test_table_alias(self, entity):
        assert entity.get_table_alias("payments") == "pa"
        assert entity.get_table("payments").name == "pa"
        with pytest.raises(UnknownTableError):
            entity.get_table_alias("courses")

    def test_set_table_alias(self, strings, session_key):
        fresh = PaymentEntity(SchemaSnapshot(frozenset()), strings, session_key.token)
        fresh.set_table_alias("payments", "p2")
        assert fresh.get_table("payments").name == "p2"


class TestColumns:
    def test_order(self, entity):
        assert [c.name for c in entity.get_columns()] == COLUMN_KEYS

    def test_keys_unique(self, entity):
        keys = [c.name for c in entity.get_columns()]
        assert len(keys) == len(set(keys))

    def test_types(self, entity):
        types = {c.name: c.type for c in entity.get_columns()}
        assert types["id"] == ColumnType.INTEGER
        assert types["recurrent"] == ColumnType.INTEGER
        assert types["success"] == ColumnType.INTEGER
        assert types["amount"] == ColumnType.INTEGER
        assert types["accountid"] == ColumnType.TEXT
        assert types["timecreated"] == ColumnType.TIMESTAMP

    def test_only_amount_is_unsortable(self, entity):
        assert [c.name for c in entity.get_columns() if not c.is_sortable] == ["amount"]

    def test_attributes(self, entity):
        assert entity.get_column("recurrent").attributes == {"class": "text-center"}
        assert entity.get_column("success").attributes == {"class": "text-center"}
        assert entity.get_column("amount").attributes == {"class": "text-right"}

    def test_joins(self, entity):
        joins = {c.name: [j.key for j in c.get_joins()] for c in entity.get_columns()}
        assert joins["course"] == ["rb"]
        assert joins["recurrent"] == ["rb"]
        assert joins["success"] == ["rb"]
        assert joins["accountid"] == ["pac"]
        assert joins["id"] == []
        assert joins["amount"] == []

    def test_timecreated_reads_modification_time(self, entity):
        assert entity.get_column("timecreated").get_sort_field().name == "timemodified"

    def test_titles(self, entity):
        titles = {c.name: str(c.title) for c in entity.get_columns()}
        assert titles["id"] == "Payment ID"
        assert titles["gateway"] == "Payment gateway"
        assert titles["success"] == "Status"

    def test_unknown_column(self, entity):
        with pytest.raises(UnknownColumnError):
            entity.get_column("userid")


class TestFilters:
    def test_order(self, entity):
        assert [f.name for f in entity.get_filters()] == FILTER_KEYS

    def test_kinds(self, entity):
        kinds = {f.name: f.kind for f in entity.get_filters()}
        assert kinds["accountid"] == FilterKind.SELECT
        assert kinds["amount"] == FilterKind.NUMBER
        assert kinds["recurrent"] == FilterKind.NUMBER
        assert kinds["timecreated"] == FilterKind.DATE
        assert kinds["component"] == kinds["gateway"] == kinds["currency"] == FilterKind.TEXT

    def test_every_filter_is_a_condition(self, entity):
        assert entity.get_conditions() == entity.get_filters()

    def test_timecreated_operators(self, entity):
        operators = {op.value for op in entity.get_filter("timecreated").get_operators()}
        assert operators == {"any", "range", "previous", "current"}

    def test_timecreated_filter_uses_entity_timezone(self, strings, session_key):
        schema = SchemaSnapshot(frozenset({"payments"}))
        entity = PaymentEntity(schema, strings, session_key.token, timezone="Europe/Moscow").initialise()
        assert entity.get_filter("timecreated").timezone.key == "Europe/Moscow"

    def test_recurrent_filter_joins_status(self, entity):
        assert [j.key for j in entity.get_filter("recurrent").get_joins()] == ["rb"]


class TestLifecycle:
    def test_initialise_twice_raises(self, entity):
        with pytest.raises(DuplicateKeyError):
            entity.initialise()

    def test_status_subquery_built_once(self, entity):
        assert entity.get_status_subquery() is entity.get_status_subquery()

    def test_status_subquery_follows_schema(self, entity):
        sql = str(entity.get_status_subquery().element.compile())
        assert "paygw_robokassa" in sql
        assert "paygw_yookassa" not in sql

    def test_columns_share_status_subquery(self, entity):
        targets = {j.target for c in entity.get_columns() for j in c.get_joins() if j.key == "rb"}
        assert targets == {entity.get_status_subquery()}
