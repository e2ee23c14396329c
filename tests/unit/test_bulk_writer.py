"""
Test per TransactionalBulkWriter
"""
import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from backoffice.core.exceptions import ConflictException, ErrorCode, InfrastructureException
from backoffice.services.csv_import.bulk_writer import EntityDescriptor, TransactionalBulkWriter
from tests.factories.customer_factory import create_customer_schema
from tests.factories.order_factory import create_order_schema

CUSTOMERS = EntityDescriptor("customer", "customers", "customer_id")
ORDERS = EntityDescriptor("order", "orders", "order_id")


def integrity_error(message: str) -> IntegrityError:
    return IntegrityError("INSERT INTO ...", {}, Exception(message))


@pytest.mark.unit
class TestTransactionalBulkWriter:
    """Scrittura tutto-o-niente e classificazione degli errori di unicità"""

    def test_write_commits_all_records(self, fake_customer_repository, fake_unit_of_work):
        writer = TransactionalBulkWriter(fake_unit_of_work)
        records = [create_customer_schema(customer_id=1), create_customer_schema(customer_id=2)]

        written = writer.write(fake_customer_repository, records, CUSTOMERS)

        assert written == 2
        assert fake_unit_of_work.commits == 1
        assert fake_unit_of_work.rollbacks == 0
        assert [c.customer_id for c in fake_customer_repository.items] == [1, 2]

    @pytest.mark.parametrize("message", [
        "UNIQUE constraint failed: orders.order_id",
        "(1062, \"Duplicate entry '101' for key 'orders.order_id'\")",
        "duplicate key value violates unique constraint \"orders_order_id_key\"",
    ])
    def test_duplicate_id_classified(self, fake_order_repository, fake_unit_of_work, message):
        """
        Test: Violazione di unicità sulla colonna identificativa

        Arrange: Repository che solleva IntegrityError (SQLite, MySQL, PostgreSQL)
        Act: write
        Assert: ConflictException DUPLICATE_ID con suggerimento, rollback eseguito
        """
        fake_order_repository.fail_with = integrity_error(message)
        writer = TransactionalBulkWriter(fake_unit_of_work)

        with pytest.raises(ConflictException) as exc_info:
            writer.write(fake_order_repository, [create_order_schema()], ORDERS)

        exc = exc_info.value
        assert exc.error_code == ErrorCode.DUPLICATE_ID.value
        assert exc.status_code == 400
        assert exc.message.startswith("Duplicate order IDs found. Each order must have a unique order_id.")
        assert "remove existing data first" in exc.message
        assert fake_unit_of_work.rollbacks == 1
        assert fake_unit_of_work.commits == 0

    def test_duplicate_customer_id_classified(self, fake_customer_repository, fake_unit_of_work):
        fake_customer_repository.fail_with = integrity_error("UNIQUE constraint failed: customers.customer_id")

        with pytest.raises(ConflictException) as exc_info:
            TransactionalBulkWriter(fake_unit_of_work).write(
                fake_customer_repository, [create_customer_schema()], CUSTOMERS
            )

        assert exc_info.value.message.startswith("Duplicate customer IDs found.")

    def test_other_unique_violation_is_duplicate_data(self, fake_customer_repository, fake_unit_of_work):
        fake_customer_repository.fail_with = integrity_error("UNIQUE constraint failed: customers.email")

        with pytest.raises(ConflictException) as exc_info:
            TransactionalBulkWriter(fake_unit_of_work).write(
                fake_customer_repository, [create_customer_schema()], CUSTOMERS
            )

        assert exc_info.value.error_code == ErrorCode.DUPLICATE_DATA.value
        assert exc_info.value.message == (
            "Duplicate data detected. Please ensure all customer IDs and other unique fields are unique."
        )

    def test_non_unique_integrity_error_is_infrastructure(self, fake_order_repository, fake_unit_of_work):
        fake_order_repository.fail_with = integrity_error("NOT NULL constraint failed: orders.amount")

        with pytest.raises(InfrastructureException) as exc_info:
            TransactionalBulkWriter(fake_unit_of_work).write(fake_order_repository, [create_order_schema()], ORDERS)

        assert exc_info.value.error_code == ErrorCode.DATABASE_ERROR.value

    def test_database_error_is_infrastructure(self, fake_order_repository, fake_unit_of_work):
        fake_order_repository.fail_with = OperationalError("INSERT", {}, Exception("database is locked"))

        with pytest.raises(InfrastructureException):
            TransactionalBulkWriter(fake_unit_of_work).write(fake_order_repository, [create_order_schema()], ORDERS)

        assert fake_unit_of_work.rollbacks == 1
