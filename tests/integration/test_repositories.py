"""
Test per i repository SQLAlchemy su SQLite in memoria
"""
from datetime import date

import pytest
from sqlalchemy.exc import IntegrityError

from backoffice.core.unit_of_work import UnitOfWork
from backoffice.repository.customer_repository import CustomerRepository
from backoffice.repository.order_repository import OrderRepository
from tests.factories.customer_factory import create_customer_schema
from tests.factories.order_factory import create_order_schema


@pytest.fixture
def customer_repository(db_session) -> CustomerRepository:
    return CustomerRepository(db_session)


@pytest.fixture
def order_repository(db_session) -> OrderRepository:
    return OrderRepository(db_session)


@pytest.mark.integration
class TestCustomerRepository:

    def test_bulk_create_and_lookup(self, db_session, customer_repository):
        """
        Test: Inserimento massivo e ricerca per customer_id e paese

        Arrange: Tre clienti, due in USA
        Act: bulk_create in una UnitOfWork
        Assert: Lookup per id e per paese nell'ordine di inserimento
        """
        with UnitOfWork(db_session):
            written = customer_repository.bulk_create([
                create_customer_schema(customer_id=10, country="USA"),
                create_customer_schema(customer_id=20, email="b@example.com", country="UK"),
                create_customer_schema(customer_id=30, email="c@example.com", country="USA"),
            ])

        assert written == 3
        customer = customer_repository.get_by_customer_id(20)
        assert customer.country == "UK"
        assert customer.signup_date == date(2024, 1, 15)
        assert [c.customer_id for c in customer_repository.get_by_country("USA")] == [10, 30]
        assert customer_repository.get_by_customer_id(99) is None
        assert customer_repository.get_count() == 3

    def test_bulk_create_empty(self, customer_repository):
        assert customer_repository.bulk_create([]) == 0

    def test_duplicate_customer_id_rolls_back_whole_batch(self, db_session, customer_repository):
        """Test: Id duplicato nel batch → IntegrityError e nessuna riga scritta"""
        with pytest.raises(IntegrityError):
            with UnitOfWork(db_session):
                customer_repository.bulk_create([
                    create_customer_schema(customer_id=1),
                    create_customer_schema(customer_id=2),
                    create_customer_schema(customer_id=1),
                ])

        assert customer_repository.get_all() == []

    def test_delete_all(self, db_session, customer_repository):
        with UnitOfWork(db_session):
            customer_repository.bulk_create([create_customer_schema(customer_id=1), create_customer_schema(customer_id=2)])

        with UnitOfWork(db_session):
            deleted = customer_repository.delete_all()

        assert deleted == 2
        assert customer_repository.get_all() == []


@pytest.mark.integration
class TestOrderRepository:

    @pytest.fixture
    def seeded(self, db_session, order_repository):
        with UnitOfWork(db_session):
            order_repository.bulk_create([
                create_order_schema(order_id=101, customer_id=1, amount=999.99),
                create_order_schema(order_id=102, customer_id=2, amount=79.99, status="pending"),
                create_order_schema(order_id=103, customer_id=1, amount=29.99, status="shipped"),
            ])
        return order_repository

    def test_get_by_customer_id(self, seeded):
        orders = seeded.get_by_customer_id(1)

        assert [o.order_id for o in orders] == [101, 103]
        assert orders[1].status == "shipped"
        assert seeded.get_by_customer_id(42) == []

    def test_get_by_order_id(self, seeded):
        assert seeded.get_by_order_id(102).amount == 79.99
        assert seeded.get_by_order_id(999) is None

    def test_aggregate_by_customer(self, seeded):
        totals = seeded.aggregate_by_customer()

        assert [(t.customer_id, t.total_orders) for t in totals] == [(1, 2), (2, 1)]
        assert totals[0].total_spent == pytest.approx(1029.98)
        assert totals[1].total_spent == pytest.approx(79.99)

    def test_duplicate_order_ids_write_nothing(self, db_session, order_repository):
        with pytest.raises(IntegrityError):
            with UnitOfWork(db_session):
                order_repository.bulk_create([
                    create_order_schema(order_id=1),
                    create_order_schema(order_id=1, product_name="Mouse"),
                ])

        assert order_repository.get_all() == []

    def test_existing_order_id_conflicts(self, db_session, seeded):
        with pytest.raises(IntegrityError):
            with UnitOfWork(db_session):
                seeded.bulk_create([create_order_schema(order_id=500), create_order_schema(order_id=101)])

        assert [o.order_id for o in seeded.get_all()] == [101, 102, 103]

    def test_delete_all(self, db_session, seeded):
        with UnitOfWork(db_session):
            assert seeded.delete_all() == 3

        assert seeded.aggregate_by_customer() == []
