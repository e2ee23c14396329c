"""
Test per le ricerche di CustomerService e OrderService
"""
import pytest

from backoffice.core.exceptions import NotFoundException
from backoffice.services.routers.customer_service import CustomerService
from backoffice.services.routers.order_service import OrderService
from tests.factories.customer_factory import create_customer_model
from tests.factories.order_factory import create_order_model
from tests.helpers.asserts import assert_service_failure


@pytest.mark.unit
class TestCustomerLookup:

    @pytest.fixture
    def service(self, fake_customer_repository, fake_unit_of_work) -> CustomerService:
        fake_customer_repository.seed(
            create_customer_model(customer_id=1, country="USA"),
            create_customer_model(customer_id=2, name="Jane", email="jane@example.com", country="UK"),
            create_customer_model(customer_id=3, name="Bob", email="bob@example.com", country="USA"),
        )
        return CustomerService(fake_customer_repository, fake_unit_of_work)

    @pytest.mark.asyncio
    async def test_find_by_id(self, service):
        result = await service.find_by_id(2)

        assert result.success is True
        assert result.message == "Customer found"
        assert result.response_object.id == "2"
        assert result.response_object.signup_date == "2024-01-15"

    @pytest.mark.asyncio
    async def test_find_by_id_not_found(self, service):
        result = await service.find_by_id(42)

        assert_service_failure(result, 404, "Customer not found")
        assert result.response_object is None

    @pytest.mark.asyncio
    async def test_find_by_id_not_found_matches_exception(self, service):
        """Test: Il 404 riporta messaggio e status di NotFoundException"""
        expected = NotFoundException("Customer")

        result = await service.find_by_id(42)

        assert_service_failure(result, expected.status_code, expected.message)

    @pytest.mark.asyncio
    async def test_find_by_country(self, service):
        result = await service.find_by_country("USA")

        assert result.message == "Customers found"
        assert [c.id for c in result.response_object] == ["1", "3"]

    @pytest.mark.asyncio
    async def test_find_by_country_database_error(self, service, fake_customer_repository):
        fake_customer_repository.fail_reads = True

        result = await service.find_by_country("USA")

        assert_service_failure(result, 500, "An error occurred while finding customers")
        assert result.response_object == []


@pytest.mark.unit
class TestOrderLookup:

    @pytest.mark.asyncio
    async def test_find_by_customer_id(self, fake_order_repository, fake_unit_of_work):
        fake_order_repository.seed(
            create_order_model(order_id=101, customer_id=1),
            create_order_model(order_id=102, customer_id=2),
            create_order_model(order_id=103, customer_id=1, amount=5.0),
        )
        service = OrderService(fake_order_repository, fake_unit_of_work)

        result = await service.find_by_customer_id(1)

        assert result.message == "Orders found"
        assert [o.order_id for o in result.response_object] == ["101", "103"]

    @pytest.mark.asyncio
    async def test_find_by_customer_id_database_error(self, fake_order_repository, fake_unit_of_work):
        fake_order_repository.fail_reads = True
        service = OrderService(fake_order_repository, fake_unit_of_work)

        result = await service.find_by_customer_id(1)

        assert_service_failure(result, 500, "An error occurred while finding orders")
