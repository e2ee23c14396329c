"""
Customer Service: import CSV e lookup clienti
"""
import logging
from typing import List, Optional

from fastapi import status

from backoffice.core.exceptions import InfrastructureException, NotFoundException
from backoffice.core.interfaces import IUnitOfWork
from backoffice.core.service_response import ServiceResponse
from backoffice.repository.interfaces.customer_repository_interface import ICustomerRepository
from backoffice.schemas.customer_schema import CustomerSchema, CustomerSummarySchema
from backoffice.services.csv_import import CSVImportService, CustomerRowValidator, EntityDescriptor
from backoffice.services.interfaces.customer_service_interface import ICustomerService

logger = logging.getLogger(__name__)

CUSTOMER_ENTITY = EntityDescriptor(singular="customer", plural="customers", id_field="customer_id")


class CustomerService(CSVImportService[CustomerSchema], ICustomerService):
    """Customer Service"""

    def __init__(self, customer_repository: ICustomerRepository, unit_of_work: IUnitOfWork):
        super().__init__(customer_repository, CustomerRowValidator(), unit_of_work, CUSTOMER_ENTITY)
        self._customer_repository = customer_repository

    async def find_by_id(self, customer_id: int) -> ServiceResponse[Optional[CustomerSummarySchema]]:
        """Ottiene un cliente per customer_id"""
        try:
            customer = self._customer_repository.get_by_customer_id(customer_id)
            if customer is None:
                raise NotFoundException("Customer", details={"customer_id": customer_id})
        except NotFoundException as e:
            return ServiceResponse.build_failure(e.message, None, e.status_code)
        except InfrastructureException as e:
            logger.error(f"Error finding customer with id {customer_id}: {e.message}")
            return ServiceResponse.build_failure(
                "An error occurred while finding customer", None, status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        return ServiceResponse.build_success("Customer found", CustomerSummarySchema.from_model(customer))

    async def find_by_country(self, country: str) -> ServiceResponse[List[CustomerSummarySchema]]:
        """Ottiene i clienti di un paese"""
        try:
            customers = self._customer_repository.get_by_country(country)
        except InfrastructureException as e:
            logger.error(f"Error finding customers by country {country}: {e.message}")
            return ServiceResponse.build_failure(
                "An error occurred while finding customers", [], status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        return ServiceResponse.build_success(
            "Customers found", [CustomerSummarySchema.from_model(customer) for customer in customers]
        )
