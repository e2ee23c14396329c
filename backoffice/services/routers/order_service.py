"""
Order Service: import CSV e lookup ordini per cliente
"""
import logging
from typing import List

from fastapi import status

from backoffice.core.exceptions import InfrastructureException
from backoffice.core.interfaces import IUnitOfWork
from backoffice.core.service_response import ServiceResponse
from backoffice.repository.interfaces.order_repository_interface import IOrderRepository
from backoffice.schemas.order_schema import OrderSchema, OrderSummarySchema
from backoffice.services.csv_import import CSVImportService, EntityDescriptor, OrderRowValidator
from backoffice.services.interfaces.order_service_interface import IOrderService

logger = logging.getLogger(__name__)

ORDER_ENTITY = EntityDescriptor(singular="order", plural="orders", id_field="order_id")


class OrderService(CSVImportService[OrderSchema], IOrderService):
    """Order Service"""

    def __init__(self, order_repository: IOrderRepository, unit_of_work: IUnitOfWork):
        super().__init__(order_repository, OrderRowValidator(), unit_of_work, ORDER_ENTITY)
        self._order_repository = order_repository

    async def find_by_customer_id(self, customer_id: int) -> ServiceResponse[List[OrderSummarySchema]]:
        """Ottiene gli ordini di un cliente"""
        try:
            orders = self._order_repository.get_by_customer_id(customer_id)
        except InfrastructureException as e:
            logger.error(f"Error finding orders for customer {customer_id}: {e.message}")
            return ServiceResponse.build_failure(
                "An error occurred while finding orders", [], status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        return ServiceResponse.build_success("Orders found", [OrderSummarySchema.from_model(order) for order in orders])
