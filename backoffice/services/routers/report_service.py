"""
Report Service: riepilogo cliente e report clienti/ordini
"""
import logging
import math
from typing import List, Optional, Sequence

from fastapi import status

from backoffice.core.exceptions import InfrastructureException, NotFoundException
from backoffice.core.service_response import ServiceResponse
from backoffice.models.customer import Customer
from backoffice.models.order import Order
from backoffice.repository.interfaces.customer_repository_interface import ICustomerRepository
from backoffice.repository.interfaces.order_repository_interface import IOrderRepository
from backoffice.schemas.customer_schema import CustomerSummarySchema
from backoffice.schemas.order_schema import OrderSummaryResponseSchema, OrderSummarySchema
from backoffice.schemas.report_schema import CustomerOrdersReportRowSchema, CustomerSummaryResponseSchema
from backoffice.services.interfaces.report_service_interface import IReportService

logger = logging.getLogger(__name__)


def build_order_summary(orders: Sequence[Order]) -> OrderSummaryResponseSchema:
    """Conteggio, totale speso (somma compensata) e lista ordini nell'ordine del repository"""
    return OrderSummaryResponseSchema(
        total_orders=len(orders),
        total_spent=math.fsum(order.amount for order in orders),
        orders=[OrderSummarySchema.from_model(order) for order in orders]
    )


class ReportService(IReportService):
    """Report Service"""

    def __init__(self, customer_repository: ICustomerRepository, order_repository: IOrderRepository):
        self._customer_repository = customer_repository
        self._order_repository = order_repository

    async def get_customer_summary(
        self, customer_id: int
    ) -> ServiceResponse[Optional[CustomerSummaryResponseSchema]]:
        """
        Riepilogo di un cliente: dati anagrafici, numero ordini, totale speso e ordini.

        Args:
            customer_id: Identificativo di business del cliente

        Returns:
            ServiceResponse 200 con il riepilogo, 404 se il cliente non esiste,
            500 per errori di accesso ai dati
        """
        try:
            customer = self._customer_repository.get_by_customer_id(customer_id)
            if customer is None:
                raise NotFoundException("Customer", details={"customer_id": customer_id})

            orders = self._order_repository.get_by_customer_id(customer_id)
        except NotFoundException as e:
            logger.info(f"Summary requested for unknown customer {customer_id}")
            return ServiceResponse.build_failure(e.message, None, e.status_code)
        except InfrastructureException as e:
            logger.error(
                f"Error fetching summary for customer {customer_id}: {e.message}",
                extra={"operation": "get_customer_summary", "customer_id": customer_id}
            )
            return ServiceResponse.build_failure(
                "An error occurred while fetching customer summary", None, status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        summary = CustomerSummaryResponseSchema(
            customer=CustomerSummarySchema.from_model(customer),
            order_summary=build_order_summary(orders)
        )
        return ServiceResponse.build_success("Customer summary found", summary)

    async def get_customer_orders_report(
        self, country: Optional[str] = None, min_spent: Optional[float] = None
    ) -> ServiceResponse[List[CustomerOrdersReportRowSchema]]:
        """
        Report clienti/ordini.

        Args:
            country: Se valorizzato, solo i clienti di quel paese (match esatto)
            min_spent: Se valorizzato, esclude i clienti con totale speso inferiore

        Returns:
            ServiceResponse con le righe ordinate per totale speso decrescente.
            A parità di totale resta l'ordine del repository.
        """
        try:
            customers = self._load_customers(country)
            rows = [self._build_row(customer) for customer in customers]
        except InfrastructureException as e:
            logger.error(
                f"Error generating customer orders report: {e.message}",
                extra={"operation": "get_customer_orders_report", "country": country, "min_spent": min_spent}
            )
            return ServiceResponse.build_failure(
                "An error occurred while generating report", [], status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        if min_spent is not None:
            rows = [row for row in rows if row.order_summary.total_spent >= min_spent]

        # sorted è stabile anche con reverse=True
        rows = sorted(rows, key=lambda row: row.order_summary.total_spent, reverse=True)

        logger.debug(f"Customer orders report generated with {len(rows)} rows")
        return ServiceResponse.build_success("Customer orders report generated", rows)

    def _load_customers(self, country: Optional[str]) -> List[Customer]:
        if country:
            return self._customer_repository.get_by_country(country)
        return self._customer_repository.get_all()

    def _build_row(self, customer: Customer) -> CustomerOrdersReportRowSchema:
        orders = self._order_repository.get_by_customer_id(customer.customer_id)
        return CustomerOrdersReportRowSchema(
            customer=CustomerSummarySchema.from_model(customer),
            order_summary=build_order_summary(orders)
        )
