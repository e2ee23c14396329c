"""
Interfaccia per Report Service seguendo ISP
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from backoffice.core.service_response import ServiceResponse
from backoffice.schemas.report_schema import CustomerOrdersReportRowSchema, CustomerSummaryResponseSchema


class IReportService(ABC):
    """Interfaccia per Report Service"""

    @abstractmethod
    async def get_customer_summary(
        self, customer_id: int
    ) -> ServiceResponse[Optional[CustomerSummaryResponseSchema]]:
        """Riepilogo di un cliente con i suoi ordini"""
        pass

    @abstractmethod
    async def get_customer_orders_report(
        self, country: Optional[str] = None, min_spent: Optional[float] = None
    ) -> ServiceResponse[List[CustomerOrdersReportRowSchema]]:
        """Report clienti/ordini filtrabile, ordinato per totale speso decrescente"""
        pass
