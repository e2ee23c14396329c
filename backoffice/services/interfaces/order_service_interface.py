"""
Interfaccia per Order Service seguendo ISP
"""
from abc import ABC, abstractmethod
from typing import List

from backoffice.core.service_response import ServiceResponse
from backoffice.schemas.import_schema import ImportResultSchema
from backoffice.schemas.order_schema import OrderSummarySchema


class IOrderService(ABC):
    """Interfaccia per Order Service"""

    @abstractmethod
    async def import_from_csv(self, file_content: bytes) -> ServiceResponse[ImportResultSchema]:
        """Importa gli ordini da un CSV (tutto-o-niente)"""
        pass

    @abstractmethod
    async def find_by_customer_id(self, customer_id: int) -> ServiceResponse[List[OrderSummarySchema]]:
        """Ottiene gli ordini di un cliente"""
        pass
