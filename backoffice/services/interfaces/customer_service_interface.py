"""
Interfaccia per Customer Service seguendo ISP
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from backoffice.core.service_response import ServiceResponse
from backoffice.schemas.customer_schema import CustomerSummarySchema
from backoffice.schemas.import_schema import ImportResultSchema


class ICustomerService(ABC):
    """Interfaccia per Customer Service"""

    @abstractmethod
    async def import_from_csv(self, file_content: bytes) -> ServiceResponse[ImportResultSchema]:
        """Importa i clienti da un CSV (tutto-o-niente)"""
        pass

    @abstractmethod
    async def find_by_id(self, customer_id: int) -> ServiceResponse[Optional[CustomerSummarySchema]]:
        """Ottiene un cliente per customer_id"""
        pass

    @abstractmethod
    async def find_by_country(self, country: str) -> ServiceResponse[List[CustomerSummarySchema]]:
        """Ottiene i clienti di un paese"""
        pass
