"""
Interfaccia per Customer Repository seguendo ISP
"""
from abc import abstractmethod
from typing import List, Optional

from backoffice.core.interfaces import IBulkRepository
from backoffice.models.customer import Customer
from backoffice.schemas.customer_schema import CustomerSchema


class ICustomerRepository(IBulkRepository[Customer, CustomerSchema]):
    """Interface per la repository dei clienti"""

    @abstractmethod
    def get_by_customer_id(self, customer_id: int) -> Optional[Customer]:
        """Ottiene un cliente per customer_id di business"""
        pass

    @abstractmethod
    def get_by_country(self, country: str) -> List[Customer]:
        """Ottiene i clienti di un paese"""
        pass
