"""
Interfaccia per Order Repository seguendo ISP
"""
from abc import abstractmethod
from typing import List, NamedTuple, Optional

from backoffice.core.interfaces import IBulkRepository
from backoffice.models.order import Order
from backoffice.schemas.order_schema import OrderSchema


class CustomerOrderTotals(NamedTuple):
    customer_id: int
    total_orders: int
    total_spent: float


class IOrderRepository(IBulkRepository[Order, OrderSchema]):
    """Interface per la repository degli ordini"""

    @abstractmethod
    def get_by_order_id(self, order_id: int) -> Optional[Order]:
        """Ottiene un ordine per order_id di business"""
        pass

    @abstractmethod
    def get_by_customer_id(self, customer_id: int) -> List[Order]:
        """Ottiene tutti gli ordini di un cliente"""
        pass

    @abstractmethod
    def aggregate_by_customer(self) -> List[CustomerOrderTotals]:
        """Numero ordini e totale speso raggruppati per cliente"""
        pass
