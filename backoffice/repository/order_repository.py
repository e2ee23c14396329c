"""
Order Repository su SQLAlchemy
"""
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backoffice.core.base_repository import BaseRepository
from backoffice.core.exceptions import InfrastructureException
from backoffice.models.order import Order
from backoffice.repository.interfaces.order_repository_interface import CustomerOrderTotals, IOrderRepository
from backoffice.schemas.order_schema import OrderSchema


class OrderRepository(IOrderRepository, BaseRepository[Order, OrderSchema]):
    """Order Repository"""

    def __init__(self, session: Session):
        super().__init__(session, Order)

    def get_by_order_id(self, order_id: int) -> Optional[Order]:
        """Ottiene un ordine per order_id"""
        return self.get_one_by("order_id", order_id)

    def get_by_customer_id(self, customer_id: int) -> List[Order]:
        """Ottiene gli ordini di un cliente in ordine di inserimento"""
        return self.get_all(customer_id=customer_id)

    def aggregate_by_customer(self) -> List[CustomerOrderTotals]:
        """
        Raggruppa gli ordini per cliente.

        Returns:
            Lista di CustomerOrderTotals ordinata per customer_id
        """
        try:
            rows = self._session.query(
                Order.customer_id,
                func.count(Order.id).label("total_orders"),
                func.coalesce(func.sum(Order.amount), 0.0).label("total_spent"),
            ).group_by(Order.customer_id).order_by(Order.customer_id).all()
        except SQLAlchemyError as e:
            raise InfrastructureException(f"Database error aggregating orders by customer: {str(e)}")

        return [
            CustomerOrderTotals(
                customer_id=row.customer_id,
                total_orders=row.total_orders,
                total_spent=float(row.total_spent),
            )
            for row in rows
        ]
