from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from backoffice.core.service_response import CamelModel
from backoffice.schemas.fields import IsoDate, RecordId


class OrderStatus(str, Enum):
    COMPLETED = "completed"
    PENDING = "pending"
    SHIPPED = "shipped"


class OrderSchema(BaseModel):
    """
        Record ordine tipizzato, prodotto dalla validazione di una riga CSV.

        Attributes:
            order_id (int): Identificativo di business dell'ordine.
            customer_id (int): Riferimento al cliente (non verificato in scrittura).
            product_name (str): Nome del prodotto, non vuoto.
            amount (float): Importo finito. Il segno non viene verificato.
            order_date (date): Data dell'ordine.
            status (OrderStatus): completed, pending o shipped.
    """
    model_config = ConfigDict(use_enum_values=True)

    order_id: RecordId
    customer_id: RecordId
    product_name: str = Field(..., min_length=1, max_length=255)
    amount: float = Field(..., allow_inf_nan=False)
    order_date: IsoDate
    status: OrderStatus


class OrderSummarySchema(CamelModel):
    order_id: str
    product_name: str
    amount: float
    order_date: str
    status: str

    @classmethod
    def from_model(cls, order) -> "OrderSummarySchema":
        return cls(
            order_id=str(order.order_id),
            product_name=order.product_name,
            amount=order.amount,
            order_date=order.order_date.isoformat(),
            status=order.status,
        )


class OrderSummaryResponseSchema(CamelModel):
    total_orders: int
    total_spent: float
    orders: List[OrderSummarySchema]
