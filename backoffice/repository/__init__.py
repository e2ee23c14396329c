from .customer_repository import CustomerRepository
from .order_repository import OrderRepository
