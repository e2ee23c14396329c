from .customer_repository_interface import ICustomerRepository
from .order_repository_interface import CustomerOrderTotals, IOrderRepository
