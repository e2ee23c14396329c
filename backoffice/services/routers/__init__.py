from .customer_service import CustomerService
from .order_service import OrderService
from .report_service import ReportService
