from .customer_service_interface import ICustomerService
from .order_service_interface import IOrderService
from .report_service_interface import IReportService
