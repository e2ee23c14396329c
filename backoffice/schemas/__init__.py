from .customer_schema import CustomerSchema, CustomerSummarySchema
from .import_schema import ImportResultSchema
from .order_schema import OrderSchema, OrderStatus, OrderSummaryResponseSchema, OrderSummarySchema
from .report_schema import CustomerOrdersReportRowSchema, CustomerSummaryResponseSchema
