from backoffice.core.service_response import CamelModel
from backoffice.schemas.customer_schema import CustomerSummarySchema
from backoffice.schemas.order_schema import OrderSummaryResponseSchema


class CustomerSummaryResponseSchema(CamelModel):
    customer: CustomerSummarySchema
    order_summary: OrderSummaryResponseSchema


class CustomerOrdersReportRowSchema(CamelModel):
    """Riga del report clienti/ordini: stessa forma del riepilogo cliente"""
    customer: CustomerSummarySchema
    order_summary: OrderSummaryResponseSchema
