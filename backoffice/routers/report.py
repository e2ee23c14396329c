"""
Report Router
"""
from typing import Optional

from fastapi import APIRouter, Depends, Path, Query, status

from backoffice.schemas.fields import SQL_INTEGER_MAX

from backoffice.services.interfaces.report_service_interface import IReportService

from .dependencies import get_report_service

router = APIRouter(
    prefix="/api",
    tags=["Report"],
)


@router.get("/customers/{customerId}/summary", status_code=status.HTTP_200_OK)
async def get_customer_summary(
    customer_id: int = Path(..., alias="customerId", gt=0, le=SQL_INTEGER_MAX, description="Identificativo del cliente"),
    report_service: IReportService = Depends(get_report_service)
):
    """
    Riepilogo di un cliente: dati anagrafici, numero ordini, totale speso e lista ordini.

    - **customerId**: intero positivo, 404 se il cliente non esiste.
    """
    result = await report_service.get_customer_summary(customer_id)
    return result.to_json_response()


@router.get("/reports/customer-orders", status_code=status.HTTP_200_OK)
async def get_customer_orders_report(
    country: Optional[str] = Query(None, description="Filtra per paese (match esatto)"),
    min_spent: Optional[float] = Query(None, alias="minSpent", ge=0, description="Totale speso minimo (incluso)"),
    report_service: IReportService = Depends(get_report_service)
):
    """
    Report clienti/ordini ordinato per totale speso decrescente.
    """
    result = await report_service.get_customer_orders_report(country=country, min_spent=min_spent)
    return result.to_json_response()
