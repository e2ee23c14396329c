"""
Upload Router

Endpoints per import clienti e ordini da file CSV (tutto-o-niente).
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile, status
from fastapi.responses import JSONResponse

from backoffice.core.service_response import ServiceResponse
from backoffice.schemas.import_schema import ImportResultSchema
from backoffice.services.interfaces.customer_service_interface import ICustomerService
from backoffice.services.interfaces.order_service_interface import IOrderService

from .dependencies import get_customer_service, get_order_service, settings_dependency

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/upload",
    tags=["Upload"]
)

BYTES_PER_MB = 1024 * 1024


def _rejected(message: str) -> JSONResponse:
    response = ServiceResponse.build_failure(message, ImportResultSchema.failed(message), status.HTTP_400_BAD_REQUEST)
    return response.to_json_response()


async def _read_csv_upload(file: Optional[UploadFile], max_size: int):
    """
    Controlla il file caricato e ne legge il contenuto.

    Returns:
        Tupla (contenuto, None) se il file è accettabile, (None, risposta 400) altrimenti
    """
    if file is None or not file.filename:
        return None, _rejected("No file uploaded")

    if not file.filename.lower().endswith('.csv'):
        logger.warning(f"Rejected upload with non CSV filename: {file.filename}")
        return None, _rejected("Only CSV files are allowed")

    content = await file.read()
    if len(content) > max_size:
        logger.warning(f"Rejected upload {file.filename}: {len(content)} bytes exceeds {max_size}")
        return None, _rejected(f"File too large. Maximum size is {max_size // BYTES_PER_MB}MB")

    return content, None


@router.post(
    "/customers",
    status_code=status.HTTP_201_CREATED,
    response_description="Clienti importati"
)
async def upload_customers(
    settings: settings_dependency,
    file: Optional[UploadFile] = File(None, description="CSV: customer_id,name,email,country,signup_date"),
    customer_service: ICustomerService = Depends(get_customer_service)
):
    """
    Importa clienti da file CSV.

    - Prima riga header, delimitatore virgola, UTF-8 o Latin-1
    - Se una sola riga non è valida nessun cliente viene scritto
    """
    content, rejection = await _read_csv_upload(file, settings.max_upload_size_bytes)
    if rejection is not None:
        return rejection

    result = await customer_service.import_from_csv(content)
    return result.to_json_response()


@router.post(
    "/orders",
    status_code=status.HTTP_201_CREATED,
    response_description="Ordini importati"
)
async def upload_orders(
    settings: settings_dependency,
    file: Optional[UploadFile] = File(None, description="CSV: order_id,customer_id,product_name,amount,order_date,status"),
    order_service: IOrderService = Depends(get_order_service)
):
    """
    Importa ordini da file CSV.

    - status ammessi: completed, pending, shipped
    - customer_id non viene verificato contro i clienti esistenti
    """
    content, rejection = await _read_csv_upload(file, settings.max_upload_size_bytes)
    if rejection is not None:
        return rejection

    result = await order_service.import_from_csv(content)
    return result.to_json_response()
