"""
Dipendenze per i router
"""
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from backoffice.core.settings import AppSettings
from backoffice.core.unit_of_work import UnitOfWork
from backoffice.database import get_db
from backoffice.repository.customer_repository import CustomerRepository
from backoffice.repository.order_repository import OrderRepository
from backoffice.services.interfaces.customer_service_interface import ICustomerService
from backoffice.services.interfaces.order_service_interface import IOrderService
from backoffice.services.interfaces.report_service_interface import IReportService
from backoffice.services.routers.customer_service import CustomerService
from backoffice.services.routers.order_service import OrderService
from backoffice.services.routers.report_service import ReportService

db_dependency = Annotated[Session, Depends(get_db)]


def get_settings(request: Request) -> AppSettings:
    """Settings registrate sull'app dalla factory"""
    return request.app.state.settings


settings_dependency = Annotated[AppSettings, Depends(get_settings)]


def get_customer_service(db: db_dependency, settings: settings_dependency) -> ICustomerService:
    """Dependency injection per Customer Service"""
    unit_of_work = UnitOfWork(db, settings.import_transaction_timeout_seconds)
    return CustomerService(CustomerRepository(db), unit_of_work)


def get_order_service(db: db_dependency, settings: settings_dependency) -> IOrderService:
    """Dependency injection per Order Service"""
    unit_of_work = UnitOfWork(db, settings.import_transaction_timeout_seconds)
    return OrderService(OrderRepository(db), unit_of_work)


def get_report_service(db: db_dependency) -> IReportService:
    """Dependency injection per Report Service"""
    return ReportService(CustomerRepository(db), OrderRepository(db))
