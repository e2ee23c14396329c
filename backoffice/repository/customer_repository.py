"""
Customer Repository su SQLAlchemy
"""
from typing import List, Optional

from sqlalchemy.orm import Session

from backoffice.core.base_repository import BaseRepository
from backoffice.models.customer import Customer
from backoffice.repository.interfaces.customer_repository_interface import ICustomerRepository
from backoffice.schemas.customer_schema import CustomerSchema


class CustomerRepository(ICustomerRepository, BaseRepository[Customer, CustomerSchema]):
    """Customer Repository"""

    def __init__(self, session: Session):
        super().__init__(session, Customer)

    def get_by_customer_id(self, customer_id: int) -> Optional[Customer]:
        """Ottiene un cliente per customer_id"""
        return self.get_one_by("customer_id", customer_id)

    def get_by_country(self, country: str) -> List[Customer]:
        """Ottiene i clienti di un paese (match esatto)"""
        return self.get_all(country=country)
