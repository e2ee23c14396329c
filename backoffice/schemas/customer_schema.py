from pydantic import BaseModel, Field

from backoffice.core.service_response import CamelModel
from backoffice.schemas.fields import EMAIL_PATTERN, IsoDate, RecordId


class CustomerSchema(BaseModel):
    """
        Record cliente tipizzato, prodotto dalla validazione di una riga CSV.

        Attributes:
            customer_id (int): Identificativo di business del cliente, nel range della colonna Integer.
            name (str): Nome del cliente, non vuoto.
            email (str): Indirizzo email nel formato ``locale@dominio.tld``.
            country (str): Paese del cliente, non vuoto.
            signup_date (date): Data di registrazione.
    """
    customer_id: RecordId
    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=1, max_length=255, pattern=EMAIL_PATTERN)
    country: str = Field(..., min_length=1, max_length=100)
    signup_date: IsoDate


class CustomerSummarySchema(CamelModel):
    id: str
    name: str
    email: str
    country: str
    signup_date: str

    @classmethod
    def from_model(cls, customer) -> "CustomerSummarySchema":
        return cls(
            id=str(customer.customer_id),
            name=customer.name,
            email=customer.email,
            country=customer.country,
            signup_date=customer.signup_date.isoformat(),
        )
