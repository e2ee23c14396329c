"""
Factory per creare dati di test per clienti
"""
from datetime import date
from typing import Any, Dict, Iterable, List, Optional

from backoffice.models.customer import Customer
from backoffice.schemas.customer_schema import CustomerSchema

CUSTOMER_CSV_HEADER = ["customer_id", "name", "email", "country", "signup_date"]


def create_customer_data(
    customer_id: int = 1,
    name: str = "John Doe",
    email: str = "john.doe@example.com",
    country: str = "USA",
    signup_date: date = date(2024, 1, 15)
) -> Dict[str, Any]:
    """Crea dati per un Customer"""
    return {
        "customer_id": customer_id,
        "name": name,
        "email": email,
        "country": country,
        "signup_date": signup_date
    }


def create_customer_schema(**kwargs) -> CustomerSchema:
    """Crea un CustomerSchema"""
    return CustomerSchema(**create_customer_data(**kwargs))


def create_customer_model(**kwargs) -> Customer:
    """Crea un Customer non persistito"""
    return Customer(**create_customer_data(**kwargs))


def create_customer_row(**kwargs) -> Dict[str, str]:
    """Riga CSV già parsata (header → valore stringa)"""
    data = create_customer_data(**kwargs)
    return {key: str(value) for key, value in data.items()}


def build_customers_csv(rows: Iterable[Iterable[Any]], header: Optional[List[str]] = None) -> bytes:
    """Costruisce il contenuto di un CSV clienti a partire da righe di valori"""
    lines = [",".join(header or CUSTOMER_CSV_HEADER)]
    lines.extend(",".join(str(value) for value in row) for row in rows)
    return ("\n".join(lines) + "\n").encode("utf-8")


SAMPLE_CUSTOMERS_CSV = build_customers_csv([
    (1, "John Doe", "john@example.com", "USA", "2024-01-15"),
    (2, "Jane Smith", "jane@example.com", "UK", "2024-02-20"),
    (3, "Mario Rossi", "mario@example.com", "Italy", "2024-03-10"),
])
