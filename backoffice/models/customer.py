from sqlalchemy import Column, Date, Index, Integer, String

from ..database import Base


class Customer(Base):
    """
        Modello SQLAlchemy per la tabella 'customers'.

        Attributes:
            __tablename__ (str): Il nome della tabella nel database, definito come 'customers'.
            id (Column): Chiave primaria autoincrementale assegnata dal database.
            customer_id (Column): Identificativo di business del cliente, unico e immutabile,
                                  distinto dalla chiave primaria. È quello usato nei CSV e nelle API.
            name (Column): Nome completo del cliente.
            email (Column): Indirizzo email del cliente (indicizzato, non unico).
            country (Column): Paese del cliente, usato come filtro nei report.
            signup_date (Column): Data di registrazione del cliente.
    """
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, index=True)
    customer_id = Column(Integer, nullable=False, unique=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, index=True)
    country = Column(String(100), nullable=False, index=True)
    signup_date = Column(Date, nullable=False)

    __table_args__ = (
        Index("ix_customers_country_signup_date", "country", "signup_date"),
    )
