from sqlalchemy import Column, Date, Float, Index, Integer, String

from ..database import Base


class Order(Base):
    """
        Modello SQLAlchemy per la tabella 'orders'.

        Attributes:
            __tablename__ (str): Il nome della tabella nel database, definito come 'orders'.
            id (Column): Chiave primaria autoincrementale assegnata dal database.
            order_id (Column): Identificativo di business dell'ordine, unico.
            customer_id (Column): Riferimento a Customer.customer_id. L'integrità referenziale
                                  non è imposta in scrittura: un ordine può riferire un cliente
                                  non ancora importato.
            product_name (Column): Nome del prodotto ordinato.
            amount (Column): Importo dell'ordine.
            order_date (Column): Data dell'ordine.
            status (Column): Stato dell'ordine: completed, pending o shipped.
    """
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(Integer, nullable=False, unique=True)
    customer_id = Column(Integer, nullable=False, index=True)
    product_name = Column(String(255), nullable=False)
    amount = Column(Float, nullable=False)
    order_date = Column(Date, nullable=False)
    status = Column(String(20), nullable=False)

    __table_args__ = (
        Index("ix_orders_customer_order_date", "customer_id", "order_date"),
        Index("ix_orders_customer_status", "customer_id", "status"),
    )
