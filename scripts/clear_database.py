#!/usr/bin/env python3
"""
Script per pulire il database eliminando tutti i clienti e gli ordini.

python -m scripts.clear_database
"""
import logging

from backoffice.core.settings import get_settings
from backoffice.core.unit_of_work import UnitOfWork
from backoffice.database import Database
from backoffice.repository.customer_repository import CustomerRepository
from backoffice.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


def clear_database(database: Database) -> dict:
    """
    Elimina clienti e ordini in un'unica transazione.

    Returns:
        Numero di righe eliminate per tabella
    """
    db = database.session()
    try:
        with UnitOfWork(db):
            deleted_orders = OrderRepository(db).delete_all()
            deleted_customers = CustomerRepository(db).delete_all()
        return {"orders": deleted_orders, "customers": deleted_customers}
    finally:
        db.close()


def main() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper(), format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    database = Database.from_settings(settings)
    try:
        database.create_tables()
        print("🧹 Inizio pulizia database...")
        deleted = clear_database(database)
        for table, count in deleted.items():
            print(f"✅ Pulita tabella {table}: {count} righe")
        print("🎉 Database pulito con successo!")
    except Exception as e:
        logger.error(f"Errore durante la pulizia del database: {e}")
        raise
    finally:
        database.dispose()


if __name__ == "__main__":
    main()
