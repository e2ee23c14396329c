#!/usr/bin/env python3
"""
Import di clienti o ordini da CSV da riga di comando, con la stessa pipeline
degli endpoint di upload.

python -m scripts.import_csv customers data/customers.csv
python -m scripts.import_csv orders data/orders.csv
"""
import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from backoffice.core.settings import get_settings
from backoffice.core.unit_of_work import UnitOfWork
from backoffice.database import Database
from backoffice.repository.customer_repository import CustomerRepository
from backoffice.repository.order_repository import OrderRepository
from backoffice.services.routers.customer_service import CustomerService
from backoffice.services.routers.order_service import OrderService

ENTITIES = ("customers", "orders")


def build_service(entity: str, db, timeout_seconds: float):
    unit_of_work = UnitOfWork(db, timeout_seconds)
    if entity == "customers":
        return CustomerService(CustomerRepository(db), unit_of_work)
    return OrderService(OrderRepository(db), unit_of_work)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Importa clienti o ordini da un file CSV")
    parser.add_argument("entity", choices=ENTITIES, help="Tipo di record contenuti nel file")
    parser.add_argument("path", type=Path, help="Percorso del file CSV")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper(), format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    if not args.path.is_file():
        print(f"File non trovato: {args.path}", file=sys.stderr)
        return 2

    database = Database.from_settings(settings)
    database.create_tables()
    db = database.session()
    try:
        service = build_service(args.entity, db, settings.import_transaction_timeout_seconds)
        result = asyncio.run(service.import_from_csv(args.path.read_bytes()))
    finally:
        db.close()
        database.dispose()

    print(json.dumps(result.model_dump(mode="json", by_alias=True), indent=2))
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
