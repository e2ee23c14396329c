"""
Fixture principali per i test di E-commerce Back Office API
"""
from typing import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient
from sqlalchemy.orm import Session

from backoffice.core.settings import AppSettings
from backoffice.database import Database
from backoffice.main import create_app
from tests.helpers.fakes import FakeCustomerRepository, FakeOrderRepository, FakeUnitOfWork


# ============================================================================
# Database Test Setup
# ============================================================================

# SQLite in-memory per i test
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture(scope="function")
def test_settings() -> AppSettings:
    """Settings isolate dall'ambiente e dal file .env"""
    return AppSettings(
        _env_file=None,
        environment="test",
        database_url=SQLALCHEMY_TEST_DATABASE_URL,
        cors_origins=["*"],
        log_level="WARNING",
    )


@pytest.fixture(scope="function")
def database(test_settings: AppSettings) -> Generator[Database, None, None]:
    """Database SQLite in memoria con tabelle create, distrutto a fine test"""
    db = Database.from_settings(test_settings)
    db.create_tables()
    try:
        yield db
    finally:
        db.drop_tables()
        db.dispose()


@pytest.fixture(scope="function")
def db_session(database: Database) -> Generator[Session, None, None]:
    """
    Crea una sessione database isolata per ogni test.
    Rollback automatico a fine test.
    """
    session = database.session()
    try:
        yield session
        session.rollback()
    finally:
        session.close()


# ============================================================================
# App e client HTTP
# ============================================================================

@pytest.fixture(scope="function")
def test_app(test_settings: AppSettings, database: Database) -> FastAPI:
    """App costruita sul database di test"""
    return create_app(settings=test_settings, database=database)


@pytest.fixture
def client(test_app: FastAPI) -> TestClient:
    """Client HTTP sincrono"""
    return TestClient(test_app)


@pytest_asyncio.fixture
async def async_client(test_app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Client HTTP asincrono"""
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as ac:
        yield ac


# ============================================================================
# Fake in memoria
# ============================================================================

@pytest.fixture
def fake_customer_repository() -> FakeCustomerRepository:
    return FakeCustomerRepository()


@pytest.fixture
def fake_order_repository() -> FakeOrderRepository:
    return FakeOrderRepository()


@pytest.fixture
def fake_unit_of_work() -> FakeUnitOfWork:
    return FakeUnitOfWork()
