import logging
from typing import Generator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from backoffice.core.settings import AppSettings

logger = logging.getLogger(__name__)

# Base per controllare il nostro DB
Base = declarative_base()


class Database:
    """
        Contesto di accesso al database.

        Incapsula engine e session factory. Viene costruito dall'host (app factory,
        script o test) e passato esplicitamente a chi ne ha bisogno: nessuno stato
        di connessione globale.

        Args:
            url: URL SQLAlchemy del database.
            echo: Se True logga le query SQL emesse.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        engine_kwargs = {"echo": echo}
        if url.startswith("sqlite"):
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if ":memory:" in url or url.rstrip("/") == "sqlite:":
                # Una sola connessione condivisa, altrimenti ogni sessione vedrebbe un DB vuoto
                engine_kwargs["poolclass"] = StaticPool

        self.engine = create_engine(url, **engine_kwargs)
        self.session_factory = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    @classmethod
    def from_settings(cls, settings: AppSettings) -> "Database":
        return cls(settings.database_url, echo=settings.database_echo)

    def create_tables(self) -> None:
        # Registra i modelli sulla metadata prima della create_all
        import backoffice.models  # noqa: F401
        Base.metadata.create_all(bind=self.engine)

    def drop_tables(self) -> None:
        Base.metadata.drop_all(bind=self.engine)

    def session(self) -> Session:
        return self.session_factory()

    def dispose(self) -> None:
        self.engine.dispose()


def get_db(request: Request) -> Generator[Session, None, None]:
    """
        Generatore di sessione database.

        Crea una sessione dal Database registrato sull'app e la chiude automaticamente
        una volta completate le operazioni. Pensato per essere usato come dipendenza FastAPI.

        Yields:
            Session: Una sessione di SQLAlchemy aperta.
    """
    database: Database = request.app.state.database
    db = database.session()
    try:
        yield db
    finally:
        db.close()
