"""
Unit of Work su sessione SQLAlchemy: scope transazionale atomico.
"""
import logging
import time
from typing import Optional

from sqlalchemy.orm import Session

from backoffice.core.exceptions import ErrorCode, InfrastructureException
from backoffice.core.interfaces import IUnitOfWork

logger = logging.getLogger(__name__)


class UnitOfWork(IUnitOfWork):
    """
    Scope transazionale tutto-o-niente.

    All'uscita senza errori esegue commit, altrimenti rollback. Se il lavoro
    eseguito nello scope supera ``timeout_seconds`` la transazione viene
    annullata invece di essere confermata. La transazione viene sempre
    rilasciata, qualunque sia l'esito.
    """

    def __init__(self, session: Session, timeout_seconds: Optional[float] = None):
        self._session = session
        self._timeout_seconds = timeout_seconds
        self._started_at: Optional[float] = None

    def __enter__(self):
        if self._started_at is not None:
            raise RuntimeError("UnitOfWork is already active")
        self._started_at = time.monotonic()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type is not None:
                self.rollback()
                return False

            elapsed = self.elapsed
            if self._timeout_seconds is not None and elapsed > self._timeout_seconds:
                self.rollback()
                raise InfrastructureException(
                    f"Transaction exceeded {self._timeout_seconds}s (took {elapsed:.2f}s) and was rolled back",
                    ErrorCode.TRANSACTION_TIMEOUT,
                    {"timeout_seconds": self._timeout_seconds, "elapsed_seconds": round(elapsed, 3)}
                )

            self.commit()
            return False
        finally:
            self._started_at = None

    @property
    def elapsed(self) -> float:
        if self._started_at is None:
            return 0.0
        return time.monotonic() - self._started_at

    def commit(self):
        try:
            self._session.commit()
        except Exception:
            logger.error("Commit failed, rolling back transaction")
            self.rollback()
            raise

    def rollback(self):
        self._session.rollback()
