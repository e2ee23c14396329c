"""
Interfacce base per il sistema seguendo ISP (Interface Segregation Principle)
"""
from abc import ABC, abstractmethod
from typing import Generic, List, Sequence, TypeVar

T = TypeVar('T')
S = TypeVar('S')


class IBulkRepository(Generic[T, S], ABC):
    """
    Interface minima per repository alimentati da import massivo.

    T è il modello persistito, S lo schema tipizzato in ingresso.
    """

    @abstractmethod
    def get_all(self, **filters) -> List[T]:
        """Ottiene tutte le entità con filtri opzionali"""
        pass

    @abstractmethod
    def bulk_create(self, entities: Sequence[S]) -> int:
        """Inserisce tutte le entità nella transazione corrente"""
        pass

    @abstractmethod
    def delete_all(self) -> int:
        """Elimina tutte le entità nella transazione corrente"""
        pass


class IUnitOfWork(ABC):
    """Interface per Unit of Work pattern"""

    @abstractmethod
    def commit(self):
        """Commit della transazione"""
        pass

    @abstractmethod
    def rollback(self):
        """Rollback della transazione"""
        pass

    @abstractmethod
    def __enter__(self):
        pass

    @abstractmethod
    def __exit__(self, exc_type, exc_val, exc_tb):
        pass
