"""
Base Repository implementation seguendo SRP e OCP
"""
import logging
from typing import Any, Dict, Generic, List, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from backoffice.core.exceptions import InfrastructureException
from backoffice.core.interfaces import IBulkRepository

T = TypeVar('T')
S = TypeVar('S', bound=BaseModel)

logger = logging.getLogger(__name__)


class BaseRepository(Generic[T, S], IBulkRepository[T, S]):
    """
    Repository base con implementazioni comuni.

    Le scritture non eseguono commit: il confine transazionale è
    responsabilità della UnitOfWork del chiamante.
    """

    def __init__(self, session: Session, model_class: Type[T]):
        self._session = session
        self._model_class = model_class

    def get_all(self, **filters) -> List[T]:
        """Ottiene tutte le entità con filtri opzionali"""
        try:
            query = self._session.query(self._model_class)
            query = self._apply_filters(query, filters)
            return query.order_by(self._model_class.id).all()
        except SQLAlchemyError as e:
            raise InfrastructureException(f"Database error retrieving {self._model_class.__name__} list: {str(e)}")

    def get_one_by(self, field_name: str, value: Any) -> Optional[T]:
        """Ottiene la prima entità con field_name == value"""
        try:
            return self._session.query(self._model_class).filter(
                getattr(self._model_class, field_name) == value
            ).first()
        except SQLAlchemyError as e:
            raise InfrastructureException(f"Database error retrieving {self._model_class.__name__}: {str(e)}")

    def get_count(self, **filters) -> int:
        """Conta le entità con filtri opzionali"""
        try:
            query = self._session.query(self._model_class)
            query = self._apply_filters(query, filters)
            return query.count()
        except SQLAlchemyError as e:
            raise InfrastructureException(f"Database error counting {self._model_class.__name__}: {str(e)}")

    def bulk_create(self, entities: Sequence[S]) -> int:
        """
        Inserisce tutte le entità con un unico flush.

        Le violazioni di vincoli (IntegrityError) vengono propagate così come
        sono, per permettere al chiamante di classificarle.
        """
        if not entities:
            return 0

        instances = [self._model_class(**entity.model_dump()) for entity in entities]
        try:
            self._session.add_all(instances)
            self._session.flush()
        except IntegrityError:
            raise
        except SQLAlchemyError as e:
            raise InfrastructureException(f"Database error bulk creating {self._model_class.__name__}: {str(e)}")

        logger.debug(f"Inserted batch of {len(instances)} {self._model_class.__name__} entities")
        return len(instances)

    def delete_all(self) -> int:
        """Elimina tutte le entità"""
        try:
            return self._session.query(self._model_class).delete(synchronize_session=False)
        except SQLAlchemyError as e:
            raise InfrastructureException(f"Database error deleting {self._model_class.__name__} entities: {str(e)}")

    def _apply_filters(self, query, filters: Dict[str, Any]):
        """Applica filtri di uguaglianza alla query"""
        for field_name, value in filters.items():
            if value is None:
                continue

            if hasattr(self._model_class, field_name):
                field = getattr(self._model_class, field_name)

                if isinstance(value, (list, tuple, set)):
                    # Filtro IN per liste
                    query = query.filter(field.in_(list(value)))
                else:
                    query = query.filter(field == value)

        return query
