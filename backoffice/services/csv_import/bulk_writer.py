"""
Transactional Bulk Writer.

Scrive un batch validato dentro una UnitOfWork e classifica gli errori di
unicità emersi durante l'inserimento.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from backoffice.core.exceptions import ConflictException, ErrorCode, InfrastructureException
from backoffice.core.interfaces import IBulkRepository, IUnitOfWork

logger = logging.getLogger(__name__)

# Frammenti dei messaggi di unique violation per SQLite, MySQL e PostgreSQL
UNIQUE_VIOLATION_MARKERS = (
    "unique constraint",
    "duplicate entry",
    "duplicate key",
)


@dataclass(frozen=True)
class EntityDescriptor:
    """
    Descrive l'entità scritta, per i messaggi di errore.

    Attributes:
        singular: Nome al singolare (es. 'order')
        plural: Nome al plurale (es. 'orders')
        id_field: Colonna identificativa di business (es. 'order_id')
    """
    singular: str
    plural: str
    id_field: str


class TransactionalBulkWriter:
    """
    Inserimento massivo tutto-o-niente.

    Ogni record viene scritto oppure nessuno: qualunque errore durante
    l'inserimento o il commit annulla l'intera transazione.
    """

    def __init__(self, unit_of_work: IUnitOfWork):
        self._unit_of_work = unit_of_work

    def write(self, repository: IBulkRepository, records: Sequence, entity: EntityDescriptor) -> int:
        """
        Scrive i record in un'unica transazione.

        Args:
            repository: Repository che esegue l'inserimento
            records: Record tipizzati già validati
            entity: Descrittore dell'entità

        Returns:
            Numero di record scritti

        Raises:
            ConflictException: Violazione di unicità (id duplicato o altro dato duplicato)
            InfrastructureException: Qualunque altro errore di persistenza
        """
        try:
            with self._unit_of_work:
                return repository.bulk_create(records)
        except IntegrityError as e:
            raise self.classify_integrity_error(e, entity) from e
        except SQLAlchemyError as e:
            raise InfrastructureException(
                f"Database error importing {entity.plural}: {str(e)}",
                ErrorCode.DATABASE_ERROR,
                {"entity_type": entity.plural}
            ) from e

    @staticmethod
    def classify_integrity_error(error: IntegrityError, entity: EntityDescriptor):
        """Mappa un IntegrityError su ConflictException o InfrastructureException"""
        reason = str(error.orig if error.orig is not None else error)
        lowered = reason.lower()

        if not any(marker in lowered for marker in UNIQUE_VIOLATION_MARKERS):
            return InfrastructureException(
                f"Integrity error importing {entity.plural}: {reason}",
                ErrorCode.DATABASE_ERROR,
                {"entity_type": entity.plural}
            )

        if entity.id_field in lowered:
            return ConflictException(
                f"Duplicate {entity.singular} IDs found. Each {entity.singular} must have a unique "
                f"{entity.id_field}. Please check your CSV file for duplicate entries or remove "
                f"existing data first.",
                ErrorCode.DUPLICATE_ID,
                {"entity_type": entity.plural, "field": entity.id_field}
            )

        return ConflictException(
            f"Duplicate data detected. Please ensure all {entity.singular} IDs and other unique "
            f"fields are unique.",
            ErrorCode.DUPLICATE_DATA,
            {"entity_type": entity.plural}
        )
