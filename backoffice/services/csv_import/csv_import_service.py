"""
CSV Import Service - pipeline di import condivisa da clienti e ordini.

parse → validate → transactional write → ServiceResponse.
"""
from __future__ import annotations

import logging
import time
from typing import Dict, Generic, List, TypeVar

from fastapi import status
from pydantic import BaseModel

from backoffice.core.exceptions import (
    BaseApplicationException,
    ErrorCode,
    ParseException,
    ValidationException,
)
from backoffice.core.interfaces import IBulkRepository, IUnitOfWork
from backoffice.core.service_response import ServiceResponse
from backoffice.schemas.import_schema import ImportResultSchema

from .bulk_writer import EntityDescriptor, TransactionalBulkWriter
from .csv_parser import CSVParser
from .csv_validator import RowValidator

R = TypeVar('R', bound=BaseModel)

logger = logging.getLogger(__name__)


class CSVImportService(Generic[R]):
    """
    Service di orchestrazione import CSV.

    Coordina: parsing, validazione, scrittura transazionale. Parsing e
    validazione non hanno effetti collaterali; solo la scrittura tocca il
    database, e solo se tutte le righe sono valide.
    """

    def __init__(
        self,
        repository: IBulkRepository,
        validator: RowValidator[R],
        unit_of_work: IUnitOfWork,
        entity: EntityDescriptor
    ):
        self._repository = repository
        self._validator = validator
        self._writer = TransactionalBulkWriter(unit_of_work)
        self._entity = entity

    async def import_from_csv(self, file_content: bytes) -> ServiceResponse[ImportResultSchema]:
        """
        Import completo entity da CSV.

        Args:
            file_content: File CSV in bytes

        Returns:
            ServiceResponse con ImportResultSchema: 201 se importato, 400 per errori
            di parsing, validazione o duplicati, 500 per errori interni
        """
        started_at = time.time()
        try:
            imported = self._run_import(file_content)
        except BaseApplicationException as exc:
            return self._failure_response(exc)
        except Exception as exc:
            logger.error(
                f"Unexpected error importing {self._entity.plural}: {type(exc).__name__}: {exc}",
                extra={"operation": f"import_{self._entity.plural}"},
                exc_info=True
            )
            return ServiceResponse.build_failure(
                f"An error occurred while importing {self._entity.plural}",
                ImportResultSchema.failed("Import failed"),
                status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        message = f"Successfully imported {imported} {self._entity.plural}"
        logger.info(f"{message} in {time.time() - started_at:.2f}s")
        return ServiceResponse.build_success(
            message,
            ImportResultSchema(success=True, records_imported=imported, message=message),
            status.HTTP_201_CREATED
        )

    def _run_import(self, file_content: bytes) -> int:
        # Step 1: Parse CSV
        parse_result = CSVParser.parse_csv(file_content)
        if not parse_result.is_valid:
            raise ParseException(
                f"CSV parsing errors: {', '.join(parse_result.errors)}",
                {"errors": parse_result.errors}
            )
        logger.debug(f"Parsed {len(parse_result.rows)} rows from CSV for {self._entity.plural}")

        # Step 2: Validate all (tutto-o-niente) e conversione in record tipizzati
        validation_result = self._validator.validate_batch(parse_result.rows)
        if not validation_result.is_valid:
            raise ValidationException(
                f"Validation errors: {', '.join(validation_result.messages)}",
                ErrorCode.VALIDATION_ERROR,
                {"errors": validation_result.messages}
            )

        if not validation_result.records:
            return 0

        # Step 3: Import
        return self._writer.write(self._repository, validation_result.records, self._entity)

    def _failure_response(self, exc: BaseApplicationException) -> ServiceResponse[ImportResultSchema]:
        summary = self._failure_summaries().get(exc.error_code, "Import failed")

        if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(
                f"Error importing {self._entity.plural}: {exc.message}",
                extra={"operation": f"import_{self._entity.plural}", "error_code": exc.error_code}
            )
            return ServiceResponse.build_failure(
                f"An error occurred while importing {self._entity.plural}",
                ImportResultSchema.failed(summary),
                exc.status_code
            )

        errors: List[str] = exc.details.get("errors", [])
        logger.warning(
            f"Import of {self._entity.plural} rejected: {summary}",
            extra={"operation": f"import_{self._entity.plural}", "error_code": exc.error_code,
                   "errors_count": len(errors)}
        )
        return ServiceResponse.build_failure(exc.message, ImportResultSchema.failed(summary), exc.status_code)

    def _failure_summaries(self) -> Dict[str, str]:
        return {
            ErrorCode.CSV_PARSE_ERROR.value: "CSV parsing failed",
            ErrorCode.VALIDATION_ERROR.value: "Validation failed",
            ErrorCode.DUPLICATE_ID.value: f"Duplicate {self._entity.singular} IDs detected",
            ErrorCode.DUPLICATE_DATA.value: "Duplicate data detected",
        }
