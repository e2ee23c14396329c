"""
Sistema di gestione errori centralizzato per import CSV e report
"""
from abc import ABC
from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """Codici errore standardizzati"""
    # Caller-fixable errors
    CSV_PARSE_ERROR = "CSV_PARSE_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    DUPLICATE_ID = "DUPLICATE_ID"
    DUPLICATE_DATA = "DUPLICATE_DATA"

    # Not found errors
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"

    # Infrastructure errors
    DATABASE_ERROR = "DATABASE_ERROR"
    TRANSACTION_TIMEOUT = "TRANSACTION_TIMEOUT"


class BaseApplicationException(Exception, ABC):
    """Base exception per l'applicazione"""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 400
    ):
        self.message = message
        self.error_code = error_code.value
        self.details = details or {}
        self.status_code = status_code
        super().__init__(self.message)


class ValidationException(BaseApplicationException):
    """Errori di validazione (righe CSV o parametri di richiesta)"""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, error_code, details, 400)


class ParseException(ValidationException):
    """CSV strutturalmente non valido"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.CSV_PARSE_ERROR, details)


class ConflictException(BaseApplicationException):
    """Violazione di unicità durante l'inserimento massivo"""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.DUPLICATE_DATA,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, error_code, details, 400)


class NotFoundException(BaseApplicationException):
    """Entità non trovata"""

    def __init__(
        self,
        entity_type: str,
        entity_id: Any = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if entity_id is not None:
            message = f"{entity_type} with id '{entity_id}' not found"
        else:
            message = f"{entity_type} not found"

        error_details = details or {}
        if entity_id is not None:
            error_details["entity_id"] = entity_id
        error_details["entity_type"] = entity_type

        super().__init__(
            message,
            ErrorCode.ENTITY_NOT_FOUND,
            error_details,
            404
        )


class InfrastructureException(BaseApplicationException):
    """Errori di infrastruttura"""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.DATABASE_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, error_code, details, 500)
