"""
Row Validators for Import System.

Per ogni riga: campi obbligatori, poi validazione Pydantic dello schema del
record (tipi, formato email, valori ammessi, range degli id). Gli errori di
una riga vengono accumulati tutti, senza fermarsi al primo.
Follows Single Responsibility Principle.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Dict, Generic, List, Optional, Sequence, Tuple, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from backoffice.schemas.customer_schema import CustomerSchema
from backoffice.schemas.fields import SQL_INTEGER_MAX, SQL_INTEGER_MIN
from backoffice.schemas.order_schema import OrderSchema

from .models import RowError, ValidationResult

R = TypeVar('R', bound=BaseModel)

INTEGER_ERRORS = {"int_parsing", "int_parsing_size", "int_type", "int_from_float"}
NUMBER_ERRORS = {"float_parsing", "float_type", "finite_number"}
RANGE_ERRORS = {"greater_than_equal", "less_than_equal"}


def describe_error(schema: Type[BaseModel], error: Dict[str, Any]) -> str:
    """Messaggio leggibile per un errore Pydantic su un campo dello schema"""
    field_name = '.'.join(str(loc) for loc in error['loc'])
    error_type = error['type']

    if error_type in INTEGER_ERRORS:
        return f"{field_name} must be a valid integer"
    if error_type in RANGE_ERRORS:
        return f"{field_name} must be an integer between {SQL_INTEGER_MIN} and {SQL_INTEGER_MAX}"
    if error_type in NUMBER_ERRORS:
        return f"{field_name} must be a valid number"
    if error_type.startswith("date"):
        return f"{field_name} must be a valid date (YYYY-MM-DD)"
    if error_type == "string_pattern_mismatch":
        return f"Invalid {field_name} format"
    if error_type == "string_too_long":
        return f"{field_name} must be at most {error['ctx']['max_length']} characters"
    if error_type == "enum":
        choices = schema.model_fields[field_name].annotation
        if isinstance(choices, type) and issubclass(choices, Enum):
            return f"Invalid {field_name}. Must be one of: {', '.join(member.value for member in choices)}"
    return f"{field_name} {error['msg']}"


class RowValidator(Generic[R]):
    """
    Validatore generico di righe CSV, specializzato per entità tramite SCHEMA.

    Validazione completa pre-import per approccio tutto-o-niente: i record
    tipizzati vengono restituiti solo se ogni riga del batch è valida.
    """

    SCHEMA: ClassVar[Type[BaseModel]]

    @property
    def field_names(self) -> List[str]:
        """Colonne obbligatorie, nell'ordine dello schema"""
        return list(self.SCHEMA.model_fields)

    def validate_row(self, row: Dict[str, str]) -> List[str]:
        """
        Valida una riga.

        Args:
            row: Riga CSV (header → valore)

        Returns:
            Lista messaggi d'errore, vuota se la riga è valida
        """
        _, errors = self._check_row(row)
        return errors

    def validate_batch(self, rows: Sequence[Dict[str, str]]) -> ValidationResult[R]:
        """
        Valida batch completo di righe CSV.

        Args:
            rows: Righe CSV in ordine di posizione

        Returns:
            ValidationResult con record tipizzati o con gli errori di tutte le righe
        """
        records: List[R] = []
        errors: List[RowError] = []

        for index, row in enumerate(rows):
            record, row_errors = self._check_row(row)
            if row_errors:
                errors.extend(RowError(index, message) for message in row_errors)
            else:
                records.append(record)

        if errors:
            return ValidationResult(records=[], errors=errors, total_rows=len(rows))
        return ValidationResult(records=records, errors=[], total_rows=len(rows))

    def _check_row(self, row: Dict[str, str]) -> Tuple[Optional[R], List[str]]:
        errors = []
        present = {}

        for name in self.field_names:
            value = row.get(name)
            if value is None or not value.strip():
                errors.append(f"Missing {name}")
            else:
                present[name] = value.strip()

        try:
            record = self.SCHEMA(**present)
        except PydanticValidationError as e:
            # I campi mancanti sono già stati riportati sopra
            errors.extend(
                describe_error(self.SCHEMA, pyd_err)
                for pyd_err in e.errors()
                if pyd_err['type'] != 'missing'
            )
            return None, errors

        return record, errors


class CustomerRowValidator(RowValidator[CustomerSchema]):
    """Schema CSV: customer_id,name,email,country,signup_date"""

    SCHEMA = CustomerSchema


class OrderRowValidator(RowValidator[OrderSchema]):
    """Schema CSV: order_id,customer_id,product_name,amount,order_date,status"""

    SCHEMA = OrderSchema
