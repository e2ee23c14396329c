from .bulk_writer import EntityDescriptor, TransactionalBulkWriter
from .csv_import_service import CSVImportService
from .csv_parser import CSVParser
from .csv_validator import CustomerRowValidator, OrderRowValidator, RowValidator
from .models import CSVParseResult, RowError, ValidationResult
