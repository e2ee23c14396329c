"""
Data models for CSV Import System.

Immutable dataclasses for representing parse/validation results.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Generic, List, TypeVar

R = TypeVar('R')


@dataclass(frozen=True)
class CSVParseResult:
    """
    Risultato del parsing di un file CSV.

    Attributes:
        rows: Righe dati (header → valore), in ordine di posizione
        errors: Messaggi per le righe malformate
        row_count: Numero di righe dati lette, incluse quelle malformate
    """
    rows: List[Dict[str, str]] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    row_count: int = 0

    @property
    def is_valid(self) -> bool:
        return not self.errors


@dataclass(frozen=True)
class RowError:
    """
    Errore di validazione su una riga CSV.

    Attributes:
        row_index: Indice riga (0-based, esclude header)
        message: Messaggio descrittivo
    """
    row_index: int
    message: str

    def __str__(self) -> str:
        return f"Row {self.row_index}: {self.message}"


@dataclass(frozen=True)
class ValidationResult(Generic[R]):
    """
    Risultato validazione di un batch (tutto-o-niente).

    Attributes:
        records: Record tipizzati, popolati solo se tutte le righe sono valide
        errors: Errori di tutte le righe, in ordine di riga
        total_rows: Numero righe validate
    """
    records: List[R] = field(default_factory=list)
    errors: List[RowError] = field(default_factory=list)
    total_rows: int = 0

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def messages(self) -> List[str]:
        return [str(error) for error in self.errors]
