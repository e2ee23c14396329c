"""
Formatter per errori di validazione Pydantic/FastAPI.

Riduce la lista di errori di una RequestValidationError a un unico messaggio
leggibile, da inserire nell'envelope di risposta.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, Tuple

# Prefissi di location introdotti da FastAPI
_LOCATION_PREFIXES = ('body', 'query', 'path', 'header', 'cookie')


def extract_field_path(loc: Tuple[Any, ...]) -> str:
    """
    Extract field path from Pydantic location tuple.

    Args:
        loc: Location tuple from Pydantic error (e.g., ('query', 'minSpent'))

    Returns:
        Field path as dot-separated string (e.g., 'minSpent')
    """
    if not loc:
        return 'unknown'

    path_parts = [str(part) for part in loc if part not in _LOCATION_PREFIXES]
    if not path_parts:
        return 'unknown'

    return '.'.join(path_parts)


def format_validation_errors(errors: Iterable[Dict[str, Any]]) -> str:
    """
    Formatta gli errori come ``Invalid input: campo: messaggio; ...``.

    Args:
        errors: Output di ``RequestValidationError.errors()``

    Returns:
        Messaggio unico
    """
    parts = [
        f"{extract_field_path(tuple(error.get('loc', ())))}: {error.get('msg', 'invalid value')}"
        for error in errors
    ]
    if not parts:
        return "Invalid input"
    return f"Invalid input: {'; '.join(parts)}"
