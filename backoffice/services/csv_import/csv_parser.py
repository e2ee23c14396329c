"""
CSV Parser for Import System.

Turns an uploaded byte buffer into position-ordered rows keyed by header.
Follows Single Responsibility Principle - only parsing logic.
"""
from __future__ import annotations

import csv
import io
from typing import Dict, List, Optional

from .models import CSVParseResult


class CSVParser:
    """
    Parser CSV (delimitatore virgola, prima riga header).

    Stateless parser - tutti i metodi sono statici. Non solleva eccezioni per
    righe malformate: le riporta nella lista ``errors`` del risultato.
    """

    DELIMITER = ','

    @staticmethod
    def parse_csv(file_content: bytes) -> CSVParseResult:
        """
        Parse CSV file.

        Args:
            file_content: Contenuto file CSV in bytes

        Returns:
            CSVParseResult con righe (header → valore) ed errori di parsing.
            Senza header il risultato è vuoto e privo di errori.
        """
        content = CSVParser.decode(file_content)

        rows: List[Dict[str, str]] = []
        errors: List[str] = []

        reader = csv.reader(io.StringIO(content, newline=''), delimiter=CSVParser.DELIMITER, strict=True)

        headers: Optional[List[str]] = None
        row_index = 0
        try:
            for cells in reader:
                # Skip righe vuote
                if not cells or not any(cell.strip() for cell in cells):
                    continue

                if headers is None:
                    headers = [cell.strip() for cell in cells]
                    continue

                if len(cells) != len(headers):
                    errors.append(
                        f"Row {row_index}: expected {len(headers)} columns but found {len(cells)}"
                    )
                else:
                    rows.append({
                        header: value.strip()
                        for header, value in zip(headers, cells)
                    })
                row_index += 1
        except csv.Error as e:
            # Il reader non è recuperabile dopo un errore strutturale
            errors.append(f"Line {reader.line_num}: {str(e)}")

        return CSVParseResult(rows=rows, errors=errors, row_count=row_index)

    @staticmethod
    def decode(file_content: bytes) -> str:
        """Decodifica UTF-8 (con eventuale BOM), fallback Latin-1"""
        try:
            return file_content.decode('utf-8-sig')  # utf-8-sig rimuove BOM
        except UnicodeDecodeError:
            return file_content.decode('latin-1')
