"""
Tipi di campo condivisi dagli schemi dei record CSV.
"""
import re
from datetime import date
from typing import Annotated

from pydantic import BeforeValidator, Field
from pydantic_core import PydanticCustomError


# Range della colonna Integer (32 bit con segno su MySQL)
SQL_INTEGER_MIN = -2**31
SQL_INTEGER_MAX = 2**31 - 1

EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"
_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")


def require_iso_date(value):
    """Accetta solo stringhe YYYY-MM-DD; date già costruite passano invariate"""
    if isinstance(value, str) and not _ISO_DATE.fullmatch(value):
        raise PydanticCustomError("date_format", "Date should be in YYYY-MM-DD format")
    return value


RecordId = Annotated[int, Field(ge=SQL_INTEGER_MIN, le=SQL_INTEGER_MAX)]
IsoDate = Annotated[date, BeforeValidator(require_iso_date)]
