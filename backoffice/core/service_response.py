"""
Envelope uniforme per tutte le risposte dei servizi.
"""
from typing import Generic, Optional, TypeVar

from fastapi import status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar('T')


class CamelModel(BaseModel):
    """Base per gli schemi esposti in JSON con chiavi camelCase"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ServiceResponse(CamelModel, Generic[T]):
    """
    Risultato di un'operazione di servizio.

    Serializzato come ``{success, message, responseObject, statusCode}``.
    """
    success: bool
    message: str
    response_object: Optional[T] = None
    status_code: int = status.HTTP_200_OK

    @classmethod
    def build_success(
        cls,
        message: str,
        response_object: Optional[T] = None,
        status_code: int = status.HTTP_200_OK
    ) -> "ServiceResponse[T]":
        return cls(success=True, message=message, response_object=response_object, status_code=status_code)

    @classmethod
    def build_failure(
        cls,
        message: str,
        response_object: Optional[T] = None,
        status_code: int = status.HTTP_400_BAD_REQUEST
    ) -> "ServiceResponse[T]":
        return cls(success=False, message=message, response_object=response_object, status_code=status_code)

    def to_json_response(self) -> JSONResponse:
        """Converte l'envelope in risposta HTTP con lo status code associato"""
        return JSONResponse(
            status_code=self.status_code,
            content=self.model_dump(mode="json", by_alias=True)
        )
