from backoffice.core.service_response import CamelModel


class ImportResultSchema(CamelModel):
    """
        Esito di un import CSV.

        Attributes:
            success (bool): True se l'intero batch è stato scritto.
            records_imported (int): Numero di record scritti (0 in caso di errore).
            message (str): Messaggio sintetico.
    """
    success: bool
    records_imported: int
    message: str

    @classmethod
    def failed(cls, message: str) -> "ImportResultSchema":
        return cls(success=False, records_imported=0, message=message)
