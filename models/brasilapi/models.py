from pydantic import BaseModel, Field, field_validator

SERVICE_ERROR = "service_error"


class BrasilApiResponse(BaseModel):
    cep: str = Field("", description="CEP retornado pela BrasilAPI")
    state: str = Field("", description="Sigla da UF")
    city: str = ""
    neighborhood: str = ""
    street: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def null_as_empty(cls, value):
        # CEPs gerais de cidade vêm com rua e bairro nulos
        return "" if value is None else value


class BrasilApiError(BaseModel):
    """Payload de erro da BrasilAPI (ex: CEP não encontrado)"""

    name: str = ""
    message: str = ""
    type: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def null_as_empty(cls, value):
        return "" if value is None else value

    @property
    def is_service_error(self) -> bool:
        return self.type == SERVICE_ERROR
