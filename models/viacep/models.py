from pydantic import BaseModel, field_validator


class ViaCepResponse(BaseModel):
    cep: str = ""
    logradouro: str = ""
    complemento: str = ""
    bairro: str = ""
    localidade: str = ""
    uf: str = ""
    ibge: str = ""
    gia: str = ""
    ddd: str = ""
    siafi: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def null_as_empty(cls, value):
        return "" if value is None else value
