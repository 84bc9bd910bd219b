from pydantic import BaseModel, ConfigDict


class Address(BaseModel):
    """Endereço normalizado, independente do provedor consultado"""

    model_config = ConfigDict(frozen=True)

    cep: str = ""
    street: str = ""
    neighborhood: str = ""
    city: str = ""
    state: str = ""

    def __str__(self) -> str:
        return (
            f"CEP: {self.cep}\n"
            f"Rua: {self.street}\n"
            f"Bairro: {self.neighborhood}\n"
            f"Cidade: {self.city}\n"
            f"Estado: {self.state}\n"
        )
