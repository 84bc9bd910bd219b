from typing import Any, Optional
from .base import CepAdapter
from models.normalized.address import Address
from models.viacep.models import ViaCepResponse


class ViaCepAdapter(CepAdapter):
    base_url = "https://viacep.com.br/ws/"

    @property
    def provider_name(self) -> str:
        return "ViaCEP"

    def build_url(self, cep: str) -> str:
        return f"{self.base_url}{cep}/json/"

    def normalize_response(self, raw_response: Any) -> Optional[Address]:
        data = ViaCepResponse.model_validate(raw_response)

        return Address(
            cep=data.cep,
            street=data.logradouro,
            neighborhood=data.bairro,
            city=data.localidade,
            state=data.uf,
        )
