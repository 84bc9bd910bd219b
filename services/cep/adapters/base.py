from abc import ABC, abstractmethod
from typing import Any, Optional
from models.normalized.address import Address


class CepAdapter(ABC):
    @property
    @abstractmethod
    def provider_name(self) -> str:
        pass

    @abstractmethod
    def build_url(self, cep: str) -> str:
        """Monta a URL de consulta do provedor para o CEP informado"""
        pass

    @abstractmethod
    def normalize_response(self, raw_response: Any) -> Optional[Address]:
        """
        Converte a resposta bruta do provedor para o endereço normalizado.

        Retorna None quando o próprio provedor sinaliza erro no payload.
        Levanta pydantic.ValidationError quando o corpo não tem o formato esperado.
        """
        pass
