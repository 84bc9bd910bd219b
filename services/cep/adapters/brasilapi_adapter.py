import logging
from typing import Any, Optional
from .base import CepAdapter
from models.normalized.address import Address
from models.brasilapi.models import BrasilApiError, BrasilApiResponse

logger = logging.getLogger(__name__)


class BrasilApiAdapter(CepAdapter):
    base_url = "https://brasilapi.com.br/api/cep/v1/"

    @property
    def provider_name(self) -> str:
        return "BrasilAPI"

    def build_url(self, cep: str) -> str:
        return f"{self.base_url}{cep}"

    def normalize_response(self, raw_response: Any) -> Optional[Address]:
        # O erro vem no corpo, inclusive com status 200
        error = BrasilApiError.model_validate(raw_response)
        if error.is_service_error:
            logger.debug(f"BrasilAPI retornou erro: {error.name} - {error.message}")
            return None

        data = BrasilApiResponse.model_validate(raw_response)

        return Address(
            cep=data.cep,
            street=data.street,
            neighborhood=data.neighborhood,
            city=data.city,
            state=data.state,
        )
