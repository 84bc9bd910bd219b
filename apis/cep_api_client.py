import asyncio
import aiohttp
from aiohttp import ClientTimeout
from typing import Optional
from pydantic import ValidationError
import logging
from models.normalized.address import Address
from services.cep.adapters.base import CepAdapter
from utils.settings import CEP_REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


class CepAPIClient:
    def __init__(self, adapter: CepAdapter, request_timeout: float = CEP_REQUEST_TIMEOUT):
        self.adapter = adapter
        self.session = None
        self.timeout = ClientTimeout(total=request_timeout)

    @property
    def provider_name(self) -> str:
        return self.adapter.provider_name

    async def start_session(self):
        if self.session is None or self.session.closed:
            self.session = aiohttp.ClientSession(
                timeout=self.timeout,
                headers={"Accept": "application/json"},
            )

    async def close_session(self):
        if self.session and not self.session.closed:
            await self.session.close()

    async def fetch_address_by_cep(self, cep: str) -> Optional[Address]:
        """
        Consulta o CEP no provedor do adaptador.

        Qualquer falha (conexão, JSON inválido, erro informado pelo provedor)
        é registrada no log e resulta em None.
        """
        await self.start_session()
        url = self.adapter.build_url(cep)
        provider = self.provider_name

        try:
            async with self.session.get(url) as response:
                logger.debug(f"{provider} API Response Status: {response.status}")
                data = await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Erro ao buscar CEP usando {provider}: {str(e)}")
            return None
        except ValueError as e:
            logger.error(f"Erro ao ler resposta da {provider}: {str(e)}")
            return None

        try:
            return self.adapter.normalize_response(data)
        except ValidationError as e:
            logger.error(f"Erro ao decodificar resposta da {provider}: {str(e)}")
            return None
