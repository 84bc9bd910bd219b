import asyncio
import logging
import random
from typing import Dict, List, Optional, Sequence
from apis import CepAPIClient
from models.normalized.address import Address
from .adapters.brasilapi_adapter import BrasilApiAdapter
from .adapters.viacep_adapter import ViaCepAdapter
from .schemas import RaceResult, RaceStatus
from utils.settings import CEP_RACE_TIMEOUT

logger = logging.getLogger(__name__)


class CEPService:
    def __init__(self, clients: Optional[Sequence[CepAPIClient]] = None):
        if clients is None:
            clients = [
                CepAPIClient(BrasilApiAdapter()),
                CepAPIClient(ViaCepAdapter()),
            ]
        self.clients: List[CepAPIClient] = list(clients)

    async def get_address(self, cep: str, timeout: float | None = None) -> RaceResult:
        """
        Consulta o CEP em todos os provedores ao mesmo tempo e retorna o
        primeiro endereço obtido.

        Args:
            cep: CEP a consultar, sem validação de formato
            timeout: Prazo total em segundos (padrão: CEP_RACE_TIMEOUT)

        Returns:
            RaceResult com status resolved, timed_out ou exhausted
        """
        if timeout is None:
            timeout = CEP_RACE_TIMEOUT

        loop = asyncio.get_running_loop()
        deadline = loop.time() + timeout

        tasks: Dict[asyncio.Task, str] = {
            asyncio.create_task(client.fetch_address_by_cep(cep)): client.provider_name
            for client in self.clients
        }
        pending = set(tasks)

        try:
            while pending:
                remaining = deadline - loop.time()
                if remaining <= 0:
                    break

                done, pending = await asyncio.wait(
                    pending, timeout=remaining, return_when=asyncio.FIRST_COMPLETED
                )

                found = []
                for task in done:
                    address = self._task_address(task, tasks[task])
                    if address is not None:
                        found.append((tasks[task], address))

                if found:
                    # Sem prioridade entre provedores que terminaram juntos
                    provider, address = random.choice(found)
                    logger.info(f"CEP {cep} obtido usando {provider}")
                    return RaceResult(
                        status=RaceStatus.RESOLVED,
                        timeout=timeout,
                        provider=provider,
                        address=address,
                    )

            if not pending:
                logger.warning(f"Nenhum provedor retornou endereço para o CEP {cep}")
                return RaceResult(status=RaceStatus.EXHAUSTED, timeout=timeout)

            logger.warning(f"Timeout de {timeout}s ao consultar o CEP {cep}")
            return RaceResult(status=RaceStatus.TIMED_OUT, timeout=timeout)
        finally:
            await self._cancel_tasks(tasks)
            await self.close_sessions()

    @staticmethod
    def _task_address(task: asyncio.Task, provider: str) -> Optional[Address]:
        if task.cancelled():
            return None
        exc = task.exception()
        if exc is not None:
            logger.error(f"Erro inesperado na consulta usando {provider}: {str(exc)}")
            return None
        return task.result()

    @staticmethod
    async def _cancel_tasks(tasks: Dict[asyncio.Task, str]):
        for task, provider in tasks.items():
            if not task.done():
                logger.debug(f"Cancelando consulta pendente usando {provider}")
                task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

    async def close_sessions(self):
        await asyncio.gather(*(client.close_session() for client in self.clients))
