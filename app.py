import asyncio
import logging
import sys
from services.cep.service import CEPService
from services.cep.schemas import RaceResult, RaceStatus
from utils.settings import CEP_DEFAULT, LOG_LEVEL


logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)


def format_result(result: RaceResult) -> str:
    """Monta o texto exibido ao usuário para o resultado da corrida"""
    if result.status == RaceStatus.RESOLVED:
        return f"CEP fetched using {result.provider}:\n\n{result.address}"
    if result.status == RaceStatus.TIMED_OUT:
        unit = "second" if result.timeout == 1 else "seconds"
        return f"Timeout after {result.timeout:g} {unit}"
    return "No provider returned an address"


async def run(cep: str) -> RaceResult:
    service = CEPService()
    return await service.get_address(cep)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    cep = args[0] if args else CEP_DEFAULT

    logger.debug(f"Consultando CEP {cep}")
    result = asyncio.run(run(cep))
    print(format_result(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
