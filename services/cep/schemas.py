from enum import Enum
from pydantic import BaseModel
from models.normalized.address import Address


class RaceStatus(str, Enum):
    RESOLVED = "resolved"
    TIMED_OUT = "timed_out"
    EXHAUSTED = "exhausted"


class RaceResult(BaseModel):
    """Resultado da corrida entre os provedores de CEP"""

    status: RaceStatus
    timeout: float
    provider: str | None = None
    address: Address | None = None
