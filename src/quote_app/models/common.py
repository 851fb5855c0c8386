from __future__ import annotations

from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict


CANONICAL_PERIODS: Tuple[int, ...] = (12, 24, 36, 48, 60)


class OperationType(str, Enum):
    VENDA = "venda"
    LOCACAO = "locacao"
    SERVICOS = "servicos"

    @property
    def is_goods(self) -> bool:
        """Sales and rentals are taxed as goods (ICMS), services as ISS."""
        return self is not OperationType.SERVICOS


class ContractType(str, Enum):
    CLT = "clt"
    TERCEIRO = "terceiro"


class Snapshot(BaseModel):
    """Immutable configuration record handed to the engine by its callers."""

    model_config = ConfigDict(frozen=True)
