from __future__ import annotations

from enum import Enum
from typing import Dict

from pydantic import BaseModel, Field

from .common import Snapshot


class RegimeType(str, Enum):
    PRESUMIDO = "presumido"
    REAL = "real"
    SIMPLES = "simples"
    MEI = "mei"


class TaxRegime(Snapshot):
    id: str
    name: str
    type: RegimeType
    rates: Dict[str, float] = Field(default_factory=dict, description="Rate name -> percent (e.g. 0.65 for 0.65%)")


class TaxBreakdown(BaseModel):
    name: str
    rate: float
    amount: float
