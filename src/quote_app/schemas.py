from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, Field, conint

from .models.commissions import CommissionTable
from .models.common import OperationType
from .models.costs import CostRatios
from .models.proposals import ProposalType
from .models.results import PaybackResult
from .models.taxes import TaxBreakdown, TaxRegime


class EffectiveRateRequest(BaseModel):
    operation_type: OperationType
    regime: Optional[TaxRegime] = None
    regime_id: Optional[str] = Field(default=None, description="Default regime to use when no regime is sent")
    revenue: Optional[float] = None


class EffectiveRateResponse(BaseModel):
    regime_id: str
    operation_type: OperationType
    rate: float
    breakdown: List[TaxBreakdown] = Field(default_factory=list)


class CommissionRequest(BaseModel):
    contract_term_months: int
    monthly_revenue: Optional[float] = None
    table: Optional[CommissionTable] = None
    table_id: Optional[str] = Field(default=None, description="Default table to use when no table is sent")


class CommissionResponse(BaseModel):
    table_id: str
    rate: float


class PaybackRequest(BaseModel):
    installation_fee: float
    service_cost: float = 0.0
    monthly_revenue: float
    contract_term_months: int


class PaybackResponse(BaseModel):
    result: PaybackResult
    message: str


class IncomeStatementRequest(BaseModel):
    monthly_revenue: float
    setup_revenue: float = 0.0
    contract_period_months: conint(ge=1)
    cost_ratios: Optional[CostRatios] = None


class ProposalRef(BaseModel):
    base_id: str


class NextProposalIdRequest(BaseModel):
    proposal_type: ProposalType
    existing: List[Union[str, ProposalRef]] = Field(default_factory=list)


class NewVersionRequest(BaseModel):
    current_id: str
    existing: List[Union[str, ProposalRef]] = Field(default_factory=list)


class ProposalIdResponse(BaseModel):
    proposal_id: str


class ParsedProposalIdResponse(BaseModel):
    proposal_type: ProposalType
    prefix: str
    sequence: int
    version: int
