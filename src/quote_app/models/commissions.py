from __future__ import annotations

from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import Field, confloat, model_validator

from .common import Snapshot


class FlatCommissionTable(Snapshot):
    kind: Literal["flat"] = "flat"
    id: str
    name: str
    rates: Dict[int, float] = Field(..., description="Contract period (months) -> commission percent")


class CommissionTier(Snapshot):
    revenue_min: confloat(ge=0) = 0.0
    revenue_max: Optional[float] = Field(default=None, description="Inclusive upper bound; None means open-ended")
    rates: Dict[int, float]
    label: Optional[str] = None

    @model_validator(mode="after")
    def _check_bounds(self) -> "CommissionTier":
        if self.revenue_max is not None and self.revenue_max < self.revenue_min:
            raise ValueError(f"revenue_max {self.revenue_max} is below revenue_min {self.revenue_min}")
        return self

    def covers(self, monthly_revenue: float) -> bool:
        return self.revenue_max is None or monthly_revenue <= self.revenue_max


class TieredCommissionTable(Snapshot):
    kind: Literal["tiered"] = "tiered"
    id: str
    name: str
    tiers: List[CommissionTier] = Field(..., min_length=1)

    def ordered_tiers(self) -> List[CommissionTier]:
        return sorted(self.tiers, key=lambda tier: tier.revenue_min)


CommissionTable = Annotated[
    Union[FlatCommissionTable, TieredCommissionTable],
    Field(discriminator="kind"),
]
