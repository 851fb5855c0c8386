from __future__ import annotations

from typing import Dict

from pydantic import Field, confloat, conint

from .common import Snapshot


class OtherCosts(Snapshot):
    """Flat percentages applied on top of item costs."""

    sales_commission: float = 0.0
    rental_commission: float = 0.0
    service_commission: float = 0.0
    service_profit_margin: float = 0.0
    admin_expenses: float = 0.0
    other_expenses: float = 0.0
    monthly_financial_cost: float = 0.0
    npv_discount_rate: float = 0.0
    depreciation: float = 0.0


class CltCosts(Snapshot):
    charges: Dict[str, float] = Field(default_factory=dict, description="Payroll burden, name -> percent of salary")
    benefits: Dict[str, float] = Field(default_factory=dict, description="Monthly flat amounts per employee")

    def total_charges_pct(self) -> float:
        return sum(self.charges.values())

    def total_benefits(self) -> float:
        return sum(self.benefits.values())


class WorkParameters(Snapshot):
    working_days: conint(ge=0) = 21
    hours_per_day: confloat(ge=0) = 8
    base_salary: confloat(ge=0) = 0.0

    def monthly_hours(self) -> float:
        return (self.working_days or 1) * (self.hours_per_day or 1)


class LaborCost(Snapshot):
    clt: CltCosts = Field(default_factory=CltCosts)
    general: WorkParameters = Field(default_factory=WorkParameters)


class CostRatios(Snapshot):
    """Shares of total revenue consumed by each DRE cost line, as fractions."""

    direct_cost_pct: confloat(ge=0)
    operational_cost_pct: confloat(ge=0)
    tax_pct: confloat(ge=0)
