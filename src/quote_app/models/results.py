from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class PaybackResult(BaseModel):
    actual_months: Optional[int] = Field(..., description="None when monthly revenue cannot recover the cost")
    max_months: int
    is_valid: bool


class IncomeStatement(BaseModel):
    total_revenue: float
    direct_costs: float
    gross_profit: float
    operational_costs: float
    ebitda: float
    taxes: float
    net_profit: float
    margin: float


class FirstMonthInputs(BaseModel):
    monthly_revenue: float
    installation_revenue: float = 0.0
    service_cost: float = 0.0
    bandwidth_cost: float = 0.0
    last_mile_cost: float = 0.0
    simples_tax: float = 0.0
    commissions: float = 0.0
    expense_cost: float = 0.0
    contract_period: int = 12

    def total_cost(self) -> float:
        return (
            self.service_cost
            + self.bandwidth_cost
            + self.last_mile_cost
            + self.simples_tax
            + self.commissions
            + self.expense_cost
        )


class FirstMonthStatement(BaseModel):
    monthly_revenue: float
    installation_revenue: float
    first_month_revenue: float
    service_cost: float
    bandwidth_cost: float
    last_mile_cost: float
    simples_tax: float
    commissions: float
    expense_cost: float
    total_cost: float
    balance: float
    net_margin: float
    markup: float
