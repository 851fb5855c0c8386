from __future__ import annotations

from typing import Dict, Iterable, List

from ..models.common import CANONICAL_PERIODS
from ..models.costs import CostRatios
from ..models.results import FirstMonthInputs, FirstMonthStatement, IncomeStatement


class IncomeStatementBuilder:
    """Simplified DRE waterfall: revenue -> gross profit -> EBITDA -> net profit."""

    def build(
        self,
        monthly_revenue: float,
        setup_revenue: float,
        contract_period_months: int,
        cost_ratios: CostRatios,
    ) -> IncomeStatement:
        total_revenue = monthly_revenue * contract_period_months + setup_revenue
        direct_costs = total_revenue * cost_ratios.direct_cost_pct
        gross_profit = total_revenue - direct_costs
        operational_costs = total_revenue * cost_ratios.operational_cost_pct
        ebitda = gross_profit - operational_costs
        taxes = total_revenue * cost_ratios.tax_pct
        net_profit = ebitda - taxes
        margin = net_profit * 100 / total_revenue if total_revenue > 0 else 0.0
        return IncomeStatement(
            total_revenue=total_revenue,
            direct_costs=direct_costs,
            gross_profit=gross_profit,
            operational_costs=operational_costs,
            ebitda=ebitda,
            taxes=taxes,
            net_profit=net_profit,
            margin=margin,
        )

    def build_for_periods(
        self,
        monthly_revenue: float,
        setup_revenue: float,
        cost_ratios: CostRatios,
        periods: Iterable[int] = CANONICAL_PERIODS,
    ) -> Dict[int, IncomeStatement]:
        return {
            period: self.build(monthly_revenue, setup_revenue, period, cost_ratios)
            for period in periods
        }

    def build_first_month(self, inputs: FirstMonthInputs) -> FirstMonthStatement:
        """First month lines, installation revenue included."""
        first_month_revenue = inputs.monthly_revenue + inputs.installation_revenue
        total_cost = inputs.total_cost()
        balance = first_month_revenue - total_cost
        return FirstMonthStatement(
            monthly_revenue=inputs.monthly_revenue,
            installation_revenue=inputs.installation_revenue,
            first_month_revenue=first_month_revenue,
            service_cost=inputs.service_cost,
            bandwidth_cost=inputs.bandwidth_cost,
            last_mile_cost=inputs.last_mile_cost,
            simples_tax=inputs.simples_tax,
            commissions=inputs.commissions,
            expense_cost=inputs.expense_cost,
            total_cost=total_cost,
            balance=balance,
            net_margin=balance * 100 / first_month_revenue if first_month_revenue > 0 else 0.0,
            markup=balance * 100 / total_cost if total_cost > 0 else 0.0,
        )

    @staticmethod
    def validate_inputs(inputs: FirstMonthInputs) -> List[str]:
        errors: List[str] = []
        if inputs.monthly_revenue < 0:
            errors.append("Receita mensal não pode ser negativa")
        if inputs.installation_revenue < 0:
            errors.append("Receita de instalação não pode ser negativa")
        if inputs.service_cost < 0:
            errors.append("Custo de serviço não pode ser negativo")
        if inputs.contract_period <= 0:
            errors.append("Período contratual deve ser maior que zero")
        return errors
