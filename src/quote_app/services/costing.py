from __future__ import annotations

from ..models.common import ContractType
from ..models.costs import LaborCost


def hourly_cost(base_salary: float, contract_type: ContractType | str, labor: LaborCost) -> float:
    """Cost of one hour of work, with CLT payroll charges and benefits when applicable."""
    hours = labor.general.monthly_hours()
    if ContractType(contract_type) is ContractType.CLT:
        charges = base_salary * labor.clt.total_charges_pct() / 100
        monthly_total = base_salary + charges + labor.clt.total_benefits()
        return monthly_total / hours
    return base_salary / hours


def pmt(rate: float, periods: int, present_value: float) -> float:
    """Fixed installment that amortizes ``present_value`` over ``periods`` at ``rate`` per period."""
    if periods <= 0 or rate < 0:
        return 0.0
    if rate == 0:
        return present_value / periods
    factor = (1 + rate) ** periods
    return rate * present_value * factor / (factor - 1)
