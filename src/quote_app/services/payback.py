from __future__ import annotations

import logging
import math
from typing import Tuple

from ..models.results import PaybackResult

logger = logging.getLogger(__name__)

# (minimum contract term, maximum payback months), evaluated top-down
PAYBACK_CEILINGS: Tuple[Tuple[int, int], ...] = (
    (60, 24),
    (48, 20),
    (36, 18),
    (24, 12),
)
SHORT_CONTRACT_PAYBACK = 6


def max_payback_months(contract_term_months: int) -> int:
    for min_term, ceiling in PAYBACK_CEILINGS:
        if contract_term_months >= min_term:
            return ceiling
    return SHORT_CONTRACT_PAYBACK


class PaybackValidator:
    def validate(
        self,
        installation_fee: float,
        service_cost: float,
        monthly_revenue: float,
        contract_term_months: int,
    ) -> PaybackResult:
        max_months = max_payback_months(contract_term_months)
        amounts = (installation_fee, service_cost, monthly_revenue)
        months = (installation_fee + service_cost) / monthly_revenue if monthly_revenue > 0 else math.nan
        if not all(math.isfinite(value) for value in amounts + (months,)):
            # No recurring revenue (or an unusable amount) means the upfront cost is never recovered.
            logger.debug("Payback undefined for fee=%s cost=%s revenue=%s", *amounts)
            return PaybackResult(actual_months=None, max_months=max_months, is_valid=False)

        actual_months = math.ceil(months)
        return PaybackResult(
            actual_months=actual_months,
            max_months=max_months,
            is_valid=actual_months <= max_months,
        )

    @staticmethod
    def format_message(result: PaybackResult, contract_term_months: int) -> str:
        if result.actual_months is None:
            return "Payback indefinido: a receita mensal precisa ser maior que zero."
        if result.is_valid:
            return (
                f"O payback de {result.actual_months} meses está dentro do limite "
                f"de {result.max_months} meses."
            )
        return (
            f"O payback de {result.actual_months} meses excede o limite de "
            f"{result.max_months} meses para contratos de {contract_term_months} meses."
        )
