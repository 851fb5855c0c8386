from __future__ import annotations

import logging
import math
from typing import Optional

from ..errors import CommissionLookupError
from ..models.commissions import (
    CommissionTable,
    CommissionTier,
    FlatCommissionTable,
    TieredCommissionTable,
)
from ..models.common import CANONICAL_PERIODS

logger = logging.getLogger(__name__)


def select_period(contract_term_months: int) -> int:
    """Smallest canonical period that is >= the term; terms above 60 use 60."""
    if contract_term_months < 1:
        raise CommissionLookupError(f"Contract term must be positive, got {contract_term_months}")
    for period in CANONICAL_PERIODS:
        if contract_term_months <= period:
            return period
    return CANONICAL_PERIODS[-1]


class CommissionResolver:
    def resolve(
        self,
        table: CommissionTable,
        contract_term_months: int,
        monthly_revenue: Optional[float] = None,
    ) -> float:
        """Commission percent for a contract term (and monthly revenue, for tiered tables)."""
        period = select_period(contract_term_months)
        if isinstance(table, FlatCommissionTable):
            rates = table.rates
        elif isinstance(table, TieredCommissionTable):
            rates = self._select_tier(table, monthly_revenue).rates
        else:
            raise CommissionLookupError(f"Unsupported commission table {type(table).__name__}")

        if period not in rates:
            raise CommissionLookupError(f"Table '{table.id}' has no rate for {period} months")
        rate = rates[period]
        logger.debug(
            "Commission %s: term=%s period=%s revenue=%s -> %s%%",
            table.id,
            contract_term_months,
            period,
            monthly_revenue,
            rate,
        )
        return rate

    def commission_value(
        self,
        table: CommissionTable,
        contract_term_months: int,
        monthly_revenue: float,
    ) -> float:
        return monthly_revenue * self.resolve(table, contract_term_months, monthly_revenue) / 100

    @staticmethod
    def _select_tier(table: TieredCommissionTable, monthly_revenue: Optional[float]) -> CommissionTier:
        if monthly_revenue is None or not math.isfinite(monthly_revenue):
            raise CommissionLookupError(f"Table '{table.id}' needs a finite monthly revenue, got {monthly_revenue}")
        tiers = table.ordered_tiers()
        if monthly_revenue < tiers[0].revenue_min:
            raise CommissionLookupError(
                f"Monthly revenue {monthly_revenue} is below the first tier of table '{table.id}'"
            )
        # Upper bounds are inclusive: a boundary value stays in the lower tier.
        for tier in tiers:
            if tier.covers(monthly_revenue):
                return tier
        return tiers[-1]
