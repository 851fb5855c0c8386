from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Tuple

from ..errors import ConfigurationError
from ..models.common import OperationType
from ..models.taxes import RegimeType, TaxBreakdown, TaxRegime

logger = logging.getLogger(__name__)

# (component name, effective percent over revenue)
Components = List[Tuple[str, float]]


def _rate(regime: TaxRegime, key: str) -> float:
    try:
        return float(regime.rates[key])
    except KeyError:
        raise ConfigurationError(f"Regime '{regime.id}' ({regime.type.value}) is missing rate '{key}'") from None


def _presumido(regime: TaxRegime, operation: OperationType) -> Components:
    presumption_key = "presuncaoVenda" if operation.is_goods else "presuncaoServico"
    presumption = _rate(regime, presumption_key) / 100
    return [
        ("pis", _rate(regime, "pis")),
        ("cofins", _rate(regime, "cofins")),
        ("irpj", _rate(regime, "irpj") * presumption),
        ("csll", _rate(regime, "csll") * presumption),
        _consumption_tax(regime, operation),
    ]


def _real(regime: TaxRegime, operation: OperationType) -> Components:
    return [
        ("pis", _rate(regime, "pis")),
        ("cofins", _rate(regime, "cofins")),
        ("irpj", _rate(regime, "irpj")),
        ("csll", _rate(regime, "csll")),
        _consumption_tax(regime, operation),
    ]


def _simples(regime: TaxRegime, operation: OperationType) -> Components:
    key = "anexoI" if operation.is_goods else "anexoIII"
    return [(key, _rate(regime, key))]


def _mei(regime: TaxRegime, operation: OperationType) -> Components:
    return [("taxa", _rate(regime, "taxa"))]


def _consumption_tax(regime: TaxRegime, operation: OperationType) -> Tuple[str, float]:
    key = "icms" if operation.is_goods else "iss"
    return key, _rate(regime, key)


_COMPOSERS: Dict[RegimeType, Callable[[TaxRegime, OperationType], Components]] = {
    RegimeType.PRESUMIDO: _presumido,
    RegimeType.REAL: _real,
    RegimeType.SIMPLES: _simples,
    RegimeType.MEI: _mei,
}


class TaxRegimeCalculator:
    """Effective tax burden of a revenue figure under a fiscal regime."""

    def components(self, regime: TaxRegime, operation_type: OperationType | str) -> Components:
        operation = OperationType(operation_type)
        try:
            composer = _COMPOSERS[RegimeType(regime.type)]
        except (KeyError, ValueError):
            raise ConfigurationError(f"Unknown regime type {regime.type!r} for regime '{regime.id}'") from None
        return composer(regime, operation)

    def compute_effective_rate(self, regime: TaxRegime, operation_type: OperationType | str) -> float:
        """Combined percent applied over revenue, e.g. 23.57 for 23.57%."""
        rate = sum(value for _, value in self.components(regime, operation_type))
        logger.debug("Effective rate for %s/%s: %.4f%%", regime.id, OperationType(operation_type).value, rate)
        return rate

    def breakdown(
        self,
        regime: TaxRegime,
        operation_type: OperationType | str,
        revenue: float,
    ) -> List[TaxBreakdown]:
        return [
            TaxBreakdown(name=name, rate=rate, amount=revenue * rate / 100)
            for name, rate in self.components(regime, operation_type)
        ]

    def tax_amount(self, regime: TaxRegime, operation_type: OperationType | str, revenue: float) -> float:
        return revenue * self.compute_effective_rate(regime, operation_type) / 100

    @staticmethod
    def find_regime(regimes: Iterable[TaxRegime], regime_id: str) -> TaxRegime:
        for regime in regimes:
            if regime.id == regime_id:
                return regime
        raise ConfigurationError(f"Tax regime '{regime_id}' is not configured")
