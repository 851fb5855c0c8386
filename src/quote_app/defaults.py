"""Default configuration snapshots.

These mirror the values shipped with a fresh installation. Callers load the
active versions from their own storage and pass them to the engine; nothing
here is mutated at runtime.
"""

from __future__ import annotations

from typing import Dict, List

from .models.commissions import CommissionTier, FlatCommissionTable, TieredCommissionTable
from .models.costs import CltCosts, CostRatios, LaborCost, OtherCosts, WorkParameters
from .models.taxes import RegimeType, TaxRegime


def build_default_regimes() -> List[TaxRegime]:
    return [
        TaxRegime(
            id="presumido_padrao",
            name="Lucro Presumido",
            type=RegimeType.PRESUMIDO,
            rates={
                "pis": 0.65,
                "cofins": 3.00,
                "irpj": 15.00,
                "csll": 9.00,
                "presuncaoVenda": 8.00,
                "presuncaoServico": 32.00,
                "icms": 18.00,
                "iss": 5.00,
            },
        ),
        TaxRegime(
            id="real_padrao",
            name="Lucro Real",
            type=RegimeType.REAL,
            rates={"pis": 1.65, "cofins": 7.60, "irpj": 15.00, "csll": 9.00, "icms": 18.00, "iss": 5.00},
        ),
        TaxRegime(
            id="simples_padrao",
            name="Simples Nacional",
            type=RegimeType.SIMPLES,
            rates={"anexoI": 8.00, "anexoIII": 11.20},
        ),
        TaxRegime(id="mei_padrao", name="MEI", type=RegimeType.MEI, rates={"taxa": 0.0}),
    ]


def build_default_other_costs() -> OtherCosts:
    return OtherCosts(
        sales_commission=3.00,
        rental_commission=10.00,
        service_commission=5.00,
        service_profit_margin=20.00,
        admin_expenses=2.00,
        other_expenses=1.00,
        monthly_financial_cost=1.17,
        npv_discount_rate=15.0,
        depreciation=0.0,
    )


def build_default_labor_cost() -> LaborCost:
    return LaborCost(
        clt=CltCosts(
            charges={
                "ferias": 8.33,
                "tercoFerias": 2.78,
                "decimoTerceiro": 8.33,
                "inssBase": 20.00,
                "inssSistemaS": 7.80,
                "inssFerias13": 1.52,
                "fgts": 8.00,
                "fgtsFerias13": 1.56,
                "multaFgts": 1.91,
                "outros": 1.00,
            },
            benefits={"valeTransporte": 200.00, "planoSaude": 300.00, "alimentacao": 550.00},
        ),
        general=WorkParameters(working_days=21, hours_per_day=8, base_salary=5000),
    )


def build_default_cost_ratios() -> CostRatios:
    return CostRatios(direct_cost_pct=0.30, operational_cost_pct=0.20, tax_pct=0.10)


def _flat(table_id: str, name: str, rates: List[float]) -> FlatCommissionTable:
    return FlatCommissionTable(id=table_id, name=name, rates=dict(zip((12, 24, 36, 48, 60), rates)))


def _tiered(table_id: str, name: str, rows: List[tuple]) -> TieredCommissionTable:
    tiers = [
        CommissionTier(
            label=label,
            revenue_min=revenue_min,
            revenue_max=revenue_max,
            rates=dict(zip((12, 24, 36, 48, 60), rates)),
        )
        for label, revenue_min, revenue_max, rates in rows
    ]
    return TieredCommissionTable(id=table_id, name=name, tiers=tiers)


def build_default_commission_tables() -> Dict[str, FlatCommissionTable | TieredCommissionTable]:
    channel_seller = _flat("channel_seller", "Canal/Vendedor", [0.60, 1.20, 2.00, 2.00, 2.00])
    channel_director = _flat("channel_director", "Canal/Diretor", [0.0, 0.0, 0.0, 0.0, 0.0])
    seller = _flat("seller", "Vendedor", [1.20, 2.40, 3.60, 3.60, 3.60])
    channel_influencer = _tiered(
        "channel_influencer",
        "Canal Influenciador",
        [
            ("Até 500,00", 0.0, 500.0, [1.50, 2.00, 2.50, 2.50, 2.50]),
            ("500,01 a 1.000,00", 500.01, 1000.0, [2.51, 3.25, 4.00, 4.00, 4.00]),
            ("1.000,01 a 1.500,00", 1000.01, 1500.0, [4.01, 4.50, 5.00, 5.00, 5.00]),
            ("1.500,01 a 3.000,00", 1500.01, 3000.0, [5.01, 5.50, 6.00, 6.00, 6.00]),
            ("3.000,01 a 5.000,00", 3000.01, 5000.0, [6.01, 6.50, 7.00, 7.00, 7.00]),
            ("Acima de 5.000,01", 5000.01, None, [7.01, 7.50, 8.00, 8.00, 8.00]),
        ],
    )
    channel_indicator = _tiered(
        "channel_indicator",
        "Canal Indicador",
        [
            ("Até 500,00", 0.0, 500.0, [0.50, 0.67, 0.83, 0.83, 0.83]),
            ("500,01 a 1.000,00", 500.01, 1000.0, [0.84, 1.08, 1.33, 1.33, 1.33]),
            ("1.000,01 a 1.500,00", 1000.01, 1500.0, [1.34, 1.50, 1.67, 1.67, 1.67]),
            ("1.500,01 a 3.000,00", 1500.01, 3000.0, [1.67, 1.83, 2.00, 2.00, 2.00]),
            ("3.000,01 a 5.000,00", 3000.01, 5000.0, [2.00, 2.17, 2.50, 2.50, 2.50]),
            ("Acima de 5.000,01", 5000.01, None, [2.34, 2.50, 3.00, 3.00, 3.00]),
        ],
    )
    tables = [channel_seller, channel_director, seller, channel_influencer, channel_indicator]
    return {table.id: table for table in tables}
