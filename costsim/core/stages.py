"""Chart series summarising a cost sheet stage by stage."""

from __future__ import annotations

from decimal import Decimal

from costsim.core.line_items import ZERO
from costsim.core.schema import ContractResult, CostStage, JobResult

STAGE_NAMES = ["Prime Cost", "Works Cost", "Cost of Production", "Total Cost", "Profit"]


def _contract_values(result: ContractResult) -> list[Decimal]:
    breakdown = result.breakdown
    return [
        breakdown.prime_cost,
        breakdown.works_cost,
        breakdown.cost_of_production,
        breakdown.cost_of_sales,
        result.contract_metrics.recognised_profit,
    ]


def _job_values(result: JobResult) -> list[Decimal]:
    modules = result.breakdown
    return [
        sum((item.prime_cost for item in modules), ZERO),
        sum((item.works_cost for item in modules), ZERO),
        sum((item.cost_of_production for item in modules), ZERO),
        result.grand_total,
        result.grand_price - result.grand_total,
    ]


def cost_sheet_stages(result: ContractResult | JobResult) -> list[CostStage]:
    if isinstance(result, ContractResult):
        values = _contract_values(result)
    else:
        values = _job_values(result)
    return [CostStage(name=name, value=value) for name, value in zip(STAGE_NAMES, values)]
