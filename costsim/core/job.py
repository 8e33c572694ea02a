"""Per-module cost sheets and project totals for IT job costing."""

from __future__ import annotations

import logging

from costsim.core.line_items import ZERO, percent_of, sum_line_items
from costsim.core.schema import JobModule, JobModuleBreakdown, JobPayload, JobResult

logger = logging.getLogger(__name__)


def calculate_module(module: JobModule) -> JobModuleBreakdown:
    """Cost one module; each percentage applies to the running stage total."""

    direct_material = sum_line_items(module.materials)
    direct_labour = sum_line_items(module.labour)
    direct_expenses = sum_line_items(module.expenses)
    prime_cost = direct_material + direct_labour + direct_expenses

    factory_overhead = percent_of(prime_cost, module.factory_overhead_percent)
    works_cost = prime_cost + factory_overhead

    admin_overhead = percent_of(works_cost, module.admin_overhead_percent)
    cost_of_production = works_cost + admin_overhead

    selling_overhead = percent_of(cost_of_production, module.selling_overhead_percent)
    total_cost = cost_of_production + selling_overhead

    profit = percent_of(total_cost, module.profit_percent)
    selling_price = total_cost + profit

    return JobModuleBreakdown(
        name=module.name,
        direct_material=direct_material,
        direct_labour=direct_labour,
        direct_expenses=direct_expenses,
        prime_cost=prime_cost,
        factory_overhead=factory_overhead,
        works_cost=works_cost,
        admin_overhead=admin_overhead,
        cost_of_production=cost_of_production,
        selling_overhead=selling_overhead,
        total_cost=total_cost,
        profit=profit,
        selling_price=selling_price,
    )


def calculate_job(payload: JobPayload) -> JobResult:
    breakdown = [calculate_module(module) for module in payload.modules]

    grand_total = sum((item.total_cost for item in breakdown), ZERO)
    grand_price = sum((item.selling_price for item in breakdown), ZERO)

    logger.debug(
        "job costed: modules=%d grand_total=%s grand_price=%s",
        len(breakdown),
        grand_total,
        grand_price,
    )
    return JobResult(breakdown=breakdown, grand_total=grand_total, grand_price=grand_price)
