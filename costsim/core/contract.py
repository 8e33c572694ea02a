"""Cost sheet and profit metrics for long-duration construction contracts."""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from fractions import Fraction

from costsim.core.line_items import ONE, ZERO, percent_of, sum_line_items
from costsim.core.schema import (
    ContractBreakdown,
    ContractMetrics,
    ContractPayload,
    ContractPolicy,
    ContractResult,
)

logger = logging.getLogger(__name__)

TWO_THIRDS = Fraction(2, 3)
ONE_THIRD = Fraction(1, 3)

# (minimum completion, recognised share) checked from the top down
COMPLETION_STAGES: list[tuple[Decimal, Fraction]] = [
    (Decimal("0.50"), TWO_THIRDS),
    (Decimal("0.25"), ONE_THIRD),
]


def _round_whole(value: Decimal) -> Decimal:
    return value.to_integral_value(rounding=ROUND_HALF_UP)


def build_breakdown(payload: ContractPayload) -> ContractBreakdown:
    direct_materials = sum_line_items(payload.materials)
    direct_wages = sum_line_items(payload.wages)
    direct_expenses = sum_line_items(payload.expenses)
    prime_cost = direct_materials + direct_wages + direct_expenses

    factory_overhead_total = sum_line_items(payload.factory_overheads)
    works_cost = prime_cost + factory_overhead_total

    admin_overhead_total = sum_line_items(payload.admin_overheads)
    cost_of_production = works_cost + admin_overhead_total

    selling_overhead_total = sum_line_items(payload.selling_overheads)
    cost_of_sales = cost_of_production + selling_overhead_total

    return ContractBreakdown(
        direct_materials=direct_materials,
        direct_wages=direct_wages,
        direct_expenses=direct_expenses,
        prime_cost=prime_cost,
        factory_overhead_total=factory_overhead_total,
        works_cost=works_cost,
        admin_overhead_total=admin_overhead_total,
        cost_of_production=cost_of_production,
        selling_overhead_total=selling_overhead_total,
        cost_of_sales=cost_of_sales,
    )


def notional_profit(
    payload: ContractPayload, breakdown: ContractBreakdown, policy: ContractPolicy
) -> Decimal:
    """Profit on work done to date, never reported as a loss."""

    if policy.notional_basis == "contract_price_less_works_cost":
        profit = payload.contract_price - breakdown.works_cost
    else:
        profit = payload.work_certified - breakdown.cost_of_production
    return max(ZERO, profit)


def recognition_share(payload: ContractPayload, policy: ContractPolicy) -> Fraction:
    if policy.recognition_rule != "completion_stage":
        return TWO_THIRDS

    if not payload.contract_price:
        return Fraction(0)
    completion = payload.work_certified / payload.contract_price
    for minimum, share in COMPLETION_STAGES:
        if completion >= minimum:
            return share
    return Fraction(0)


def recognised_profit(
    payload: ContractPayload, notional: Decimal, policy: ContractPolicy
) -> Decimal:
    """Scale notional profit by the recognised share and the cash ratio.

    A zero work-certified value divides by one instead, which keeps the
    result defined for contracts with nothing certified yet.
    """

    share = recognition_share(payload, policy)
    certified = payload.work_certified or ONE
    numerator = notional * share.numerator * payload.cash_received
    denominator = certified * share.denominator
    return _round_whole(numerator / denominator)


def calculate_contract(
    payload: ContractPayload, policy: ContractPolicy | None = None
) -> ContractResult:
    if policy is None:
        policy = payload.policy or ContractPolicy()

    breakdown = build_breakdown(payload)

    material_escalation = percent_of(
        breakdown.direct_materials, payload.materials_increase_percent
    )
    notional = notional_profit(payload, breakdown, policy)
    retention_money = percent_of(payload.work_certified, payload.retention_percent)
    recognised = recognised_profit(payload, notional, policy)

    logger.debug(
        "contract costed: cost_of_sales=%s notional=%s recognised=%s basis=%s rule=%s",
        breakdown.cost_of_sales,
        notional,
        recognised,
        policy.notional_basis,
        policy.recognition_rule,
    )

    return ContractResult(
        breakdown=breakdown,
        contract_metrics=ContractMetrics(
            material_escalation=material_escalation,
            notional_profit=notional,
            retention_money=retention_money,
            recognised_profit=recognised,
        ),
    )
