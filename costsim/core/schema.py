from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, field_validator
from pydantic.alias_generators import to_camel

from costsim.core.line_items import ZERO, to_decimal


def _json_number(value: Decimal) -> int | float:
    if value == value.to_integral_value():
        return int(value)
    return float(value)


Money = Annotated[Decimal, PlainSerializer(_json_number, when_used="json")]

NotionalBasis = Literal[
    "work_certified_less_cost_of_production",
    "contract_price_less_works_cost",
]
RecognitionRule = Literal["two_thirds_cash_ratio", "completion_stage"]


class CostingModel(BaseModel):
    """Base model mapping snake_case fields onto the camelCase wire format."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LineItem(CostingModel):
    name: str = ""
    amount: Money = ZERO

    @field_validator("name", mode="before")
    @classmethod
    def _display_name(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("amount", mode="before")
    @classmethod
    def _lenient_amount(cls, value: Any) -> Decimal:
        return to_decimal(value)


def _empty_when_missing(value: Any) -> Any:
    return [] if value is None else value


class ContractPolicy(CostingModel):
    """How notional profit is measured and how much of it is recognised."""

    notional_basis: NotionalBasis = "work_certified_less_cost_of_production"
    recognition_rule: RecognitionRule = "two_thirds_cash_ratio"


class ContractPayload(CostingModel):
    materials: list[LineItem] = Field(default_factory=list)
    wages: list[LineItem] = Field(default_factory=list)
    expenses: list[LineItem] = Field(default_factory=list)
    factory_overheads: list[LineItem] = Field(default_factory=list)
    admin_overheads: list[LineItem] = Field(default_factory=list)
    selling_overheads: list[LineItem] = Field(default_factory=list)
    contract_price: Money = ZERO
    work_certified: Money = ZERO
    cash_received: Money = ZERO
    retention_percent: Money = ZERO
    materials_increase_percent: Money = ZERO
    policy: ContractPolicy | None = None

    @field_validator(
        "materials",
        "wages",
        "expenses",
        "factory_overheads",
        "admin_overheads",
        "selling_overheads",
        mode="before",
    )
    @classmethod
    def _missing_list(cls, value: Any) -> Any:
        return _empty_when_missing(value)

    @field_validator(
        "contract_price",
        "work_certified",
        "cash_received",
        "retention_percent",
        "materials_increase_percent",
        mode="before",
    )
    @classmethod
    def _lenient_number(cls, value: Any) -> Decimal:
        return to_decimal(value)


class ContractBreakdown(CostingModel):
    direct_materials: Money = ZERO
    direct_wages: Money = ZERO
    direct_expenses: Money = ZERO
    prime_cost: Money = ZERO
    factory_overhead_total: Money = ZERO
    works_cost: Money = ZERO
    admin_overhead_total: Money = ZERO
    cost_of_production: Money = ZERO
    selling_overhead_total: Money = ZERO
    cost_of_sales: Money = ZERO


class ContractMetrics(CostingModel):
    material_escalation: Money = ZERO
    notional_profit: Money = ZERO
    retention_money: Money = ZERO
    recognised_profit: Money = ZERO


class ContractResult(CostingModel):
    breakdown: ContractBreakdown
    contract_metrics: ContractMetrics


class JobModule(CostingModel):
    """One independently priced module of a job.

    Percentages are optional; an absent, ``null`` or non-numeric percentage is
    the same as an explicit ``0`` and produces a zero overhead for that stage.
    """

    name: str = ""
    materials: list[LineItem] = Field(default_factory=list)
    labour: list[LineItem] = Field(default_factory=list)
    expenses: list[LineItem] = Field(default_factory=list)
    factory_overhead_percent: Money = ZERO
    admin_overhead_percent: Money = ZERO
    selling_overhead_percent: Money = ZERO
    profit_percent: Money = ZERO

    @field_validator("name", mode="before")
    @classmethod
    def _display_name(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("materials", "labour", "expenses", mode="before")
    @classmethod
    def _missing_list(cls, value: Any) -> Any:
        return _empty_when_missing(value)

    @field_validator(
        "factory_overhead_percent",
        "admin_overhead_percent",
        "selling_overhead_percent",
        "profit_percent",
        mode="before",
    )
    @classmethod
    def _lenient_percent(cls, value: Any) -> Decimal:
        return to_decimal(value)


class JobPayload(CostingModel):
    modules: list[JobModule] = Field(default_factory=list)

    @field_validator("modules", mode="before")
    @classmethod
    def _missing_list(cls, value: Any) -> Any:
        return _empty_when_missing(value)


class JobModuleBreakdown(CostingModel):
    name: str = ""
    direct_material: Money = ZERO
    direct_labour: Money = ZERO
    direct_expenses: Money = ZERO
    prime_cost: Money = ZERO
    factory_overhead: Money = ZERO
    works_cost: Money = ZERO
    admin_overhead: Money = ZERO
    cost_of_production: Money = ZERO
    selling_overhead: Money = ZERO
    total_cost: Money = ZERO
    profit: Money = ZERO
    selling_price: Money = ZERO


class JobResult(CostingModel):
    breakdown: list[JobModuleBreakdown] = Field(default_factory=list)
    grand_total: Money = ZERO
    grand_price: Money = ZERO


class CostStage(CostingModel):
    name: str
    value: Money = ZERO
