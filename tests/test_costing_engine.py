from decimal import Decimal

import pytest

from costsim.core import (
    MalformedInputError,
    calculate_contract,
    calculate_job,
    calculate_module,
    cost_sheet_stages,
    parse_contract_payload,
    parse_job_payload,
    sum_line_items,
    to_decimal,
)
from costsim.core.schema import ContractPolicy, JobModule


def test_sum_line_items_is_lenient():
    assert sum_line_items([]) == 0
    assert sum_line_items(None) == 0
    items = [
        {"name": "Cement", "amount": 100},
        {"name": "Steel", "amount": "250.5"},
        {"name": "Unknown", "amount": "n/a"},
        {"name": "Missing"},
        {"name": "Null", "amount": None},
        {"name": "Flag", "amount": True},
        {"name": "NaN", "amount": float("nan")},
    ]
    assert sum_line_items(items) == Decimal("350.5")


def test_to_decimal_handles_floats_exactly():
    assert to_decimal(0.1) + to_decimal(0.2) == Decimal("0.3")
    assert to_decimal(" 42 ") == 42
    assert to_decimal("") == 0
    assert to_decimal("Infinity") == 0
    assert to_decimal([1]) == 0


def test_contract_scenario(contract_payload):
    result = calculate_contract(parse_contract_payload(contract_payload))
    breakdown = result.breakdown
    metrics = result.contract_metrics

    assert breakdown.direct_materials == 7000000
    assert breakdown.prime_cost == 9500000
    assert breakdown.works_cost == 9700000
    assert breakdown.cost_of_production == 9850000
    assert breakdown.cost_of_sales == 9900000
    assert metrics.material_escalation == 350000
    assert metrics.notional_profit == 8150000
    assert metrics.retention_money == 1800000
    assert metrics.recognised_profit == 4527778


def test_contract_stages_are_layered(contract_payload):
    breakdown = calculate_contract(parse_contract_payload(contract_payload)).breakdown
    assert breakdown.cost_of_sales >= breakdown.cost_of_production
    assert breakdown.cost_of_production >= breakdown.works_cost
    assert breakdown.works_cost >= breakdown.prime_cost
    assert breakdown.works_cost == breakdown.prime_cost + breakdown.factory_overhead_total
    assert breakdown.cost_of_production == breakdown.works_cost + breakdown.admin_overhead_total
    assert breakdown.cost_of_sales == breakdown.cost_of_production + breakdown.selling_overhead_total


def test_notional_profit_never_negative(contract_payload):
    contract_payload["workCertified"] = 1000
    metrics = calculate_contract(parse_contract_payload(contract_payload)).contract_metrics
    assert metrics.notional_profit == 0
    assert metrics.recognised_profit == 0


def test_zero_work_certified_is_defined():
    payload = parse_contract_payload(
        {"materials": [{"name": "Cement", "amount": -500}], "cashReceived": 3}
    )
    metrics = calculate_contract(payload).contract_metrics
    # notional profit is 500; cash ratio falls back to 3 / 1
    assert metrics.notional_profit == 500
    assert metrics.recognised_profit == 1000
    assert metrics.retention_money == 0


def test_empty_contract_payload_is_all_zero():
    result = calculate_contract(parse_contract_payload({}))
    assert result.model_dump(mode="json", by_alias=True) == {
        "breakdown": {
            "directMaterials": 0,
            "directWages": 0,
            "directExpenses": 0,
            "primeCost": 0,
            "factoryOverheadTotal": 0,
            "worksCost": 0,
            "adminOverheadTotal": 0,
            "costOfProduction": 0,
            "sellingOverheadTotal": 0,
            "costOfSales": 0,
        },
        "contractMetrics": {
            "materialEscalation": 0,
            "notionalProfit": 0,
            "retentionMoney": 0,
            "recognisedProfit": 0,
        },
    }


def test_null_lists_and_scalars_default_to_zero(contract_payload):
    contract_payload["wages"] = None
    contract_payload["materialsIncreasePercent"] = None
    contract_payload["retentionPercent"] = "ten"
    result = calculate_contract(parse_contract_payload(contract_payload))
    assert result.breakdown.direct_wages == 0
    assert result.breakdown.prime_cost == 8000000
    assert result.contract_metrics.material_escalation == 0
    assert result.contract_metrics.retention_money == 0


def test_contract_price_basis(contract_payload):
    policy = ContractPolicy(notional_basis="contract_price_less_works_cost")
    metrics = calculate_contract(parse_contract_payload(contract_payload), policy).contract_metrics
    assert metrics.notional_profit == 15300000
    assert metrics.recognised_profit == 8500000


def test_payload_policy_used_when_none_given(contract_payload):
    contract_payload["policy"] = {"notionalBasis": "contract_price_less_works_cost"}
    metrics = calculate_contract(parse_contract_payload(contract_payload)).contract_metrics
    assert metrics.notional_profit == 15300000


@pytest.mark.parametrize(
    ("certified", "price", "cash", "expected"),
    [
        (18000000, 25000000, 15000000, 4527778),  # 72% complete, two thirds
        (10000000, 25000000, 8000000, 40000),  # 40% complete, one third
        (20000000, 100000000, 20000000, 0),  # 20% complete, nothing
        (18000000, 0, 15000000, 0),  # no contract price
    ],
)
def test_completion_stage_recognition(contract_payload, certified, price, cash, expected):
    contract_payload.update(workCertified=certified, contractPrice=price, cashReceived=cash)
    policy = ContractPolicy(recognition_rule="completion_stage")
    metrics = calculate_contract(parse_contract_payload(contract_payload), policy).contract_metrics
    assert metrics.recognised_profit == expected


def test_job_scenario():
    module = JobModule.model_validate(
        {
            "name": "Attendance",
            "materials": [{"name": "License", "amount": 45000}],
            "labour": [{"name": "Dev Team", "amount": 300000}],
            "expenses": [{"name": "Hosting", "amount": 50000}],
            "factoryOverheadPercent": 10,
            "adminOverheadPercent": 5,
            "profitPercent": 20,
        }
    )
    row = calculate_module(module)
    assert row.prime_cost == 395000
    assert row.factory_overhead == 39500
    assert row.works_cost == 434500
    assert row.admin_overhead == 21725
    assert row.cost_of_production == 456225
    assert row.selling_overhead == 0
    assert row.total_cost == 456225
    assert row.profit == 91245
    assert row.selling_price == 547470


def test_job_totals_and_order(job_payload):
    job_payload["modules"].reverse()
    result = calculate_job(parse_job_payload(job_payload))
    assert [row.name for row in result.breakdown] == ["FeeMgmt", "Attendance"]
    assert result.grand_total == sum(row.total_cost for row in result.breakdown)
    assert result.grand_price == sum(row.selling_price for row in result.breakdown)
    assert result.grand_total == 993300
    assert result.grand_price == 1191960


def test_module_without_percentages():
    module = JobModule.model_validate(
        {"name": "Bare", "materials": [{"amount": 10}], "labour": [{"amount": 20}]}
    )
    row = calculate_module(module)
    assert row.prime_cost == 30
    assert row.total_cost == row.prime_cost
    assert row.selling_price == row.prime_cost


def test_zero_percent_matches_absent_percent():
    base = {"materials": [{"amount": 1000}]}
    absent = calculate_module(JobModule.model_validate(base))
    zero = calculate_module(
        JobModule.model_validate(
            {
                **base,
                "factoryOverheadPercent": 0,
                "adminOverheadPercent": None,
                "sellingOverheadPercent": "",
                "profitPercent": 0,
            }
        )
    )
    assert absent == zero


def test_empty_modules():
    for raw in ({}, {"modules": []}, {"modules": None}):
        result = calculate_job(parse_job_payload(raw))
        assert result.breakdown == []
        assert result.grand_total == 0
        assert result.grand_price == 0


@pytest.mark.parametrize(
    "raw",
    [
        [1, 2, 3],
        "payload",
        None,
        {"materials": "cement"},
        {"factoryOverheads": 12},
        {"materials": [5]},
    ],
)
def test_malformed_contract_payload(raw):
    with pytest.raises(MalformedInputError):
        parse_contract_payload(raw)


@pytest.mark.parametrize(
    "raw",
    [
        {"modules": "abc"},
        {"modules": 5},
        {"modules": [{"labour": "team"}]},
        {"modules": ["Attendance"]},
    ],
)
def test_malformed_job_payload(raw):
    with pytest.raises(MalformedInputError):
        parse_job_payload(raw)


def test_malformed_message_names_field():
    with pytest.raises(MalformedInputError) as excinfo:
        parse_contract_payload({"sellingOverheads": "lots"})
    assert "sellingOverheads" in str(excinfo.value)


def test_cost_sheet_stages(contract_payload, job_payload):
    contract = calculate_contract(parse_contract_payload(contract_payload))
    assert [(s.name, s.value) for s in cost_sheet_stages(contract)] == [
        ("Prime Cost", 9500000),
        ("Works Cost", 9700000),
        ("Cost of Production", 9850000),
        ("Total Cost", 9900000),
        ("Profit", 4527778),
    ]

    job = calculate_job(parse_job_payload(job_payload))
    assert [s.value for s in cost_sheet_stages(job)] == [860000, 946000, 993300, 993300, 198660]


def test_large_figures_stay_defined():
    payload = parse_contract_payload({"workCertified": 1e30, "cashReceived": 1e30})
    metrics = calculate_contract(payload).contract_metrics
    assert metrics.notional_profit == Decimal("1e30")
    assert Decimal("6.66e29") < metrics.recognised_profit < Decimal("6.67e29")


def test_out_of_range_amounts_count_as_zero():
    items = [{"amount": "1e1000000"}, {"amount": "-1e-1000000"}, {"amount": 10**200}, {"amount": 5}]
    assert sum_line_items(items) == 5
    result = calculate_contract(parse_contract_payload({"materials": items, "workCertified": "1e1000000"}))
    assert result.breakdown.prime_cost == 5
    assert result.contract_metrics.notional_profit == 0


def test_underscore_digit_groups_are_not_numbers():
    assert to_decimal("1_000") == 0
    assert to_decimal("1000") == 1000
