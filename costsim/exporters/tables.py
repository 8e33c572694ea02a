from __future__ import annotations

import pandas as pd

from costsim.core.schema import ContractResult, JobModuleBreakdown, JobResult
from costsim.core.stages import cost_sheet_stages

CONTRACT_ROWS = [
    ("breakdown", "directMaterials", "Direct Materials"),
    ("breakdown", "directWages", "Direct Wages"),
    ("breakdown", "directExpenses", "Direct Expenses"),
    ("breakdown", "primeCost", "Prime Cost"),
    ("breakdown", "factoryOverheadTotal", "Factory Overheads"),
    ("breakdown", "worksCost", "Works Cost"),
    ("breakdown", "adminOverheadTotal", "Administration Overheads"),
    ("breakdown", "costOfProduction", "Cost of Production"),
    ("breakdown", "sellingOverheadTotal", "Selling & Distribution Overheads"),
    ("breakdown", "costOfSales", "Cost of Sales"),
    ("contractMetrics", "materialEscalation", "Material Escalation"),
    ("contractMetrics", "notionalProfit", "Notional Profit"),
    ("contractMetrics", "retentionMoney", "Retention Money"),
    ("contractMetrics", "recognisedProfit", "Recognised Profit"),
]

JOB_COLUMNS = [field.alias or name for name, field in JobModuleBreakdown.model_fields.items()]


def cost_sheet_frame(result: ContractResult | JobResult) -> pd.DataFrame:
    """Tabulate a result: one row per cost sheet line, or one row per job module."""

    data = result.model_dump(mode="json", by_alias=True)
    if isinstance(result, ContractResult):
        records = [
            {"section": section, "item": label, "amount": data[section][key]}
            for section, key, label in CONTRACT_ROWS
        ]
        return pd.DataFrame(records, columns=["section", "item", "amount"])
    return pd.DataFrame(data["breakdown"], columns=JOB_COLUMNS)


def summary_frame(result: ContractResult | JobResult) -> pd.DataFrame:
    records = [stage.model_dump(mode="json") for stage in cost_sheet_stages(result)]
    if isinstance(result, JobResult):
        data = result.model_dump(mode="json")
        records.append({"name": "Grand Total", "value": data["grand_total"]})
        records.append({"name": "Grand Price", "value": data["grand_price"]})
    return pd.DataFrame(records, columns=["name", "value"])
