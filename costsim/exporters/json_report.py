from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from pydantic import BaseModel

from costsim.core.schema import ContractResult, JobResult
from costsim.core.stages import cost_sheet_stages


def build_report(mode: str, inputs: BaseModel, result: ContractResult | JobResult) -> dict:
    """Assemble the downloadable report: the inputs, the result and its chart series."""

    return {
        "mode": mode,
        "generatedAt": datetime.now(timezone.utc).isoformat(),
        "inputs": inputs.model_dump(mode="json", by_alias=True, exclude_none=True),
        "result": result.model_dump(mode="json", by_alias=True),
        "stages": [stage.model_dump(mode="json") for stage in cost_sheet_stages(result)],
    }


def export_json_report(path: Path, report: dict) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as fp:
        json.dump(report, fp, indent=2, ensure_ascii=False)
    return path
