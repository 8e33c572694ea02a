from __future__ import annotations

from pathlib import Path
from typing import IO

from costsim.core.schema import ContractResult, JobResult
from costsim.exporters.tables import cost_sheet_frame


def export_cost_sheet_csv(target: Path | IO[str], result: ContractResult | JobResult) -> Path | IO[str]:
    df = cost_sheet_frame(result)
    if isinstance(target, Path):
        target.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(target, index=False)
    return target
