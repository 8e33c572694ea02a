from __future__ import annotations

from pathlib import Path
from typing import IO

import pandas as pd

from costsim.core.schema import ContractResult, JobResult
from costsim.exporters.tables import cost_sheet_frame, summary_frame


def export_cost_sheet_xlsx(target: Path | IO[bytes], result: ContractResult | JobResult) -> Path | IO[bytes]:
    """Write the cost sheet and its stage summary as two worksheets."""

    if isinstance(target, Path):
        target.parent.mkdir(parents=True, exist_ok=True)
    with pd.ExcelWriter(target, engine="openpyxl") as writer:
        cost_sheet_frame(result).to_excel(writer, sheet_name="Cost Sheet", index=False)
        summary_frame(result).to_excel(writer, sheet_name="Summary", index=False)
    return target
