"""Cost sheet exporters."""

from .cost_sheet_csv import export_cost_sheet_csv
from .cost_sheet_xlsx import export_cost_sheet_xlsx
from .json_report import build_report, export_json_report

__all__ = [
    "build_report",
    "export_cost_sheet_csv",
    "export_cost_sheet_xlsx",
    "export_json_report",
]
