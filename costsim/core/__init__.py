"""Costing calculation engine."""

from .contract import calculate_contract
from .job import calculate_job, calculate_module
from .line_items import sum_line_items, to_decimal
from .stages import cost_sheet_stages
from .validation import MalformedInputError, parse_contract_payload, parse_job_payload

__all__ = [
    "MalformedInputError",
    "calculate_contract",
    "calculate_job",
    "calculate_module",
    "cost_sheet_stages",
    "parse_contract_payload",
    "parse_job_payload",
    "sum_line_items",
    "to_decimal",
]
