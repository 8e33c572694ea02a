"""Application service layer running costing simulations."""
from __future__ import annotations

from typing import Any

from costsim.core.contract import calculate_contract
from costsim.core.job import calculate_job
from costsim.core.policy import load_contract_policy
from costsim.core.schema import ContractPayload, ContractPolicy, ContractResult, JobPayload, JobResult
from costsim.core.validation import parse_contract_payload, parse_job_payload


class SimulationService:
    """Coordinates payload parsing and the two costing calculators."""

    PARSERS = {
        "contract": parse_contract_payload,
        "job": parse_job_payload,
    }

    def __init__(self, policy: ContractPolicy) -> None:
        self._policy = policy

    @property
    def policy(self) -> ContractPolicy:
        return self._policy

    def parse(self, mode: str, raw: Any) -> ContractPayload | JobPayload:
        """Validate ``raw`` for ``mode``; unknown modes raise ``KeyError``."""

        return self.PARSERS[mode](raw)

    def calculate(self, payload: ContractPayload | JobPayload) -> ContractResult | JobResult:
        if isinstance(payload, ContractPayload):
            return calculate_contract(payload, payload.policy or self._policy)
        return calculate_job(payload)

    def simulate_contract(self, raw: Any) -> ContractResult:
        return self.calculate(parse_contract_payload(raw))

    def simulate_job(self, raw: Any) -> JobResult:
        return self.calculate(parse_job_payload(raw))


_service: SimulationService | None = None


def get_simulation_service() -> SimulationService:
    global _service
    if _service is None:
        _service = SimulationService(load_contract_policy())
    return _service


def reset_simulation_service() -> None:
    """Utility used in tests to reload the default policy."""

    global _service
    _service = None
