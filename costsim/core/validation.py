from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from costsim.core.schema import ContractPayload, JobPayload

PayloadT = TypeVar("PayloadT", bound=BaseModel)


class MalformedInputError(ValueError):
    """Raised when a payload does not have the shape of a costing request."""


def _describe(exc: ValidationError) -> str:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())) or "payload"
        problems.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(problems)


def _parse(model: type[PayloadT], raw: Any) -> PayloadT:
    if isinstance(raw, model):
        return raw
    if not isinstance(raw, Mapping):
        raise MalformedInputError("payload must be a JSON object")
    try:
        return model.model_validate(dict(raw))
    except ValidationError as exc:
        raise MalformedInputError(_describe(exc)) from exc


def parse_contract_payload(raw: Any) -> ContractPayload:
    return _parse(ContractPayload, raw)


def parse_job_payload(raw: Any) -> JobPayload:
    return _parse(JobPayload, raw)
