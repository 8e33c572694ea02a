from __future__ import annotations

import os
from pathlib import Path

import yaml

from costsim.core.schema import ContractPolicy

CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"


def _policy_path() -> Path:
    env_path = os.getenv("COSTSIM_POLICY_FILE")
    if env_path:
        return Path(env_path).expanduser().resolve()
    return CONFIG_DIR / "contract_policy.yaml"


def load_contract_policy(path: Path | None = None) -> ContractPolicy:
    """Read the server default profit policy; a missing file means built-in defaults."""

    path = path or _policy_path()
    if not path.exists():
        return ContractPolicy()
    with path.open("r", encoding="utf-8") as fp:
        data = yaml.safe_load(fp) or {}
    return ContractPolicy.model_validate(data)
