import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from costsim.application import reset_simulation_service


@pytest.fixture(autouse=True)
def reset_service():
    reset_simulation_service()
    yield
    reset_simulation_service()


@pytest.fixture()
def contract_payload() -> dict:
    return {
        "contractPrice": 25000000,
        "workCertified": 18000000,
        "cashReceived": 15000000,
        "retentionPercent": 10,
        "materialsIncreasePercent": 5,
        "materials": [
            {"name": "Cement", "amount": 5500000},
            {"name": "Steel", "amount": 1500000},
        ],
        "wages": [{"name": "Masons", "amount": 2500000}],
        "expenses": [{"name": "Machinery Hire", "amount": 1000000}],
        "factoryOverheads": [{"name": "Site Power", "amount": 200000}],
        "adminOverheads": [{"name": "Office Staff", "amount": 150000}],
        "sellingOverheads": [{"name": "Marketing", "amount": 50000}],
    }


@pytest.fixture()
def job_payload() -> dict:
    return {
        "modules": [
            {
                "name": "Attendance",
                "materials": [{"name": "License", "amount": 45000}],
                "labour": [{"name": "Dev Team", "amount": 300000}],
                "expenses": [{"name": "Hosting", "amount": 50000}],
                "factoryOverheadPercent": 10,
                "adminOverheadPercent": 5,
                "profitPercent": 20,
            },
            {
                "name": "FeeMgmt",
                "materials": [{"name": "License", "amount": 55000}],
                "labour": [{"name": "Dev Team", "amount": 350000}],
                "expenses": [{"name": "APIs", "amount": 60000}],
                "factoryOverheadPercent": 10,
                "adminOverheadPercent": 5,
                "profitPercent": 20,
            },
        ]
    }
