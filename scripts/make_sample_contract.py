#!/usr/bin/env python
from __future__ import annotations

import argparse
import json
from pathlib import Path


def build_payload(work_certified: float, cash_received: float) -> dict:
    return {
        "contractPrice": 25000000,
        "workCertified": work_certified,
        "cashReceived": cash_received,
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


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate a sample contract costing payload")
    parser.add_argument("--output", required=True, help="Output file path (.json)")
    parser.add_argument("--certified", type=float, default=18000000, help="Work certified to date")
    parser.add_argument("--cash", type=float, default=15000000, help="Cash received to date")
    args = parser.parse_args()

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    with output.open("w", encoding="utf-8") as fp:
        json.dump(build_payload(args.certified, args.cash), fp, indent=2)

    print(f"Contract payload written: {output}")


if __name__ == "__main__":
    main()
