#!/usr/bin/env python
from __future__ import annotations

import argparse
import json
from pathlib import Path


MODULES = [
    ("Attendance", 45000, 300000, 50000),
    ("FeeMgmt", 55000, 350000, 60000),
]


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate a sample job costing payload")
    parser.add_argument("--output", required=True, help="Output file path (.json)")
    parser.add_argument("--factory", type=float, default=10, help="Factory overhead percent")
    parser.add_argument("--admin", type=float, default=5, help="Admin overhead percent")
    parser.add_argument("--profit", type=float, default=20, help="Profit percent")
    args = parser.parse_args()

    modules = []
    for name, licence, team, hosting in MODULES:
        modules.append(
            {
                "name": name,
                "materials": [{"name": "License", "amount": licence}],
                "labour": [{"name": "Dev Team", "amount": team}],
                "expenses": [{"name": "Hosting", "amount": hosting}],
                "factoryOverheadPercent": args.factory,
                "adminOverheadPercent": args.admin,
                "profitPercent": args.profit,
            }
        )

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    with output.open("w", encoding="utf-8") as fp:
        json.dump({"modules": modules}, fp, indent=2)

    print(f"Job payload written: {output}")


if __name__ == "__main__":
    main()
