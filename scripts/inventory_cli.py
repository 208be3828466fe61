#!/usr/bin/env python3
"""Drive a car inventory server from the terminal.

Usage
-----
Point the client at a server and run one command::

    export CARINV_BASE_URL="http://192.168.1.100:3000"
    python scripts/inventory_cli.py list
    python scripts/inventory_cli.py add --make Honda --model Civic --year 2022 --price 25000
    python scripts/inventory_cli.py delete 7
    python scripts/inventory_cli.py delete-all --yes

Options::

    --base-url URL      Override CARINV_BASE_URL
    --json              Print the final record set as JSON
    --verbose, -v       Enable debug logging
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from carinventory import CarDraft, CarInventoryClient, CarValidationError, InventoryConfig  # noqa: E402
from carinventory.state import InventoryState  # noqa: E402


def _print_state(state: InventoryState, *, json_mode: bool) -> None:
    if json_mode:
        payload: dict[str, Any] = {
            "cars": [car.to_payload() for car in state.cars],
            "error": state.error_message,
        }
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    if state.error_message:
        print(f"Error: {state.error_message}", file=sys.stderr)
        return
    if not state.cars:
        print("No cars in inventory. Add one!")
        return
    for car in state.cars:
        print(f"  [{car.id}] {car}  ${car.price:,}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="List, add and delete cars on an inventory server.")
    parser.add_argument("--base-url", help="Server base URL (default: $CARINV_BASE_URL)")
    parser.add_argument("--json", action="store_true", dest="json_mode", help="Output machine-readable JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("list", help="Show every car")

    add = sub.add_parser("add", help="Add a new car")
    add.add_argument("--make", required=True)
    add.add_argument("--model", required=True)
    add.add_argument("--year", required=True)
    add.add_argument("--price", required=True)

    delete = sub.add_parser("delete", help="Delete one car by id")
    delete.add_argument("car_id", type=int)

    delete_all = sub.add_parser("delete-all", help="Delete every car")
    delete_all.add_argument("--yes", action="store_true", help="Do not ask for confirmation")
    return parser


def _confirm_delete_all() -> bool:
    answer = input("Delete All Cars? This action cannot be undone. [y/N] ")
    return answer.strip().lower() in {"y", "yes"}


async def main() -> int:
    args = _build_parser().parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    overrides: dict[str, Any] = {}
    if args.base_url:
        overrides["base_url"] = args.base_url
    config = InventoryConfig.from_env(**overrides)

    if args.command == "add":
        draft = CarDraft(make=args.make, model=args.model, year=args.year, price=args.price)
        try:
            car = draft.to_car()
        except CarValidationError as exc:
            print(exc, file=sys.stderr)
            return 2
    if args.command == "delete-all" and not args.yes and not _confirm_delete_all():
        print("Cancelled.")
        return 1

    async with CarInventoryClient(config) as client:
        if args.command == "list":
            state = await client.fetch_cars()
        elif args.command == "add":
            state = await client.add_car(car)
        elif args.command == "delete":
            state = await client.delete_car(args.car_id)
        else:
            state = await client.delete_all_cars()

    _print_state(state, json_mode=args.json_mode)
    return 1 if state.error_message else 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
