#!/usr/bin/env python3
"""
Command line lookups against a Web Distribution instance.

Examples:
    web-distribution product 1234-01 --company 1
    web-distribution inventory 5521
    web-distribution transaction S-100234 --company 1

Results are printed as JSON. Exit codes: 0 found, 1 not found, 2 other API error.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

from web_distribution.config import load_client_config
from web_distribution.exceptions import NotFoundException, WebDistributionError
from web_distribution.sdk import WebDistribution

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Look up products, inventory and transactions in Web Distribution")
    parser.add_argument("--config", type=Path, default=None, help="Path to a YAML config file (default: environment only)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    product = sub.add_parser("product", help="Find a product by item number")
    product.add_argument("item_number")
    product.add_argument("--company", type=int, required=True, help="Company id")

    inventory = sub.add_parser("inventory", help="List inventory pieces of a product")
    inventory.add_argument("product_id", type=int)

    transaction = sub.add_parser("transaction", help="Find a transaction by number")
    transaction.add_argument("transaction_number")
    transaction.add_argument("--company", type=int, required=True, help="Company id")

    return parser


def run_command(args: argparse.Namespace, sdk: WebDistribution) -> Any:
    if args.command == "product":
        return sdk.products.find(args.company, args.item_number).model_dump(mode="json")
    if args.command == "inventory":
        product = sdk.products.find_by_id(args.product_id)
        return [piece.model_dump(mode="json") for piece in sdk.inventory.list_by_product(product)]
    if args.command == "transaction":
        return sdk.transactions.find_by_transaction_number(args.company, args.transaction_number).model_dump(mode="json")
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[Sequence[str]] = None, sdk: Optional[WebDistribution] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    owns_sdk = sdk is None
    if sdk is None:
        sdk = WebDistribution.from_config(load_client_config(args.config))

    try:
        result = run_command(args, sdk)
    except NotFoundException as e:
        print(f"Not found: {e}", file=sys.stderr)
        return 1
    except WebDistributionError as e:
        logger.error(f"Web Distribution request failed: {e}")
        return 2
    finally:
        if owns_sdk:
            sdk.close()

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
