#!/usr/bin/env python
"""
Add a customer from the command line.

Runs the same form controller as the web page against the customers API and
prints the notifications it emits.

Usage:
    python scripts/create_customer.py --first-name Ada --last-name Lovelace \
        --email ada@example.com --city London

Environment:
    CUSTOMERS_API_URL: customers API base URL (default http://localhost:3001)
    CUSTOMERS_API_TOKEN: optional bearer token

Exit code is 0 when the customer was created, 1 otherwise.
"""
from __future__ import annotations

import argparse
import sys

# Add project root to path
sys.path.insert(0, ".")

from dotenv import load_dotenv

from app.crm.config import load_config
from app.crm.modules.customers.api_client import customers_api_from_config
from app.crm.modules.customers.models import EDITABLE_FIELDS
from app.crm.modules.customers.service import LISTING_PATH, CustomerCreationForm


class ConsoleNotifier:
    def notify_success(self, text: str) -> None:
        print(f"OK: {text}")

    def notify_error(self, text: str) -> None:
        print(f"ERROR: {text}", file=sys.stderr)


def _option_name(field_name: str) -> str:
    # firstName -> first-name
    return "".join(f"-{ch.lower()}" if ch.isupper() else ch for ch in field_name)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Add a customer through the customers API")
    for name, attr in EDITABLE_FIELDS.items():
        parser.add_argument(f"--{_option_name(name)}", dest=attr, default="", help=f"Customer {name}")
    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    api = customers_api_from_config(load_config())

    form = CustomerCreationForm(
        create=api.create_customer,
        notifier=ConsoleNotifier(),
        navigate=lambda: print(f"Customer listing: {api.base_url.rstrip('/')}{LISTING_PATH}"),
    )
    for name, attr in EDITABLE_FIELDS.items():
        form.update_field(name, getattr(args, attr))

    try:
        outcome = form.submit()
    finally:
        api.close()
    return 0 if outcome.ok else 1


if __name__ == "__main__":
    sys.exit(main())
