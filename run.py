#!/usr/bin/env python3
"""
Magento onX Adapter — Entry Point.

Runs one onX commerce operation against an Adobe Commerce (Magento 2) store
and prints the result envelope as JSON. Configuration is read from a .env
file (see magento_onx/config/settings.py).

Usage:
    python run.py get-orders --params '{"ids": ["12"]}'
    python run.py get-inventory --params-file ./inventory.json
    python run.py get-returns --debug      # Verbose transport logging (stderr)
    python run.py --list                   # Show available operations
    python run.py --version                # Show version
    python run.py --env /path get-orders   # Use alternate .env file
"""

import sys
import json
import argparse
import logging
from pathlib import Path

from magento_onx.core import CommerceAdapter

# Read version from the repo-root VERSION file (e.g., "0.1.0").
VERSION_FILE = Path(__file__).resolve().parent / "VERSION"
VERSION = VERSION_FILE.read_text().strip() if VERSION_FILE.exists() else "unknown"


def load_params(args) -> dict:
    """Operation parameters from --params or --params-file (default: {})."""
    if args.params_file:
        with open(args.params_file) as f:
            return json.load(f)
    if args.params:
        return json.loads(args.params)
    return {}


def main():
    """Parse CLI arguments and run one operation."""
    parser = argparse.ArgumentParser(
        description="Magento onX Adapter - Run onX commerce operations against Adobe Commerce"
    )
    parser.add_argument("operation", nargs="?", help="onX operation name (e.g., get-orders)")
    parser.add_argument("--params", "-p", help="Operation parameters as a JSON object")
    parser.add_argument("--params-file", "-f", help="Path to a JSON file with operation parameters")
    parser.add_argument("--env", "-e", default="./.env", help="Path to .env file")
    parser.add_argument("--debug", action="store_true", help="Enable debug output")
    parser.add_argument("--list", action="store_true", help="List operations and exit")
    parser.add_argument("--version", "-v", action="store_true", help="Show version and exit")

    args = parser.parse_args()

    if args.version:
        print(f"magento2-onx {VERSION}")
        sys.exit(0)

    if args.list:
        for name in CommerceAdapter.operation_names():
            print(name)
        sys.exit(0)

    if not args.operation:
        parser.error("an operation name is required")

    # Logs go to stderr so stdout stays pure JSON
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format='%(name)s - %(levelname)s - %(message)s'
    )

    adapter = CommerceAdapter(env_file=args.env)
    if args.debug:
        adapter.debug = True

    if not adapter.validate_config():
        sys.exit(1)

    try:
        params = load_params(args)
    except (OSError, ValueError) as e:
        print(f"Invalid parameters: {e}", file=sys.stderr)
        sys.exit(1)

    result = adapter.run(args.operation, params)
    print(json.dumps(result, indent=2, default=str))

    if not result.get("success"):
        sys.exit(1)


if __name__ == "__main__":
    main()
