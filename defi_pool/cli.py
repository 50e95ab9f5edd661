"""Command-line interface for the SUI lending pool client."""
from __future__ import annotations

import argparse
import asyncio
import json
import sys

from .config import load_config
from .exceptions import ValidationError
from .logging_setup import configure_logging
from .models import OPERATIONS
from .services import PoolService
from .units import to_base_units


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse CLI parser."""
    parser = argparse.ArgumentParser(
        prog="defi-pool",
        description="Inspect and build transactions for a SUI lending pool",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to config.yaml (default: config.yaml in project root)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )

    sub = parser.add_subparsers(dest="command")

    status_parser = sub.add_parser("status", help="Show pool balance, wallet balance and debt")
    status_parser.add_argument("address", help="Wallet address")

    build_cmd = sub.add_parser("build", help="Build an unsigned pool transaction")
    build_cmd.add_argument("operation", choices=OPERATIONS)
    build_cmd.add_argument("amount", help="Amount in SUI")
    build_cmd.add_argument(
        "--offline",
        action="store_true",
        help="Skip RPC object resolution and omit the BCS bytes",
    )

    explorer_parser = sub.add_parser("explorer", help="Print the explorer link for a digest")
    explorer_parser.add_argument("digest", help="Transaction digest")

    return parser


async def _run(args: argparse.Namespace) -> int:
    """Execute the selected command."""
    configure_logging(args.log_level)
    config = load_config(args.config)
    service = PoolService(config)

    if args.command == "status":
        snapshot = await service.refresh(args.address)
        print(f"Pool Balance: {snapshot.pool_balance} SUI")
        print(f"Your Balance: {snapshot.user_balance} SUI")
        print(f"Your Debt:    {snapshot.user_debt} SUI")
    elif args.command == "build":
        try:
            request = service.build(args.operation, args.amount)
        except ValidationError as e:
            print(str(e), file=sys.stderr)
            return 2
        output = {
            "operation": args.operation,
            "amount": args.amount.strip(),
            "base_units": to_base_units(args.amount.strip()),
            "transaction": request.to_dict(),
        }
        if not args.offline:
            try:
                output["tx_kind_bytes"] = await service.serialize(request)
            except (RuntimeError, ValueError) as e:
                print(f"Failed to serialize transaction: {e}", file=sys.stderr)
                return 1
        print(json.dumps(output, indent=2))
    elif args.command == "explorer":
        print(service.explorer_url(args.digest))
    else:
        build_parser().print_help()
        return 1
    return 0


def main() -> None:
    """Entry point."""
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    sys.exit(asyncio.run(_run(args)))
