"""Command-line interface for inspecting Sui identifiers and payloads."""
from __future__ import annotations

import argparse
import json
import logging
import sys

from .codec import (
    decode_object_owner,
    decode_transaction_kind,
    encode_object_owner,
    encode_transaction_kind,
)
from .config import SdkConfig, load_config
from .errors import SuiTypesError
from .hexdata import Address, is_same_string_address
from .logging_setup import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse CLI parser."""
    parser = argparse.ArgumentParser(
        prog="sui-types",
        description="Canonicalize Sui identifiers and decode RPC payloads",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to config.yaml (default: built-in network settings)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )

    sub = parser.add_subparsers(dest="command")

    address_parser = sub.add_parser("address", help="Print the canonical address")
    address_parser.add_argument("hex", help="Hex string, with or without 0x")
    address_parser.add_argument(
        "--short", action="store_true", help="Print with leading zeros trimmed"
    )

    same_parser = sub.add_parser("same", help="Loosely compare two address strings")
    same_parser.add_argument("first")
    same_parser.add_argument("second")

    owner_parser = sub.add_parser("owner", help="Decode an object owner")
    owner_parser.add_argument("json", help="Owner JSON, e.g. '\"Immutable\"'")

    kind_parser = sub.add_parser("kind", help="Decode a transaction kind")
    kind_parser.add_argument("json", help="Transaction kind JSON object")

    sub.add_parser("networks", help="Show coin type and RPC endpoints")

    return parser


def _run(args: argparse.Namespace, config: SdkConfig) -> None:
    """Execute the selected command."""
    if args.command == "address":
        address = Address.from_hex(args.hex)
        print(address.short_string() if args.short else str(address))
    elif args.command == "same":
        print("true" if is_same_string_address(args.first, args.second) else "false")
    elif args.command == "owner":
        owner = decode_object_owner(args.json)
        arm = "string" if owner.string is not None else "record"
        print(f"{arm} {encode_object_owner(owner).decode('utf-8')}")
    elif args.command == "kind":
        kind = decode_transaction_kind(args.json)
        print(f"{kind.tag.value} {encode_transaction_kind(kind).decode('utf-8')}")
    elif args.command == "networks":
        print(f"coin_type {config.coin_type}")
        for name, network in config.networks.items():
            marker = "*" if name == config.default_network else " "
            print(f"{marker} {name} {network.rpc_url}")


def main(argv: list[str] | None = None) -> None:
    """Entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    configure_logging(args.log_level)

    try:
        config = load_config(args.config) if args.config else SdkConfig()
        _run(args, config)
    except (SuiTypesError, ValueError, FileNotFoundError) as e:
        logger.error("%s failed: %s", args.command, e)
        sys.exit(1)
