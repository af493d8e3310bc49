#!/usr/bin/env python3
"""Entry point for the Quai adapter command-line tool.

Fetches blocks and transactions from a Quai node and prints them in
canonical form as JSON.
"""

import argparse
import json
import logging
import os
import sys
from dataclasses import replace
from typing import Any

# Configure logging before any other imports create loggers
def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level as string (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    log_level: int = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )

# Get logger for this module
logger = logging.getLogger(__name__)

from quai_adapter.client import QuaiClient
from quai_adapter.config import ClientConfig


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser."""
    parser: argparse.ArgumentParser = argparse.ArgumentParser(
        description="Quai adapter - fetch canonical blocks and transactions from a Quai node",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""Environment Variables:
  QUAI_RPC_URL     - RPC endpoint of the Quai node (default: http://localhost:9200)
  REQUEST_TIMEOUT  - HTTP request timeout in seconds (default: 30)
  LOG_LEVEL        - Logging level (can be overridden with --log-level)
        """
    )
    parser.add_argument(
        "--rpc-url",
        default=None,
        help="Override QUAI_RPC_URL"
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get("LOG_LEVEL", "INFO"),
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging level (default: INFO)"
    )

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("chain-id", help="Print the node's chain ID")

    block_cmd = commands.add_parser("block", help="Print a block")
    block_cmd.add_argument("block_id", help="Block number, tag (latest, ...) or hash")
    block_cmd.add_argument(
        "--full",
        action="store_true",
        default=False,
        help="Embed full transactions instead of hashes"
    )

    tx_cmd = commands.add_parser("tx", help="Print a transaction")
    tx_cmd.add_argument("tx_hash", help="Transaction hash")

    return parser


def parse_block_id(value: str) -> int | str:
    """Decimal numbers become ints; tags, hex numbers and hashes stay strings."""
    return int(value) if value.isdigit() else value


def load_config(args: argparse.Namespace) -> ClientConfig:
    """Load configuration from the environment, applying command-line overrides."""
    config: ClientConfig = ClientConfig.from_env()
    return replace(
        config,
        rpc_url=args.rpc_url or config.rpc_url,
        log_level=args.log_level
    )


def run(args: argparse.Namespace, config: ClientConfig) -> Any:
    """Execute the selected command and return a JSON-serializable result."""
    client: QuaiClient = QuaiClient(config)

    match args.command:
        case "chain-id":
            return {"chainId": client.get_chain_id()}
        case "block":
            block = client.get_block(parse_block_id(args.block_id), full_transactions=args.full)
            return block.to_dict() if block else None
        case "tx":
            tx = client.get_transaction(args.tx_hash)
            return tx.to_dict() if tx else None


def main() -> None:
    """Main entry point for the Quai adapter CLI.

    Raises:
        SystemExit: On configuration or runtime errors
    """
    args: argparse.Namespace = build_parser().parse_args()
    setup_logging(args.log_level)

    try:
        config: ClientConfig = load_config(args)
    except ValueError as e:
        logger.error(f"Configuration Error: {e}")
        logger.error("Please check your environment variables:")
        logger.error("  - QUAI_RPC_URL: RPC endpoint of the Quai node")
        logger.error("  - REQUEST_TIMEOUT: HTTP request timeout in seconds")
        sys.exit(1)

    config.log_config()

    try:
        result = run(args, config)
    except KeyboardInterrupt:
        logger.info("Received interrupt signal, exiting...")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Fatal Error: {e}", exc_info=True)
        sys.exit(1)

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
