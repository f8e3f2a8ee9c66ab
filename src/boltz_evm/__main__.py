"""Command line entry point.

Usage:
    python -m boltz_evm address
    python -m boltz_evm contracts --chain ethereum --provider http://127.0.0.1:8545
    python -m boltz_evm start-height --provider http://127.0.0.1:8545 --delta 1000
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

from web3 import AsyncWeb3

from boltz_evm.blocks import get_logs_query_start_height
from boltz_evm.chains import SUPPORTED_CHAINS
from boltz_evm.config import Settings, get_settings
from boltz_evm.contracts import get_contracts
from boltz_evm.errors import BoltzEvmError
from boltz_evm.wallet import connect_ethereum, get_boltz_address

logger = logging.getLogger(__name__)


async def _address(args: argparse.Namespace, settings: Settings) -> None:
    print(await get_boltz_address(settings))


async def _contracts(args: argparse.Namespace, settings: Settings) -> None:
    signer = await connect_ethereum(args.provider, settings)
    binding = get_contracts(args.chain, signer, settings)

    print(f"Signer:    {signer.address}")
    print(f"EtherSwap: {binding.ether_swap.address}")
    print(f"ERC20Swap: {binding.erc20_swap.address}")
    print(f"Token:     {binding.token.address}")


async def _start_height(args: argparse.Namespace, settings: Settings) -> None:
    delta = settings.logs_query_delta if args.delta is None else args.delta
    provider = AsyncWeb3(AsyncWeb3.AsyncHTTPProvider(args.provider))
    print(await get_logs_query_start_height(provider, delta))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="boltz-evm", description="Boltz wallet and contract utilities for EVM chains"
    )
    parser.add_argument("--data-dir", type=Path, help="Boltz data directory")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    commands = parser.add_subparsers(dest="command", required=True)

    address = commands.add_parser("address", help="Print the wallet address")
    address.set_defaults(handler=_address)

    contracts = commands.add_parser("contracts", help="Print the bound contract addresses")
    contracts.add_argument("--chain", choices=SUPPORTED_CHAINS, default="ethereum")
    contracts.add_argument("--provider", required=True, help="JSON-RPC endpoint URL")
    contracts.set_defaults(handler=_contracts)

    start_height = commands.add_parser(
        "start-height", help="Print the first block of a log query"
    )
    start_height.add_argument("--provider", required=True, help="JSON-RPC endpoint URL")
    start_height.add_argument("--delta", type=int, help="Number of blocks to look back")
    start_height.set_defaults(handler=_start_height)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    settings = get_settings()
    if args.data_dir is not None:
        settings = settings.model_copy(update={"data_dir": args.data_dir.expanduser()})

    logger.debug(f"Using data directory {settings.data_dir}")

    try:
        asyncio.run(args.handler(args, settings))
    except BoltzEvmError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
