"""Wallet factory.

Creates the Boltz wallet from the seed stored in the data directory.
Every call derives a fresh wallet; nothing is cached.
"""

import logging
from typing import Optional
from urllib.parse import urlsplit

from web3 import AsyncWeb3

from boltz_evm.config import Settings, get_settings
from boltz_evm.wallet.seed import read_seed
from boltz_evm.wallet.signer import BoltzSigner, BoltzWallet

logger = logging.getLogger(__name__)


def get_boltz_wallet(settings: Optional[Settings] = None) -> BoltzWallet:
    """Derive the wallet of the active seed file.

    Raises:
        MissingCredentialError: If no seed file exists
        InvalidCredentialError: If the seed is not a valid mnemonic
    """
    settings = settings or get_settings()
    return BoltzWallet.from_phrase(read_seed(settings), settings.derivation_path)


async def get_boltz_address(settings: Optional[Settings] = None) -> str:
    """Get the address of the Boltz wallet. No network access."""
    return get_boltz_wallet(settings).address


async def connect_ethereum(
    provider_url: str, settings: Optional[Settings] = None
) -> BoltzSigner:
    """Connect the Boltz wallet to a JSON-RPC endpoint.

    No request is sent to the endpoint here.
    """
    wallet = get_boltz_wallet(settings)
    web3 = AsyncWeb3(AsyncWeb3.AsyncHTTPProvider(provider_url))

    logger.info(f"Connecting wallet {wallet.address} to {urlsplit(provider_url).hostname}")
    return wallet.connect(web3)
