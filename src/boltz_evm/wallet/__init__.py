"""Boltz wallet: seed lookup and key derivation."""

from boltz_evm.wallet.factory import connect_ethereum, get_boltz_address, get_boltz_wallet
from boltz_evm.wallet.seed import find_seed_file, read_seed
from boltz_evm.wallet.signer import BoltzSigner, BoltzWallet, Signer, derive_account

__all__ = [
    "BoltzSigner",
    "BoltzWallet",
    "Signer",
    "connect_ethereum",
    "derive_account",
    "find_seed_file",
    "get_boltz_address",
    "get_boltz_wallet",
    "read_seed",
]
