"""Boltz EVM utilities.

Resolves the Boltz wallet from the data directory and binds the swap
contracts configured for Ethereum and RSK.
"""

from boltz_evm.blocks import get_logs_query_start_height
from boltz_evm.chains import BoltzConfig, ChainConfig, get_chain_config, load_config
from boltz_evm.config import Settings, get_settings
from boltz_evm.contracts import BoundContract, ContractBinding, get_contracts
from boltz_evm.errors import (
    BoltzEvmError,
    ConfigurationError,
    InvalidCredentialError,
    MissingAddressError,
    MissingConfigurationError,
    MissingCredentialError,
)
from boltz_evm.wallet import (
    BoltzSigner,
    BoltzWallet,
    Signer,
    connect_ethereum,
    get_boltz_address,
    get_boltz_wallet,
)

__version__ = "0.1.0"

__all__ = [
    "BoltzConfig",
    "BoltzEvmError",
    "BoltzSigner",
    "BoltzWallet",
    "BoundContract",
    "ChainConfig",
    "ConfigurationError",
    "ContractBinding",
    "InvalidCredentialError",
    "MissingAddressError",
    "MissingConfigurationError",
    "MissingCredentialError",
    "Settings",
    "Signer",
    "connect_ethereum",
    "get_boltz_address",
    "get_boltz_wallet",
    "get_chain_config",
    "get_contracts",
    "get_logs_query_start_height",
    "get_settings",
    "load_config",
]
