"""Chain configuration read from ``boltz.conf``.

The file is TOML. Only the EVM chain sections are modelled here:

    [[ethereum.contracts]]
    etherSwap = "0x..."
    erc20Swap = "0x..."

    [[ethereum.tokens]]
    symbol = "ETH"

    [[ethereum.tokens]]
    symbol = "USDT"
    contractAddress = "0x..."

A chain without a section is valid configuration: it simply is not enabled.
"""

import logging
from typing import Literal, Optional, get_args

import tomli
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from boltz_evm.config import Settings, get_settings
from boltz_evm.errors import ConfigurationError, MissingConfigurationError

logger = logging.getLogger(__name__)

ChainName = Literal["rsk", "ethereum"]

SUPPORTED_CHAINS: tuple[str, ...] = get_args(ChainName)


class _ConfigModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class ContractsRecord(_ConfigModel):
    """Deployed swap contract addresses."""

    ether_swap: Optional[str] = Field(default=None, alias="etherSwap")
    erc20_swap: Optional[str] = Field(default=None, alias="erc20Swap")


class TokenRecord(_ConfigModel):
    """Asset traded on the chain.

    The native asset of the chain has no ``contractAddress``.
    """

    symbol: str
    decimals: Optional[int] = None
    contract_address: Optional[str] = Field(default=None, alias="contractAddress")
    min_swap_amount: Optional[int] = Field(default=None, alias="minSwapAmount")
    max_swap_amount: Optional[int] = Field(default=None, alias="maxSwapAmount")


class ChainConfig(_ConfigModel):
    """Configuration section of a single EVM chain."""

    network_name: Optional[str] = Field(default=None, alias="networkName")
    provider_endpoint: Optional[str] = Field(default=None, alias="providerEndpoint")
    contracts: list[ContractsRecord] = Field(default_factory=list)
    tokens: list[TokenRecord] = Field(default_factory=list)


class BoltzConfig(_ConfigModel):
    """The parts of ``boltz.conf`` relevant to EVM chains."""

    rsk: Optional[ChainConfig] = None
    ethereum: Optional[ChainConfig] = None

    def chain(self, chain: str) -> Optional[ChainConfig]:
        """Get the section of a chain, None if it is not configured."""
        if chain not in SUPPORTED_CHAINS:
            raise ValueError(
                f"Unsupported chain: {chain}. Expected one of {list(SUPPORTED_CHAINS)}"
            )
        return getattr(self, chain)


def load_config(settings: Optional[Settings] = None) -> BoltzConfig:
    """Read and parse ``boltz.conf`` from the data directory.

    Raises:
        OSError: If the file cannot be read
        ConfigurationError: If the file is not valid TOML or violates the schema
    """
    settings = settings or get_settings()
    path = settings.config_path

    with open(path, "rb") as f:
        try:
            raw = tomli.load(f)
        except tomli.TOMLDecodeError as e:
            raise ConfigurationError(f"Invalid TOML in {path}: {e}") from e

    try:
        return BoltzConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration in {path}: {e}") from e


def get_chain_config(chain: str, settings: Optional[Settings] = None) -> ChainConfig:
    """Load the configuration and select the section of ``chain``.

    Raises:
        ValueError: If ``chain`` is not a supported chain identifier
        MissingConfigurationError: If the chain has no section
    """
    config = load_config(settings).chain(chain)
    if config is None:
        raise MissingConfigurationError(chain)

    logger.debug(
        f"Loaded {chain} config: {len(config.contracts)} contract records, "
        f"{len(config.tokens)} tokens"
    )
    return config
