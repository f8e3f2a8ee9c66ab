"""Bind the configured swap and token contracts to a signer.

Binding only creates in-memory contract objects; the endpoint is first
contacted when a contract function is called.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from web3 import Web3

from boltz_evm.chains import ChainConfig, get_chain_config
from boltz_evm.config import Settings
from boltz_evm.contracts.abi import ERC20_ABI, ERC20_SWAP_ABI, ETHER_SWAP_ABI
from boltz_evm.errors import MissingAddressError
from boltz_evm.wallet.signer import Signer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoundContract:
    """A contract address paired with its ABI and the signer that uses it."""

    name: str
    address: str
    abi: list[dict]
    signer: Signer
    contract: Any = field(repr=False, compare=False)

    @property
    def functions(self):
        return self.contract.functions

    @property
    def events(self):
        return self.contract.events


@dataclass(frozen=True)
class ContractBinding:
    """The contracts a swap on an EVM chain interacts with."""

    token: BoundContract
    ether_swap: BoundContract
    erc20_swap: BoundContract


def _checksum(chain: str, name: str, address: Optional[str]) -> str:
    if address is None:
        raise MissingAddressError(chain, name)

    try:
        return Web3.to_checksum_address(address)
    except ValueError as e:
        raise MissingAddressError(chain, name, f"invalid address {address!r}") from e


def _token_address(config: ChainConfig) -> Optional[str]:
    # First token with an address; the native asset has none
    for token in config.tokens:
        if token.contract_address is not None:
            return token.contract_address
    return None


def bind_contract(name: str, address: str, abi: list[dict], signer: Signer) -> BoundContract:
    """Create a contract object for ``address`` on the signer's provider."""
    contract = signer.web3.eth.contract(address=address, abi=abi)
    return BoundContract(name=name, address=address, abi=abi, signer=signer, contract=contract)


def bind_contracts(chain: str, config: ChainConfig, signer: Signer) -> ContractBinding:
    """Bind the contracts of an already resolved chain configuration.

    Addresses must be full 20-byte hex addresses; they are checksummed
    before binding. Shorter values such as ``0xAA`` are rejected.

    Raises:
        MissingAddressError: If a swap contract or token address is missing
            or is not a valid address
    """
    if not config.contracts:
        raise MissingAddressError(chain, "swap contract")

    record = config.contracts[0]
    ether_swap = _checksum(chain, "etherSwap", record.ether_swap)
    erc20_swap = _checksum(chain, "erc20Swap", record.erc20_swap)
    token = _checksum(chain, "token contract", _token_address(config))

    binding = ContractBinding(
        token=bind_contract("token", token, ERC20_ABI, signer),
        ether_swap=bind_contract("etherSwap", ether_swap, ETHER_SWAP_ABI, signer),
        erc20_swap=bind_contract("erc20Swap", erc20_swap, ERC20_SWAP_ABI, signer),
    )

    logger.info(
        f"Bound {chain} contracts for {signer.address}: "
        f"etherSwap={ether_swap}, erc20Swap={erc20_swap}, token={token}"
    )
    return binding


def get_contracts(
    chain: str, signer: Signer, settings: Optional[Settings] = None
) -> ContractBinding:
    """Load the configuration of ``chain`` and bind its contracts to ``signer``.

    Raises:
        MissingConfigurationError: If the chain is not configured
        MissingAddressError: If a swap contract or token address is missing
    """
    return bind_contracts(chain, get_chain_config(chain, settings), signer)
