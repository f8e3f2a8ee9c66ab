"""Contract ABIs and bindings."""

from boltz_evm.contracts.abi import ERC20_ABI, ERC20_SWAP_ABI, ETHER_SWAP_ABI
from boltz_evm.contracts.binder import (
    BoundContract,
    ContractBinding,
    bind_contract,
    bind_contracts,
    get_contracts,
)

__all__ = [
    "ERC20_ABI",
    "ERC20_SWAP_ABI",
    "ETHER_SWAP_ABI",
    "BoundContract",
    "ContractBinding",
    "bind_contract",
    "bind_contracts",
    "get_contracts",
]
