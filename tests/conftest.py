"""Pytest configuration and fixtures."""

from pathlib import Path
from typing import Callable

import pytest

from boltz_evm.config import Settings

# BIP39 test vector and its address at m/44'/60'/0'/0/0
TEST_MNEMONIC = (
    "abandon abandon abandon abandon abandon abandon "
    "abandon abandon abandon abandon abandon about"
)
TEST_ADDRESS = "0x9858EfFD232B4033E47d90003D41EC34EcaEda94"

OTHER_MNEMONIC = "zoo zoo zoo zoo zoo zoo zoo zoo zoo zoo zoo wrong"

ETHER_SWAP = "0x" + "aa" * 20
ERC20_SWAP = "0x" + "bb" * 20
TOKEN = "0x" + "cc" * 20

ETHEREUM_CONFIG = f"""
[ethereum]
networkName = "Anvil"
providerEndpoint = "http://127.0.0.1:8545"

[[ethereum.contracts]]
etherSwap = "{ETHER_SWAP}"
erc20Swap = "{ERC20_SWAP}"

[[ethereum.tokens]]
symbol = "ETH"
maxSwapAmount = 4294967
minSwapAmount = 10000

[[ethereum.tokens]]
symbol = "USDT"
decimals = 6
contractAddress = "{TOKEN}"
"""


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Empty Boltz data directory."""
    path = tmp_path / "boltz"
    path.mkdir()
    return path


@pytest.fixture
def settings(data_dir: Path) -> Settings:
    """Settings pointing at the temporary data directory."""
    return Settings(data_dir=data_dir)


@pytest.fixture
def write_file(data_dir: Path) -> Callable[[str, str], Path]:
    """Write a file into the data directory."""

    def _write(name: str, content: str) -> Path:
        path = data_dir / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def seeded(write_file) -> Path:
    """Data directory with the test mnemonic in seed.dat."""
    return write_file("seed.dat", f"  {TEST_MNEMONIC}\n")


@pytest.fixture
def configured(write_file) -> Path:
    """Data directory with an Ethereum chain section."""
    return write_file("boltz.conf", ETHEREUM_CONFIG)
