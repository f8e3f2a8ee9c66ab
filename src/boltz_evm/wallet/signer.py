"""Signing identities derived from a BIP39 seed phrase.

Derivation: BIP39 seed -> BIP32 secp256k1 -> ``m/44'/60'/0'/0/0`` by default.
The same phrase always yields the same key and address.
"""

import logging
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from bip_utils import Bip32Slip10Secp256k1, Bip39MnemonicValidator, Bip39SeedGenerator
from eth_account import Account
from eth_account.signers.local import LocalAccount
from web3 import AsyncWeb3
from web3.middleware import SignAndSendRawMiddlewareBuilder

from boltz_evm.config import DEFAULT_DERIVATION_PATH
from boltz_evm.errors import InvalidCredentialError

logger = logging.getLogger(__name__)

SIGNER_MIDDLEWARE = "boltz_signer"


@runtime_checkable
class Signer(Protocol):
    """Anything that can authorize transactions sent through ``web3``."""

    @property
    def address(self) -> str: ...

    @property
    def web3(self) -> AsyncWeb3: ...


def derive_account(
    seed_phrase: str, derivation_path: str = DEFAULT_DERIVATION_PATH
) -> LocalAccount:
    """Derive the EVM account of a seed phrase.

    Raises:
        InvalidCredentialError: If the phrase is not a valid BIP39 mnemonic
            or the path cannot be derived
    """
    if not Bip39MnemonicValidator().IsValid(seed_phrase):
        # Never include the phrase itself in the error
        word_count = len(seed_phrase.split())
        raise InvalidCredentialError(
            f"Invalid seed phrase ({word_count} words): not a valid BIP39 mnemonic"
        )

    try:
        seed = Bip39SeedGenerator(seed_phrase).Generate()
        node = Bip32Slip10Secp256k1.FromSeed(seed).DerivePath(derivation_path)
        private_key = node.PrivateKey().Raw().ToBytes()
    except Exception as e:
        raise InvalidCredentialError(f"Cannot derive key at {derivation_path}: {e}") from e

    account = Account.from_key(private_key)
    logger.debug(f"Derived account {account.address} at {derivation_path}")
    return account


@dataclass(frozen=True)
class BoltzSigner:
    """Wallet account bound to a JSON-RPC endpoint.

    Transactions sent through ``web3`` from ``address`` are signed locally.
    """

    account: LocalAccount
    web3: AsyncWeb3

    @property
    def address(self) -> str:
        return self.account.address


class BoltzWallet:
    """Unconnected wallet identity.

    Usage:
        wallet = BoltzWallet.from_phrase("abandon abandon ... about")
        wallet.address
        signer = wallet.connect(AsyncWeb3(AsyncWeb3.AsyncHTTPProvider(url)))
    """

    def __init__(self, account: LocalAccount, derivation_path: str = DEFAULT_DERIVATION_PATH):
        self.account = account
        self.derivation_path = derivation_path

    @classmethod
    def from_phrase(
        cls, seed_phrase: str, derivation_path: str = DEFAULT_DERIVATION_PATH
    ) -> "BoltzWallet":
        """Derive a wallet from a seed phrase."""
        return cls(derive_account(seed_phrase, derivation_path), derivation_path)

    @property
    def address(self) -> str:
        """Checksummed address of the wallet."""
        return self.account.address

    def connect(self, web3: AsyncWeb3) -> BoltzSigner:
        """Bind the wallet to a provider so that it can send transactions.

        Registers the account as default sender and signs outgoing
        transactions locally before they reach the endpoint. Connecting
        again to the same web3 instance replaces the previous signer.
        """
        if SIGNER_MIDDLEWARE in web3.middleware_onion:
            web3.middleware_onion.remove(SIGNER_MIDDLEWARE)
        web3.middleware_onion.inject(
            SignAndSendRawMiddlewareBuilder.build(self.account),
            name=SIGNER_MIDDLEWARE,
            layer=0,
        )
        web3.eth.default_account = self.account.address
        return BoltzSigner(account=self.account, web3=web3)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(address={self.address}, path={self.derivation_path})"
