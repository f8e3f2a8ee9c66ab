"""Exceptions raised while resolving wallets and contract bindings.

Filesystem and RPC failures are not wrapped: ``OSError`` and the web3
provider exceptions reach the caller unchanged.
"""

from typing import Optional


class BoltzEvmError(Exception):
    """Base class for all errors raised by this package."""
    pass


class MissingCredentialError(BoltzEvmError):
    """Exception raised when none of the seed files exist."""

    def __init__(self, message: str = "no Boltz wallet found"):
        super().__init__(message)


class InvalidCredentialError(BoltzEvmError):
    """Exception raised when a seed phrase cannot be turned into a key."""
    pass


class ConfigurationError(BoltzEvmError):
    """Exception raised when the configuration file cannot be used."""
    pass


class MissingConfigurationError(ConfigurationError):
    """Exception raised when a chain has no configuration section."""

    def __init__(self, chain: str):
        self.chain = chain
        super().__init__(f"{chain} configuration missing")


class MissingAddressError(ConfigurationError):
    """Exception raised when a required contract address is not configured."""

    def __init__(self, chain: str, field: str, detail: Optional[str] = None):
        self.chain = chain
        self.field = field
        message = f"no {field} address configured for {chain}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
