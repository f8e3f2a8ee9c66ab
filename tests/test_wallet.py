"""Tests for seed lookup and wallet derivation."""

import pytest
from eth_account import Account
from web3 import AsyncWeb3

from boltz_evm.config import Settings
from boltz_evm.errors import InvalidCredentialError, MissingCredentialError
from boltz_evm.wallet import (
    BoltzWallet,
    connect_ethereum,
    derive_account,
    find_seed_file,
    get_boltz_address,
    get_boltz_wallet,
    read_seed,
)
from boltz_evm.wallet.signer import SIGNER_MIDDLEWARE

from conftest import OTHER_MNEMONIC, TEST_ADDRESS, TEST_MNEMONIC


class TestSeedLookup:
    """Tests for the seed file priority order."""

    def test_reads_generic_seed(self, settings, seeded):
        """Test that seed.dat is used when it is the only seed file."""
        assert read_seed(settings) == TEST_MNEMONIC

    def test_evm_seed_takes_priority(self, settings, write_file):
        """Test that seedEvm.dat wins over seed.dat."""
        write_file("seed.dat", TEST_MNEMONIC)
        write_file("seedEvm.dat", OTHER_MNEMONIC)

        assert read_seed(settings) == OTHER_MNEMONIC

    def test_whitespace_is_trimmed(self, settings, write_file):
        """Test that surrounding whitespace and newlines are removed."""
        write_file("seedEvm.dat", f"\n\t{TEST_MNEMONIC}  \r\n")

        assert read_seed(settings) == TEST_MNEMONIC

    def test_no_seed_file(self, settings):
        """Test that a missing wallet raises MissingCredentialError."""
        with pytest.raises(MissingCredentialError, match="no Boltz wallet found"):
            read_seed(settings)

    def test_find_seed_file_first_existing(self, data_dir):
        """Test that the first existing candidate is returned."""
        second = data_dir / "b.dat"
        third = data_dir / "c.dat"
        second.write_text("x")
        third.write_text("y")

        assert find_seed_file([data_dir / "a.dat", second, third]) == second

    def test_custom_seed_files(self, data_dir, write_file):
        """Test that the candidate list comes from settings."""
        write_file("seed.dat", TEST_MNEMONIC)
        write_file("custom.dat", OTHER_MNEMONIC)
        settings = Settings(data_dir=data_dir, seed_files=["custom.dat", "seed.dat"])

        assert read_seed(settings) == OTHER_MNEMONIC


class TestDerivation:
    """Tests for deriving accounts from seed phrases."""

    def test_known_address(self):
        """Test the address of the BIP39 test mnemonic."""
        assert derive_account(TEST_MNEMONIC).address == TEST_ADDRESS

    def test_matches_eth_account_hd_wallet(self):
        """Test that derivation matches eth-account's HD wallet."""
        Account.enable_unaudited_hdwallet_features()
        expected = Account.from_mnemonic(OTHER_MNEMONIC)

        account = derive_account(OTHER_MNEMONIC)

        assert account.address == expected.address
        assert account.key == expected.key

    def test_deterministic(self):
        """Test that the same phrase always yields the same key."""
        first = derive_account(TEST_MNEMONIC)
        second = derive_account(TEST_MNEMONIC)

        assert first.address == second.address
        assert first.key == second.key

    def test_other_path(self):
        """Test that the derivation path changes the account."""
        account = derive_account(TEST_MNEMONIC, "m/44'/60'/0'/0/1")

        assert account.address != TEST_ADDRESS

    def test_invalid_checksum(self):
        """Test that a bad checksum word is rejected."""
        phrase = " ".join(["abandon"] * 12)

        with pytest.raises(InvalidCredentialError):
            derive_account(phrase)

    def test_wrong_word_count(self):
        """Test that a phrase with too few words is rejected."""
        with pytest.raises(InvalidCredentialError):
            derive_account("abandon abandon about")

    def test_error_does_not_leak_phrase(self):
        """Test that the seed phrase is not part of the error message."""
        phrase = "secret words that are not a mnemonic at all here ok"

        with pytest.raises(InvalidCredentialError) as exc_info:
            derive_account(phrase)

        assert "secret" not in str(exc_info.value)

    def test_wallet_repr_hides_key(self):
        """Test that the wallet repr shows only public data."""
        wallet = BoltzWallet.from_phrase(TEST_MNEMONIC)

        assert TEST_ADDRESS in repr(wallet)
        assert wallet.account.key.hex() not in repr(wallet)


class TestWalletFactory:
    """Tests for the wallet factory entry points."""

    def test_get_boltz_wallet(self, settings, seeded):
        """Test that the wallet is derived from the data directory."""
        wallet = get_boltz_wallet(settings)

        assert wallet.address == TEST_ADDRESS
        assert wallet.derivation_path == "m/44'/60'/0'/0/0"

    def test_invalid_seed_file(self, settings, write_file):
        """Test that a malformed seed file raises InvalidCredentialError."""
        write_file("seedEvm.dat", "not a seed")

        with pytest.raises(InvalidCredentialError):
            get_boltz_wallet(settings)

    def test_seed_file_not_utf8(self, settings, data_dir):
        """Test that undecodable seed bytes raise InvalidCredentialError."""
        (data_dir / "seedEvm.dat").write_bytes(b"\xff\xfe abandon")

        with pytest.raises(InvalidCredentialError, match="not valid UTF-8") as exc_info:
            get_boltz_wallet(settings)

        assert "abandon" not in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_get_boltz_address(self, settings, seeded):
        """Test that the address is returned without network access."""
        assert await get_boltz_address(settings) == TEST_ADDRESS
        assert await get_boltz_address(settings) == TEST_ADDRESS

    @pytest.mark.asyncio
    async def test_get_boltz_address_without_wallet(self, settings):
        """Test that the missing wallet error is propagated unchanged."""
        with pytest.raises(MissingCredentialError):
            await get_boltz_address(settings)

    @pytest.mark.asyncio
    async def test_connect_ethereum(self, settings, seeded):
        """Test that the signer is bound to the endpoint."""
        signer = await connect_ethereum("http://127.0.0.1:8545", settings)

        assert signer.address == TEST_ADDRESS
        assert signer.web3.eth.default_account == TEST_ADDRESS
        assert signer.web3.provider.endpoint_uri == "http://127.0.0.1:8545"

    @pytest.mark.asyncio
    async def test_connect_ethereum_without_wallet(self, settings):
        """Test that connecting without a seed fails before any provider is used."""
        with pytest.raises(MissingCredentialError):
            await connect_ethereum("http://127.0.0.1:8545", settings)

    def test_connect_twice_replaces_signer(self):
        """Test that reconnecting a web3 instance keeps a single signer middleware."""
        web3 = AsyncWeb3(AsyncWeb3.AsyncHTTPProvider("http://127.0.0.1:8545"))
        before = len(list(web3.middleware_onion))

        BoltzWallet.from_phrase(TEST_MNEMONIC).connect(web3)
        other = BoltzWallet.from_phrase(OTHER_MNEMONIC).connect(web3)

        assert len(list(web3.middleware_onion)) == before + 1
        assert SIGNER_MIDDLEWARE in web3.middleware_onion
        assert web3.eth.default_account == other.address
