"""Tests for mint configuration."""

import pytest

from pyth_aptos_mint import (
    BTC_USD_PRICE_ID,
    ConfigurationError,
    EntryFunctionId,
    MintConfig,
)
from pyth_aptos_mint.chain import MODULE_ADDRESS
from pyth_aptos_mint.config import HERMES_URLS, NODE_URLS

from conftest import TEST_PRIVATE_KEY


class TestMintConfig:
    """Tests for MintConfig defaults and validation."""

    def test_defaults(self):
        """Test that testnet defaults are applied."""
        config = MintConfig(private_key=TEST_PRIVATE_KEY)

        assert config.network == "testnet"
        assert config.node_url == NODE_URLS["testnet"]
        assert config.hermes_url == HERMES_URLS["testnet"]
        assert config.price_feed_id == BTC_USD_PRICE_ID
        assert config.mint_amount == 100
        assert str(config.mint_function) == (
            f"{MODULE_ADDRESS}::btc_pegged_coin::mint_coins"
        )

    def test_missing_private_key(self):
        """Test that a missing key is fatal."""
        with pytest.raises(ConfigurationError, match="Private key not found"):
            MintConfig(private_key="")

    def test_unknown_network(self):
        """Test that unknown networks are rejected."""
        with pytest.raises(ConfigurationError, match="Unknown network"):
            MintConfig(private_key=TEST_PRIVATE_KEY, network="moonnet")

    def test_invalid_feed_id(self):
        """Test that malformed feed IDs are rejected."""
        with pytest.raises(ConfigurationError, match="Invalid price feed ID"):
            MintConfig(private_key=TEST_PRIVATE_KEY, price_feed_id="BTC")

    def test_explicit_urls_win(self):
        """Test that explicit URLs override the network defaults."""
        config = MintConfig(
            private_key=TEST_PRIVATE_KEY,
            node_url="http://node.test/v1",
            hermes_url="http://hermes.test",
        )

        assert config.node_url == "http://node.test/v1"
        assert config.hermes_url == "http://hermes.test"

    def test_mint_function_override(self):
        """Test that a full entry function ID replaces the default."""
        config = MintConfig(
            private_key=TEST_PRIVATE_KEY, mint_function_id="0x1::pegged::mint"
        )

        assert config.mint_function == EntryFunctionId("0x1", "pegged", "mint")

    def test_invalid_mint_function(self):
        """Test that a malformed entry function ID is a configuration error."""
        with pytest.raises(ConfigurationError, match="Invalid entry function ID"):
            MintConfig(private_key=TEST_PRIVATE_KEY, mint_function_id="0x1::pegged")

    def test_repr_hides_private_key(self):
        """Test that the key never shows up in the repr."""
        assert TEST_PRIVATE_KEY not in repr(MintConfig(private_key=TEST_PRIVATE_KEY))


class TestFromEnv:
    """Tests for loading configuration from the environment."""

    def test_from_env_mapping(self):
        """Test loading from an explicit mapping."""
        config = MintConfig.from_env(
            {
                "APTOS_PRIVATE_KEY": TEST_PRIVATE_KEY,
                "APTOS_NETWORK": "devnet",
                "PRICE_FEED_ID": BTC_USD_PRICE_ID[2:],
                "MINT_FUNCTION": "0x1::pegged::mint",
            }
        )

        assert config.network == "devnet"
        assert config.node_url == NODE_URLS["devnet"]
        assert config.price_feed_id == BTC_USD_PRICE_ID
        assert str(config.mint_function) == "0x1::pegged::mint"

    def test_from_env_missing_key(self):
        """Test that an environment without a key is fatal."""
        with pytest.raises(ConfigurationError):
            MintConfig.from_env({})

    def test_from_env_reads_os_environ(self, monkeypatch, tmp_path):
        """Test that os.environ is used when no mapping is given."""
        monkeypatch.setenv("APTOS_PRIVATE_KEY", TEST_PRIVATE_KEY)
        monkeypatch.delenv("APTOS_NETWORK", raising=False)

        config = MintConfig.from_env(dotenv_path=str(tmp_path / ".env"))

        assert config.private_key == TEST_PRIVATE_KEY
