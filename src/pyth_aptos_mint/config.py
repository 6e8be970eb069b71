"""Configuration for the mint flow.

Everything the flow needs is passed in through `MintConfig`; nothing
below this module reads the environment.
"""

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from dotenv import load_dotenv

from .chain.types import EntryFunctionId
from .chain.utils import MINT_AMOUNT_USD, MODULE_ADDRESS
from .errors import ConfigurationError
from .oracle.utils import (
    BTC_USD_PRICE_ID,
    HERMES_BETA_URL,
    HERMES_MAINNET_URL,
    is_feed_id,
    normalize_feed_id,
)

NODE_URLS = {
    "mainnet": "https://fullnode.mainnet.aptoslabs.com/v1",
    "testnet": "https://fullnode.testnet.aptoslabs.com/v1",
    "devnet": "https://fullnode.devnet.aptoslabs.com/v1",
    "local": "http://127.0.0.1:8080/v1",
}

HERMES_URLS = {
    "mainnet": HERMES_MAINNET_URL,
    "testnet": HERMES_BETA_URL,
    "devnet": HERMES_BETA_URL,
    "local": HERMES_BETA_URL,
}

DEFAULT_NETWORK = "testnet"

# Environment variable names
ENV_PRIVATE_KEY = "APTOS_PRIVATE_KEY"
ENV_NETWORK = "APTOS_NETWORK"
ENV_NODE_URL = "APTOS_NODE_URL"
ENV_HERMES_URL = "HERMES_URL"
ENV_PRICE_FEED_ID = "PRICE_FEED_ID"
ENV_MODULE_ADDRESS = "MINT_MODULE_ADDRESS"
ENV_MINT_FUNCTION = "MINT_FUNCTION"


@dataclass(frozen=True)
class MintConfig:
    """Resolved mint configuration with all defaults applied."""

    private_key: str = field(repr=False)
    """Ed25519 private key of the signing account (hex, 0x prefix optional)."""

    network: str = DEFAULT_NETWORK
    """Aptos network name. Default: testnet"""

    node_url: str = ""
    """Fullnode REST URL. Default: the network's public fullnode"""

    hermes_url: str = ""
    """Hermes service URL. Default: the network's Hermes endpoint"""

    price_feed_id: str = BTC_USD_PRICE_ID
    """Pyth price feed ID validated by the mint contract."""

    module_address: str = MODULE_ADDRESS
    """Address the mint module is published under."""

    mint_amount: int = MINT_AMOUNT_USD
    """Amount in USD minted per call."""

    mint_function_id: str = ""
    """Entry point as "<address>::<module>::<function>". Default: mint_coins"""

    def __post_init__(self) -> None:
        if not self.private_key:
            raise ConfigurationError("Private key not found in environment variables")
        if self.network not in NODE_URLS:
            raise ConfigurationError(
                f"Unknown network: {self.network!r}. "
                f"Expected one of: {', '.join(sorted(NODE_URLS))}"
            )
        if not is_feed_id(self.price_feed_id):
            raise ConfigurationError(f"Invalid price feed ID: {self.price_feed_id!r}")
        if self.mint_function_id:
            try:
                EntryFunctionId.parse(self.mint_function_id)
            except ValueError as e:
                raise ConfigurationError(str(e)) from e

        # Frozen dataclass: fill derived defaults through object.__setattr__
        object.__setattr__(self, "node_url", self.node_url or NODE_URLS[self.network])
        object.__setattr__(
            self, "hermes_url", self.hermes_url or HERMES_URLS[self.network]
        )
        object.__setattr__(self, "price_feed_id", normalize_feed_id(self.price_feed_id))
        object.__setattr__(
            self,
            "mint_function_id",
            self.mint_function_id or str(EntryFunctionId.mint(self.module_address)),
        )

    @property
    def mint_function(self) -> EntryFunctionId:
        """Entry point the flow calls."""
        return EntryFunctionId.parse(self.mint_function_id)

    @classmethod
    def from_env(
        cls,
        env: Optional[Mapping[str, str]] = None,
        dotenv_path: Optional[str] = None,
    ) -> "MintConfig":
        """Build a config from environment variables.

        Loads a .env file first (without overriding variables already set)
        unless an explicit env mapping is given.

        Args:
            env: Mapping to read instead of os.environ
            dotenv_path: Optional path to a .env file

        Returns:
            MintConfig

        Raises:
            ConfigurationError: If APTOS_PRIVATE_KEY is missing or a value is invalid
        """
        if env is None:
            load_dotenv(dotenv_path)
            env = os.environ

        return cls(
            private_key=env.get(ENV_PRIVATE_KEY, ""),
            network=env.get(ENV_NETWORK, DEFAULT_NETWORK),
            node_url=env.get(ENV_NODE_URL, ""),
            hermes_url=env.get(ENV_HERMES_URL, ""),
            price_feed_id=env.get(ENV_PRICE_FEED_ID, BTC_USD_PRICE_ID),
            module_address=env.get(ENV_MODULE_ADDRESS, MODULE_ADDRESS),
            mint_function_id=env.get(ENV_MINT_FUNCTION, ""),
        )
