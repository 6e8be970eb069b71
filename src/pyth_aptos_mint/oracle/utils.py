"""Utility functions and constants for Pyth price feeds."""

from eth_utils import add_0x_prefix, is_hex, remove_0x_prefix

# Hermes endpoints
HERMES_BETA_URL = "https://hermes-beta.pyth.network"
HERMES_MAINNET_URL = "https://hermes.pyth.network"

# Latest price updates endpoint
LATEST_PRICE_UPDATES_PATH = "/v2/updates/price/latest"

# Testnet BTC/USD price feed ID
BTC_USD_PRICE_ID = (
    "0xf9c0172ba10dfa4d19088d94f5bf61d3b54d5bd7483a322a982e1373ee8ea31b"
)

# Feed IDs are 32 bytes
FEED_ID_BYTES = 32


def is_feed_id(value: str) -> bool:
    """Check whether a string is a well-formed price feed ID.

    Args:
        value: Candidate feed ID (hex string with or without 0x prefix)

    Returns:
        True if value is 32 bytes of hex
    """
    if not isinstance(value, str) or not is_hex(value):
        return False
    return len(remove_0x_prefix(value)) == FEED_ID_BYTES * 2


def normalize_feed_id(value: str) -> str:
    """Normalize a price feed ID to its 0x-prefixed lower-case form.

    Args:
        value: Feed ID (hex string with or without 0x prefix)

    Returns:
        Normalized feed ID (e.g., "0xf9c0...a31b")

    Raises:
        ValueError: If value is not a 32-byte hex string
    """
    if not is_feed_id(value):
        raise ValueError(f"Invalid price feed ID: {value!r}")
    return add_0x_prefix(value.lower())


def format_price(price: int, expo: int) -> str:
    """Format a Pyth integer price with its exponent.

    Args:
        price: Integer mantissa (e.g., 6512345000000)
        expo: Base-10 exponent (e.g., -8)

    Returns:
        Human readable string (e.g., "65123.45")
    """
    if expo >= 0:
        return str(price * 10**expo)
    return f"{price / 10**-expo:.{-expo}f}".rstrip("0").rstrip(".")
