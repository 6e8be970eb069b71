"""Signing identity loading for Aptos transactions."""

import logging
from typing import Optional

from aptos_sdk.account import Account
from eth_utils import is_hex, remove_0x_prefix

from ..errors import ConfigurationError
from .types import SigningIdentity
from .utils import AIP80_ED25519_PREFIX, PRIVATE_KEY_BYTES

logger = logging.getLogger(__name__)


def normalize_private_key(private_key: str) -> str:
    """Strip the AIP-80 and 0x prefixes from a private key.

    Args:
        private_key: Ed25519 private key as hex, optionally prefixed with
            "0x" or "ed25519-priv-0x"

    Returns:
        Unprefixed 64-character hex string

    Raises:
        ConfigurationError: If the key is not 32 bytes of hex
    """
    key = private_key.strip()
    if key.startswith(AIP80_ED25519_PREFIX):
        key = key[len(AIP80_ED25519_PREFIX):]
    key = remove_0x_prefix(key)

    # Never echo the key itself
    if not is_hex(key) or len(key) != PRIVATE_KEY_BYTES * 2:
        raise ConfigurationError(
            f"Invalid private key: expected {PRIVATE_KEY_BYTES} bytes of hex"
        )
    return key


def load_signing_identity(private_key: Optional[str]) -> SigningIdentity:
    """Load the account that signs mint transactions.

    Args:
        private_key: Ed25519 private key (hex string with or without 0x prefix)

    Returns:
        SigningIdentity for the key

    Raises:
        ConfigurationError: If the key is missing or malformed
    """
    if not private_key:
        raise ConfigurationError("Private key not found in environment variables")

    account = Account.load_key(normalize_private_key(private_key))
    address = str(account.address())
    logger.info("Loaded signing account %s", address)
    return SigningIdentity(address=address, account=account)
