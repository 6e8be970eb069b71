"""Utility functions and constants for the Aptos mint contract."""

import re
from typing import Optional

# Mint contract on Aptos testnet
MODULE_ADDRESS = "0x435c07fee9a83d1c65f667513a72d49156b001229b08db94162826e0ab02c916"
MINT_MODULE_NAME = "btc_pegged_coin"
MINT_FUNCTION_NAME = "mint_coins"

# Amount in USD minted per call
MINT_AMOUNT_USD = 100

# Ed25519 private keys are 32 bytes
PRIVATE_KEY_BYTES = 32

# AIP-80 prefix some wallets export keys with
AIP80_ED25519_PREFIX = "ed25519-priv-"

_MODULE_ABORT = re.compile(
    r"Move abort in [^\s:]+::\w+:\s*(?:\w+\()?(0x[0-9a-fA-F]+)"
)
_BARE_ABORT = re.compile(r"Move abort[^:]*:\s*(?:\w+\()?(0x[0-9a-fA-F]+)")


def parse_abort_code(vm_status: str) -> Optional[str]:
    """Extract the abort code from an Aptos VM status string.

    Args:
        vm_status: VM status or error text, e.g.
            "Move abort in 0x1::coin: EINSUFFICIENT_BALANCE(0x10006): ..."

    Returns:
        Lower-case hex abort code (e.g., "0x10006"), or None if the text
        does not describe a Move abort
    """
    match = _MODULE_ABORT.search(vm_status) or _BARE_ABORT.search(vm_status)
    if match is None:
        return None
    return match.group(1).lower()


def format_function_id(module_address: str, module_name: str, function_name: str) -> str:
    """Format a fully qualified entry function ID.

    Returns:
        "<address>::<module>::<function>"
    """
    return f"{module_address}::{module_name}::{function_name}"
