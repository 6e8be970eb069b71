"""Aptos Chain Module.

Builds, signs, submits and confirms the mint transaction.

Example usage:
    ```python
    from pyth_aptos_mint.chain import (
        AptosChainClient,
        EntryFunctionId,
        MintIntent,
        TransactionSubmitter,
        load_signing_identity,
    )

    identity = load_signing_identity("0x...")
    submitter = TransactionSubmitter(
        AptosChainClient("https://fullnode.testnet.aptoslabs.com/v1"),
        EntryFunctionId.mint(),
    )

    tx_hash = await submitter.submit_mint(MintIntent(payload=[[0xa1, 0xb2]]), identity)
    ```
"""

from .types import EntryFunctionId, MintIntent, SigningIdentity, SubmittedTransaction
from .signing import load_signing_identity, normalize_private_key
from .client import AptosChainClient, ChainClient, to_transaction_argument
from .submitter import TransactionSubmitter
from .utils import (
    MINT_AMOUNT_USD,
    MINT_FUNCTION_NAME,
    MINT_MODULE_NAME,
    MODULE_ADDRESS,
    PRIVATE_KEY_BYTES,
    format_function_id,
    parse_abort_code,
)

__all__ = [
    # Types
    "EntryFunctionId",
    "MintIntent",
    "SigningIdentity",
    "SubmittedTransaction",
    # Signing
    "load_signing_identity",
    "normalize_private_key",
    # Client
    "ChainClient",
    "AptosChainClient",
    "to_transaction_argument",
    # Submission
    "TransactionSubmitter",
    # Utils
    "MINT_AMOUNT_USD",
    "MINT_FUNCTION_NAME",
    "MINT_MODULE_NAME",
    "MODULE_ADDRESS",
    "PRIVATE_KEY_BYTES",
    "format_function_id",
    "parse_abort_code",
]
