"""Pyth-attested mint flow for Aptos.

Fetches a signed BTC/USD price update from Pyth Hermes, encodes it for
the mint entry point, and submits a mint transaction on Aptos.

Example usage:
    ```python
    from pyth_aptos_mint import MintConfig, MintFlow

    flow = MintFlow.from_config(MintConfig.from_env())
    outcome = await flow.mint()
    ```
"""

from .errors import (
    BuildError,
    ConfigurationError,
    ExecutionError,
    InvalidAttestationFormat,
    MintError,
    NetworkError,
    SubmissionError,
)
from .config import HERMES_URLS, NODE_URLS, MintConfig
from .oracle import (
    BTC_USD_PRICE_ID,
    HermesClient,
    ParsedPrice,
    PriceAttestation,
    encode_price_payload,
)
from .chain import (
    AptosChainClient,
    ChainClient,
    EntryFunctionId,
    MintIntent,
    SigningIdentity,
    TransactionSubmitter,
    load_signing_identity,
)
from .flow import ErrorMessageTable, MintFlow, MintOutcome, MintState

__all__ = [
    # Errors
    "MintError",
    "ConfigurationError",
    "NetworkError",
    "InvalidAttestationFormat",
    "BuildError",
    "SubmissionError",
    "ExecutionError",
    # Config
    "MintConfig",
    "NODE_URLS",
    "HERMES_URLS",
    # Oracle
    "BTC_USD_PRICE_ID",
    "HermesClient",
    "ParsedPrice",
    "PriceAttestation",
    "encode_price_payload",
    # Chain
    "AptosChainClient",
    "ChainClient",
    "EntryFunctionId",
    "MintIntent",
    "SigningIdentity",
    "TransactionSubmitter",
    "load_signing_identity",
    # Flow
    "ErrorMessageTable",
    "MintFlow",
    "MintOutcome",
    "MintState",
]
