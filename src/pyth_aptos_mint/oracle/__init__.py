"""Pyth Oracle Module.

Fetches signed price updates from Hermes and encodes them for the
Aptos mint entry point.

Example usage:
    ```python
    from pyth_aptos_mint.oracle import (
        HermesClient,
        encode_price_payload,
        BTC_USD_PRICE_ID,
    )

    async with HermesClient() as hermes:
        attestation = await hermes.fetch_latest_attestation(BTC_USD_PRICE_ID)

    payload = encode_price_payload(attestation)  # [[0x50, 0x4e, ...]]
    ```
"""

from .types import ParsedPrice, PriceAttestation
from .hermes import HermesClient
from .encoding import EncodedPricePayload, encode_price_payload, payload_to_bytes
from .utils import (
    BTC_USD_PRICE_ID,
    FEED_ID_BYTES,
    HERMES_BETA_URL,
    HERMES_MAINNET_URL,
    LATEST_PRICE_UPDATES_PATH,
    format_price,
    is_feed_id,
    normalize_feed_id,
)

__all__ = [
    # Types
    "ParsedPrice",
    "PriceAttestation",
    "EncodedPricePayload",
    # Client
    "HermesClient",
    # Encoding
    "encode_price_payload",
    "payload_to_bytes",
    # Utils
    "BTC_USD_PRICE_ID",
    "FEED_ID_BYTES",
    "HERMES_BETA_URL",
    "HERMES_MAINNET_URL",
    "LATEST_PRICE_UPDATES_PATH",
    "format_price",
    "is_feed_id",
    "normalize_feed_id",
]
