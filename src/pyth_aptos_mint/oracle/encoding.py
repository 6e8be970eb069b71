"""Price payload encoding for the on-chain mint call.

The mint entry point takes `vector<vector<u8>>`: a list of price
updates. Hermes hands back one flat hex string per feed, so a single
attestation becomes a list holding exactly one byte list.
"""

from typing import List, Union

from eth_utils import decode_hex

from .types import PriceAttestation

EncodedPricePayload = List[List[int]]


def encode_price_payload(
    attestation: Union[PriceAttestation, str],
) -> EncodedPricePayload:
    """Encode a price attestation as a singleton list of byte values.

    Args:
        attestation: PriceAttestation, or its hex data (0x prefix optional)

    Returns:
        [[b0, b1, ...]] - always exactly one element

    Example:
        >>> encode_price_payload("a1b2")
        [[161, 178]]
    """
    data = attestation.data if isinstance(attestation, PriceAttestation) else attestation
    return [list(decode_hex(data))]


def payload_to_bytes(payload: EncodedPricePayload) -> List[bytes]:
    """Convert an encoded payload to a list of bytes objects for BCS serialization."""
    return [bytes(update) for update in payload]
