"""Hermes price oracle client.

Fetches the latest signed price update for a single Pyth feed. The
binary update is what the on-chain contract verifies; the parsed price
is only kept around for logging and display.
"""

import logging
from typing import Any, Dict, Optional

import httpx
from eth_utils import is_hex, remove_0x_prefix

from ..errors import InvalidAttestationFormat, NetworkError
from .types import ParsedPrice, PriceAttestation
from .utils import HERMES_BETA_URL, LATEST_PRICE_UPDATES_PATH, normalize_feed_id

logger = logging.getLogger(__name__)


class HermesClient:
    """Async client for the Hermes "latest price updates" endpoint.

    Example:
        ```python
        async with HermesClient() as hermes:
            attestation = await hermes.fetch_latest_attestation(BTC_USD_PRICE_ID)
        ```
    """

    def __init__(
        self,
        base_url: str = HERMES_BETA_URL,
        timeout: float = 30.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the Hermes client.

        Args:
            base_url: Hermes service URL
            timeout: Request timeout in seconds (ignored if http_client is given)
            http_client: Optional pre-configured client; not closed by close()
        """
        self.base_url = base_url.rstrip("/")
        self._owns_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(timeout=timeout)

    async def fetch_latest_attestation(self, feed_id: str) -> PriceAttestation:
        """Fetch the latest signed price update for one feed.

        Args:
            feed_id: Price feed ID (32-byte hex string)

        Returns:
            PriceAttestation holding the hex-encoded signed update

        Raises:
            ValueError: If feed_id is malformed
            NetworkError: If Hermes is unreachable or answers with an error status
            InvalidAttestationFormat: If the response has no usable binary entry
        """
        feed_id = normalize_feed_id(feed_id)

        try:
            response = await self._http_client.get(
                f"{self.base_url}{LATEST_PRICE_UPDATES_PATH}",
                params={"ids[]": [feed_id], "encoding": "hex", "parsed": "true"},
            )
        except httpx.TransportError as e:
            raise NetworkError(f"Hermes request failed: {e}") from e

        if not response.is_success:
            raise NetworkError(
                f"Hermes request failed: {response.status_code} {response.text}",
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError as e:
            raise InvalidAttestationFormat("Invalid price update data format") from e

        logger.debug("Raw price update data: %s", body)

        data = _first_binary_entry(body)
        if data is None or not _is_byte_hex(data):
            raise InvalidAttestationFormat("Invalid price update data format")

        return PriceAttestation(
            feed_id=feed_id,
            data=data,
            parsed=_first_parsed_price(body),
        )

    async def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> "HermesClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()


def _first_binary_entry(body: Any) -> Optional[str]:
    if not isinstance(body, dict):
        return None
    binary = body.get("binary")
    if not isinstance(binary, dict):
        return None
    data = binary.get("data")
    if not isinstance(data, list) or not data:
        return None
    entry = data[0]
    if not isinstance(entry, str) or not entry:
        return None
    return entry


def _first_parsed_price(body: Dict[str, Any]) -> Optional[ParsedPrice]:
    # Hermes sends numbers as strings
    try:
        price = body["parsed"][0]["price"]
        return ParsedPrice(
            price=int(price["price"]),
            conf=int(price["conf"]),
            expo=int(price["expo"]),
            publish_time=int(price["publish_time"]),
        )
    except (KeyError, IndexError, TypeError, ValueError):
        return None


def _is_byte_hex(value: str) -> bool:
    return is_hex(value) and len(remove_0x_prefix(value)) % 2 == 0
