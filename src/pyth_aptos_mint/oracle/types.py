"""Oracle Types for Pyth price attestations."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ParsedPrice:
    """Human readable price that Hermes returns next to the binary update."""

    price: int
    """Price as an integer mantissa."""

    conf: int
    """Confidence interval, same scale as price."""

    expo: int
    """Base-10 exponent applied to price and conf (e.g., -8)."""

    publish_time: int
    """Unix timestamp in seconds when the price was published."""

    @property
    def value(self) -> float:
        """Price with the exponent applied."""
        return self.price * 10**self.expo


@dataclass(frozen=True)
class PriceAttestation:
    """Signed price update for one feed, fetched fresh for each mint attempt."""

    feed_id: str
    """Price feed ID the update was requested for (0x-prefixed)."""

    data: str
    """Hex-encoded signed update, exactly as returned by Hermes."""

    parsed: Optional[ParsedPrice] = None
    """Decoded price, when Hermes included it. Informational only."""

    @property
    def byte_length(self) -> int:
        """Length of the signed update once hex-decoded."""
        data = self.data[2:] if self.data.startswith("0x") else self.data
        return len(data) // 2
