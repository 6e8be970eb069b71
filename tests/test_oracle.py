"""Tests for the oracle module."""

import httpx
import pytest

from pyth_aptos_mint import InvalidAttestationFormat, NetworkError
from pyth_aptos_mint.oracle import (
    BTC_USD_PRICE_ID,
    LATEST_PRICE_UPDATES_PATH,
    PriceAttestation,
    encode_price_payload,
    format_price,
    is_feed_id,
    normalize_feed_id,
    payload_to_bytes,
)

from conftest import TEST_ATTESTATION_HEX, hermes_body, hermes_client


class TestFeedIds:
    """Tests for price feed ID helpers."""

    def test_is_feed_id_valid(self):
        """Test that the BTC/USD feed ID is accepted with and without prefix."""
        assert is_feed_id(BTC_USD_PRICE_ID)
        assert is_feed_id(BTC_USD_PRICE_ID[2:])

    def test_is_feed_id_invalid(self):
        """Test that short, non-hex and non-string IDs are rejected."""
        assert not is_feed_id("0x1234")
        assert not is_feed_id("0x" + "zz" * 32)
        assert not is_feed_id(None)

    def test_normalize_feed_id(self):
        """Test normalization adds the prefix and lower-cases."""
        assert normalize_feed_id(BTC_USD_PRICE_ID[2:].upper()) == BTC_USD_PRICE_ID

    def test_normalize_feed_id_invalid(self):
        """Test that malformed IDs raise ValueError."""
        with pytest.raises(ValueError, match="Invalid price feed ID"):
            normalize_feed_id("BTC_USD")

    def test_format_price(self):
        """Test price formatting with exponents."""
        assert format_price(6512345000000, -8) == "65123.45"
        assert format_price(0, -8) == "0"
        assert format_price(12, 2) == "1200"


class TestEncoding:
    """Tests for price payload encoding."""

    def test_encode_wraps_single_update(self):
        """Test the payload is a single-element list of byte values."""
        payload = encode_price_payload(PriceAttestation(BTC_USD_PRICE_ID, "a1b2"))

        assert payload == [[0xA1, 0xB2]]

    def test_encode_preserves_length(self):
        """Test the inner list has as many bytes as the decoded attestation."""
        attestation = PriceAttestation(BTC_USD_PRICE_ID, "504e4155" + "00ff" * 200)

        payload = encode_price_payload(attestation)

        assert len(payload) == 1
        assert len(payload[0]) == attestation.byte_length == 404
        assert bytes(payload[0]).hex() == attestation.data

    def test_encode_accepts_prefixed_hex(self):
        """Test that a 0x prefix is ignored."""
        assert encode_price_payload("0xa1b2") == encode_price_payload("a1b2")

    def test_encode_is_deterministic(self):
        """Test repeated encoding yields identical output."""
        attestation = PriceAttestation(BTC_USD_PRICE_ID, TEST_ATTESTATION_HEX)

        assert encode_price_payload(attestation) == encode_price_payload(attestation)

    def test_encode_empty(self):
        """Test that an empty attestation encodes to a single empty update."""
        assert encode_price_payload("") == [[]]

    def test_payload_to_bytes(self):
        """Test conversion to bytes for BCS serialization."""
        assert payload_to_bytes([[0xA1, 0xB2]]) == [b"\xa1\xb2"]


class TestHermesClient:
    """Tests for the Hermes client."""

    @pytest.mark.asyncio
    async def test_fetch_latest_attestation(self):
        """Test a successful fetch returns the first binary entry."""
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, json=hermes_body())

        hermes = hermes_client(handler)
        attestation = await hermes.fetch_latest_attestation(BTC_USD_PRICE_ID)

        assert attestation.feed_id == BTC_USD_PRICE_ID
        assert attestation.data == TEST_ATTESTATION_HEX
        assert attestation.parsed.price == 6512345000000
        assert attestation.parsed.expo == -8
        assert attestation.parsed.value == pytest.approx(65123.45)

        assert len(requests) == 1
        assert requests[0].url.path == LATEST_PRICE_UPDATES_PATH
        assert requests[0].url.params.get_list("ids[]") == [BTC_USD_PRICE_ID]
        assert requests[0].url.params["encoding"] == "hex"

    @pytest.mark.asyncio
    async def test_fetch_without_parsed_price(self):
        """Test that the parsed price is optional."""
        body = hermes_body()
        del body["parsed"]
        hermes = hermes_client(lambda request: httpx.Response(200, json=body))

        attestation = await hermes.fetch_latest_attestation(BTC_USD_PRICE_ID)

        assert attestation.parsed is None

    @pytest.mark.asyncio
    async def test_fetch_missing_binary(self):
        """Test that a response without binary data is rejected."""
        hermes = hermes_client(lambda request: httpx.Response(200, json={"parsed": []}))

        with pytest.raises(InvalidAttestationFormat, match="Invalid price update data format"):
            await hermes.fetch_latest_attestation(BTC_USD_PRICE_ID)

    @pytest.mark.asyncio
    async def test_fetch_empty_data(self):
        """Test that an empty binary.data list is rejected."""
        hermes = hermes_client(
            lambda request: httpx.Response(200, json=hermes_body(data=()))
        )

        with pytest.raises(InvalidAttestationFormat):
            await hermes.fetch_latest_attestation(BTC_USD_PRICE_ID)

    @pytest.mark.asyncio
    async def test_fetch_non_hex_data(self):
        """Test that an entry that does not decode to bytes is rejected."""
        hermes = hermes_client(
            lambda request: httpx.Response(200, json=hermes_body(data=("not-hex",)))
        )

        with pytest.raises(InvalidAttestationFormat):
            await hermes.fetch_latest_attestation(BTC_USD_PRICE_ID)

    @pytest.mark.asyncio
    async def test_fetch_invalid_json(self):
        """Test that a non-JSON body is rejected."""
        hermes = hermes_client(lambda request: httpx.Response(200, text="<html>"))

        with pytest.raises(InvalidAttestationFormat):
            await hermes.fetch_latest_attestation(BTC_USD_PRICE_ID)

    @pytest.mark.asyncio
    async def test_fetch_http_error(self):
        """Test that an error status surfaces as NetworkError."""
        hermes = hermes_client(lambda request: httpx.Response(503, text="unavailable"))

        with pytest.raises(NetworkError) as exc_info:
            await hermes.fetch_latest_attestation(BTC_USD_PRICE_ID)

        assert exc_info.value.status_code == 503

    @pytest.mark.asyncio
    async def test_fetch_transport_error(self):
        """Test that connection failures surface as NetworkError."""

        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        hermes = hermes_client(handler)

        with pytest.raises(NetworkError, match="connection refused"):
            await hermes.fetch_latest_attestation(BTC_USD_PRICE_ID)

    @pytest.mark.asyncio
    async def test_fetch_invalid_feed_id(self):
        """Test that a malformed feed ID never reaches the network."""
        requests = []
        hermes = hermes_client(lambda request: requests.append(request))

        with pytest.raises(ValueError):
            await hermes.fetch_latest_attestation("BTC_USD_PRICE_ID")

        assert requests == []
