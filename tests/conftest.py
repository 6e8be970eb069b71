"""Shared fixtures for the mint flow tests."""

from unittest.mock import AsyncMock, Mock

import httpx
import pytest

from pyth_aptos_mint import (
    BTC_USD_PRICE_ID,
    EntryFunctionId,
    HermesClient,
    MintConfig,
    SigningIdentity,
    TransactionSubmitter,
)

# Test key (DO NOT use in production)
TEST_PRIVATE_KEY = "0x" + "ab" * 32

# Short attestation standing in for a real Pyth accumulator update
TEST_ATTESTATION_HEX = "a1b2c3d4"


def hermes_body(data=(TEST_ATTESTATION_HEX,)):
    """Build a Hermes latest-price response envelope."""
    return {
        "binary": {"encoding": "hex", "data": list(data)},
        "parsed": [
            {
                "id": BTC_USD_PRICE_ID[2:],
                "price": {
                    "price": "6512345000000",
                    "conf": "2500000000",
                    "expo": -8,
                    "publish_time": 1700000000,
                },
            }
        ],
    }


def hermes_client(handler) -> HermesClient:
    """HermesClient whose requests are answered by handler."""
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return HermesClient("https://hermes.test", http_client=http_client)


@pytest.fixture
def config():
    return MintConfig(private_key=TEST_PRIVATE_KEY)


@pytest.fixture
def identity():
    return SigningIdentity(address="0x1", account=Mock())


@pytest.fixture
def chain_client():
    chain = Mock()
    chain.build_transaction = AsyncMock(return_value="raw-txn")
    chain.sign_and_submit = AsyncMock(return_value="0xABC")
    chain.wait_for_transaction = AsyncMock(return_value=None)
    return chain


@pytest.fixture
def submitter(chain_client):
    return TransactionSubmitter(chain_client, EntryFunctionId.mint())
