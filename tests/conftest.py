"""Pytest configuration and fixtures."""

import json
from typing import Callable
from unittest.mock import AsyncMock

import httpx
import pytest

from odos_sor.config import ClientConfig, RetryConfig
from odos_sor.sor import OdosSorV2Client

SIGNER = "0x1111111111111111111111111111111111111111"
RECIPIENT = "0x2222222222222222222222222222222222222222"
ROUTER = "0xa669e7A0d4b3e4Fa48af2dE86BD4CD7126Be4e13"
WETH = "0x82aF49447D8a07e3bd95BD0d56f35241523fBab1"
USDC = "0xaf88d065e77c8cC2239327C5EDb3A432268e5831"
PATH_ID = "a1b2c3d4e5f6"


@pytest.fixture
def quote_body() -> dict:
    """A realistic SOR V2 quote response."""
    return {
        "inTokens": [WETH],
        "outTokens": [USDC],
        "inAmounts": ["1000000000000000000"],
        "outAmounts": ["3450120000"],
        "gasEstimate": 412345,
        "dataGasEstimate": 0,
        "gweiPerGas": 0.01,
        "gasEstimateValue": 0.0142,
        "inValues": [3451.2],
        "outValues": [3450.12],
        "netOutValue": 3450.1058,
        "priceImpact": -0.0031,
        "percentDiff": -0.03,
        "partnerFeePercent": 0,
        "pathId": PATH_ID,
        "pathViz": None,
        "blockNumber": 250123456,
    }


@pytest.fixture
def assembly_body() -> dict:
    """A realistic assemble response."""
    return {
        "deprecated": None,
        "blockNumber": 250123460,
        "gasEstimate": 412345,
        "gasEstimateValue": 0.0142,
        "inputTokens": [{"tokenAddress": WETH, "amount": "1000000000000000000"}],
        "outputTokens": [{"tokenAddress": USDC, "amount": "3450120000"}],
        "netOutValue": 3450.1058,
        "outValues": ["3450.12"],
        "transaction": {
            "gas": 618517,
            "gasPrice": 10000000,
            "value": "1000000000000000000",
            "to": ROUTER,
            "from": SIGNER,
            "data": "0x1234",
            "nonce": 42,
            "chainId": 42161,
        },
        "simulation": None,
    }


@pytest.fixture
def test_config() -> ClientConfig:
    """Config with a small retry budget and no API key."""
    return ClientConfig(
        api_key=None,
        retry=RetryConfig(max_retries=2, initial_backoff=0.01, max_backoff=0.05),
    )


@pytest.fixture
def no_sleep(monkeypatch) -> AsyncMock:
    """Replace retry sleeps with a recording no-op."""
    sleep = AsyncMock()
    monkeypatch.setattr("odos_sor.http.asyncio.sleep", sleep)
    return sleep


@pytest.fixture
def make_client(test_config, no_sleep) -> Callable[..., OdosSorV2Client]:
    """Build an OdosSorV2Client whose requests go to ``handler``."""

    def _make(handler, config: ClientConfig = None) -> OdosSorV2Client:
        return OdosSorV2Client(config or test_config, transport=httpx.MockTransport(handler))

    return _make


def json_response(status_code: int, body) -> httpx.Response:
    """Build a JSON response for a mock handler."""
    return httpx.Response(status_code, content=json.dumps(body).encode())
