"""Shared test fixtures for the exchange model codecs."""

import pytest

from exchange_model.codec import Document, DocumentMapper
from exchange_model.config import CodecSettings


@pytest.fixture
def deposit_info_doc() -> Document:
    """A well-formed DepositInfo document."""
    return {
        "limit": {"min": 0.001, "max": 10.5},
        "fee": 0.0005,
        "currency": "BTC",
        "method": "bitcoin",
    }


@pytest.fixture
def exchange_info_doc() -> Document:
    """A well-formed ExchangeInfo document with a delimited pair."""
    return {
        "pair": "BTC_ETH",
        "limit": {"min": 0.01, "max": 2.0},
        "rate": 31.25,
        "miner_fee": 0.002,
    }


@pytest.fixture
def market_info_doc() -> Document:
    """A well-formed MarketInfo document with a delimited pair."""
    return {
        "pair": "XBT_USD",
        "limit": {"min": 0.0001, "max": 100},
        "taker_fee": 0.0026,
        "maker_fee": 0.0016,
    }


@pytest.fixture
def order_doc() -> Document:
    """A closed limit buy order as an exchange reports it (string numerics)."""
    return {
        "status": "closed",
        "ordertype": "limit",
        "type": "buy",
        "pair": ["XBT", "USD"],
        "open": 1700000000,
        "close": 1700000600,
        "volume": "0.5",
        "cost": "15000.00",
        "fee": "24.00",
        "price": "30000.0",
    }


@pytest.fixture
def ticker_doc() -> Document:
    """A ticker with string prices and integer timestamps."""
    return {
        "bid": {"price": "29999.9", "amount": "1.25", "time": 1700000000},
        "ask": {"price": "30000.1", "amount": "0.75", "time": 1700000001},
    }


@pytest.fixture
def mapper() -> DocumentMapper:
    """DocumentMapper with default (lenient pair, strict status) settings."""
    return DocumentMapper(CodecSettings())
