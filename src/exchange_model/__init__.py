"""Exchange domain model and its JSON document mapping."""

from exchange_model.codec import DocumentMapper
from exchange_model.config import AppSettings, CodecSettings, PairDecodeMode, StatusDecodeMode
from exchange_model.exceptions import (
    DecodeError,
    ExchangeModelError,
    MalformedPair,
    MissingField,
    TypeMismatch,
    UnknownStatus,
)
from exchange_model.models import (
    Coin,
    CurrencyPair,
    DepositInfo,
    DepositLimit,
    ExchangeInfo,
    MarketInfo,
    Order,
    Quotation,
    RawDocument,
    Ticker,
    TransactionStatus,
)

__all__ = [
    "AppSettings",
    "CodecSettings",
    "Coin",
    "CurrencyPair",
    "DecodeError",
    "DepositInfo",
    "DepositLimit",
    "DocumentMapper",
    "ExchangeInfo",
    "ExchangeModelError",
    "MalformedPair",
    "MarketInfo",
    "MissingField",
    "Order",
    "PairDecodeMode",
    "Quotation",
    "RawDocument",
    "StatusDecodeMode",
    "Ticker",
    "TransactionStatus",
    "TypeMismatch",
    "UnknownStatus",
]
