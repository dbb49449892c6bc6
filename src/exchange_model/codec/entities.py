"""Encoders and decoders for the composite domain types.

Decoders take a document (usually a dict fresh from json.loads), require
every named key and convert each value to its domain type. Failures inside a
nested object report the dotted path, e.g. "limit.max".

Encoders are total. Decimals in JSON-number fields are written as int when
they carry no fractional digits and as float otherwise.
Order and Quotation numerics are written as strings, the way exchanges
report them.
"""

from collections.abc import Mapping
from decimal import Decimal

from exchange_model.codec.document import Document, parse_document, render_document
from exchange_model.codec.fields import (
    as_mapping,
    nested,
    read_decimal,
    read_numeric_string,
    read_string,
    read_timestamp,
    require,
)
from exchange_model.codec.pair import (
    decode_pair_array,
    decode_pair_delimited,
    encode_pair_array,
    encode_pair_delimited,
)
from exchange_model.config import PairDecodeMode
from exchange_model.exceptions import TypeMismatch
from exchange_model.models import (
    Coin,
    DepositInfo,
    DepositLimit,
    ExchangeInfo,
    MarketInfo,
    Order,
    Quotation,
    RawDocument,
    Ticker,
)


def _number(value: Decimal) -> int | float:
    """Write a Decimal as a JSON number.

    Decimals read from JSON integers have a non-negative exponent
    (Decimal("100"), not Decimal("100.0")), so they go back out as int and
    keep full precision beyond 2**53.
    """
    if not value.is_finite():
        # float() refuses signalling NaNs
        return float("nan") if value.is_nan() else float(value)
    if value.as_tuple().exponent >= 0:
        return int(value)
    return float(value)


# ──────────────────────────────────────────────
# Coin
# ──────────────────────────────────────────────


def encode_coin(coin: Coin) -> dict[str, Document]:
    return {"name": coin.name, "symbol": coin.symbol, "status": coin.status}


def decode_coin(document: Document) -> Coin:
    doc = as_mapping(document)
    return Coin(
        name=read_string(doc, "name"),
        symbol=read_string(doc, "symbol"),
        status=read_string(doc, "status"),
    )


# ──────────────────────────────────────────────
# Deposits
# ──────────────────────────────────────────────


def encode_deposit_limit(limit: DepositLimit) -> dict[str, Document]:
    return {"min": _number(limit.min), "max": _number(limit.max)}


def decode_deposit_limit(document: Document) -> DepositLimit:
    doc = as_mapping(document)
    return DepositLimit(min=read_decimal(doc, "min"), max=read_decimal(doc, "max"))


def _read_limit(doc: Mapping[str, Document]) -> DepositLimit:
    value = require(doc, "limit")
    with nested("limit"):
        return decode_deposit_limit(value)


def encode_deposit_info(info: DepositInfo) -> dict[str, Document]:
    return {
        "limit": encode_deposit_limit(info.limit),
        "fee": _number(info.fee),
        "currency": info.currency,
        "method": info.method,
    }


def decode_deposit_info(document: Document) -> DepositInfo:
    doc = as_mapping(document)
    return DepositInfo(
        limit=_read_limit(doc),
        fee=read_decimal(doc, "fee"),
        currency=read_string(doc, "currency"),
        method=read_string(doc, "method"),
    )


# ──────────────────────────────────────────────
# Exchange and market info (delimited pair)
# ──────────────────────────────────────────────


def encode_exchange_info(info: ExchangeInfo) -> dict[str, Document]:
    return {
        "pair": encode_pair_delimited(info.pair),
        "limit": encode_deposit_limit(info.limit),
        "rate": _number(info.rate),
        "miner_fee": _number(info.miner_fee),
    }


def decode_exchange_info(
    document: Document,
    pair_mode: PairDecodeMode = PairDecodeMode.LENIENT,
) -> ExchangeInfo:
    """Decode exchange info. pair is a "BASE_QUOTE" string split on its last "_"."""
    doc = as_mapping(document)
    limit = _read_limit(doc)
    rate = read_decimal(doc, "rate")
    miner_fee = read_decimal(doc, "miner_fee")
    pair = decode_pair_delimited(read_string(doc, "pair"), pair_mode)
    return ExchangeInfo(pair=pair, limit=limit, rate=rate, miner_fee=miner_fee)


def encode_market_info(info: MarketInfo) -> dict[str, Document]:
    return {
        "pair": encode_pair_delimited(info.pair),
        "limit": encode_deposit_limit(info.limit),
        "taker_fee": _number(info.taker_fee),
        "maker_fee": _number(info.maker_fee),
    }


def decode_market_info(
    document: Document,
    pair_mode: PairDecodeMode = PairDecodeMode.LENIENT,
) -> MarketInfo:
    """Decode market info. pair is a "BASE_QUOTE" string split on its last "_"."""
    doc = as_mapping(document)
    limit = _read_limit(doc)
    maker_fee = read_decimal(doc, "maker_fee")
    taker_fee = read_decimal(doc, "taker_fee")
    pair = decode_pair_delimited(read_string(doc, "pair"), pair_mode)
    return MarketInfo(pair=pair, limit=limit, maker_fee=maker_fee, taker_fee=taker_fee)


# ──────────────────────────────────────────────
# Ticker
# ──────────────────────────────────────────────


def encode_quotation(quotation: Quotation) -> dict[str, Document]:
    return {
        "price": str(quotation.price),
        "amount": str(quotation.amount),
        "time": quotation.time,
    }


def decode_quotation(document: Document) -> Quotation:
    doc = as_mapping(document)
    return Quotation(
        price=read_numeric_string(doc, "price"),
        amount=read_numeric_string(doc, "amount"),
        time=read_timestamp(doc, "time"),
    )


def encode_ticker(ticker: Ticker) -> dict[str, Document]:
    return {"bid": encode_quotation(ticker.bid), "ask": encode_quotation(ticker.ask)}


def decode_ticker(document: Document) -> Ticker:
    doc = as_mapping(document)
    sides = {}
    for side in ("bid", "ask"):
        value = require(doc, side)
        with nested(side):
            sides[side] = decode_quotation(value)
    return Ticker(**sides)


# ──────────────────────────────────────────────
# Order (array pair)
# ──────────────────────────────────────────────


def encode_order(order: Order) -> dict[str, Document]:
    return {
        "status": order.status,
        "ordertype": order.order_type,
        "type": order.side,
        "pair": encode_pair_array(order.pair),
        "open": order.open_time,
        "close": order.close_time,
        "volume": str(order.volume),
        "cost": str(order.cost),
        "fee": str(order.fee),
        "price": str(order.price),
    }


def decode_order(document: Document) -> Order:
    """Decode an order. Numeric fields are strings; null reads as zero."""
    doc = as_mapping(document)
    return Order(
        status=read_string(doc, "status"),
        order_type=read_string(doc, "ordertype"),
        side=read_string(doc, "type"),
        pair=decode_pair_array(require(doc, "pair")),
        open_time=read_timestamp(doc, "open"),
        close_time=read_timestamp(doc, "close"),
        volume=read_numeric_string(doc, "volume"),
        cost=read_numeric_string(doc, "cost"),
        fee=read_numeric_string(doc, "fee"),
        price=read_numeric_string(doc, "price"),
    )


# ──────────────────────────────────────────────
# Raw documents
# ──────────────────────────────────────────────


def encode_raw_document(raw: RawDocument) -> Document:
    """Embed the stored JSON text as a parsed document.

    Raises TypeMismatch if the stored text is not valid JSON.
    """
    return parse_document(raw.text)


def decode_raw_document(document: Document) -> RawDocument:
    if not isinstance(document, str):
        raise TypeMismatch("", "a string", render_document(document))
    return RawDocument(document)
