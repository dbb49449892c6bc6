"""Domain value types for exchange entities.

All entities are immutable (frozen dataclasses) and compare structurally.

CRITICAL: All monetary values use Decimal. Never use float for prices, amounts, fees or rates.
Timestamps are integer Unix seconds.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


@dataclass(frozen=True)
class CurrencyPair:
    """An ordered (base, quote) currency identifier.

    Both components are upper-cased on construction, so every call site
    gets the same normalization and equality is case-insensitive with
    respect to the input. The default value is the empty pair.
    """

    base: str = ""
    quote: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "base", self.base.upper())
        object.__setattr__(self, "quote", self.quote.upper())

    def __str__(self) -> str:
        return f"{self.base}_{self.quote}"


@dataclass(frozen=True)
class Coin:
    """A coin listed on an exchange. status is an exchange-defined label."""

    name: str
    symbol: str
    status: str


@dataclass(frozen=True)
class DepositLimit:
    """Minimum and maximum accepted deposit. min <= max is not enforced."""

    min: Decimal
    max: Decimal


@dataclass(frozen=True)
class DepositInfo:
    """Deposit conditions for a single currency and method."""

    limit: DepositLimit
    fee: Decimal
    currency: str
    method: str  # e.g. "bitcoin", "sepa"


@dataclass(frozen=True)
class ExchangeInfo:
    """Conversion conditions offered by an instant-exchange service."""

    pair: CurrencyPair
    limit: DepositLimit
    rate: Decimal
    miner_fee: Decimal


@dataclass(frozen=True)
class MarketInfo:
    """Trading conditions of a market."""

    pair: CurrencyPair
    limit: DepositLimit
    maker_fee: Decimal
    taker_fee: Decimal


class TransactionStatus(str, Enum):
    """Lifecycle status of a deposit or exchange transaction.

    Each member's value is its wire label. NO_DEPOSITS keeps the historical
    "no_deposists" spelling that existing documents use.
    """

    NO_DEPOSITS = "no_deposists"
    INITIAL = "initial"
    RECEIVED = "received"
    COMPLETE = "complete"  # success
    SETTLED = "settled"
    PENDING = "pending"
    FAILED = "failed"
    PARTIAL = "partial"
    EXPIRED = "expired"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Quotation:
    """A single price level of a ticker."""

    price: Decimal
    amount: Decimal
    time: int  # Unix seconds


@dataclass(frozen=True)
class Ticker:
    """Best bid and ask of a market."""

    bid: Quotation
    ask: Quotation


@dataclass(frozen=True)
class Order:
    """An order placed on an exchange.

    Unlike ExchangeInfo and MarketInfo, pair is carried as a structured
    [base, quote] field in documents, not as a "BASE_QUOTE" string.
    """

    status: str  # open, closed, canceled
    order_type: str  # limit, market, ...
    side: str  # buy / sell
    pair: CurrencyPair
    open_time: int  # Unix seconds
    close_time: int  # Unix seconds, 0 while the order is open
    volume: Decimal
    cost: Decimal
    fee: Decimal
    price: Decimal


@dataclass(frozen=True)
class RawDocument:
    """An opaque, already-serialized JSON document (e.g. a signed payload).

    Encoding parses the text into a document; decoding keeps the text as-is.
    """

    text: str
