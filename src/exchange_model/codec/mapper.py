"""Type-dispatching front end over the per-type codecs.

DocumentMapper applies CodecSettings (pair and status decode modes) so that
callers can decode by target class without threading modes through every
call site.

Usage:
    mapper = DocumentMapper(AppSettings().codec)
    info = mapper.loads(MarketInfo, response_text)
"""

from collections.abc import Callable
from typing import Any, TypeVar

from exchange_model.codec import entities
from exchange_model.codec.document import Document, parse_document, render_document
from exchange_model.codec.pair import decode_pair_array, encode_pair_array
from exchange_model.codec.status import decode_status, encode_status
from exchange_model.config import CodecSettings
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

T = TypeVar("T")

_ENCODERS: dict[type, Callable[[Any], Document]] = {
    CurrencyPair: encode_pair_array,
    Coin: entities.encode_coin,
    DepositLimit: entities.encode_deposit_limit,
    DepositInfo: entities.encode_deposit_info,
    ExchangeInfo: entities.encode_exchange_info,
    MarketInfo: entities.encode_market_info,
    TransactionStatus: encode_status,
    Quotation: entities.encode_quotation,
    Ticker: entities.encode_ticker,
    Order: entities.encode_order,
    RawDocument: entities.encode_raw_document,
}


class DocumentMapper:
    """Encodes domain values to documents and decodes documents by target type.

    A bare CurrencyPair uses the [base, quote] array form; the delimited form
    only appears inside ExchangeInfo and MarketInfo.

    Args:
        settings: Codec behaviour (pair and status decode modes).
    """

    def __init__(self, settings: CodecSettings | None = None) -> None:
        self._settings = settings if settings is not None else CodecSettings()
        self._decoders: dict[type, Callable[[Document], Any]] = {
            CurrencyPair: decode_pair_array,
            Coin: entities.decode_coin,
            DepositLimit: entities.decode_deposit_limit,
            DepositInfo: entities.decode_deposit_info,
            ExchangeInfo: lambda doc: entities.decode_exchange_info(doc, self._settings.pair_mode),
            MarketInfo: lambda doc: entities.decode_market_info(doc, self._settings.pair_mode),
            TransactionStatus: lambda doc: decode_status(doc, self._settings.status_mode),
            Quotation: entities.decode_quotation,
            Ticker: entities.decode_ticker,
            Order: entities.decode_order,
            RawDocument: entities.decode_raw_document,
        }

    @property
    def settings(self) -> CodecSettings:
        return self._settings

    def encode(self, value: object) -> Document:
        """Encode a domain value. Raises TypeError for unsupported types."""
        encoder = _ENCODERS.get(type(value))
        if encoder is None:
            raise TypeError(f"no document encoder for {type(value).__name__}")
        return encoder(value)

    def decode(self, cls: type[T], document: Document) -> T:
        """Decode a document into cls. Raises DecodeError subclasses on bad input."""
        decoder = self._decoders.get(cls)
        if decoder is None:
            raise TypeError(f"no document decoder for {cls.__name__}")
        return decoder(document)

    def dumps(self, value: object) -> str:
        """Encode a domain value straight to JSON text."""
        return render_document(self.encode(value))

    def loads(self, cls: type[T], text: str) -> T:
        """Parse JSON text and decode it into cls."""
        return self.decode(cls, parse_document(text))
