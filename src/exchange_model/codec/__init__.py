"""Document codecs for the exchange domain model.

Per-type encode/decode functions live in the submodules; DocumentMapper
dispatches over all of them by type.
"""

from exchange_model.codec.document import Document, parse_document, render_document
from exchange_model.codec.entities import (
    decode_coin,
    decode_deposit_info,
    decode_deposit_limit,
    decode_exchange_info,
    decode_market_info,
    decode_order,
    decode_quotation,
    decode_raw_document,
    decode_ticker,
    encode_coin,
    encode_deposit_info,
    encode_deposit_limit,
    encode_exchange_info,
    encode_market_info,
    encode_order,
    encode_quotation,
    encode_raw_document,
    encode_ticker,
)
from exchange_model.codec.fields import numeric_string
from exchange_model.codec.mapper import DocumentMapper
from exchange_model.codec.pair import (
    decode_pair_array,
    decode_pair_delimited,
    encode_pair_array,
    encode_pair_delimited,
)
from exchange_model.codec.status import decode_status, encode_status

__all__ = [
    "Document",
    "DocumentMapper",
    "decode_coin",
    "decode_deposit_info",
    "decode_deposit_limit",
    "decode_exchange_info",
    "decode_market_info",
    "decode_order",
    "decode_pair_array",
    "decode_pair_delimited",
    "decode_quotation",
    "decode_raw_document",
    "decode_status",
    "decode_ticker",
    "encode_coin",
    "encode_deposit_info",
    "encode_deposit_limit",
    "encode_exchange_info",
    "encode_market_info",
    "encode_order",
    "encode_pair_array",
    "encode_pair_delimited",
    "encode_quotation",
    "encode_raw_document",
    "encode_status",
    "encode_ticker",
    "numeric_string",
    "parse_document",
    "render_document",
]
