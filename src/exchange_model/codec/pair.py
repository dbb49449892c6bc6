"""Currency pair adapters.

A CurrencyPair has two document encodings, chosen by the containing type:

- array form ``["BTC", "USD"]``, used by Order;
- delimited form ``"BTC_USD"``, used by ExchangeInfo and MarketInfo.

The delimited form is lossy. Decoding splits on the *last* "_", which is only
correct when the quote code itself contains no "_": "BTC_ETH_USD" decodes to
("BTC_ETH", "USD"). Existing documents depend on this split, so it must not
change.
"""

from collections.abc import Sequence

from exchange_model.codec.document import Document, render_document
from exchange_model.config import PairDecodeMode
from exchange_model.exceptions import MalformedPair, TypeMismatch
from exchange_model.logging import get_logger
from exchange_model.models import CurrencyPair

logger = get_logger(__name__)

DELIMITER = "_"


def encode_pair_array(pair: CurrencyPair) -> list[str]:
    return [pair.base, pair.quote]


def decode_pair_array(document: Document, field: str = "pair") -> CurrencyPair:
    """Decode ``[base, quote]``. Elements past the second are ignored."""
    if (
        isinstance(document, str)
        or not isinstance(document, Sequence)
        or len(document) < 2
        or not all(isinstance(item, str) for item in document[:2])
    ):
        raise TypeMismatch(field, "a [base, quote] array of strings", render_document(document))
    return CurrencyPair(document[0], document[1])


def encode_pair_delimited(pair: CurrencyPair) -> str:
    return str(pair)


def decode_pair_delimited(
    text: str,
    mode: PairDecodeMode = PairDecodeMode.LENIENT,
    field: str = "pair",
) -> CurrencyPair:
    """Split a ``BASE_QUOTE`` string on its last delimiter.

    Without a delimiter, LENIENT mode returns the empty CurrencyPair() and
    STRICT mode raises MalformedPair.
    """
    base, delimiter, quote = text.rpartition(DELIMITER)
    if not delimiter:
        if mode is PairDecodeMode.STRICT:
            raise MalformedPair(field, text)
        logger.debug("pair_missing_delimiter", field=field, text=text)
        return CurrencyPair()
    return CurrencyPair(base, quote)
