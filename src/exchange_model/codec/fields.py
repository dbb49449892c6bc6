"""Field access and scalar coercion helpers shared by all decoders.

Every reader takes the enclosing document and a key, requires the key to be
present and converts its value to the domain type, raising a DecodeError
subclass that names the key on failure.
"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from decimal import Decimal, InvalidOperation

from exchange_model.codec.document import Document, render_document
from exchange_model.exceptions import DecodeError, MissingField, TypeMismatch

NULL_NUMERIC = "0.0"


def as_mapping(document: Document, field: str = "") -> Mapping[str, Document]:
    """Return the document if it is a JSON object, else raise TypeMismatch."""
    if not isinstance(document, Mapping):
        raise TypeMismatch(field, "an object", render_document(document))
    return document


def require(document: Mapping[str, Document], key: str) -> Document:
    """Return document[key], raising MissingField if the key is absent."""
    if key not in document:
        raise MissingField(key)
    return document[key]


@contextmanager
def nested(key: str) -> Iterator[None]:
    """Prefix the path of any DecodeError raised inside with key."""
    try:
        yield
    except DecodeError as exc:
        exc.nest(key)
        raise


def numeric_string(value: Document, field: str = "") -> str:
    """Normalize a numeric-or-null field to a numeric-parseable string.

    Exchanges report numbers inconsistently as strings or, for zero, as null.
    Strings pass through unchanged and null becomes "0.0". Any other shape,
    bare numbers included, raises TypeMismatch.
    """
    if isinstance(value, str):
        return value
    if value is None:
        return NULL_NUMERIC
    raise TypeMismatch(field, "string or null", render_document(value))


def read_string(document: Mapping[str, Document], key: str) -> str:
    value = require(document, key)
    if not isinstance(value, str):
        raise TypeMismatch(key, "a string", render_document(value))
    return value


def read_decimal(document: Mapping[str, Document], key: str) -> Decimal:
    """Read a JSON number as Decimal.

    Goes through str() so that 0.1 becomes Decimal("0.1") rather than the
    binary float expansion. Booleans are rejected even though bool is an int.
    """
    value = require(document, key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeMismatch(key, "a number", render_document(value))
    result = Decimal(str(value))
    if not result.is_finite():
        raise TypeMismatch(key, "a finite number", render_document(value))
    return result


def read_numeric_string(document: Mapping[str, Document], key: str) -> Decimal:
    """Read a string-or-null numeric field (see numeric_string) as Decimal.

    Only plain finite numbers are accepted. "NaN", "sNaN", "Infinity", "1_000"
    and padded text raise TypeMismatch although Decimal() parses them.
    """
    value = require(document, key)
    text = numeric_string(value, key)
    try:
        result = Decimal(text)
    except InvalidOperation:
        result = None
    if result is None or not result.is_finite() or "_" in text or text != text.strip():
        raise TypeMismatch(key, "a numeric string", render_document(value))
    return result


def read_timestamp(document: Mapping[str, Document], key: str) -> int:
    """Read Unix seconds. Integral floats (e.g. 1700000000.0) are accepted."""
    value = require(document, key)
    if isinstance(value, bool):
        raise TypeMismatch(key, "an integer timestamp", render_document(value))
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise TypeMismatch(key, "an integer timestamp", render_document(value))
