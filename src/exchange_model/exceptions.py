"""Exceptions raised by the document mapping layer.

Decode failures live here so that the codec modules and the models can
share them without circular imports. Encoding never raises.
"""


class ExchangeModelError(Exception):
    """Base exception for all exchange model errors."""


class DecodeError(ExchangeModelError):
    """Raised when a document cannot be decoded into a domain value.

    Attributes:
        field: Name of the offending document key ("" for the document root).
        path: Keys leading from the outermost document to the offending field.
    """

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.path: tuple[str, ...] = (field,) if field else ()
        self.message = message
        super().__init__(message)

    @property
    def location(self) -> str:
        """Dotted path to the offending field, e.g. "limit.min"."""
        return ".".join(self.path) or "<root>"

    def nest(self, parent: str) -> None:
        """Prefix the path with the key of the enclosing document."""
        self.path = (parent, *self.path)

    def __str__(self) -> str:
        return f"{self.location}: {self.message}"


class MissingField(DecodeError):
    """Raised when a required document key is absent."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"missing required field {name!r}")


class TypeMismatch(DecodeError):
    """Raised when a document value has the wrong kind for its domain field."""

    def __init__(self, field: str, expected: str, rendered: str) -> None:
        self.expected = expected
        self.rendered = rendered
        super().__init__(field, f"field {rendered} is not {expected}")


class UnknownStatus(TypeMismatch):
    """Raised when a status label is not one of the known transaction statuses."""


class MalformedPair(DecodeError):
    """Raised in strict mode when a pair string has no "_" delimiter."""

    def __init__(self, field: str, text: str) -> None:
        self.text = text
        super().__init__(field, f"pair {text!r} has no '_' delimiter")
