"""The structured document model used at the serialization boundary.

A document is the tree produced by json.loads: None, bool, int, float, str,
list and dict (insertion-ordered).
"""

import json
from typing import TypeAlias

from exchange_model.exceptions import TypeMismatch

Document: TypeAlias = "None | bool | int | float | str | list[Document] | dict[str, Document]"

_EXCERPT_LENGTH = 40


def parse_document(text: str) -> Document:
    """Parse JSON text into a document.

    Raises:
        TypeMismatch: If text is not valid JSON. The error sits at the
            document root and renders the start of the offending text.
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise TypeMismatch("", "JSON text", render_document(text[:_EXCERPT_LENGTH])) from exc


def render_document(document: Document) -> str:
    """Render a document as compact JSON text.

    Used for error messages as well, so values that are not JSON-serializable
    fall back to their str() form instead of raising.
    """
    return json.dumps(document, separators=(",", ":"), default=str)
