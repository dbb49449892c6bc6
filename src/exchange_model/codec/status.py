"""Transaction status label codec.

Decoding is an exhaustive match over the nine known labels. Encoding keeps
the historical display behaviour: anything that is not a known status
renders as "expired", the last member doubling as the default case.
"""

from exchange_model.codec.document import Document, render_document
from exchange_model.config import StatusDecodeMode
from exchange_model.exceptions import TypeMismatch, UnknownStatus
from exchange_model.logging import get_logger
from exchange_model.models import TransactionStatus

logger = get_logger(__name__)

FALLBACK_STATUS = TransactionStatus.EXPIRED

_LABELS: dict[TransactionStatus, str] = {
    TransactionStatus.NO_DEPOSITS: "no_deposists",
    TransactionStatus.INITIAL: "initial",
    TransactionStatus.RECEIVED: "received",
    TransactionStatus.COMPLETE: "complete",
    TransactionStatus.SETTLED: "settled",
    TransactionStatus.PENDING: "pending",
    TransactionStatus.FAILED: "failed",
    TransactionStatus.PARTIAL: "partial",
    TransactionStatus.EXPIRED: "expired",
}

_BY_LABEL: dict[str, TransactionStatus] = {label: status for status, label in _LABELS.items()}


def encode_status(status: object) -> str:
    """Return the wire label of status, "expired" for anything unrecognized."""
    if isinstance(status, TransactionStatus):
        return _LABELS[status]
    if isinstance(status, str) and status in _BY_LABEL:
        return status
    logger.warning("status_encode_fallback", status=repr(status))
    return _LABELS[FALLBACK_STATUS]


def decode_status(
    document: Document,
    mode: StatusDecodeMode = StatusDecodeMode.STRICT,
    field: str = "status",
) -> TransactionStatus:
    """Decode a bare status label.

    Unknown labels raise UnknownStatus, or map to EXPIRED in FALLBACK mode.
    """
    if not isinstance(document, str):
        raise TypeMismatch(field, "a status label", render_document(document))
    status = _BY_LABEL.get(document)
    if status is not None:
        return status
    if mode is StatusDecodeMode.FALLBACK:
        logger.warning("status_decode_fallback", label=document)
        return FALLBACK_STATUS
    raise UnknownStatus(field, "a known status label", render_document(document))
