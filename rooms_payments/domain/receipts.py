"""Receipt and refund actions keyed by payment identifier"""

import logging
from typing import Any
from urllib.parse import quote

from rooms_payments.config import settings
from rooms_payments.domain.exceptions import ReceiptActionError
from rooms_payments.domain.models import ReceiptAction, ReceiptMode
from rooms_payments.domain.sanitizers import sanitize_text

RECEIPT_FAILURE_MESSAGE = "Failed to generate receipt. Please try again."


def receipt_filename(payment_id: str) -> str:
    return settings.receipt_filename_template.format(payment_id=payment_id)


def build_receipt_action(payment_id: Any, mode: Any) -> ReceiptAction:
    """
    Describe how to open a payment's receipt.

    `view` opens the document inline, `download` saves it as
    Rooms4U_Receipt_<id>.pdf.

    Raises:
        ReceiptActionError: Unknown mode or an id that sanitizes to nothing
    """
    try:
        receipt_mode = ReceiptMode(mode)
    except ValueError as e:
        raise ReceiptActionError(f"Unsupported receipt mode: {mode!r}") from e

    safe_id = sanitize_text(payment_id)
    if not safe_id:
        raise ReceiptActionError("Missing payment identifier")

    url = f"{settings.receipt_path}/{quote(safe_id, safe='')}"

    if receipt_mode is ReceiptMode.DOWNLOAD:
        return ReceiptAction(
            payment_id=safe_id,
            mode=receipt_mode,
            url=url,
            disposition="attachment",
            filename=receipt_filename(safe_id),
        )

    return ReceiptAction(payment_id=safe_id, mode=receipt_mode, url=url, disposition="inline")


def handle_refund_action(payment_id: Any) -> None:
    """Refund requests are accepted and ignored; refunds are not processed here"""
    safe_id = sanitize_text(payment_id)
    logging.info("Refund requested", extra={"payment_id": safe_id, "step": "refund_noop"})
