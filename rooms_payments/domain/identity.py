"""Display identifier resolution for payment records"""

import secrets
import string
from typing import Any

from rooms_payments.domain.sanitizers import is_present, sanitize_text

_PLACEHOLDER_ALPHABET = string.digits + string.ascii_lowercase
_PLACEHOLDER_LENGTH = 9


def placeholder_id() -> str:
    """Random id, unique enough within one render pass; not stable across calls"""
    suffix = "".join(secrets.choice(_PLACEHOLDER_ALPHABET) for _ in range(_PLACEHOLDER_LENGTH))
    return f"payment-{suffix}"


def resolve_payment_id(payment_id: Any, booking_id: Any) -> str:
    """
    Resolve the visible identifier of a payment.

    Priority: explicit id -> "payment-<booking id>" -> random placeholder.
    A tier applies only when its raw value is present (0, False and "" are not)
    and still non-blank after sanitizing.
    """
    if is_present(payment_id):
        safe_id = sanitize_text(payment_id)
        if safe_id.strip():
            return safe_id

    if is_present(booking_id):
        safe_booking_id = sanitize_text(booking_id)
        if safe_booking_id.strip():
            return f"payment-{safe_booking_id}"

    return placeholder_id()
