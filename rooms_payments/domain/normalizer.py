"""Record normalizer - raw payment payloads to canonical payment records"""

import logging
from collections.abc import Mapping
from typing import Any, Iterable, Optional, Tuple

from rooms_payments.config import settings
from rooms_payments.domain.identity import resolve_payment_id
from rooms_payments.domain.models import (
    RAW_FIELD_MAP,
    AcceptedPayment,
    NormalizedPayment,
    ParseOutcome,
    RawPaymentFields,
    RefundInfo,
    RejectedPayment,
    RejectionReason,
)
from rooms_payments.domain.sanitizers import (
    coerce_amount,
    format_date,
    is_present,
    render_currency,
    sanitize_payment_method,
    sanitize_text,
    truncate,
)


def _optional_text(value: Any) -> Optional[str]:
    return sanitize_text(value) or None


def map_raw_fields(raw: Mapping) -> RawPaymentFields:
    """Apply the fixed source -> canonical key correspondence"""
    return RawPaymentFields(**{canonical: raw.get(source) for source, canonical in RAW_FIELD_MAP.items()})


def build_payment(fields: RawPaymentFields) -> NormalizedPayment:
    """Sanitize every field of an identity-bearing entry"""
    amount, flagged = coerce_amount(fields.amount)

    refund = None
    if is_present(fields.refund_id) and is_present(fields.refund_time):
        refund = RefundInfo(
            refund_id=sanitize_text(fields.refund_id),
            refunded_at=format_date(fields.refund_time),
        )

    return NormalizedPayment(
        id=resolve_payment_id(fields.id, fields.booking_id),
        booking_id=_optional_text(fields.booking_id),
        amount=amount,
        amount_flagged=flagged,
        amount_display=render_currency(amount, flagged),
        method_key=sanitize_text(fields.method).lower(),
        method=sanitize_payment_method(fields.method),
        status=_optional_text(fields.status),
        paid_at=format_date(fields.paid_at),
        gateway_id=truncate(fields.gateway_id, settings.gateway_id_max_length),
        refund=refund,
        apartment_title=_optional_text(fields.apartment_title),
        start_date=_optional_text(fields.start_date),
        end_date=_optional_text(fields.end_date),
    )


def parse_payment(raw: Any, index: int) -> ParseOutcome:
    """
    Parse one raw entry into a tagged outcome.

    Entries that are not objects, or carry neither `id` nor `booking_id`, are
    rejected. Rejection is a data-quality filter, not an error.
    """
    if not isinstance(raw, Mapping):
        return RejectedPayment(index=index, reason=RejectionReason.NOT_AN_OBJECT)

    fields = map_raw_fields(raw)
    if not (is_present(fields.id) or is_present(fields.booking_id)):
        return RejectedPayment(index=index, reason=RejectionReason.MISSING_IDENTITY)

    return AcceptedPayment(index=index, payment=build_payment(fields))


def parse_payments(payload: Any) -> Tuple[ParseOutcome, ...]:
    """Parse `{"payments": [...]}`; any other shape yields no outcomes"""
    if not isinstance(payload, Mapping):
        return ()

    entries = payload.get("payments")
    if not isinstance(entries, (list, tuple)):
        return ()

    return tuple(parse_payment(raw, index) for index, raw in enumerate(entries))


def accepted_payments(outcomes: Iterable[ParseOutcome]) -> Tuple[NormalizedPayment, ...]:
    return tuple(o.payment for o in outcomes if isinstance(o, AcceptedPayment))


def normalize_payments(payload: Any) -> Tuple[NormalizedPayment, ...]:
    """
    Main entry point: raw payload -> canonical record set.

    Input order is preserved and duplicates are kept. Never raises; an
    unexpected failure is logged and produces an empty set.
    """
    try:
        return accepted_payments(parse_payments(payload))
    except Exception as e:
        logging.error(f"Error processing payment data: {e}")
        return ()
