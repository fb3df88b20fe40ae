"""Presentation adapter - canonical payment records to card view models"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from rooms_payments.domain.exceptions import ReceiptActionError
from rooms_payments.domain.models import NormalizedPayment, ReceiptMode
from rooms_payments.domain.receipts import build_receipt_action
from rooms_payments.presentation.styles import DEFAULT_CARD_STYLES, CardStyles


@dataclass(frozen=True)
class StatusBadge:
    label: str
    css_class: str
    icon: str
    spinning: bool


@dataclass(frozen=True)
class DetailRow:
    label: str
    value: str
    color: str
    icon: str


@dataclass(frozen=True)
class RefundBlock:
    refund_id: str
    refunded_at: str
    icon: str = "undo"


@dataclass(frozen=True)
class CardAction:
    mode: str
    label: str
    icon: str
    href: str
    filename: Optional[str] = None


@dataclass(frozen=True)
class PaymentCard:
    payment_id: str
    title: Optional[str]
    subtitle: str
    status: Optional[StatusBadge]
    details: Tuple[DetailRow, ...]
    refund: Optional[RefundBlock]
    actions: Tuple[CardAction, ...]
    animation_delay: str


@dataclass(frozen=True)
class EmptyState:
    title: str
    message: str


@dataclass(frozen=True)
class PaymentList:
    total_count: int
    visible_count: int
    cards: Tuple[PaymentCard, ...]
    empty_state: Optional[EmptyState]


def _status_badge(status: Optional[str], styles: CardStyles) -> Optional[StatusBadge]:
    if not status:
        return None
    return StatusBadge(
        label=status[0].upper() + status[1:],
        css_class=styles.status_class(status),
        icon=styles.status_icon(status),
        spinning=status == "processing",
    )


def _actions(payment_id: str) -> Tuple[CardAction, ...]:
    try:
        view = build_receipt_action(payment_id, ReceiptMode.VIEW)
        download = build_receipt_action(payment_id, ReceiptMode.DOWNLOAD)
    except ReceiptActionError as e:
        logging.warning(f"Receipt actions unavailable: {e}", extra={"payment_id": payment_id})
        return ()
    return (
        CardAction(mode=view.mode.value, label="Receipt", icon="eye", href=view.url),
        CardAction(
            mode=download.mode.value,
            label="Download",
            icon="download",
            href=download.url,
            filename=download.filename,
        ),
    )


def render_payment_card(
    payment: NormalizedPayment,
    index: int,
    styles: CardStyles = DEFAULT_CARD_STYLES,
) -> PaymentCard:
    """Build the card for one visible payment; `index` staggers the entry animation"""
    details = (
        DetailRow(label="Amount", value=payment.amount_display, color="emerald", icon="money-bill-wave"),
        DetailRow(label="Method", value=payment.method, color="sky", icon=styles.method_icon(payment.method_key)),
        DetailRow(label="Paid At", value=payment.paid_at, color="amber", icon="calendar-check"),
        DetailRow(label="Gateway ID", value=payment.gateway_id, color="violet", icon="fingerprint"),
    )

    refund = None
    if payment.refund is not None:
        refund = RefundBlock(refund_id=payment.refund.refund_id, refunded_at=payment.refund.refunded_at)

    return PaymentCard(
        payment_id=payment.id,
        title=payment.apartment_title,
        subtitle=f"payment #{payment.id}",
        status=_status_badge(payment.status, styles),
        details=details,
        refund=refund,
        actions=_actions(payment.id),
        animation_delay=f"{round(index * 0.1, 1)}s",
    )


def render_payment_list(
    payments: Sequence[NormalizedPayment],
    visible: Sequence[NormalizedPayment],
    styles: CardStyles = DEFAULT_CARD_STYLES,
) -> PaymentList:
    """Cards for the visible subset, or the empty state explaining why there are none"""
    empty_state = None
    if not visible:
        if not payments:
            empty_state = EmptyState(title="No payments available", message="There are no payments to display")
        else:
            empty_state = EmptyState(
                title="No payments found",
                message="No payments match your current filter criteria",
            )

    return PaymentList(
        total_count=len(payments),
        visible_count=len(visible),
        cards=tuple(render_payment_card(p, i, styles) for i, p in enumerate(visible)),
        empty_state=empty_state,
    )
