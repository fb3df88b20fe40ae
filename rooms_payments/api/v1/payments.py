"""Payments view endpoints - normalize, filter and render payment cards"""

import logging
import time
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Query, Request

from rooms_payments.api.dependencies import get_card_styles, get_request_id
from rooms_payments.api.v1.schemas import (
    EmptyStateSchema,
    FilterOption,
    FiltersResponse,
    PaymentCardSchema,
    PaymentMethodOption,
    PaymentMethodsResponse,
    PaymentsViewResponse,
    RefundResponse,
)
from rooms_payments.domain.filters import ALL, FILTERS, FilterState, filter_payments
from rooms_payments.domain.models import PAYMENT_METHODS, UNKNOWN_METHOD, RejectedPayment
from rooms_payments.domain.normalizer import accepted_payments, parse_payments
from rooms_payments.domain.receipts import handle_refund_action
from rooms_payments.domain.sanitizers import INVALID_DATE
from rooms_payments.infrastructure.observability.logging import log_payments_view
from rooms_payments.infrastructure.observability.metrics import record_normalization, record_suspicious_value
from rooms_payments.presentation.adapter import render_payment_list
from rooms_payments.presentation.styles import CardStyles

router = APIRouter()

_FILTER_OPTIONS = [FilterOption(id=filter_id, label=label) for filter_id, label in FILTERS]


@router.get("/payments/filters", response_model=FiltersResponse)
def get_filters():
    """Status filters offered to the dashboard, in display order"""
    return FiltersResponse(filters=_FILTER_OPTIONS, default=ALL)


@router.get("/payments/methods", response_model=PaymentMethodsResponse)
def get_payment_methods():
    """Known payment methods and the label used for missing ones"""
    return PaymentMethodsResponse(
        methods=[PaymentMethodOption(key=key, label=label) for key, label in PAYMENT_METHODS.items()],
        fallback=UNKNOWN_METHOD,
    )


@router.post("/payments/view", response_model=PaymentsViewResponse)
def view_payments(
    request: Request,
    payload: Any = Body(None),
    filter_: str = Query(ALL, alias="filter", description="Status filter: all, paid, refunded or failed"),
    styles: CardStyles = Depends(get_card_styles),
):
    """
    Turn a raw payments payload into display-ready cards.

    Flow:
    1. Parse and sanitize every entry; drop entries without identity
    2. Apply the status filter (unknown filters keep "all")
    3. Render cards for the visible subset

    Malformed payloads never fail the request; they yield an empty view.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        outcomes = parse_payments(payload)
    except Exception as e:
        logging.error(f"Error processing payment data: {e}", extra={"request_id": request_id})
        outcomes = ()
    payments = accepted_payments(outcomes)
    rejected = sum(1 for o in outcomes if isinstance(o, RejectedPayment))
    record_normalization(len(payments), rejected)

    for payment in payments:
        if payment.amount_flagged:
            record_suspicious_value("amount")
        if payment.paid_at == INVALID_DATE:
            record_suspicious_value("date")
        if payment.refund is not None and payment.refund.refunded_at == INVALID_DATE:
            record_suspicious_value("date")

    state = FilterState().select(filter_)
    visible = filter_payments(payments, state)
    listing = render_payment_list(payments, visible, styles)

    duration_ms = (time.time() - start_time) * 1000
    log_payments_view(request_id, state.selector, listing.total_count, listing.visible_count, duration_ms)

    return PaymentsViewResponse(
        filters=_FILTER_OPTIONS,
        active_filter=state.selector,
        total_count=listing.total_count,
        visible_count=listing.visible_count,
        empty_state=EmptyStateSchema.model_validate(listing.empty_state) if listing.empty_state else None,
        cards=[PaymentCardSchema.model_validate(card) for card in listing.cards],
    )


@router.post(
    "/payments/{payment_id}/refund",
    status_code=501,
    responses={501: {"model": RefundResponse, "description": "Refunds are not processed here"}},
)
def request_refund(payment_id: str):
    """Refunds are not processed by this service"""
    handle_refund_action(payment_id)
    raise HTTPException(status_code=501, detail="Refunds are not supported")
