"""GET /v1/receipts/{payment_id} - View or download a payment receipt"""

import logging
from urllib.parse import quote
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from starlette.responses import Response

from rooms_payments.api.dependencies import get_receipt_client, get_request_id
from rooms_payments.domain.exceptions import ReceiptActionError, ReceiptServiceError
from rooms_payments.domain.models import ReceiptMode
from rooms_payments.domain.receipts import RECEIPT_FAILURE_MESSAGE, build_receipt_action
from rooms_payments.infrastructure.clients.receipts import ReceiptClient
from rooms_payments.infrastructure.observability.metrics import receipt_failure_counter, receipt_request_counter

router = APIRouter()


@router.get("/receipts/{payment_id}")
async def get_receipt(
    payment_id: str,
    request: Request,
    mode: ReceiptMode = Query(ReceiptMode.VIEW, description="view opens inline, download saves a file"),
    receipt_client: ReceiptClient = Depends(get_receipt_client),
):
    """
    Proxy a receipt document from the receipt service.

    Returns:
        The document with an inline or attachment Content-Disposition
    """
    request_id = get_request_id(request)
    receipt_request_counter.labels(mode=mode.value).inc()

    try:
        action = build_receipt_action(payment_id, mode)
        document = await receipt_client.fetch(action)

    except ReceiptServiceError as e:
        receipt_failure_counter.inc()
        logging.error(f"Receipt service error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=502, detail=RECEIPT_FAILURE_MESSAGE)

    except ReceiptActionError as e:
        receipt_failure_counter.inc()
        logging.warning(f"Receipt action rejected: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=400, detail=RECEIPT_FAILURE_MESSAGE)

    disposition = action.disposition
    if action.filename:
        disposition = f"{disposition}; filename*=UTF-8''{quote(action.filename)}"

    return Response(
        content=document.content,
        media_type=document.media_type,
        headers={"Content-Disposition": disposition},
    )
