"""Domain models - immutable dataclasses representing payment entities"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Mapping, Optional, Union

# Source key -> canonical field name
RAW_FIELD_MAP: Mapping[str, str] = {
    "id": "id",
    "booking_id": "booking_id",
    "amount": "amount",
    "method": "method",
    "status": "status",
    "paid_at": "paid_at",
    "gatewayId": "gateway_id",
    "refund_id": "refund_id",
    "refund_time": "refund_time",
    "apartment_title": "apartment_title",
    "start_date": "start_date",
    "end_date": "end_date",
}

PAYMENT_METHODS: Mapping[str, str] = {
    "credit_card": "Credit Card",
    "debit_card": "Debit Card",
    "upi": "UPI",
    "netbanking": "Net Banking",
    "wallet": "Digital Wallet",
}

UNKNOWN_METHOD = "Unknown"


@dataclass(frozen=True)
class RawPaymentFields:
    """Untrusted source values after fixed key correspondence, not yet sanitized"""

    id: Any = None
    booking_id: Any = None
    amount: Any = None
    method: Any = None
    status: Any = None
    paid_at: Any = None
    gateway_id: Any = None
    refund_id: Any = None
    refund_time: Any = None
    apartment_title: Any = None
    start_date: Any = None
    end_date: Any = None


@dataclass(frozen=True)
class RefundInfo:
    """Refund details shown only when both id and time are present"""

    refund_id: str
    refunded_at: str


@dataclass(frozen=True)
class NormalizedPayment:
    """Canonical payment record, safe for direct display"""

    id: str
    booking_id: Optional[str]
    amount: Optional[Decimal]
    amount_flagged: bool
    amount_display: str
    method_key: str
    method: str
    status: Optional[str]
    paid_at: str
    gateway_id: str
    refund: Optional[RefundInfo]
    apartment_title: Optional[str]
    start_date: Optional[str]
    end_date: Optional[str]


class RejectionReason(str, Enum):
    NOT_AN_OBJECT = "not_an_object"
    MISSING_IDENTITY = "missing_identity"


@dataclass(frozen=True)
class AcceptedPayment:
    index: int
    payment: NormalizedPayment


@dataclass(frozen=True)
class RejectedPayment:
    index: int
    reason: RejectionReason


ParseOutcome = Union[AcceptedPayment, RejectedPayment]


class ReceiptMode(str, Enum):
    VIEW = "view"
    DOWNLOAD = "download"


@dataclass(frozen=True)
class ReceiptAction:
    """Identifier-keyed document action handed to the receipt service"""

    payment_id: str
    mode: ReceiptMode
    url: str
    disposition: str  # inline | attachment
    filename: Optional[str] = None
