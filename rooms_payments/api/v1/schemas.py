"""Pydantic schemas for API responses"""

from pydantic import BaseModel, ConfigDict
from typing import List, Optional


class OrmSchema(BaseModel):
    """Schemas populated straight from presentation dataclasses"""

    model_config = ConfigDict(from_attributes=True)


class FilterOption(BaseModel):
    """Selectable status filter"""

    id: str
    label: str


class FiltersResponse(BaseModel):
    """Response for GET /v1/payments/filters"""

    filters: List[FilterOption]
    default: str


class PaymentMethodOption(BaseModel):
    key: str
    label: str


class PaymentMethodsResponse(BaseModel):
    """Response for GET /v1/payments/methods"""

    methods: List[PaymentMethodOption]
    fallback: str


class StatusBadgeSchema(OrmSchema):
    label: str
    css_class: str
    icon: str
    spinning: bool


class DetailRowSchema(OrmSchema):
    label: str
    value: str
    color: str
    icon: str


class RefundBlockSchema(OrmSchema):
    refund_id: str
    refunded_at: str
    icon: str


class CardActionSchema(OrmSchema):
    mode: str
    label: str
    icon: str
    href: str
    filename: Optional[str] = None


class PaymentCardSchema(OrmSchema):
    """Single payment card"""

    payment_id: str
    title: Optional[str] = None
    subtitle: str
    status: Optional[StatusBadgeSchema] = None
    details: List[DetailRowSchema]
    refund: Optional[RefundBlockSchema] = None
    actions: List[CardActionSchema]
    animation_delay: str


class EmptyStateSchema(OrmSchema):
    title: str
    message: str


class PaymentsViewResponse(OrmSchema):
    """Response for POST /v1/payments/view"""

    filters: List[FilterOption]
    active_filter: str
    total_count: int
    visible_count: int
    empty_state: Optional[EmptyStateSchema] = None
    cards: List[PaymentCardSchema]


class RefundResponse(BaseModel):
    detail: str
