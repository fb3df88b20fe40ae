"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from rooms_payments.infrastructure.clients.receipts import ReceiptClient
from rooms_payments.presentation.styles import DEFAULT_CARD_STYLES, CardStyles


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_receipt_client() -> ReceiptClient:
    """Provide receipt service client instance"""
    return ReceiptClient()


def get_card_styles() -> CardStyles:
    """Provide the read-only style tables for payment cards"""
    return DEFAULT_CARD_STYLES
