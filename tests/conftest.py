"""Pytest fixtures for testing"""

import pytest
from datetime import datetime, timezone
from typing import Any, Dict
from fastapi.testclient import TestClient
from rooms_payments.api.main import create_app


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def now() -> datetime:
    """Fixed reference time for date sanitizer tests"""
    return datetime(2024, 6, 1, tzinfo=timezone.utc)


@pytest.fixture
def sample_payload() -> Dict[str, Any]:
    """Dashboard payload with one payment per status plus entries the normalizer drops"""
    return {
        "payments": [
            {
                "id": "pay_001",
                "booking_id": "bk_100",
                "amount": 12500,
                "method": "credit_card",
                "status": "paid",
                "paid_at": "2024-01-15T10:30:00Z",
                "gatewayId": "pay_GATEWAY_1234567890_extra",
                "apartment_title": "Sea View Studio",
            },
            {
                "id": "pay_002",
                "booking_id": "bk_101",
                "amount": "4999.50",
                "method": "UPI",
                "status": "refunded",
                "paid_at": "2024-02-01T08:00:00Z",
                "refund_id": "rf_9",
                "refund_time": "2024-02-03T09:15:00Z",
            },
            {
                "booking_id": "bk_102",
                "amount": 999999999,
                "method": "paypal",
                "status": "failed",
            },
            {"amount": 100, "status": "paid"},
            None,
            "not a payment",
        ]
    }
