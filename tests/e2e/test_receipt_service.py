"""
E2E tests for receipt proxying against the mock receipt server.

These tests require the mock receipt server to be running on RECEIPT_API_BASE:
    uvicorn mock.receipt_server.main:app --port 8001

Scenarios:
- existing receipt: served inline and as a download
- missing receipt: receipt service 404 surfaces as the user-facing failure
"""

import pytest
from fastapi.testclient import TestClient
from rooms_payments.domain.receipts import RECEIPT_FAILURE_MESSAGE


@pytest.mark.integration
def test_view_existing_receipt(client: TestClient):
    """
    pay_001: receipt exists
    Expected: PDF returned inline
    """
    response = client.get("/v1/receipts/pay_001?mode=view")

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert response.content.startswith(b"%PDF")
    assert response.headers["content-disposition"] == "inline"


@pytest.mark.integration
def test_download_existing_receipt(client: TestClient):
    """
    pay_001: receipt exists
    Expected: PDF returned as Rooms4U_Receipt_pay_001.pdf
    """
    response = client.get("/v1/receipts/pay_001?mode=download")

    assert response.status_code == 200
    assert "Rooms4U_Receipt_pay_001.pdf" in response.headers["content-disposition"]


@pytest.mark.integration
def test_missing_receipt(client: TestClient):
    """
    missing-1: receipt service answers 404
    Expected: 502 with the retry-later message, no retry
    """
    response = client.get("/v1/receipts/missing-1?mode=view")

    assert response.status_code == 502
    assert response.json()["detail"] == RECEIPT_FAILURE_MESSAGE
