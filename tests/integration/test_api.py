"""Integration tests for API endpoints"""

from unittest.mock import AsyncMock, patch
from fastapi.testclient import TestClient
from prometheus_client import REGISTRY
from rooms_payments.domain.exceptions import ReceiptServiceError
from rooms_payments.domain.receipts import RECEIPT_FAILURE_MESSAGE
from rooms_payments.infrastructure.clients.receipts import ReceiptDocument


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    response = client.get("/metrics")
    assert response.status_code == 200
    assert "rooms_payments_normalized_total" in response.text


def test_request_id_header(client: TestClient):
    """Test request ID is generated, and reused when the caller sends a sane one"""
    assert client.get("/health").headers["X-Request-ID"]

    response = client.get("/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers["X-Request-ID"] == "abc-123"


def test_filters_endpoint(client: TestClient):
    """Test GET /v1/payments/filters"""
    response = client.get("/v1/payments/filters")

    assert response.status_code == 200
    data = response.json()
    assert [f["id"] for f in data["filters"]] == ["all", "paid", "refunded", "failed"]
    assert data["default"] == "all"


def test_methods_endpoint(client: TestClient):
    """Test GET /v1/payments/methods"""
    data = client.get("/v1/payments/methods").json()

    assert {m["key"] for m in data["methods"]} == {"credit_card", "debit_card", "upi", "netbanking", "wallet"}
    assert data["fallback"] == "Unknown"


def test_view_single_payment(client: TestClient):
    """Test POST /v1/payments/view with one paid payment"""
    response = client.post(
        "/v1/payments/view",
        json={"payments": [{"id": "p1", "amount": 500, "status": "paid", "method": "credit_card"}]},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["active_filter"] == "all"
    assert data["total_count"] == 1
    assert data["visible_count"] == 1
    assert data["empty_state"] is None

    card = data["cards"][0]
    details = {row["label"]: row["value"] for row in card["details"]}
    assert card["payment_id"] == "p1"
    assert details["Amount"] == "₹500"
    assert details["Method"] == "Credit Card"
    assert card["status"]["label"] == "Paid"
    assert [a["mode"] for a in card["actions"]] == ["view", "download"]


def test_view_drops_entries_without_identity(client: TestClient, sample_payload):
    """Test malformed entries are dropped rather than failing the request"""
    data = client.post("/v1/payments/view", json=sample_payload).json()

    assert data["total_count"] == 3
    assert [c["payment_id"] for c in data["cards"]] == ["pay_001", "pay_002", "payment-bk_102"]
    assert data["cards"][2]["details"][0]["value"] == "₹Invalid"
    assert data["cards"][1]["refund"]["refund_id"] == "rf_9"


def test_view_with_filter(client: TestClient, sample_payload):
    """Test ?filter=refunded shows only the refunded payment"""
    data = client.post("/v1/payments/view?filter=refunded", json=sample_payload).json()

    assert data["active_filter"] == "refunded"
    assert data["total_count"] == 3
    assert data["visible_count"] == 1
    assert data["cards"][0]["payment_id"] == "pay_002"


def test_view_with_unknown_filter_keeps_all(client: TestClient, sample_payload):
    """Test an unknown filter is ignored"""
    data = client.post("/v1/payments/view?filter=pending", json=sample_payload).json()

    assert data["active_filter"] == "all"
    assert data["visible_count"] == 3


def test_view_with_malformed_payload(client: TestClient):
    """Test a top-level array yields the empty view"""
    response = client.post("/v1/payments/view", json=[{"id": "p1"}])

    assert response.status_code == 200
    data = response.json()
    assert data["total_count"] == 0
    assert data["cards"] == []
    assert data["empty_state"]["title"] == "No payments available"


def test_view_without_body(client: TestClient):
    """Test missing body yields the empty view"""
    data = client.post("/v1/payments/view").json()
    assert data["total_count"] == 0


def test_view_with_no_matches(client: TestClient):
    """Test empty state when the filter hides everything"""
    data = client.post(
        "/v1/payments/view?filter=failed",
        json={"payments": [{"id": "p1", "status": "paid"}]},
    ).json()

    assert data["visible_count"] == 0
    assert data["empty_state"]["title"] == "No payments found"


@patch("rooms_payments.infrastructure.clients.receipts.ReceiptClient.fetch", new_callable=AsyncMock)
def test_download_receipt(mock_fetch: AsyncMock, client: TestClient):
    """Test GET /v1/receipts/{payment_id}?mode=download"""
    mock_fetch.return_value = ReceiptDocument(content=b"%PDF-1.4", media_type="application/pdf")

    response = client.get("/v1/receipts/p1?mode=download")

    assert response.status_code == 200
    assert response.content == b"%PDF-1.4"
    assert response.headers["content-type"] == "application/pdf"
    assert response.headers["content-disposition"].startswith("attachment")
    assert "Rooms4U_Receipt_p1.pdf" in response.headers["content-disposition"]


@patch("rooms_payments.infrastructure.clients.receipts.ReceiptClient.fetch", new_callable=AsyncMock)
def test_view_receipt(mock_fetch: AsyncMock, client: TestClient):
    """Test GET /v1/receipts/{payment_id} defaults to inline viewing"""
    mock_fetch.return_value = ReceiptDocument(content=b"%PDF-1.4", media_type="application/pdf")

    response = client.get("/v1/receipts/p1")

    assert response.status_code == 200
    assert response.headers["content-disposition"] == "inline"
    action = mock_fetch.call_args.args[0]
    assert action.url == "/api/receipt/p1"


@patch("rooms_payments.infrastructure.clients.receipts.ReceiptClient.fetch", new_callable=AsyncMock)
def test_receipt_service_failure(mock_fetch: AsyncMock, client: TestClient):
    """Test receipt service errors surface as a user-facing message"""
    mock_fetch.side_effect = ReceiptServiceError("Receipt service error: 503")

    response = client.get("/v1/receipts/p1?mode=view")

    assert response.status_code == 502
    assert response.json()["detail"] == RECEIPT_FAILURE_MESSAGE


def test_receipt_unknown_mode(client: TestClient):
    """Test unsupported modes are rejected by validation"""
    response = client.get("/v1/receipts/p1?mode=print")
    assert response.status_code == 422


def test_receipt_unusable_identifier(client: TestClient):
    """Test an identifier that sanitizes to nothing"""
    response = client.get("/v1/receipts/javascript:")

    assert response.status_code == 400
    assert response.json()["detail"] == RECEIPT_FAILURE_MESSAGE


def test_refund_not_supported(client: TestClient):
    """Test POST /v1/payments/{payment_id}/refund"""
    response = client.post("/v1/payments/p1/refund")

    assert response.status_code == 501
    assert response.json()["detail"] == "Refunds are not supported"


def test_refund_documents_its_response_model(client: TestClient):
    """Test the 501 answer is described by RefundResponse in the OpenAPI schema"""
    schema = client.get("/openapi.json").json()
    response = schema["paths"]["/v1/payments/{payment_id}/refund"]["post"]["responses"]["501"]

    assert response["content"]["application/json"]["schema"]["$ref"].endswith("/RefundResponse")


def test_view_with_id_that_sanitizes_to_blank(client: TestClient):
    """Test a hostile id falls back to the booking id instead of failing the view"""
    response = client.post(
        "/v1/payments/view",
        json={"payments": [
            {"id": "javascript: javascript:", "booking_id": "b1", "status": "paid"},
            {"id": "javascript: javascript:", "status": "paid"},
        ]},
    )

    assert response.status_code == 200
    cards = response.json()["cards"]
    assert cards[0]["payment_id"] == "payment-b1"
    assert cards[1]["payment_id"].startswith("payment-")
    assert [a["mode"] for a in cards[1]["actions"]] == ["view", "download"]


def test_view_with_falsy_id_uses_booking_id(client: TestClient):
    """Test numeric zero is not a usable id"""
    data = client.post("/v1/payments/view", json={"payments": [{"id": 0, "booking_id": "b1"}]}).json()
    assert data["cards"][0]["payment_id"] == "payment-b1"


def test_view_with_huge_text_field(client: TestClient):
    """Test oversized text is bounded and does not stall the request"""
    data = client.post(
        "/v1/payments/view",
        json={"payments": [{"id": "p1", "apartment_title": "<script" * 15000, "gatewayId": "g" * 50000}]},
    ).json()

    card = data["cards"][0]
    details = {row["label"]: row["value"] for row in card["details"]}
    assert details["Gateway ID"] == "g" * 20


def test_future_refund_date_counts_as_suspicious(client: TestClient):
    """Test a future refund time is counted like a future payment time"""
    labels = {"kind": "date"}
    before = REGISTRY.get_sample_value("rooms_payments_suspicious_values_total", labels) or 0

    client.post(
        "/v1/payments/view",
        json={"payments": [{
            "id": "p1",
            "status": "refunded",
            "paid_at": "2024-01-15T10:30:00Z",
            "refund_id": "rf_1",
            "refund_time": "2999-01-01T00:00:00Z",
        }]},
    )

    after = REGISTRY.get_sample_value("rooms_payments_suspicious_values_total", labels)
    assert after == before + 1
