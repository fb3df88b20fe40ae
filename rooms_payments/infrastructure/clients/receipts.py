"""Receipt service HTTP client for fetching payment receipt documents"""

import httpx
from dataclasses import dataclass
from rooms_payments.config import settings
from rooms_payments.domain.exceptions import ReceiptServiceError
from rooms_payments.domain.models import ReceiptAction


@dataclass(frozen=True)
class ReceiptDocument:
    content: bytes
    media_type: str


class ReceiptClient:
    """Client for the external receipt document service"""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = (base_url or settings.receipt_api_base).rstrip("/")
        self.timeout = timeout or settings.http_timeout_seconds
        self.transport = transport

    async def fetch(self, action: ReceiptAction) -> ReceiptDocument:
        """
        Fetch the receipt document an action points at.

        Single attempt; a second request for the same id is not coordinated
        with the first.

        Raises:
            ReceiptServiceError: On timeout, HTTP errors, or an empty response
        """
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.get(f"{self.base_url}{action.url}")
                response.raise_for_status()
            except httpx.TimeoutException as e:
                raise ReceiptServiceError(f"Receipt service timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise ReceiptServiceError(f"Receipt service error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise ReceiptServiceError(f"Receipt service unreachable: {e}") from e

        if not response.content:
            raise ReceiptServiceError("Receipt service returned an empty document")

        media_type = response.headers.get("content-type", "application/pdf").split(";")[0].strip()
        return ReceiptDocument(content=response.content, media_type=media_type)
