"""Static, read-only style tables consumed by the presentation adapter"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

NEUTRAL_STATUS_CLASS = "bg-gray-700 text-gray-300 border border-gray-600"


@dataclass(frozen=True)
class CardStyles:
    """Lookup tables from status/method to presentation metadata"""

    status_classes: Mapping[str, str]
    status_icons: Mapping[str, str]
    method_icons: Mapping[str, str]
    default_status_class: str = NEUTRAL_STATUS_CLASS
    default_status_icon: str = "circle"
    default_method_icon: str = "credit-card"

    def status_class(self, status: str) -> str:
        return self.status_classes.get(status, self.default_status_class)

    def status_icon(self, status: str) -> str:
        return self.status_icons.get(status.lower(), self.default_status_icon)

    def method_icon(self, method_key: str) -> str:
        return self.method_icons.get(method_key, self.default_method_icon)


DEFAULT_CARD_STYLES = CardStyles(
    status_classes=MappingProxyType({
        "paid": "bg-green-900/20 text-green-400 border border-green-800/30",
        "refunded": "bg-blue-900/20 text-blue-400 border border-blue-800/30",
        "cancelled": "bg-red-900/20 text-red-400 border border-red-800/30",
        "failed": NEUTRAL_STATUS_CLASS,
    }),
    status_icons=MappingProxyType({
        "paid": "check-circle",
        "pending": "clock",
        "failed": "times-circle",
        "refunded": "undo",
        "processing": "sync-alt",
        "cancelled": "ban",
    }),
    method_icons=MappingProxyType({
        "credit_card": "credit-card",
        "debit_card": "credit-card",
        "paypal": "paypal",
        "bank_transfer": "university",
        "wallet": "wallet",
        "cash": "money-bill",
        "stripe": "stripe",
        "apple_pay": "apple",
        "google_pay": "google",
    }),
)
