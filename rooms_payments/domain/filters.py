"""Filter engine - status selection over the canonical record set"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Tuple

from rooms_payments.domain.models import NormalizedPayment

ALL = "all"

FILTERS: Tuple[Tuple[str, str], ...] = (
    (ALL, "All"),
    ("paid", "Paid"),
    ("refunded", "Refunded"),
    ("failed", "Failed"),
)

FILTER_IDS = frozenset(filter_id for filter_id, _ in FILTERS)


@dataclass(frozen=True)
class FilterState:
    """Current filter selector; always one of FILTER_IDS"""

    selector: str = ALL

    def __post_init__(self) -> None:
        if self.selector not in FILTER_IDS:
            raise ValueError(f"Unknown filter: {self.selector!r}")

    def select(self, new_selector: Any) -> "FilterState":
        """Switch to `new_selector`; anything outside the vocabulary keeps the current state"""
        if isinstance(new_selector, str) and new_selector in FILTER_IDS:
            return FilterState(new_selector)

        logging.debug("Ignoring unknown filter", extra={"requested": repr(new_selector)[:50]})
        return self


def filter_payments(
    payments: Iterable[NormalizedPayment],
    state: FilterState,
) -> Tuple[NormalizedPayment, ...]:
    """
    Subset of `payments` visible under `state`, in input order.

    `all` keeps everything; other selectors match the sanitized status exactly.
    """
    if state.selector == ALL:
        return tuple(payments)

    return tuple(p for p in payments if p.status == state.selector)
