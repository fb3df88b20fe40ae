"""
Sanitizers - total functions turning one untrusted scalar into a display-safe value.

None of these raise. Anything that cannot be represented comes back as the
caller's default or as one of the sentinels below.
"""

import logging
import re
from datetime import datetime, timedelta, timezone
from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Tuple

from rooms_payments.config import settings
from rooms_payments.domain.models import PAYMENT_METHODS, UNKNOWN_METHOD
from rooms_payments.utils.date_utils import format_display_datetime, get_timezone, parse_timestamp
from rooms_payments.utils.number_utils import format_grouped

NOT_AVAILABLE = "N/A"
INVALID = "Invalid"
INVALID_DATE = "Invalid Date"

_SCRIPT_OPEN = re.compile(r"<script\b", re.IGNORECASE)
_SCRIPT_CLOSE = re.compile(r"</script>", re.IGNORECASE)
_SCRIPT_TAG = re.compile(r"</?script\b[^>]*>?", re.IGNORECASE)
_EVENT_HANDLER = re.compile(r"""on\w+=["'][^"']*["']""")
_JAVASCRIPT_URI = re.compile(r"javascript:", re.IGNORECASE)
_NUMERIC_TEXT = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def is_present(value: Any) -> bool:
    """Presence test for identity fields: None, "", False, zero and NaN are absent"""
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, (int, float, Decimal)):
        return value != 0 and value == value
    return True


def _to_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _remove_script_blocks(text: str) -> str:
    """Drop every <script ...>...</script> span, each ending at the first closing tag"""
    kept = []
    pos = 0
    while True:
        opening = _SCRIPT_OPEN.search(text, pos)
        if opening is None:
            break
        closing = _SCRIPT_CLOSE.search(text, opening.end())
        if closing is None:
            # no later opener can be closed either
            break
        kept.append(text[pos : opening.start()])
        pos = closing.end()
    kept.append(text[pos:])
    return "".join(kept)


def _strip_markup(text: str) -> str:
    # Repeat until stable so removals cannot splice a new payload together
    while True:
        cleaned = _remove_script_blocks(text)
        cleaned = _SCRIPT_TAG.sub("", cleaned)
        cleaned = _EVENT_HANDLER.sub("", cleaned)
        cleaned = _JAVASCRIPT_URI.sub("", cleaned)
        if cleaned == text:
            return cleaned
        text = cleaned


def sanitize_text(value: Any, default: str = "") -> str:
    """
    Stringify, trim and neutralize markup in an untrusted value.

    Input is first cut to `settings.max_raw_text_length` characters. Script
    blocks, inline on*="..." handlers and javascript: URIs are then removed,
    the result is trimmed again and capped at `settings.max_text_length`.
    None maps to `default`; an empty result is returned as-is.
    """
    if value is None:
        return default

    try:
        raw = _to_text(value)[: settings.max_raw_text_length]
        text = _strip_markup(raw.strip()).strip()
        return text[: settings.max_text_length]
    except Exception as e:
        logging.warning(f"Error converting to string: {e}")
        return default


def truncate(value: Any, limit: int) -> str:
    """Sanitized text cut to `limit` characters"""
    return sanitize_text(value)[:limit]


def _coerce_number(value: Any) -> Optional[Decimal]:
    """Loose numeric coercion; None stands for not-a-number"""
    if isinstance(value, bool):
        return Decimal(int(value))
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(repr(value))
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return Decimal(0)
        if text.lstrip("+-") == "Infinity" or _NUMERIC_TEXT.fullmatch(text):
            return Decimal(text)
    return None


def coerce_amount(value: Any) -> Tuple[Optional[Decimal], bool]:
    """
    Coerce a payment amount and check it against policy.

    Returns:
        (amount, flagged): amount is None when missing, unparseable or out of
        range; flagged is True only for finite values outside
        [0, settings.max_payment_amount].
    """
    if value is None:
        return None, False

    try:
        number = _coerce_number(value)
    except (InvalidOperation, ValueError):
        return None, False

    if number is None or not number.is_finite():
        return None, False

    if number < 0 or number > settings.max_payment_amount:
        logging.warning("Suspicious payment amount", extra={"kind": "amount", "amount": str(number)})
        return None, True

    return number, False


def format_number(value: Any, default: str = NOT_AVAILABLE) -> str:
    """Grouped number, `default` for unusable input, "Invalid" when out of range"""
    if value is None:
        return default

    try:
        amount, flagged = coerce_amount(value)
        if flagged:
            return INVALID
        if amount is None:
            return default
        return format_grouped(amount)
    except Exception as e:
        logging.warning(f"Error formatting number: {e}")
        return default


def render_currency(
    amount: Optional[Decimal],
    flagged: bool,
    currency: Optional[str] = None,
    default: str = NOT_AVAILABLE,
) -> str:
    """Render an already coerced amount; out-of-range keeps the symbol prefix"""
    symbol = settings.currency_symbol if currency is None else currency
    if flagged:
        return f"{symbol}{INVALID}"
    if amount is None:
        return default
    return f"{symbol}{format_grouped(amount)}"


def format_currency(value: Any, currency: Optional[str] = None, default: str = NOT_AVAILABLE) -> str:
    """Currency string such as "₹1,00,000", "₹Invalid" or `default`"""
    if value is None:
        return default

    try:
        amount, flagged = coerce_amount(value)
        return render_currency(amount, flagged, currency, default)
    except Exception as e:
        logging.warning(f"Error formatting currency: {e}")
        return default


def format_date(value: Any, default: str = NOT_AVAILABLE, now: Optional[datetime] = None) -> str:
    """
    Display string for a timestamp.

    Falsy or unparseable input gives `default`. Timestamps more than
    `settings.future_date_tolerance_seconds` ahead of `now` give "Invalid Date".
    """
    try:
        if not value:
            return default

        tz = get_timezone(settings.display_timezone)
        moment = parse_timestamp(value, tz)
        if moment is None:
            return default

        current = now or datetime.now(timezone.utc)
        if moment > current + timedelta(seconds=settings.future_date_tolerance_seconds):
            logging.warning("Suspicious future date", extra={"kind": "date", "value": moment.isoformat()})
            return INVALID_DATE

        return format_display_datetime(moment, tz)
    except Exception as e:
        logging.warning(f"Error formatting date: {e}")
        return default


def sanitize_payment_method(value: Any) -> str:
    """Display label for a known method; unknown methods pass through sanitize_text"""
    key = sanitize_text(value).lower()
    return PAYMENT_METHODS.get(key) or sanitize_text(value, UNKNOWN_METHOD)
