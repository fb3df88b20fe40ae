"""Number formatting utilities (Indian digit grouping)"""

from decimal import Decimal, ROUND_HALF_UP


def group_indian_digits(digits: str) -> str:
    """
    Group an unsigned integer string the en-IN way.

    The last three digits form one group, everything before is grouped in pairs:
    10000000 -> 1,00,00,000
    """
    if len(digits) <= 3:
        return digits

    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)

    return ",".join(groups + [tail])


def format_grouped(value: Decimal, max_fraction_digits: int = 3) -> str:
    """Format a decimal with en-IN grouping and at most `max_fraction_digits` decimals"""
    quantum = Decimal(1).scaleb(-max_fraction_digits)
    rounded = value.quantize(quantum, rounding=ROUND_HALF_UP)
    if rounded == 0:
        rounded = abs(rounded)  # no "-0"

    sign = "-" if rounded < 0 else ""
    integer, _, fraction = f"{abs(rounded):f}".partition(".")
    fraction = fraction.rstrip("0")

    grouped = group_indian_digits(integer)
    return f"{sign}{grouped}.{fraction}" if fraction else f"{sign}{grouped}"
