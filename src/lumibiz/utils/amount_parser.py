"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re


def parse_amount(amount_str: str) -> Decimal:
    """Parse a per-unit price into a Decimal.

    Handles various formats:
    - "120"
    - "120.50"
    - "৳120"
    - "Tk 1,200"
    - "1,234.56"

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    cleaned = amount_str.strip()

    # Remove currency symbols and the taka abbreviation
    cleaned = re.sub(r"[৳$€£¥]|(?i:tk\.?)", "", cleaned)

    # Remove thousands separators
    cleaned = cleaned.replace(",", "").strip()

    try:
        return Decimal(cleaned)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e!r}")
