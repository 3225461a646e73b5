"""Display formatting for amounts and percentages."""

from __future__ import annotations

from .numeric import round_half_up, to_amount

TAKA = "৳"
CRORE = 10_000_000
LAKH = 100_000


def _group_south_asian(digits: str) -> str:
    """Group an integer string as 12,34,567 (last three, then pairs)."""

    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


def _split(value: float, decimals: bool) -> tuple[str, str]:
    if decimals:
        text = f"{value:.2f}"
        whole, fraction = text.split(".")
        return whole, fraction.rstrip("0")
    return str(round_half_up(value)), ""


def format_currency(amount: float, currency: str = "BDT", decimals: bool = False) -> str:
    """Format *amount* for display.

    Taka amounts use the ``৳`` sign and lakh/crore digit grouping; other
    currencies are prefixed with their ISO code and grouped in thousands.
    Whole units are shown unless *decimals* is set.
    """

    amount = to_amount(amount)
    sign = "-" if amount < 0 else ""
    whole, fraction = _split(abs(amount), decimals)
    if whole == "0" and not fraction:
        sign = ""

    if currency.upper() == "BDT":
        grouped = _group_south_asian(whole)
        prefix = TAKA
    else:
        grouped = f"{int(whole):,}"
        prefix = f"{currency.upper()} "

    suffix = f".{fraction}" if fraction else ""
    return f"{sign}{prefix}{grouped}{suffix}"


def format_compact_currency(amount: float, currency: str = "BDT") -> str:
    """Abbreviate large amounts as crore (Cr), lakh (L) or thousands (K)."""

    amount = to_amount(amount)
    magnitude = abs(amount)
    sign = "-" if amount < 0 else ""

    if magnitude >= CRORE:
        return f"{sign}{TAKA}{magnitude / CRORE:.1f}Cr"
    if magnitude >= LAKH:
        return f"{sign}{TAKA}{magnitude / LAKH:.1f}L"
    if magnitude >= 1000:
        return f"{sign}{TAKA}{magnitude / 1000:.0f}K"
    return format_currency(amount, currency)


def format_percentage(value: float) -> str:
    return f"{round_half_up(value)}%"
