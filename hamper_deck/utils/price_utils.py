"""
Price and currency formatting shared by every slide type.
Pure functions only; the renderer decides where the strings go.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional, Union

from hamper_deck.models.presentation import Item, PriceDisplayMode

CURRENCY_SYMBOL = "₹"
PRICE_UPON_REQUEST = "Price upon request"

Number = Union[int, float, Decimal]


def _to_decimal(amount: Number) -> Decimal:
    if isinstance(amount, Decimal):
        return amount
    # str() keeps the shortest repr, so 49.99 stays 49.99 instead of 49.989999...
    return Decimal(str(amount))


def format_amount(amount: Number) -> str:
    """Currency prefix plus exactly two decimals, rounded half-up."""
    quantized = _to_decimal(amount).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"{CURRENCY_SYMBOL}{quantized}"


def format_price(
    amount: Number,
    mode: Optional[PriceDisplayMode] = PriceDisplayMode.SHOW,
    override_text: Optional[str] = None,
) -> Optional[str]:
    """
    Resolve the price line for a slide.
    - hide: None, the caller omits the element
    - upon_request: fixed text, amount and override ignored
    - show: override verbatim when non-empty, else the formatted amount
    """
    mode = PriceDisplayMode(mode) if mode is not None else PriceDisplayMode.SHOW

    if mode == PriceDisplayMode.HIDE:
        return None
    if mode == PriceDisplayMode.UPON_REQUEST:
        return PRICE_UPON_REQUEST
    if override_text:
        return override_text
    return format_amount(amount)


def hamper_total(items: Iterable[Item]) -> Decimal:
    """Plain sum of each item's client price, in listed order."""
    total = Decimal("0")
    for item in items:
        total += _to_decimal(item.price)
    return total


def format_currency(amount: Optional[Number]) -> str:
    """Budget style: integral amounts without decimals, "N/A" when missing."""
    if amount is None:
        return "N/A"
    value = _to_decimal(amount)
    if value == value.to_integral_value():
        return f"{CURRENCY_SYMBOL}{int(value)}"
    return format_amount(value)
