from __future__ import annotations

from decimal import Decimal

import pytest

from hamper_deck.models.presentation import Item, PriceDisplayMode
from hamper_deck.utils.price_utils import (
    PRICE_UPON_REQUEST,
    format_amount,
    format_currency,
    format_price,
    hamper_total,
)


def _item(price: float) -> Item:
    return Item(id=str(price), name=f"Item {price}", client_price=price)


@pytest.mark.parametrize("amount", [0, 1, 99.99, 12345.678])
@pytest.mark.parametrize("override", [None, "", "Ask us"])
def test_hide_returns_none(amount, override) -> None:
    assert format_price(amount, PriceDisplayMode.HIDE, override) is None
    assert format_price(amount, "hide", override) is None


@pytest.mark.parametrize("amount", [0, 250, 1e6])
@pytest.mark.parametrize("override", [None, "Ask us"])
def test_upon_request_ignores_amount_and_override(amount, override) -> None:
    assert format_price(amount, PriceDisplayMode.UPON_REQUEST, override) == "Price upon request"
    assert PRICE_UPON_REQUEST == "Price upon request"


def test_show_formats_amount_with_two_decimals() -> None:
    assert format_price(100, PriceDisplayMode.SHOW, None) == "₹100.00"
    assert format_price(100) == "₹100.00"
    assert format_price(100, None) == "₹100.00"


def test_show_prefers_non_empty_override() -> None:
    assert format_price(100, PriceDisplayMode.SHOW, "Ask us") == "Ask us"
    assert format_price(100, PriceDisplayMode.SHOW, "") == "₹100.00"


def test_rounding_is_half_up() -> None:
    assert format_amount(2.675) == "₹2.68"
    assert format_amount(0.125) == "₹0.13"
    assert format_amount(Decimal("1.005")) == "₹1.01"


def test_hamper_total_is_plain_sum() -> None:
    items = [_item(40.50), _item(9.49)]
    assert format_price(hamper_total(items)) == "₹49.99"


def test_hamper_total_is_order_independent() -> None:
    prices = [0.1, 0.2, 0.3, 1999.99, 5.55]
    forward = hamper_total([_item(p) for p in prices])
    backward = hamper_total([_item(p) for p in reversed(prices)])
    assert forward == backward == Decimal("2006.14")


def test_empty_hamper_total_is_zero() -> None:
    assert format_price(hamper_total([])) == "₹0.00"


def test_format_currency_for_budgets() -> None:
    assert format_currency(50000) == "₹50000"
    assert format_currency(499.5) == "₹499.50"
    assert format_currency(None) == "N/A"
