"""Billing service utilities."""

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable

CENTS = Decimal("0.01")


def to_money(value: Decimal | float | int) -> Decimal:
    return Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_UP)


def line_total(price: Decimal | float | int, quantity: int) -> Decimal:
    return to_money(Decimal(str(price)) * quantity)


def compute_total(items: Iterable) -> Decimal:
    """Sum price * quantity over items using Decimal math.

    Items only need ``price`` and ``quantity`` attributes, so ORM rows and
    request schemas both work. Input is assumed to be validated already.
    """
    total = sum((Decimal(str(item.price)) * item.quantity for item in items), Decimal("0.00"))
    return to_money(total)
