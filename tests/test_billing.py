from decimal import Decimal
from types import SimpleNamespace

from backend.app.schemas.entry import EntryItemCreate
from backend.app.services.billing import compute_total, line_total


def item(price, quantity, name="Thing"):
    return SimpleNamespace(name=name, price=price, quantity=quantity)


def test_compute_total_empty_is_zero():
    assert compute_total([]) == 0
    assert compute_total([]) == Decimal("0.00")


def test_compute_total_sums_price_times_quantity():
    items = [item(500, 2, "Chair"), item(1500, 1, "Table")]
    assert compute_total(items) == Decimal("2500.00")


def test_compute_total_ignores_order():
    items = [item("19.99", 3), item("0.50", 7), item(100, 0), item("12.25", 4)]
    assert compute_total(items) == compute_total(list(reversed(items)))
    assert compute_total(items) == Decimal("112.47")


def test_compute_total_accepts_request_items():
    items = [
        EntryItemCreate(name="Chair", price=500, quantity=2),
        EntryItemCreate(name="Lamp", price="12.50", quantity=3),
    ]
    assert compute_total(items) == Decimal("1037.50")


def test_compute_total_handles_floats_without_binary_drift():
    assert compute_total([item(0.1, 3)]) == Decimal("0.30")


def test_line_total_rounds_to_cents():
    assert line_total("2.50", 3) == Decimal("7.50")
    assert line_total(0, 10) == Decimal("0.00")
