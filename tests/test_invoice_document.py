from datetime import date
from decimal import Decimal
from types import SimpleNamespace

import pytest

from backend.app.schemas.invoice_document import Branding, ColumnsBlock, InvoiceDocument, TableBlock, TextBlock
from backend.app.services.billing import compute_total
from backend.app.services.invoice_document import HEADER_FILL, build_invoice_document


@pytest.fixture
def branding():
    return Branding(
        company_name="Mumtaz Associates",
        company_tagline="Civil, Architecture & Interior Consultancy",
        footer="Thank you for choosing us!",
        currency_symbol="Rs. ",
        date_format="%d/%m/%Y",
    )


def table_of(document: InvoiceDocument) -> TableBlock:
    return next(block for block in document.blocks if isinstance(block, TableBlock))


def make_entry(items, total=None):
    items = [SimpleNamespace(name=name, price=Decimal(str(price)), quantity=qty) for name, price, qty in items]
    return SimpleNamespace(
        customer_name="Asha Verma",
        booking_date=date(2024, 3, 9),
        items=items,
        total=compute_total(items) if total is None else total,
    )


def test_chair_and_table_scenario(branding):
    entry = make_entry([("Chair", 500, 2), ("Table", 1500, 1)])
    table = table_of(build_invoice_document(entry, branding))

    assert len(table.rows) == 4
    assert [cell.text for cell in table.rows[0]] == ["Item", "Price", "Qty", "Total"]
    assert table.rows[1][0].text == "Chair"
    assert table.rows[1][3].value == Decimal("1000.00")
    assert table.rows[2][0].text == "Table"
    assert table.rows[2][3].value == Decimal("1500.00")

    grand_total = table.rows[-1]
    assert grand_total[0].text == "Grand Total"
    assert grand_total[0].col_span == 3
    assert grand_total[1].spanned and grand_total[2].spanned
    assert grand_total[3].value == Decimal("2500.00")
    assert grand_total[3].text == "Rs. 2500.00"


def test_zero_items_has_header_and_grand_total_only(branding):
    table = table_of(build_invoice_document(make_entry([]), branding))

    assert len(table.rows) == 2
    assert table.rows[0][0].text == "Item"
    assert table.rows[1][0].text == "Grand Total"
    assert table.rows[1][3].value == 0


@pytest.mark.parametrize("count", [0, 1, 5, 30])
def test_row_count_is_items_plus_two(branding, count):
    entry = make_entry([(f"Item {i}", i + 1, 1) for i in range(count)])
    assert len(table_of(build_invoice_document(entry, branding)).rows) == count + 2


def test_rows_keep_input_order(branding):
    names = ["Zinc", "Apple", "Mango", "Bolt"]
    entry = make_entry([(name, 10, 1) for name in names])
    table = table_of(build_invoice_document(entry, branding))
    assert [row[0].text for row in table.rows[1:-1]] == names


def test_grand_total_uses_stored_total(branding):
    entry = make_entry([("Chair", 500, 2)], total=Decimal("999.00"))
    table = table_of(build_invoice_document(entry, branding))
    assert table.rows[-1][3].value == Decimal("999.00")


def test_header_fill_is_resolved_into_cells(branding):
    table = table_of(build_invoice_document(make_entry([("Chair", 500, 2)]), branding))
    assert all(cell.style.fill_color == HEADER_FILL for cell in table.rows[0])
    assert all(cell.style.fill_color is None for cell in table.rows[1])


def test_info_block_and_branding(branding):
    document = build_invoice_document(make_entry([]), branding)

    info = next(block for block in document.blocks if isinstance(block, ColumnsBlock))
    left, right = info.columns
    assert [run.text for run in left.runs] == ["Customer Name:", "Asha Verma"]
    assert [run.text for run in right.runs] == ["Booking Date:", "09/03/2024"]
    assert right.alignment == "right"

    texts = [block.text for block in document.blocks if isinstance(block, TextBlock)]
    assert texts[0] == "INVOICE"
    assert "Mumtaz Associates\nCivil, Architecture & Interior Consultancy" in texts
    assert texts[-1] == "Thank you for choosing us!"


def test_document_round_trips_through_json(branding):
    document = build_invoice_document(make_entry([("Chair", 500, 2)]), branding)
    restored = InvoiceDocument.model_validate_json(document.model_dump_json())
    assert len(table_of(restored).rows) == 3
    assert table_of(restored).rows[-1][0].text == "Grand Total"
