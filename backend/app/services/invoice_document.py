"""Build the printable invoice description for an entry."""

from decimal import Decimal

from backend.app.schemas.invoice_document import (
    Branding,
    Column,
    ColumnsBlock,
    InvoiceDocument,
    TableBlock,
    TableCell,
    TableLayout,
    TextBlock,
    TextRun,
    TextStyle,
)
from backend.app.services.billing import line_total, to_money

HEADER_FILL = "#d3eafd"
TABLE_HEADERS = ("Item", "Price", "Qty", "Total")
# Item column takes the remaining width, the numeric ones stay narrow
TABLE_WIDTHS = [4.0, 1.6, 1.0, 1.8]

STYLES = {
    "invoiceTitle": TextStyle(font_size=26, bold=True, color="#003366", alignment="center", margin=(0, 10, 0, 20)),
    "sectionHeading": TextStyle(font_size=16, bold=True, color="#003366", margin=(0, 20, 0, 10)),
    "label": TextStyle(font_size=12, bold=True, color="#555555"),
    "value": TextStyle(font_size=12, color="#111111"),
    "tableHeader": TextStyle(font_size=13, bold=True, color="#003366"),
    "tableCell": TextStyle(font_size=12, color="#333333"),
    "tableNumber": TextStyle(font_size=12, color="#333333", alignment="right"),
    "totalLabel": TextStyle(font_size=13, bold=True, color="#222222", alignment="right"),
    "totalValue": TextStyle(font_size=13, bold=True, color="#007700", alignment="right"),
    "companyInfo": TextStyle(font_size=11, bold=True, color="#555555", alignment="center", margin=(0, 40, 0, 0)),
    "footer": TextStyle(font_size=10, italics=True, color="#888888", alignment="center", margin=(0, 20, 0, 0)),
}

TABLE_LAYOUT = TableLayout(
    h_line_width=0.8,
    v_line_width=0.4,
    h_line_color="#aaaaaa",
    v_line_color="#cccccc",
    padding_left=6,
    padding_right=6,
    padding_top=4,
    padding_bottom=4,
)


def row_fill(row_index: int) -> str | None:
    return HEADER_FILL if row_index == 0 else None


def _style(name: str, row_index: int | None = None) -> TextStyle:
    style = STYLES[name]
    if row_index is None:
        return style
    return style.model_copy(update={"fill_color": row_fill(row_index)})


def format_money(amount, symbol: str) -> str:
    return f"{symbol}{to_money(amount)}"


def _header_row() -> list[TableCell]:
    return [TableCell(text=label, style=_style("tableHeader", 0)) for label in TABLE_HEADERS]


def _item_row(item, row_index: int, symbol: str) -> list[TableCell]:
    price = to_money(item.price)
    row_total = line_total(item.price, item.quantity)
    return [
        TableCell(text=item.name, style=_style("tableCell", row_index)),
        TableCell(text=format_money(price, symbol), style=_style("tableNumber", row_index), value=price),
        TableCell(text=str(item.quantity), style=_style("tableNumber", row_index), value=item.quantity),
        TableCell(text=format_money(row_total, symbol), style=_style("tableNumber", row_index), value=row_total),
    ]


def _grand_total_row(total: Decimal, row_index: int, symbol: str) -> list[TableCell]:
    return [
        TableCell(text="Grand Total", style=_style("totalLabel", row_index), col_span=3),
        TableCell(spanned=True),
        TableCell(spanned=True),
        TableCell(text=format_money(total, symbol), style=_style("totalValue", row_index), value=total),
    ]


def build_invoice_document(entry, branding: Branding) -> InvoiceDocument:
    """Describe the invoice for a loaded entry.

    Rows keep the entry's item order. The grand total row shows the stored
    ``entry.total`` rather than recomputing it.
    """
    symbol = branding.currency_symbol
    items = list(entry.items)

    rows = [_header_row()]
    for index, item in enumerate(items, start=1):
        rows.append(_item_row(item, index, symbol))
    rows.append(_grand_total_row(to_money(entry.total or 0), len(items) + 1, symbol))

    info = ColumnsBlock(
        columns=[
            Column(
                runs=[
                    TextRun(text="Customer Name:", style=STYLES["label"]),
                    TextRun(text=entry.customer_name, style=STYLES["value"]),
                ],
            ),
            Column(
                alignment="right",
                runs=[
                    TextRun(text="Booking Date:", style=STYLES["label"]),
                    TextRun(text=entry.booking_date.strftime(branding.date_format), style=STYLES["value"]),
                ],
            ),
        ],
        margin=(0, 20, 0, 10),
    )

    return InvoiceDocument(
        title=f"Invoice - {entry.customer_name}",
        blocks=[
            TextBlock(text="INVOICE", style=STYLES["invoiceTitle"]),
            info,
            TextBlock(text="Order Summary", style=STYLES["sectionHeading"]),
            TableBlock(widths=list(TABLE_WIDTHS), rows=rows, layout=TABLE_LAYOUT),
            TextBlock(text=f"{branding.company_name}\n{branding.company_tagline}", style=STYLES["companyInfo"]),
            TextBlock(text=branding.footer, style=STYLES["footer"]),
        ],
    )
