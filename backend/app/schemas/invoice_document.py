"""Renderable description of an invoice.

Everything here is plain data: styles are resolved while the document is
built, so a renderer only has to walk the blocks in order.
"""

from decimal import Decimal
from typing import Annotated, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, Field

Alignment = Literal["left", "center", "right"]
# left, top, right, bottom
Margin = Tuple[float, float, float, float]


class Branding(BaseModel):
    company_name: str
    company_tagline: str
    footer: str
    currency_symbol: str = ""
    date_format: str = "%d/%m/%Y"

    @classmethod
    def from_settings(cls, settings) -> "Branding":
        return cls(
            company_name=settings.company_name,
            company_tagline=settings.company_tagline,
            footer=settings.invoice_footer,
            currency_symbol=settings.currency_symbol,
            date_format=settings.invoice_date_format,
        )


class TextStyle(BaseModel):
    font_size: float
    bold: bool = False
    italics: bool = False
    color: str = "#000000"
    fill_color: Optional[str] = None
    alignment: Alignment = "left"
    margin: Margin = (0, 0, 0, 0)


class TextRun(BaseModel):
    text: str
    style: TextStyle


class TextBlock(BaseModel):
    kind: Literal["text"] = "text"
    text: str
    style: TextStyle


class Column(BaseModel):
    runs: List[TextRun]
    alignment: Alignment = "left"


class ColumnsBlock(BaseModel):
    kind: Literal["columns"] = "columns"
    columns: List[Column]
    margin: Margin = (0, 0, 0, 0)


class TableCell(BaseModel):
    text: str = ""
    style: Optional[TextStyle] = None
    col_span: int = 1
    # Numeric cells keep the raw value next to the formatted text
    value: Optional[Union[Decimal, int]] = None
    # Covered by a col_span from an earlier cell in the same row
    spanned: bool = False


class TableLayout(BaseModel):
    h_line_width: float
    v_line_width: float
    h_line_color: str
    v_line_color: str
    padding_left: float
    padding_right: float
    padding_top: float
    padding_bottom: float


class TableBlock(BaseModel):
    kind: Literal["table"] = "table"
    widths: List[float]
    rows: List[List[TableCell]]
    layout: TableLayout


Block = Annotated[Union[TextBlock, ColumnsBlock, TableBlock], Field(discriminator="kind")]


class InvoiceDocument(BaseModel):
    title: str
    blocks: List[Block] = Field(default_factory=list)
