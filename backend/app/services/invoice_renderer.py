"""Render an InvoiceDocument to PDF bytes with fpdf2."""

import logging

from fpdf import FPDF, XPos, YPos

from backend.app.schemas.invoice_document import (
    ColumnsBlock,
    InvoiceDocument,
    TableBlock,
    TableCell,
    TextBlock,
    TextStyle,
)

logger = logging.getLogger(__name__)

PAGE_MARGIN = 40
LINE_HEIGHT_RATIO = 1.25
ALIGN = {"left": "L", "center": "C", "right": "R"}


def hex_to_rgb(color: str) -> tuple[int, int, int]:
    value = color.lstrip("#")
    if len(value) == 3:
        value = "".join(ch * 2 for ch in value)
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


class InvoicePdfRenderer:
    """Turns invoice descriptions into PDF documents.

    Built once per application. Without ``font_path`` the PDF core font
    Helvetica is used and characters outside Latin-1 are replaced; pass a
    TrueType font to print other scripts and currency signs.
    """

    CORE_FAMILY = "helvetica"
    CUSTOM_FAMILY = "invoice"

    def __init__(self, font_path: str | None = None):
        self.font_path = font_path

    def render(self, document: InvoiceDocument) -> bytes:
        pdf = FPDF(unit="pt", format="A4")
        pdf.set_margins(PAGE_MARGIN, PAGE_MARGIN, PAGE_MARGIN)
        pdf.set_auto_page_break(True, margin=PAGE_MARGIN)
        self._register_fonts(pdf)
        pdf.set_title(self._clean(document.title))
        pdf.add_page()

        for block in document.blocks:
            if isinstance(block, TextBlock):
                self._draw_text_block(pdf, block)
            elif isinstance(block, ColumnsBlock):
                self._draw_columns(pdf, block)
            elif isinstance(block, TableBlock):
                self._draw_table(pdf, block)
            else:
                raise TypeError(f"Unsupported block: {type(block).__name__}")

        data = bytes(pdf.output())
        logger.debug("Rendered invoice %r (%d bytes)", document.title, len(data))
        return data

    @property
    def family(self) -> str:
        return self.CUSTOM_FAMILY if self.font_path else self.CORE_FAMILY

    def _register_fonts(self, pdf: FPDF) -> None:
        if not self.font_path:
            return
        for style in ("", "B", "I", "BI"):
            pdf.add_font(self.CUSTOM_FAMILY, style, self.font_path)

    def _clean(self, text: str) -> str:
        if self.font_path:
            return text
        return text.encode("latin-1", "replace").decode("latin-1")

    def _apply_style(self, pdf: FPDF, style: TextStyle) -> float:
        font_style = ("B" if style.bold else "") + ("I" if style.italics else "")
        pdf.set_font(self.family, font_style, style.font_size)
        pdf.set_text_color(*hex_to_rgb(style.color))
        return style.font_size * LINE_HEIGHT_RATIO

    def _draw_text_block(self, pdf: FPDF, block: TextBlock) -> None:
        left, top, right, bottom = block.style.margin
        line_height = self._apply_style(pdf, block.style)
        pdf.set_y(pdf.get_y() + top)
        pdf.set_x(pdf.l_margin + left)
        pdf.multi_cell(
            pdf.epw - left - right,
            line_height,
            self._clean(block.text),
            align=ALIGN[block.style.alignment],
            new_x=XPos.LMARGIN,
            new_y=YPos.NEXT,
        )
        pdf.set_y(pdf.get_y() + bottom)

    def _draw_columns(self, pdf: FPDF, block: ColumnsBlock) -> None:
        _, top, _, bottom = block.margin
        start_y = pdf.get_y() + top
        width = pdf.epw / max(len(block.columns), 1)
        lowest = start_y
        for index, column in enumerate(block.columns):
            pdf.set_xy(pdf.l_margin + index * width, start_y)
            for run in column.runs:
                line_height = self._apply_style(pdf, run.style)
                pdf.multi_cell(
                    width,
                    line_height,
                    self._clean(run.text),
                    align=ALIGN[column.alignment],
                    new_x=XPos.LEFT,
                    new_y=YPos.NEXT,
                )
            lowest = max(lowest, pdf.get_y())
        pdf.set_xy(pdf.l_margin, lowest + bottom)

    def wrap_cell(self, pdf: FPDF, cell: TableCell, width: float, block: TableBlock) -> list[str]:
        """Split a cell's text into the lines it occupies inside ``width``."""
        if cell.style is None:
            return []
        layout = block.layout
        line_height = self._apply_style(pdf, cell.style)
        return pdf.multi_cell(
            width - layout.padding_left - layout.padding_right,
            line_height,
            self._clean(cell.text),
            align=ALIGN[cell.style.alignment],
            dry_run=True,
            output="LINES",
        )

    def _draw_table(self, pdf: FPDF, block: TableBlock) -> None:
        layout = block.layout
        scale = pdf.epw / sum(block.widths)
        widths = [weight * scale for weight in block.widths]

        for row in block.rows:
            cells = []
            text_height = 0.0
            for index, cell in enumerate(row):
                if cell.spanned:
                    continue
                cell_width = sum(widths[index:index + cell.col_span])
                lines = self.wrap_cell(pdf, cell, cell_width, block)
                if cell.style is not None:
                    text_height = max(text_height, len(lines) * cell.style.font_size * LINE_HEIGHT_RATIO)
                cells.append((cell, cell_width))
            row_height = text_height + layout.padding_top + layout.padding_bottom
            if pdf.get_y() + row_height > pdf.h - pdf.b_margin:
                pdf.add_page()
            y = pdf.get_y()
            x = pdf.l_margin
            for cell, cell_width in cells:
                self._draw_cell(pdf, cell, x, y, cell_width, row_height, block)
                x += cell_width
            pdf.set_xy(pdf.l_margin, y + row_height)

    def _draw_cell(
        self,
        pdf: FPDF,
        cell: TableCell,
        x: float,
        y: float,
        width: float,
        height: float,
        block: TableBlock,
    ) -> None:
        layout = block.layout
        style = cell.style
        if style is not None and style.fill_color:
            pdf.set_fill_color(*hex_to_rgb(style.fill_color))
            pdf.rect(x, y, width, height, style="F")

        pdf.set_draw_color(*hex_to_rgb(layout.v_line_color))
        pdf.set_line_width(layout.v_line_width)
        pdf.line(x, y, x, y + height)
        pdf.line(x + width, y, x + width, y + height)
        pdf.set_draw_color(*hex_to_rgb(layout.h_line_color))
        pdf.set_line_width(layout.h_line_width)
        pdf.line(x, y, x + width, y)
        pdf.line(x, y + height, x + width, y + height)

        if style is None:
            return
        line_height = self._apply_style(pdf, style)
        pdf.set_xy(x + layout.padding_left, y + layout.padding_top)
        # Wrap inside the cell, then continue to the right of it on the same row
        pdf.multi_cell(
            width - layout.padding_left - layout.padding_right,
            line_height,
            self._clean(cell.text),
            align=ALIGN[style.alignment],
            new_x=XPos.RIGHT,
            new_y=YPos.TOP,
        )
