# pattern_core/export_pdf.py
from __future__ import annotations
from typing import Dict, Sequence
import io
from reportlab.lib.pagesizes import letter, landscape
from reportlab.lib import colors
from reportlab.pdfgen import canvas
from reportlab.platypus import Table, TableStyle

from .constants import FALLBACK_COLOR
from .distribution import tally
from .models import GridConfig

MAX_CELL_PT = 24.0


def _hex(c: str):
    try:
        return colors.HexColor(c)
    except ValueError:
        return colors.HexColor(FALLBACK_COLOR)


def render_pdf(grid: Sequence[Sequence[str]], colors_map: Dict[str, str], config: GridConfig) -> bytes:
    """Printable chart: title, colour legend with counts, then the coloured grid."""
    buf = io.BytesIO()
    page_size = landscape(letter)
    c = canvas.Canvas(buf, pagesize=page_size)

    title = f"Pattern Mapper: {config.rows} x {config.cols}, {config.num_values} colours"
    c.setFont("Helvetica-Bold", 16)
    c.drawString(40, page_size[1] - 40, title)

    # Legend
    counts = tally(grid)
    legend_y = page_size[1] - 60
    if counts:
        legend = Table([[s.upper() for s in counts], [str(n) for n in counts.values()]])
        legend_style = [
            ("FONTNAME", (0, 0), (-1, -1), "Helvetica-Bold"),
            ("FONTSIZE", (0, 0), (-1, -1), 9),
            ("ALIGN", (0, 0), (-1, -1), "CENTER"),
            ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
            ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ]
        for i, s in enumerate(counts):
            legend_style.append(("BACKGROUND", (i, 0), (i, 0), _hex(colors_map.get(s, FALLBACK_COLOR))))
        legend.setStyle(TableStyle(legend_style))
        _, legend_h = legend.wrapOn(c, page_size[0] - 80, 60)
        legend_y -= legend_h
        legend.drawOn(c, 40, legend_y)

    # Grid
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    if rows and cols:
        avail_w = page_size[0] - 80
        avail_h = legend_y - 60
        cell = min(MAX_CELL_PT, avail_w / cols, avail_h / rows)
        data = [[s.upper() for s in row] for row in grid]
        t = Table(data, colWidths=[cell] * cols, rowHeights=[cell] * rows)
        style = [
            ("FONTNAME", (0, 0), (-1, -1), "Helvetica-Bold"),
            ("FONTSIZE", (0, 0), (-1, -1), max(4.0, cell * 0.45)),
            ("TEXTCOLOR", (0, 0), (-1, -1), colors.white),
            ("ALIGN", (0, 0), (-1, -1), "CENTER"),
            ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
            ("GRID", (0, 0), (-1, -1), 0.5, colors.black),
            ("LEFTPADDING", (0, 0), (-1, -1), 0),
            ("RIGHTPADDING", (0, 0), (-1, -1), 0),
            ("TOPPADDING", (0, 0), (-1, -1), 0),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 0),
        ]
        for r, row in enumerate(grid):
            for col, s in enumerate(row):
                style.append(("BACKGROUND", (col, r), (col, r), _hex(colors_map.get(s, FALLBACK_COLOR))))
        t.setStyle(TableStyle(style))
        _, table_h = t.wrapOn(c, avail_w, avail_h)
        t.drawOn(c, 40, legend_y - 20 - table_h)

    c.showPage()
    c.save()
    return buf.getvalue()
