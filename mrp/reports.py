"""
PDF rendering for the stock report and demand analysis.

Both builders return the PDF as bytes so a page can offer it as a download
or hand it to save_pdf() to write a timestamped file.
"""

import logging
import math
from datetime import datetime
from io import BytesIO
from pathlib import Path
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import PageBreak, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from . import config

logger = logging.getLogger(__name__)

STOCK_REPORT_PREFIX = "VR-StockReport"
DEMAND_PREFIX = "DemandAnalysis"


def timestamp(now=None):
    return (now or datetime.now()).strftime("%Y.%m.%d-%H.%M")


def _styles():
    styles = getSampleStyleSheet()
    styles.add(ParagraphStyle(
        name='ReportTitle', parent=styles['Title'],
        fontName='Helvetica-Bold', fontSize=16, alignment=TA_CENTER, spaceAfter=4
    ))
    styles.add(ParagraphStyle(
        name='ReportMeta', parent=styles['Normal'],
        fontName='Helvetica', fontSize=11, alignment=TA_CENTER, spaceAfter=10
    ))
    styles.add(ParagraphStyle(
        name='SectionHeader', parent=styles['Normal'],
        fontName='Helvetica-Bold', fontSize=14, leading=18
    ))
    styles.add(ParagraphStyle(
        name='Body', parent=styles['Normal'],
        fontName='Helvetica', fontSize=12, leading=15
    ))
    return styles


def _table(header, rows, col_widths, grid=False):
    data = [list(header)] + [["" if v is None else str(v) for v in row] for row in rows]
    table = Table(data, colWidths=col_widths, repeatRows=1)
    style = [
        ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
        ('FONTSIZE', (0, 0), (-1, 0), 10),
        ('LEADING', (0, 0), (-1, 0), 12),
        ('FONTNAME', (0, 1), (-1, -1), 'Helvetica'),
        ('FONTSIZE', (0, 1), (-1, -1), 9),
        ('LEADING', (0, 1), (-1, -1), 11),
        ('TOPPADDING', (0, 0), (-1, -1), 1),
        ('BOTTOMPADDING', (0, 0), (-1, -1), 1),
        ('LINEBELOW', (0, 0), (-1, 0), 1, colors.black),
        ('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),
    ]
    if grid:
        style.append(('GRID', (0, 0), (-1, -1), 0.5, colors.grey))
    table.setStyle(TableStyle(style))
    return table


def _build(story):
    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer, pagesize=A4,
        leftMargin=15*mm, rightMargin=15*mm, topMargin=15*mm, bottomMargin=15*mm
    )
    doc.build(story)
    return buffer.getvalue()


def stock_report_pdf(frame, now=None, rows_per_page=None):
    """Render a stock report DataFrame, a fixed number of rows per page."""
    now = now or datetime.now()
    rows_per_page = rows_per_page or config.REPORT_ROWS_PER_PAGE
    styles = _styles()

    rows = frame.values.tolist()
    total_pages = max(1, math.ceil(len(rows) / rows_per_page))
    width = A4[0] - 30*mm
    col_widths = [width * 0.22, width * 0.50, width * 0.14, width * 0.14]
    generated = now.strftime("%B %d, %Y %H:%M")

    story = []
    for page in range(total_pages):
        if page > 0:
            story.append(PageBreak())
        story.append(Paragraph(escape(f"{config.COMPANY_NAME} Stock Report"), styles['ReportTitle']))
        story.append(Paragraph(
            f"Generated: {generated} &nbsp;&nbsp;|&nbsp;&nbsp; Page {page + 1} of {total_pages}",
            styles['ReportMeta']
        ))
        chunk = rows[page * rows_per_page:(page + 1) * rows_per_page]
        story.append(_table(frame.columns, chunk, col_widths))

    logger.info(f"Rendered stock report: {len(rows)} parts on {total_pages} pages")
    return _build(story)


def demand_pdf(result, now=None):
    styles = _styles()
    width = A4[0] - 30*mm
    frame = result.to_frame()

    story = [
        Paragraph("Demand Analysis", styles['SectionHeader']),
        Paragraph(escape(f"SKU: {result.sku}"), styles['Body']),
        Paragraph(f"Desired Quantity: {result.quantity}", styles['Body']),
    ]
    if now is not None:
        story.append(Paragraph(f"Generated: {now.strftime('%B %d, %Y %H:%M')}", styles['Body']))
    story.append(Spacer(1, 6*mm))
    story.append(_table(
        frame.columns, frame.values.tolist(),
        [width * 0.25, width * 0.12, width * 0.12, width * 0.51], grid=True
    ))

    logger.info(f"Rendered demand analysis for {result.quantity} x {result.sku}")
    return _build(story)


def save_pdf(data, prefix, directory=None, now=None):
    """Write PDF bytes to <directory>/<prefix>-<timestamp>.pdf and return the path."""
    directory = Path(directory or config.REPORT_DIR)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{prefix}-{timestamp(now)}.pdf"
    path.write_bytes(data)
    logger.info(f"PDF saved to {path.resolve()}")
    return path
