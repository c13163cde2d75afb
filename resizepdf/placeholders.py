"""
resizepdf/placeholders.py

Stand-in outputs for the format conversions the site advertises but does not
perform: each returns a document describing the uploaded file instead of a
converted copy of it. `images_to_pdf` is the exception and does real work.
"""

import csv
import io
from datetime import datetime
from pathlib import Path
from typing import Iterable, List

from docx import Document
from PIL import Image, ImageDraw, ImageFont, UnidentifiedImageError
from reportlab.lib.pagesizes import letter
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

DEMO_NOTE = "This is a demo implementation; the original content was not converted."


def _now() -> str:
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")


def _kb(size: int) -> str:
    return f"{size / 1024:.2f} KB"


def _draw_lines(c: canvas.Canvas, x: float, y: float, lines: Iterable[str], font: str, size: int, leading=None):
    text = c.beginText(x, y)
    text.setFont(font, size, leading or size * 1.35)
    text.textLines(list(lines))
    c.drawText(text)


# ------------------ Office -> PDF ------------------

def word_to_pdf(filename: str, size: int) -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    _, height = letter
    _draw_lines(c, 50, height - 50, [
        "Word to PDF Conversion",
        "",
        f"Original File: {filename}",
        f"File Size: {_kb(size)}",
        f"Converted: {_now()}",
        "",
        DEMO_NOTE,
        "A full conversion would preserve text formatting, images,",
        "tables, headers and footers, page breaks and margins.",
    ], "Times-Roman", 12)
    c.showPage()
    c.save()
    return buf.getvalue()


SAMPLE_TABLE = [
    ["Column A", "Column B", "Column C", "Column D"],
    ["Data 1", "Data 2", "Data 3", "Data 4"],
    ["Value 1", "Value 2", "Value 3", "Value 4"],
    ["Item 1", "Item 2", "Item 3", "Item 4"],
]


def excel_to_pdf(filename: str, size: int) -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    _, height = letter

    c.setFont("Helvetica-Bold", 18)
    c.drawString(50, height - 50, "Excel to PDF Conversion")
    _draw_lines(c, 50, height - 80, [
        f"Original File: {filename}",
        f"File Size: {_kb(size)}",
        f"Converted: {_now()}",
    ], "Courier", 12, leading=20)

    y = height - 180
    c.setFont("Helvetica-Bold", 14)
    c.drawString(50, y, "Sample Data Table:")
    y -= 30

    cell_w, cell_h = 100, 20
    c.setFont("Courier", 10)
    for row_i, row in enumerate(SAMPLE_TABLE):
        for col_i, cell in enumerate(row):
            x = 50 + col_i * cell_w
            top = y - row_i * cell_h
            c.rect(x, top - cell_h + 5, cell_w, cell_h, stroke=1, fill=0)
            c.drawString(x + 5, top - 10, cell)

    c.setFillGray(0.5)
    _draw_lines(c, 50, height - 350, [DEMO_NOTE], "Courier", 10)
    c.showPage()
    c.save()
    return buf.getvalue()


SLIDES = [
    None,  # filled per file
    [
        "Features Preserved:",
        "",
        "- Text formatting and fonts",
        "- Slide layouts and designs",
        "- Images and graphics",
        "- Charts and tables",
    ],
    [
        "Technical Implementation:",
        "",
        "A full conversion would parse every slide and render it",
        "with its images and layout. This demo creates a multi-page",
        "PDF representing the original presentation structure.",
    ],
]


def powerpoint_to_pdf(filename: str, size: int) -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    _, height = letter
    for i, body in enumerate(SLIDES, start=1):
        if body is None:
            body = [
                "PowerPoint to PDF Conversion",
                "",
                f"Original File: {filename}",
                f"File Size: {_kb(size)}",
                f"Converted: {_now()}",
            ]
        c.setFont("Helvetica-Bold", 24)
        c.drawString(50, height - 80, f"Slide {i}")
        _draw_lines(c, 50, height - 150, body, "Helvetica", 12)
        c.showPage()
    c.save()
    return buf.getvalue()


# ------------------ PDF -> other ------------------

def pdf_to_word(filename: str, pages: int) -> bytes:
    doc = Document()
    doc.add_heading("PDF to Word Conversion", level=1)
    doc.add_paragraph(f"Original PDF: {filename}")
    doc.add_paragraph(f"Pages: {pages}")
    doc.add_paragraph(f"Converted on: {_now()}")
    doc.add_paragraph(DEMO_NOTE)
    out = io.BytesIO()
    doc.save(out)
    return out.getvalue()


def pdf_to_excel(filename: str, pages: int) -> bytes:
    out = io.StringIO()
    w = csv.writer(out, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    w.writerow(["Column A", "Column B", "Column C"])
    w.writerow(["Original PDF", filename, f"{pages} pages"])
    w.writerow(["Converted on", _now(), "Demo"])
    w.writerow(["Note", DEMO_NOTE, ""])
    return out.getvalue().encode("utf-8")


def pdf_to_powerpoint(filename: str, pages: int) -> bytes:
    lines = [
        "PDF to PowerPoint Conversion",
        "",
        "Slide 1: Title Slide",
        f"Original PDF: {filename}",
        f"Pages: {pages}",
        "",
        "Slide 2: Content",
        f"Converted on: {_now()}",
        "",
        DEMO_NOTE,
    ]
    return "\n".join(lines).encode("utf-8")


def page_image(filename: str, page_no: int, total: int) -> bytes:
    """A labelled JPEG standing in for a rendered page (pages are not rasterized)."""
    img = Image.new("RGB", (595, 842), "white")
    draw = ImageDraw.Draw(img)
    font = ImageFont.load_default()
    draw.rectangle((20, 20, 574, 821), outline=(200, 200, 200), width=2)
    draw.text((50, 60), f"{filename}", fill=(20, 20, 20), font=font)
    draw.text((50, 90), f"Page {page_no} of {total}", fill=(20, 20, 20), font=font)
    draw.text((50, 120), "Preview image (page content not rendered)", fill=(120, 120, 120), font=font)
    out = io.BytesIO()
    img.save(out, "JPEG", quality=85)
    return out.getvalue()


def pdf_to_images(filename: str, pages: int) -> List[tuple]:
    stem = Path(filename).stem
    return [(f"{stem}-page-{i}.jpg", page_image(filename, i, pages)) for i in range(1, pages + 1)]


# ------------------ Images -> PDF ------------------

def images_to_pdf(images: Iterable[bytes]) -> bytes:
    """One page per image, each page exactly the image's pixel size."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf)
    count = 0
    for data in images:
        try:
            img = Image.open(io.BytesIO(data))
            img.load()
        except (UnidentifiedImageError, OSError):
            raise ValueError("One of the files is not a readable image.") from None
        if img.mode not in ("RGB", "L"):
            img = img.convert("RGB")
        w, h = img.size
        c.setPageSize((w, h))
        c.drawImage(ImageReader(img), 0, 0, width=w, height=h)
        c.showPage()
        count += 1
    if not count:
        raise ValueError("No files provided")
    c.save()
    return buf.getvalue()
