# resizepdf/tools/convert/routes.py
import logging
from pathlib import Path

from flask import Blueprint

from ... import placeholders
from ...pdf_ops import page_count
from ...uploads import require_file, send_bytes, tool_errors

logger = logging.getLogger(__name__)

bp = Blueprint("convert", __name__, url_prefix="/api")

DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


# ------------------ PDF -> office ------------------

@bp.post("/pdf-to-word")
@tool_errors("PDF_TO_WORD", "Failed to convert PDF to Word")
def pdf_to_word():
    name, data = require_file("file")
    pages = page_count(data)
    logger.info("[PDF_TO_WORD] %s pages=%d", name, pages)
    return send_bytes(placeholders.pdf_to_word(name, pages), Path(name).with_suffix(".docx").name, DOCX_MIME)


@bp.post("/pdf-to-excel")
@tool_errors("PDF_TO_EXCEL", "Failed to convert PDF to Excel")
def pdf_to_excel():
    name, data = require_file("file")
    pages = page_count(data)
    logger.info("[PDF_TO_EXCEL] %s pages=%d", name, pages)
    return send_bytes(placeholders.pdf_to_excel(name, pages), Path(name).with_suffix(".csv").name, "text/csv")


@bp.post("/pdf-to-powerpoint")
@tool_errors("PDF_TO_PPT", "Failed to convert PDF to PowerPoint")
def pdf_to_powerpoint():
    name, data = require_file("file")
    pages = page_count(data)
    logger.info("[PDF_TO_PPT] %s pages=%d", name, pages)
    return send_bytes(placeholders.pdf_to_powerpoint(name, pages), Path(name).with_suffix(".txt").name, "text/plain")


# ------------------ office -> PDF ------------------

@bp.post("/word-to-pdf")
@tool_errors("WORD_TO_PDF", "Failed to convert Word to PDF")
def word_to_pdf():
    name, data = require_file("file", pdf=False)
    logger.info("[WORD_TO_PDF] %s size=%d", name, len(data))
    return send_bytes(placeholders.word_to_pdf(name, len(data)), f"{Path(name).stem}.pdf", "application/pdf")


@bp.post("/excel-to-pdf")
@tool_errors("EXCEL_TO_PDF", "Failed to convert Excel to PDF")
def excel_to_pdf():
    name, data = require_file("file", pdf=False)
    logger.info("[EXCEL_TO_PDF] %s size=%d", name, len(data))
    return send_bytes(placeholders.excel_to_pdf(name, len(data)), f"{Path(name).stem}.pdf", "application/pdf")


@bp.post("/powerpoint-to-pdf")
@tool_errors("PPT_TO_PDF", "Failed to convert PowerPoint to PDF")
def powerpoint_to_pdf():
    name, data = require_file("file", pdf=False)
    logger.info("[PPT_TO_PDF] %s size=%d", name, len(data))
    return send_bytes(placeholders.powerpoint_to_pdf(name, len(data)), f"{Path(name).stem}.pdf", "application/pdf")
