# resizepdf/tools/merge/routes.py
import logging

from flask import Blueprint, abort

from ...pdf_ops import merge_pdfs
from ...uploads import display_name, is_pdf, pdf_uploads_by_prefix, send_bytes, tool_errors

logger = logging.getLogger(__name__)

bp = Blueprint("merge", __name__, url_prefix="/api/merge-pdf")


@bp.route("", methods=["POST"])
@bp.route("/", methods=["POST"])
@tool_errors("MERGE", "Failed to merge PDFs")
def merge_post():
    """
    Expects multipart/form-data with two or more file fields named file*
    (file0, file1, ... or repeated "files"); pages keep upload order.
    """
    files = pdf_uploads_by_prefix("file")
    if len(files) < 2:
        abort(400, "At least 2 PDF files are required")
    if not all(is_pdf(f.filename) for f in files):
        abort(400, "All files must be PDFs (.pdf).")
    names = [display_name(f) for f in files]

    logger.info("[MERGE] files=%s", names)
    merged = merge_pdfs(f.read() for f in files)
    return send_bytes(merged, "merged-document.pdf", "application/pdf")
