# resizepdf/tools/images/routes.py
import logging

from flask import Blueprint, abort, jsonify, request

from ...artifacts import IMAGE_STORE, get_store, send_artifact
from ...pdf_ops import page_count
from ...placeholders import images_to_pdf, pdf_to_images
from ...uploads import require_file, send_bytes, tool_errors

logger = logging.getLogger(__name__)

bp = Blueprint("images", __name__, url_prefix="/api")

MAX_PDF_TO_JPG_BYTES = 50 * 1024 * 1024


@bp.post("/jpg-to-pdf")
@tool_errors("JPG_TO_PDF", "Failed to convert images")
def jpg_to_pdf():
    files = [f for f in request.files.getlist("files") if f and f.filename]
    if not files:
        abort(400, "No files provided")
    logger.info("[JPG_TO_PDF] images=%d", len(files))
    pdf = images_to_pdf(f.read() for f in files)
    return send_bytes(pdf, "converted-images.pdf", "application/pdf")


@bp.post("/pdf-to-jpg")
@tool_errors("PDF_TO_JPG", "Failed to convert PDF to JPG")
def pdf_to_jpg():
    name, data = require_file("file", max_bytes=MAX_PDF_TO_JPG_BYTES)
    pages = page_count(data)
    logger.info("[PDF_TO_JPG] %s pages=%d", name, pages)
    images = get_store(IMAGE_STORE).put_batch(pdf_to_images(name, pages))
    return jsonify({"images": images})


@bp.get("/pdf-to-jpg")
def pdf_to_jpg_download_query():
    return send_artifact(IMAGE_STORE, request.args.get("id"))


@bp.get("/download-image/<artifact_id>")
def image_download(artifact_id):
    return send_artifact(IMAGE_STORE, artifact_id)
