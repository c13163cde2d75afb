# resizepdf/tools/compress/routes.py
import logging

from flask import Blueprint, abort, request

from ...pdf_ops import COMPRESSION_LEVELS, compress_pdf
from ...uploads import require_file, send_bytes, tool_errors

logger = logging.getLogger(__name__)

bp = Blueprint("compress", __name__, url_prefix="/api/compress-pdf")


@bp.route("", methods=["POST"])
@bp.route("/", methods=["POST"])
@tool_errors("COMPRESS", "Failed to compress PDF")
def compress_post():
    name, data = require_file("file")
    level = (request.form.get("level") or "medium").lower()
    if level not in COMPRESSION_LEVELS:
        abort(400, "Please choose a compression level: low, medium or high.")

    out = compress_pdf(data, level)
    logger.info("[COMPRESS] %s level=%s in=%d out=%d", name, level, len(data), len(out))
    return send_bytes(out, f"compressed-{name}", "application/pdf")
