# resizepdf/tools/enhance/routes.py
import logging

from flask import Blueprint, request

from ...pdf_ops import enhance_pdf
from ...uploads import require_file, send_bytes, tool_errors

logger = logging.getLogger(__name__)

bp = Blueprint("enhance", __name__, url_prefix="/api/enhance-pdf")


@bp.route("", methods=["POST"])
@bp.route("/", methods=["POST"])
@tool_errors("ENHANCE", "Failed to enhance PDF")
def enhance_post():
    name, data = require_file("file")
    enhance_type = (request.form.get("enhanceType") or "standard").strip()
    logger.info("[ENHANCE] %s type=%s", name, enhance_type)
    return send_bytes(enhance_pdf(data, enhance_type), f"enhanced-{name}", "application/pdf")
