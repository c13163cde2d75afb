# resizepdf/tools/rotate/routes.py
import logging

from flask import Blueprint, abort, request

from ...pdf_ops import ROTATIONS, rotate_pdf
from ...uploads import require_file, send_bytes, tool_errors

logger = logging.getLogger(__name__)

bp = Blueprint("rotate", __name__, url_prefix="/api/rotate-pdf")


@bp.route("", methods=["POST"])
@bp.route("/", methods=["POST"])
@tool_errors("ROTATE", "Failed to rotate PDF")
def rotate_post():
    name, data = require_file("file")
    try:
        angle = int(request.form.get("rotation") or "")
    except ValueError:
        abort(400, "Please choose a rotation: 90, 180 or 270.")
    if angle not in ROTATIONS:
        abort(400, "Please choose a rotation: 90, 180 or 270.")

    logger.info("[ROTATE] %s angle=%d", name, angle)
    return send_bytes(rotate_pdf(data, angle), f"rotated-{name}", "application/pdf")
