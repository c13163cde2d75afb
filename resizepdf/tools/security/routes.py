# resizepdf/tools/security/routes.py
import logging

from flask import Blueprint, abort, request

from ...pdf_ops import IncorrectPasswordError, parse_permissions, protect_pdf, unlock_pdf
from ...uploads import require_file, send_bytes, tool_errors

logger = logging.getLogger(__name__)

bp = Blueprint("security", __name__, url_prefix="/api")


@bp.post("/protect-pdf")
@tool_errors("PROTECT", "Failed to protect PDF")
def protect_post():
    """
    Expects multipart/form-data:
      - file: the PDF
      - password: required
      - permissions: JSON object, e.g. {"printing": true, "copying": false}
    The output is marked as protected; it is not encrypted.
    """
    name, data = require_file("file")
    password = request.form.get("password") or ""
    if not password:
        abort(400, "No password provided")
    permissions = parse_permissions(request.form.get("permissions"))

    logger.info("[PROTECT] %s permissions=%s", name, sorted(permissions))
    return send_bytes(protect_pdf(data, password, permissions, name), f"protected-{name}", "application/pdf")


@bp.post("/unlock-pdf")
@tool_errors("UNLOCK", "Failed to unlock PDF")
def unlock_post():
    name, data = require_file("file")
    password = request.form.get("password") or ""
    if not password:
        abort(400, "No password provided")

    try:
        out = unlock_pdf(data, password, name)
    except IncorrectPasswordError:
        logger.info("[UNLOCK] %s rejected", name)
        abort(401, "Incorrect password")
    return send_bytes(out, f"unlocked-{name}", "application/pdf")
