# resizepdf/tools/page_count/routes.py
from flask import Blueprint, jsonify

from ...pdf_ops import page_count
from ...uploads import require_file, tool_errors

bp = Blueprint("page_count", __name__, url_prefix="/api/get-page-count")


@bp.route("", methods=["POST"])
@bp.route("/", methods=["POST"])
@tool_errors("PAGE_COUNT", "Failed to get page count")
def page_count_post():
    _name, data = require_file("file")
    return jsonify({"pageCount": page_count(data)})
