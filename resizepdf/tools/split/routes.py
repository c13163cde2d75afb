# resizepdf/tools/split/routes.py
import logging

from flask import Blueprint, abort, jsonify, request

from ...artifacts import SPLIT_STORE, get_store, send_artifact
from ...pdf_ops import extract_pages, split_all, split_ranges
from ...uploads import require_file, tool_errors

logger = logging.getLogger(__name__)

bp = Blueprint("split", __name__, url_prefix="/api")

MAX_SPLIT_BYTES = 100 * 1024 * 1024


@bp.route("/split-pdf", methods=["POST"])
@tool_errors("SPLIT", "Failed to split PDF")
def split_post():
    """
    Expects multipart/form-data:
      - file: the PDF
      - mode: "all" | "range" | "pages"
      - range: e.g. "1-2,4-4" (mode=range)
      - pages: e.g. "3,1,2" (mode=pages)
    Returns {"files": [{id, filename}, ...]}; fetch each via /api/download-split/<id>.
    Ranges that fall outside the document are skipped, not rejected.
    """
    _name, data = require_file("file", max_bytes=MAX_SPLIT_BYTES)
    mode = (request.form.get("mode") or "all").lower()

    if mode == "all":
        outputs = split_all(data)
    elif mode == "range":
        selection = (request.form.get("range") or "").strip()
        if not selection:
            abort(400, "Please provide at least one page range.")
        outputs = split_ranges(data, selection)
    elif mode == "pages":
        selection = (request.form.get("pages") or "").strip()
        if not selection:
            abort(400, "Please provide the pages to extract.")
        outputs = extract_pages(data, selection)
    else:
        abort(400, "Split mode must be all, range or pages.")

    logger.info("[SPLIT] mode=%s outputs=%d", mode, len(outputs))
    files = get_store(SPLIT_STORE).put_batch(outputs)
    return jsonify({"files": files})


@bp.route("/split-pdf", methods=["GET"])
def split_download_query():
    return send_artifact(SPLIT_STORE, request.args.get("id"))


@bp.route("/download-split/<artifact_id>", methods=["GET"])
def split_download(artifact_id):
    return send_artifact(SPLIT_STORE, artifact_id)
