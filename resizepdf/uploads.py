# resizepdf/uploads.py
import functools
import io
import logging
from pathlib import Path
from typing import List, Optional

from flask import abort, request, send_file
from werkzeug.datastructures import FileStorage
from werkzeug.exceptions import HTTPException
from werkzeug.utils import secure_filename

logger = logging.getLogger(__name__)


def is_pdf(name: str) -> bool:
    return Path(name).suffix.lower() == ".pdf"


def display_name(f: FileStorage, default_stem: str = "document") -> str:
    """
    ASCII-safe download name for an upload. secure_filename drops non-ASCII
    characters, so a name like "报告.pdf" collapses to "pdf"; those fall back to
    default_stem with the original suffix.
    """
    raw = f.filename or ""
    suffix = Path(raw).suffix.lower()
    safe = secure_filename(raw)
    if not Path(safe).stem or Path(safe).suffix.lower() != suffix:
        return f"{default_stem}{suffix}"
    return safe


def require_file(field: str = "file", pdf: bool = True, max_bytes: Optional[int] = None):
    """
    Return (safe_name, data) for a single uploaded file or abort with a 400.
    """
    f = request.files.get(field)
    if not f or not f.filename:
        abort(400, "No file provided")
    if pdf and not is_pdf(f.filename):
        abort(400, "Only PDF files are accepted.")
    name = display_name(f)
    data = f.read()
    if max_bytes is not None and len(data) > max_bytes:
        abort(400, f"File too large. Maximum size is {max_bytes // (1024 * 1024)}MB.")
    return name, data


def pdf_uploads_by_prefix(prefix: str = "file") -> List[FileStorage]:
    """Every uploaded file whose field name starts with `prefix`, in form order."""
    return [
        f for key, f in request.files.items(multi=True)
        if key.startswith(prefix) and f and f.filename
    ]


def tool_errors(tag: str, message: str):
    """
    Wrap a tool view: aborts pass through, ValueError becomes a 400 with its
    text, anything else is logged with its traceback and becomes a 500.
    """
    def decorator(view):
        @functools.wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except HTTPException:
                raise
            except ValueError as ve:
                logger.info("[%s BAD_INPUT] %s", tag, ve)
                abort(400, str(ve))
            except Exception:
                logger.exception("[%s ERROR]", tag)
                abort(500, message)
        return wrapper
    return decorator


def send_bytes(data: bytes, download_name: str, mimetype: str):
    return send_file(
        io.BytesIO(data),
        as_attachment=True,
        download_name=download_name,
        mimetype=mimetype,
    )
