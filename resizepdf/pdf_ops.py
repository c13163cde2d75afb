"""
resizepdf/pdf_ops.py

Pure document transforms over pypdf. Every function takes PDF bytes and
returns bytes (or a list of `(filename, bytes)` for multi-output splits), so
routes and tests can call them without a request context.

Input problems the caller should report as 400 are raised as ValueError.
"""

import io
import json
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Tuple

from pypdf import PdfReader, PdfWriter

ROTATIONS = (90, 180, 270)
COMPRESSION_LEVELS = ("low", "medium", "high")
MIN_UNLOCK_PASSWORD = 3
PROTECTED_PREFIX = "Protected: "

# Info keys cleared by the "high" compression level
_STRIPPED_INFO_KEYS = ("/Title", "/Author", "/Subject", "/Keywords", "/Producer", "/Creator")


class IncorrectPasswordError(Exception):
    pass


# ------------------ Helpers ------------------

def load_pdf(data: bytes) -> PdfReader:
    # Be lenient with odd PDFs
    return PdfReader(io.BytesIO(data), strict=False)


def to_bytes(writer: PdfWriter) -> bytes:
    out = io.BytesIO()
    writer.write(out)
    return out.getvalue()


def _pdf_date(when: Optional[datetime] = None) -> str:
    when = when or datetime.now(timezone.utc)
    return when.strftime("D:%Y%m%d%H%M%S+00'00'")


def _existing_title(reader: PdfReader) -> Optional[str]:
    meta = reader.metadata
    return meta.title if meta else None


def _pages_to_pdf(reader: PdfReader, indices: Iterable[int]) -> bytes:
    writer = PdfWriter()
    for i in indices:
        writer.add_page(reader.pages[i])
    return to_bytes(writer)


def page_count(data: bytes) -> int:
    return len(load_pdf(data).pages)


# ------------------ Merge ------------------

def merge_pdfs(buffers: Iterable[bytes]) -> bytes:
    """Concatenate pages in input order, then in-file page order."""
    writer = PdfWriter()
    for data in buffers:
        reader = load_pdf(data)
        for page in reader.pages:
            writer.add_page(page)
    return to_bytes(writer)


# ------------------ Split ------------------

def parse_ranges(text: str) -> List[Tuple[int, int]]:
    """
    Parse "1-2, 4-4, 7" into 1-based inclusive (start, end) pairs.
    Bounds are not checked here; a token that is not "a-b" or "a" raises ValueError.
    """
    ranges = []
    for token in (text or "").split(","):
        token = token.strip()
        if not token:
            continue
        parts = [p.strip() for p in token.split("-")]
        try:
            if len(parts) == 1:
                s_i = e_i = int(parts[0])
            elif len(parts) == 2:
                s_i, e_i = int(parts[0]), int(parts[1])
            else:
                raise ValueError
        except ValueError:
            raise ValueError(f"Invalid page range: {token!r}") from None
        ranges.append((s_i, e_i))
    return ranges


def parse_pages(text: str) -> List[int]:
    pages = []
    for token in (text or "").split(","):
        token = token.strip()
        if not token:
            continue
        try:
            pages.append(int(token))
        except ValueError:
            raise ValueError(f"Invalid page number: {token!r}") from None
    return pages


def split_all(data: bytes) -> List[Tuple[str, bytes]]:
    reader = load_pdf(data)
    return [(f"page-{i + 1}.pdf", _pages_to_pdf(reader, [i])) for i in range(len(reader.pages))]


def split_ranges(data: bytes, ranges: str) -> List[Tuple[str, bytes]]:
    """One PDF per range; out-of-bounds ranges and start > end are skipped."""
    reader = load_pdf(data)
    total = len(reader.pages)
    results = []
    for s, e in parse_ranges(ranges):
        if s < 1 or e > total or s > e:
            continue
        results.append((f"pages-{s}-to-{e}.pdf", _pages_to_pdf(reader, range(s - 1, e))))
    return results


def extract_pages(data: bytes, pages: str) -> List[Tuple[str, bytes]]:
    """One PDF with the listed pages in listed order, or nothing if none are in bounds."""
    reader = load_pdf(data)
    total = len(reader.pages)
    wanted = [p - 1 for p in parse_pages(pages) if 1 <= p <= total]
    if not wanted:
        return []
    return [("selected-pages.pdf", _pages_to_pdf(reader, wanted))]


# ------------------ Rotate / compress ------------------

def rotate_pdf(data: bytes, angle: int) -> bytes:
    if angle not in ROTATIONS:
        raise ValueError("Rotation must be 90, 180 or 270 degrees.")
    writer = PdfWriter(clone_from=load_pdf(data))
    for page in writer.pages:
        page.rotation = (page.rotation + angle) % 360
    return to_bytes(writer)


def compress_pdf(data: bytes, level: str = "medium") -> bytes:
    """
    Rewrite the document with lossless savings only; embedded images are left alone.

    low:    rewrite through pypdf
    medium: also deflate every page content stream
    high:   also drop duplicate/orphan objects and clear the info fields
    """
    if level not in COMPRESSION_LEVELS:
        raise ValueError("Compression level must be low, medium or high.")
    writer = PdfWriter(clone_from=load_pdf(data))

    if level in ("medium", "high"):
        for page in writer.pages:
            page.compress_content_streams()

    if level == "high":
        writer.compress_identical_objects(remove_identicals=True, remove_orphans=True)
        writer.add_metadata({key: "" for key in _STRIPPED_INFO_KEYS})

    return to_bytes(writer)


# ------------------ Protect / unlock (simulated) ------------------

def parse_permissions(text: Optional[str]) -> dict:
    if not text:
        return {}
    try:
        permissions = json.loads(text)
    except ValueError:
        raise ValueError("Permissions must be a JSON object.") from None
    if not isinstance(permissions, dict):
        raise ValueError("Permissions must be a JSON object.")
    return permissions


def protect_pdf(data: bytes, password: str, permissions: dict, fallback_title: str) -> bytes:
    """
    Mark a copy of the document as protected. No encryption is applied; the
    requested permissions are only recorded in the document info.
    """
    if not password:
        raise ValueError("No password provided")
    reader = load_pdf(data)
    writer = PdfWriter()
    for page in reader.pages:
        writer.add_page(page)
    writer.add_metadata({
        "/Title": f"{PROTECTED_PREFIX}{_existing_title(reader) or fallback_title}",
        "/Subject": "Password Protected PDF",
        "/Permissions": json.dumps(permissions, sort_keys=True),
    })
    return to_bytes(writer)


def unlock_pdf(data: bytes, password: str, fallback_title: str) -> bytes:
    """
    Simulated unlock: any password of MIN_UNLOCK_PASSWORD characters or more
    is accepted. A document that cannot be read counts as a wrong password.
    """
    if len(password or "") < MIN_UNLOCK_PASSWORD:
        raise IncorrectPasswordError("Incorrect password")
    try:
        reader = load_pdf(data)
        if reader.is_encrypted and not reader.decrypt(password):
            raise IncorrectPasswordError("Incorrect password")
        pages = list(reader.pages)
    except IncorrectPasswordError:
        raise
    except Exception as e:
        raise IncorrectPasswordError("Incorrect password") from e

    writer = PdfWriter()
    for page in pages:
        writer.add_page(page)
    title = _existing_title(reader) or ""
    if title.startswith(PROTECTED_PREFIX):
        title = title[len(PROTECTED_PREFIX):]
    writer.add_metadata({
        "/Title": title or fallback_title,
        "/Subject": "Unlocked PDF",
    })
    return to_bytes(writer)


# ------------------ Enhance ------------------

def enhance_pdf(data: bytes, enhance_type: str = "standard", now: Optional[datetime] = None) -> bytes:
    writer = PdfWriter(clone_from=load_pdf(data))
    stamp = _pdf_date(now)
    writer.add_metadata({
        "/Title": f"Enhanced PDF - {enhance_type}",
        "/Subject": f"PDF enhanced with {enhance_type} optimization",
        "/Creator": "Resize PDF - Enhancement Tool",
        "/Producer": "Resize PDF Enhancement Engine",
        "/CreationDate": stamp,
        "/ModDate": stamp,
    })
    return to_bytes(writer)
