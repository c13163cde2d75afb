import io

import pytest
from pypdf import PdfReader
from reportlab.pdfgen import canvas

from resizepdf import create_app
from resizepdf.artifacts import ArtifactStore, IMAGE_STORE, SPLIT_STORE


class FakeClock:
    def __init__(self, now=1_700_000_000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


def make_pdf(widths=(200, 210, 220), title=None, author=None) -> bytes:
    """Build a PDF whose page i is widths[i] points wide, so order is checkable."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf)
    if title:
        c.setTitle(title)
    if author:
        c.setAuthor(author)
    for i, w in enumerate(widths, start=1):
        c.setPageSize((w, 300))
        c.drawString(10, 150, f"Page {i}")
        c.showPage()
    c.save()
    return buf.getvalue()


def page_widths(data: bytes):
    return [int(float(p.mediabox.width)) for p in PdfReader(io.BytesIO(data)).pages]


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def app(clock):
    app = create_app({"TESTING": True, "SITE_BASE_URL": "https://example.test"})
    stores = app.extensions["artifact_stores"]
    stores[SPLIT_STORE] = ArtifactStore(600, mimetype="application/pdf", clock=clock)
    stores[IMAGE_STORE] = ArtifactStore(600, mimetype="image/jpeg", clock=clock)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def five_pages():
    return make_pdf(widths=(101, 102, 103, 104, 105))


def upload(data: bytes, filename: str = "doc.pdf"):
    return (io.BytesIO(data), filename)
