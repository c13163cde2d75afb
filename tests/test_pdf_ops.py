import io

import pytest
from pypdf import PdfReader

from resizepdf import pdf_ops
from resizepdf.pdf_ops import IncorrectPasswordError

from .conftest import make_pdf, page_widths


def _reader(data):
    return PdfReader(io.BytesIO(data))


def test_merge_keeps_file_then_page_order():
    a = make_pdf(widths=(101, 102))
    b = make_pdf(widths=(201,))
    c = make_pdf(widths=(301, 302, 303))
    merged = pdf_ops.merge_pdfs([a, b, c])
    assert page_widths(merged) == [101, 102, 201, 301, 302, 303]


def test_split_all_one_page_each_and_reassembles():
    src = make_pdf(widths=(101, 102, 103, 104))
    parts = pdf_ops.split_all(src)
    assert [name for name, _ in parts] == ["page-1.pdf", "page-2.pdf", "page-3.pdf", "page-4.pdf"]
    assert all(len(_reader(data).pages) == 1 for _, data in parts)
    assert page_widths(pdf_ops.merge_pdfs(data for _, data in parts)) == page_widths(src)


def test_split_ranges(five_pages):
    parts = pdf_ops.split_ranges(five_pages, "1-2,4-4")
    assert [name for name, _ in parts] == ["pages-1-to-2.pdf", "pages-4-to-4.pdf"]
    assert page_widths(parts[0][1]) == [101, 102]
    assert page_widths(parts[1][1]) == [104]


@pytest.mark.parametrize("text", ["10-20", "3-2", "0-1", "4-6"])
def test_split_ranges_skips_invalid(five_pages, text):
    assert pdf_ops.split_ranges(five_pages, text) == []


def test_split_ranges_single_page_token(five_pages):
    parts = pdf_ops.split_ranges(five_pages, " 3 , 10-20")
    assert [name for name, _ in parts] == ["pages-3-to-3.pdf"]


@pytest.mark.parametrize("text", ["a-b", "1-2-3", "1,x"])
def test_parse_ranges_rejects_malformed(text):
    with pytest.raises(ValueError):
        pdf_ops.parse_ranges(text)


def test_extract_pages_in_listed_order_and_filters_out_of_bounds(five_pages):
    parts = pdf_ops.extract_pages(five_pages, "5, 1, 9, 0, 3")
    assert [name for name, _ in parts] == ["selected-pages.pdf"]
    assert page_widths(parts[0][1]) == [105, 101, 103]


def test_extract_pages_nothing_in_bounds(five_pages):
    assert pdf_ops.extract_pages(five_pages, "7,8") == []


def test_extract_pages_rejects_non_integer(five_pages):
    with pytest.raises(ValueError):
        pdf_ops.extract_pages(five_pages, "1,two")


def test_rotation_composes_modulo_360():
    src = make_pdf(widths=(100, 100))
    once = pdf_ops.rotate_pdf(src, 90)
    assert [p.rotation for p in _reader(once).pages] == [90, 90]
    twice = pdf_ops.rotate_pdf(once, 270)
    assert [p.rotation for p in _reader(twice).pages] == [0, 0]
    half = pdf_ops.rotate_pdf(pdf_ops.rotate_pdf(src, 180), 180)
    assert [p.rotation for p in _reader(half).pages] == [0, 0]


def test_rotation_rejects_other_angles():
    with pytest.raises(ValueError):
        pdf_ops.rotate_pdf(make_pdf(), 45)


@pytest.mark.parametrize("level", ["low", "medium", "high"])
def test_compress_keeps_pages(level):
    src = make_pdf(widths=(101, 102, 103))
    assert page_widths(pdf_ops.compress_pdf(src, level)) == [101, 102, 103]


def test_compress_high_clears_metadata():
    src = make_pdf(title="Quarterly report", author="Finance")
    out = pdf_ops.compress_pdf(src, "high")
    meta = _reader(out).metadata
    assert not (meta and meta.title)
    assert not (meta and meta.author)


def test_compress_medium_keeps_metadata():
    src = make_pdf(title="Quarterly report")
    assert _reader(pdf_ops.compress_pdf(src, "medium")).metadata.title == "Quarterly report"


def test_compress_unknown_level():
    with pytest.raises(ValueError):
        pdf_ops.compress_pdf(make_pdf(), "extreme")


def test_protect_then_unlock_round_trips_title():
    src = make_pdf(widths=(101, 102), title="Quarterly report")
    protected = pdf_ops.protect_pdf(src, "secret", {"printing": True}, "doc.pdf")
    meta = _reader(protected).metadata
    assert meta.title == "Protected: Quarterly report"
    assert meta.subject == "Password Protected PDF"
    assert meta["/Permissions"] == '{"printing": true}'

    unlocked = pdf_ops.unlock_pdf(protected, "abc", "doc.pdf")
    meta = _reader(unlocked).metadata
    assert meta.title == "Quarterly report"
    assert meta.subject == "Unlocked PDF"
    assert page_widths(unlocked) == [101, 102]


def test_protect_falls_back_to_filename():
    out = pdf_ops.protect_pdf(make_pdf(), "secret", {}, "contract.pdf")
    assert _reader(out).metadata.title == "Protected: contract.pdf"


@pytest.mark.parametrize("password", ["", "a", "ab"])
def test_unlock_short_password_rejected_regardless_of_content(password):
    with pytest.raises(IncorrectPasswordError):
        pdf_ops.unlock_pdf(make_pdf(), password, "doc.pdf")
    with pytest.raises(IncorrectPasswordError):
        pdf_ops.unlock_pdf(b"not a pdf", password, "doc.pdf")


def test_unlock_unreadable_document_is_wrong_password():
    with pytest.raises(IncorrectPasswordError):
        pdf_ops.unlock_pdf(b"not a pdf", "long-enough", "doc.pdf")


@pytest.mark.parametrize("text", ["[1, 2]", "{broken", "42"])
def test_parse_permissions_rejects_non_objects(text):
    with pytest.raises(ValueError):
        pdf_ops.parse_permissions(text)


def test_parse_permissions_empty_is_empty_dict():
    assert pdf_ops.parse_permissions(None) == {}
    assert pdf_ops.parse_permissions('{"copying": false}') == {"copying": False}


def test_enhance_sets_metadata():
    out = pdf_ops.enhance_pdf(make_pdf(widths=(150,)), "clarity")
    meta = _reader(out).metadata
    assert meta.title == "Enhanced PDF - clarity"
    assert meta.creator == "Resize PDF - Enhancement Tool"
    assert meta.producer == "Resize PDF Enhancement Engine"
    assert meta.creation_date is not None
    assert page_widths(out) == [150]


def test_page_count(five_pages):
    assert pdf_ops.page_count(five_pages) == 5
