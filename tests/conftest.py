from __future__ import annotations

import io
from pathlib import Path
from typing import Callable
import sys

import pytest
from pypdf import PdfReader, PdfWriter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


def build_pdf(widths: list[int], title: str | None = None) -> bytes:
    """Return PDF bytes with one blank page per entry in *widths*.

    Page widths double as markers so tests can check page order.
    """
    writer = PdfWriter()
    for width in widths:
        writer.add_blank_page(width=width, height=100)
    if title is not None:
        writer.add_metadata({"/Title": title})
    stream = io.BytesIO()
    writer.write(stream)
    return stream.getvalue()


def page_widths(data: bytes) -> list[int]:
    reader = PdfReader(io.BytesIO(data))
    return [int(page.mediabox.width) for page in reader.pages]


@pytest.fixture()
def pdf_bytes_factory() -> Callable[..., bytes]:
    return build_pdf


@pytest.fixture()
def read_widths() -> Callable[[bytes], list[int]]:
    return page_widths


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    return build_pdf([])


@pytest.fixture()
def pdf_factory(tmp_path: Path) -> Callable[[str, list[int]], Path]:
    def _create(filename: str, widths: list[int]) -> Path:
        path = tmp_path / filename
        path.write_bytes(build_pdf(widths))
        return path

    return _create


@pytest.fixture()
def sample_pdfs(pdf_factory: Callable[[str, list[int]], Path]) -> list[Path]:
    pdf1 = pdf_factory("one.pdf", [101, 102])
    pdf2 = pdf_factory("two.pdf", [201])
    return [pdf1, pdf2]
