from collections.abc import Callable

import pytest
from PIL import Image

from bookguard.pdf.base import BasePdfDocument, BasePdfEngine
from bookguard.pdf.exceptions import PdfExtractionError


class FakePdfDocument(BasePdfDocument):
    """In-memory document: one text-layer string per page."""

    def __init__(self, pages: list[str], failing_page: int | None = None) -> None:
        self._pages = pages
        self._failing_page = failing_page
        self.closed = False
        self.read_pages: list[int] = []
        self.rendered_pages: list[int] = []

    @property
    def page_count(self) -> int:
        return len(self._pages)

    def page_text(self, page_number: int) -> str:
        if page_number == self._failing_page:
            raise PdfExtractionError(f"broken page {page_number}")
        self.read_pages.append(page_number)
        return self._pages[page_number - 1]

    def render_page(self, page_number: int, scale: float = 1.0) -> Image.Image:
        self.rendered_pages.append(page_number)
        return Image.new("RGB", (int(10 * scale), int(10 * scale)), "white")

    def close(self) -> None:
        self.closed = True


class FakePdfEngine(BasePdfEngine):
    def __init__(self, document: FakePdfDocument | None = None) -> None:
        self.document = document

    def open(self, pdf_bytes: bytes) -> BasePdfDocument:
        if self.document is None:
            raise PdfExtractionError("not a pdf")
        return self.document


@pytest.fixture()
def make_pdf_engine() -> Callable[..., FakePdfEngine]:
    """Build a fake engine serving the given page texts (None = unreadable)."""

    def _make(pages: list[str] | None, failing_page: int | None = None) -> FakePdfEngine:
        if pages is None:
            return FakePdfEngine()
        return FakePdfEngine(FakePdfDocument(pages, failing_page=failing_page))

    return _make
