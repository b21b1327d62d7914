import io

import pdfplumber
from pdfplumber.page import Page
from PIL import Image

from bookguard.pdf.base import BasePdfDocument, BasePdfEngine
from bookguard.pdf.exceptions import PdfExtractionError

_POINTS_PER_INCH = 72


class PdfPlumberDocument(BasePdfDocument):
    """Page-level access to a document opened with pdfplumber."""

    def __init__(self, pdf: pdfplumber.PDF) -> None:
        self._pdf = pdf

    @property
    def page_count(self) -> int:
        return len(self._pdf.pages)

    def page_text(self, page_number: int) -> str:
        page = self._page(page_number)
        try:
            words = page.extract_words()
        except Exception as exc:
            raise PdfExtractionError(
                f"pdfplumber failed to read page {page_number}: {exc}"
            ) from exc
        finally:
            page.close()
        return " ".join(word["text"] for word in words)

    def render_page(self, page_number: int, scale: float = 1.0) -> Image.Image:
        page = self._page(page_number)
        try:
            rendered = page.to_image(resolution=round(_POINTS_PER_INCH * scale))
            return rendered.original.convert("RGB")
        except Exception as exc:
            raise PdfExtractionError(
                f"pdfplumber failed to render page {page_number}: {exc}"
            ) from exc
        finally:
            page.close()

    def close(self) -> None:
        self._pdf.close()

    def _page(self, page_number: int) -> Page:
        if not 1 <= page_number <= self.page_count:
            raise PdfExtractionError(
                f"Page {page_number} out of range 1..{self.page_count}"
            )
        return self._pdf.pages[page_number - 1]


class PdfPlumberAdapter(BasePdfEngine):
    """Opens PDF documents using pdfplumber."""

    def open(self, pdf_bytes: bytes) -> BasePdfDocument:
        try:
            return PdfPlumberDocument(pdfplumber.open(io.BytesIO(pdf_bytes)))
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber could not open document: {exc}") from exc
