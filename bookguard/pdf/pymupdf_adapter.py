import pymupdf
from PIL import Image

from bookguard.pdf.base import BasePdfDocument, BasePdfEngine
from bookguard.pdf.exceptions import PdfExtractionError

# Index of the word string in a PyMuPDF "words" tuple.
_WORD_TEXT = 4


class PyMuPdfDocument(BasePdfDocument):
    """Page-level access to a document opened with PyMuPDF."""

    def __init__(self, doc: pymupdf.Document) -> None:
        self._doc = doc

    @property
    def page_count(self) -> int:
        return self._doc.page_count

    def page_text(self, page_number: int) -> str:
        page = self._page(page_number)
        try:
            words = page.get_text("words")
        except Exception as exc:
            raise PdfExtractionError(
                f"pymupdf failed to read page {page_number}: {exc}"
            ) from exc
        return " ".join(word[_WORD_TEXT] for word in words)

    def render_page(self, page_number: int, scale: float = 1.0) -> Image.Image:
        page = self._page(page_number)
        try:
            pix = page.get_pixmap(matrix=pymupdf.Matrix(scale, scale), alpha=False)
            return Image.frombytes("RGB", (pix.width, pix.height), pix.samples)
        except Exception as exc:
            raise PdfExtractionError(
                f"pymupdf failed to render page {page_number}: {exc}"
            ) from exc

    def close(self) -> None:
        self._doc.close()

    def _page(self, page_number: int) -> pymupdf.Page:
        if not 1 <= page_number <= self.page_count:
            raise PdfExtractionError(
                f"Page {page_number} out of range 1..{self.page_count}"
            )
        return self._doc[page_number - 1]


class PyMuPdfAdapter(BasePdfEngine):
    """Opens PDF documents using PyMuPDF."""

    def open(self, pdf_bytes: bytes) -> BasePdfDocument:
        try:
            doc = pymupdf.open(stream=pdf_bytes, filetype="pdf")  # type: ignore[no-untyped-call]
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf could not open document: {exc}") from exc
        return PyMuPdfDocument(doc)
