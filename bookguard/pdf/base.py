from abc import ABC, abstractmethod
from types import TracebackType

from PIL import Image


class BasePdfDocument(ABC):
    """An opened paginated document. Pages are addressed 1..page_count."""

    @property
    @abstractmethod
    def page_count(self) -> int:
        """Total number of pages."""

    @abstractmethod
    def page_text(self, page_number: int) -> str:
        """Return the text layer of one page.

        Text runs are joined by single spaces in the order the layout engine
        reports them. A page without a text layer yields an empty string.

        Raises:
            PdfExtractionError: if the page cannot be read.
        """

    @abstractmethod
    def render_page(self, page_number: int, scale: float = 1.0) -> Image.Image:
        """Rasterize one page at ``scale`` (1.0 = 72 dpi).

        Raises:
            PdfExtractionError: if the page cannot be rendered.
        """

    @abstractmethod
    def close(self) -> None:
        """Release the underlying parser resources."""

    def __enter__(self) -> "BasePdfDocument":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class BasePdfEngine(ABC):
    """Contract for all paginated-document engine adapters."""

    @abstractmethod
    def open(self, pdf_bytes: bytes) -> BasePdfDocument:
        """Open a document from raw bytes.

        Raises:
            PdfExtractionError: if the bytes are not a readable document.
        """
