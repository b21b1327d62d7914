from typing import ClassVar

from bookguard.config.settings import Settings
from bookguard.pdf.base import BasePdfEngine
from bookguard.pdf.pdfplumber_adapter import PdfPlumberAdapter
from bookguard.pdf.pymupdf_adapter import PyMuPdfAdapter


class PdfEngineFactory:
    """Builds the paginated-document engine named by ``settings.pdf_engine``."""

    ENGINES: ClassVar[dict[str, type[BasePdfEngine]]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }
    # PyMuPDF is still widely known by its legacy import name.
    ALIASES: ClassVar[dict[str, str]] = {"fitz": "pymupdf"}

    @classmethod
    def create(cls, settings: Settings) -> BasePdfEngine:
        requested = settings.pdf_engine.strip().lower()
        name = cls.ALIASES.get(requested, requested)
        engine_cls = cls.ENGINES.get(name)
        if engine_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{requested}'. "
                f"Choose from: {sorted([*cls.ENGINES, *cls.ALIASES])}"
            )
        return engine_cls()
