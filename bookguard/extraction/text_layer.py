import asyncio

from bookguard.pdf.base import BasePdfDocument


class TextLayerExtractor:
    """Reads the embedded text layer of one page at a time."""

    async def extract_page_text(self, document: BasePdfDocument, page_number: int) -> str:
        """Return the page's text runs joined by single spaces ("" if none)."""
        return await asyncio.to_thread(document.page_text, page_number)
