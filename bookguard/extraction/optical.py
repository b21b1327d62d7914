import asyncio

from bookguard.logging.logger import Log
from bookguard.ocr.base import BaseOcrEngine
from bookguard.ocr.exceptions import OcrTimeoutError
from bookguard.pdf.base import BasePdfDocument


class OpticalFallbackExtractor:
    """Rasterizes a page and runs text recognition over the image.

    The recognition engine is owned by the caller and may be shared across
    documents. It is opened on first use if the owner has not opened it, and
    access to it is serialized so concurrent extractions never overlap on
    the same engine.
    """

    def __init__(
        self,
        engine: BaseOcrEngine,
        render_scale: float = 1.0,
        page_timeout_seconds: float = 30,
    ) -> None:
        self._engine = engine
        self._render_scale = render_scale
        self._page_timeout_seconds = page_timeout_seconds
        self._lock = asyncio.Lock()

    async def recognize_page_text(self, document: BasePdfDocument, page_number: int) -> str:
        """Return recognized text for one page (may be empty for a blank page).

        Raises:
            OcrError: if the engine fails.
            OcrTimeoutError: if rendering plus recognition exceeds the per-page timeout.
            PdfExtractionError: if the page cannot be rendered.
        """
        async with self._lock:
            if not self._engine.is_open:
                await asyncio.to_thread(self._engine.open)
            try:
                text = await asyncio.wait_for(
                    self._render_and_recognize(document, page_number),
                    timeout=self._page_timeout_seconds,
                )
            except asyncio.TimeoutError as exc:
                raise OcrTimeoutError(
                    f"Rendering and recognition of page {page_number} exceeded "
                    f"{self._page_timeout_seconds}s"
                ) from exc
        Log.debug(f"Recognized {len(text)} chars on page {page_number}")
        return text

    async def _render_and_recognize(self, document: BasePdfDocument, page_number: int) -> str:
        image = await asyncio.to_thread(
            document.render_page, page_number, self._render_scale
        )
        return await asyncio.to_thread(self._engine.recognize, image)
