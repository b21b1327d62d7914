import asyncio
import inspect
from collections.abc import Awaitable, Callable

from bookguard.cancellation import CancellationToken, OperationCancelledError
from bookguard.extraction.exceptions import (
    ExtractionError,
    ExtractionFailedError,
    UnsupportedFormatError,
)
from bookguard.extraction.models import MediaKind, SourceDocument
from bookguard.extraction.optical import OpticalFallbackExtractor
from bookguard.extraction.text_layer import TextLayerExtractor
from bookguard.logging.logger import Log
from bookguard.pdf.base import BasePdfDocument, BasePdfEngine
from bookguard.progress import scaled_percent

ProgressCallback = Callable[[int], object]
PageReader = Callable[[BasePdfDocument, int], Awaitable[str]]

# Each pass over the pages owns half of the [0, 100] progress range.
_PASS_SPAN = 50


def decode_plain_text(payload: bytes) -> str:
    """Decode as UTF-8, dropping a BOM and replacing undecodable bytes."""
    return payload.decode("utf-8-sig", errors="replace")


class _ProgressReporter:
    """Forwards progress to a caller's callback without letting it interfere.

    Values that would move progress backwards are dropped. Callback errors are logged
    and swallowed; coroutine callbacks are scheduled, never awaited.
    """

    def __init__(self, callback: ProgressCallback | None) -> None:
        self._callback = callback
        self._last = -1
        self._pending: set[asyncio.Future[object]] = set()

    def report(self, percent: int) -> None:
        if percent < self._last:
            return
        self._last = percent
        if self._callback is None:
            return
        try:
            outcome = self._callback(percent)
        except Exception as exc:
            Log.warning(f"Progress callback failed at {percent}%: {exc}")
            return
        if inspect.isawaitable(outcome):
            future = asyncio.ensure_future(outcome)
            self._pending.add(future)
            future.add_done_callback(self._settle)

    def finish(self) -> None:
        if self._last != 100:
            self.report(100)

    def _settle(self, future: "asyncio.Future[object]") -> None:
        self._pending.discard(future)
        if not future.cancelled() and future.exception() is not None:
            Log.warning(f"Progress callback failed: {future.exception()}")


class ExtractionOrchestrator:
    """Turns a SourceDocument into plain text.

    Plain text is decoded directly. Paginated documents are read page by
    page from their text layer; when the trimmed result is no longer than
    ``min_text_chars`` the text layer is discarded and every page is run
    through optical recognition instead.

    Progress: the text-layer pass covers 0..50 and the optical pass 50..100.
    A successful call always ends by reporting exactly 100.
    """

    def __init__(
        self,
        pdf_engine: BasePdfEngine,
        text_layer: TextLayerExtractor,
        optical: OpticalFallbackExtractor,
        min_text_chars: int = 20,
    ) -> None:
        self._pdf_engine = pdf_engine
        self._text_layer = text_layer
        self._optical = optical
        self._min_text_chars = min_text_chars

    async def extract(
        self,
        document: SourceDocument,
        on_progress: ProgressCallback | None = None,
        cancel_token: CancellationToken | None = None,
    ) -> str:
        """Extract the full text of ``document``.

        Raises:
            UnsupportedFormatError: if the document kind is not supported.
            ExtractionFailedError: if any read, decode or recognition step fails.
            OperationCancelledError: if ``cancel_token`` is cancelled mid-way.
        """
        token = cancel_token or CancellationToken()
        progress = _ProgressReporter(on_progress)

        if document.kind is MediaKind.PLAIN_TEXT:
            text = await self._extract_plain(document, token)
        elif document.kind is MediaKind.PAGINATED:
            text = await self._extract_paginated(document, progress, token)
        else:
            raise UnsupportedFormatError(
                f"Unsupported document kind '{document.kind.value}' for '{document.name}'"
            )

        progress.finish()
        return text

    async def _extract_plain(self, document: SourceDocument, token: CancellationToken) -> str:
        token.raise_if_cancelled()
        text = await asyncio.to_thread(decode_plain_text, document.payload)
        token.raise_if_cancelled()
        Log.info(f"Read {len(text)} chars of plain text from '{document.name}'")
        return text

    async def _extract_paginated(
        self,
        document: SourceDocument,
        progress: _ProgressReporter,
        token: CancellationToken,
    ) -> str:
        try:
            token.raise_if_cancelled()
            pdf = await asyncio.to_thread(self._pdf_engine.open, document.payload)
            with pdf:
                return await self._read_document(pdf, document.name, progress, token)
        except (ExtractionError, OperationCancelledError):
            raise
        except Exception as exc:
            Log.error(f"Extraction of '{document.name}' failed: {exc}")
            raise ExtractionFailedError(
                f"Extraction of '{document.name}' failed: {exc}"
            ) from exc

    async def _read_document(
        self,
        pdf: BasePdfDocument,
        name: str,
        progress: _ProgressReporter,
        token: CancellationToken,
    ) -> str:
        text = await self._read_pages(
            pdf, self._text_layer.extract_page_text, 0, progress, token
        )
        Log.info(f"Text layer of '{name}': {len(text)} chars over {pdf.page_count} pages")

        if len(text.strip()) > self._min_text_chars:
            return text

        Log.info(
            f"Text layer of '{name}' has at most {self._min_text_chars} usable chars, "
            "falling back to OCR"
        )
        return await self._read_pages(
            pdf, self._optical.recognize_page_text, _PASS_SPAN, progress, token
        )

    async def _read_pages(
        self,
        pdf: BasePdfDocument,
        read_page: PageReader,
        offset: int,
        progress: _ProgressReporter,
        token: CancellationToken,
    ) -> str:
        total = pdf.page_count
        parts: list[str] = []
        for page_number in range(1, total + 1):
            token.raise_if_cancelled()
            page_text = await read_page(pdf, page_number)
            parts.append(page_text + "\n")
            progress.report(offset + scaled_percent(page_number, total, _PASS_SPAN))
        token.raise_if_cancelled()
        return "".join(parts)
