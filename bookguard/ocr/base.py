from abc import ABC, abstractmethod
from types import TracebackType

from PIL import Image


class BaseOcrEngine(ABC):
    """Contract for all text-recognition adapters.

    Engines have an explicit lifecycle: ``open()`` before the first
    ``recognize()`` call and ``close()`` when the owner is done with them.
    One engine instance may be reused for any number of pages and documents,
    but never by two callers at the same time.
    """

    def __init__(self) -> None:
        self._opened = False

    @property
    def is_open(self) -> bool:
        return self._opened

    def open(self) -> None:
        """Acquire engine resources. Calling it twice is a no-op.

        Raises:
            OcrError: if the engine is not available.
        """
        if not self._opened:
            self._start()
            self._opened = True

    def close(self) -> None:
        if self._opened:
            self._stop()
            self._opened = False

    @abstractmethod
    def recognize(self, image: Image.Image) -> str:
        """Recognize text in a raster image.

        Returns:
            Recognized text; empty for a blank image.

        Raises:
            OcrError: if recognition fails.
            OcrTimeoutError: if recognition exceeds the engine's time budget.
        """

    def _start(self) -> None:
        return None

    def _stop(self) -> None:
        return None

    def __enter__(self) -> "BaseOcrEngine":
        self.open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
