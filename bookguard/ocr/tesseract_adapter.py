import pytesseract
from PIL import Image

from bookguard.logging.logger import Log
from bookguard.ocr.base import BaseOcrEngine
from bookguard.ocr.exceptions import OcrError, OcrTimeoutError


class TesseractOcrEngine(BaseOcrEngine):
    """Recognizes text with the Tesseract binary through pytesseract."""

    def __init__(self, language: str = "eng", timeout_seconds: int = 30) -> None:
        super().__init__()
        self._language = language
        self._timeout_seconds = timeout_seconds

    def _start(self) -> None:
        try:
            version = pytesseract.get_tesseract_version()
        except pytesseract.TesseractNotFoundError as exc:
            raise OcrError(f"Tesseract is not installed or not on PATH: {exc}") from exc
        Log.info(f"Tesseract {version} ready (lang={self._language})")

    def recognize(self, image: Image.Image) -> str:
        if not self.is_open:
            raise OcrError("Tesseract engine used before open()")
        try:
            text = pytesseract.image_to_string(
                image,
                lang=self._language,
                timeout=self._timeout_seconds,
            )
        except pytesseract.TesseractError as exc:
            raise OcrError(f"Tesseract recognition failed: {exc}") from exc
        except RuntimeError as exc:
            # pytesseract signals a killed process with a bare RuntimeError
            if "timeout" in str(exc).lower():
                raise OcrTimeoutError(
                    f"Tesseract exceeded {self._timeout_seconds}s"
                ) from exc
            raise OcrError(f"Tesseract recognition failed: {exc}") from exc
        return text.strip()
