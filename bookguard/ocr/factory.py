from bookguard.config.settings import Settings
from bookguard.ocr.base import BaseOcrEngine
from bookguard.ocr.example_adapter import ExampleOcrEngine
from bookguard.ocr.tesseract_adapter import TesseractOcrEngine


class OcrEngineFactory:
    """Creates the configured recognition engine (unopened)."""

    ENGINES = ("tesseract", "example")

    @classmethod
    def create(cls, settings: Settings) -> BaseOcrEngine:
        engine = settings.ocr_engine.lower()
        if engine == "tesseract":
            return TesseractOcrEngine(
                language=settings.ocr_language,
                timeout_seconds=settings.ocr_page_timeout_seconds,
            )
        if engine == "example":
            return ExampleOcrEngine()
        raise ValueError(f"Unknown OCR engine '{engine}'. Choose from: {list(cls.ENGINES)}")
