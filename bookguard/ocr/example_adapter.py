"""Example recognition engine.

Use this module as a reference when implementing new OCR adapters.
Implement BaseOcrEngine and register the engine in OcrEngineFactory.
"""

from typing import ClassVar

from PIL import Image

from bookguard.ocr.base import BaseOcrEngine


class ExampleOcrEngine(BaseOcrEngine):
    """Example engine that returns a fixed transcription for every image.

    No external binary. Useful for local development and tests.
    """

    DEFAULT_TEXT: ClassVar[str] = "Recognized page text"

    def __init__(self, text: str | None = None) -> None:
        super().__init__()
        self._text = self.DEFAULT_TEXT if text is None else text
        self.calls = 0

    def recognize(self, image: Image.Image) -> str:
        _ = image
        self.calls += 1
        return self._text
