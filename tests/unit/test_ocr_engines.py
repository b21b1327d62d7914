from unittest.mock import MagicMock, patch

import pytesseract
import pytest
from PIL import Image

from bookguard.ocr.example_adapter import ExampleOcrEngine
from bookguard.ocr.exceptions import OcrError, OcrTimeoutError
from bookguard.ocr.factory import OcrEngineFactory
from bookguard.ocr.tesseract_adapter import TesseractOcrEngine


def _image() -> Image.Image:
    return Image.new("RGB", (20, 20), "white")


@pytest.fixture()
def tesseract_mock():  # type: ignore[no-untyped-def]
    with patch("bookguard.ocr.tesseract_adapter.pytesseract") as mock_module:
        mock_module.TesseractError = pytesseract.TesseractError
        mock_module.TesseractNotFoundError = pytesseract.TesseractNotFoundError
        mock_module.get_tesseract_version.return_value = "5.3.0"
        yield mock_module


class TestTesseractOcrEngine:
    def test_open_checks_binary(self, tesseract_mock: MagicMock) -> None:
        engine = TesseractOcrEngine()

        engine.open()
        engine.open()

        assert engine.is_open
        tesseract_mock.get_tesseract_version.assert_called_once()

    def test_open_raises_when_binary_missing(self, tesseract_mock: MagicMock) -> None:
        tesseract_mock.get_tesseract_version.side_effect = pytesseract.TesseractNotFoundError()

        with pytest.raises(OcrError, match="not installed"):
            TesseractOcrEngine().open()

    def test_recognize_passes_language_and_timeout(self, tesseract_mock: MagicMock) -> None:
        tesseract_mock.image_to_string.return_value = "  Chapter One\n\n"
        image = _image()

        with TesseractOcrEngine(language="deu", timeout_seconds=7) as engine:
            text = engine.recognize(image)

        assert text == "Chapter One"
        tesseract_mock.image_to_string.assert_called_once_with(image, lang="deu", timeout=7)

    def test_recognize_before_open_raises(self, tesseract_mock: MagicMock) -> None:
        with pytest.raises(OcrError, match="before open"):
            TesseractOcrEngine().recognize(_image())

    def test_timeout_maps_to_ocr_timeout_error(self, tesseract_mock: MagicMock) -> None:
        tesseract_mock.image_to_string.side_effect = RuntimeError("Tesseract process timeout")

        with TesseractOcrEngine() as engine:
            with pytest.raises(OcrTimeoutError):
                engine.recognize(_image())

    def test_tesseract_error_maps_to_ocr_error(self, tesseract_mock: MagicMock) -> None:
        tesseract_mock.image_to_string.side_effect = pytesseract.TesseractError(1, "bad image")

        with TesseractOcrEngine() as engine:
            with pytest.raises(OcrError, match="bad image"):
                engine.recognize(_image())

    def test_close_resets_state(self, tesseract_mock: MagicMock) -> None:
        engine = TesseractOcrEngine()
        with engine:
            assert engine.is_open
        assert not engine.is_open


class TestExampleOcrEngine:
    def test_returns_fixed_text(self) -> None:
        engine = ExampleOcrEngine()
        assert engine.recognize(_image()) == ExampleOcrEngine.DEFAULT_TEXT
        assert engine.calls == 1

    def test_custom_text(self) -> None:
        assert ExampleOcrEngine("page").recognize(_image()) == "page"


class TestOcrEngineFactory:
    def test_creates_tesseract(self) -> None:
        settings = MagicMock(ocr_engine="Tesseract", ocr_language="eng", ocr_page_timeout_seconds=5)
        assert isinstance(OcrEngineFactory.create(settings), TesseractOcrEngine)

    def test_creates_example(self) -> None:
        settings = MagicMock(ocr_engine="example")
        assert isinstance(OcrEngineFactory.create(settings), ExampleOcrEngine)

    def test_raises_for_unknown_engine(self) -> None:
        with pytest.raises(ValueError, match="Unknown OCR engine"):
            OcrEngineFactory.create(MagicMock(ocr_engine="vision"))
