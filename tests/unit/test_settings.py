import pytest
from pydantic import ValidationError

from bookguard.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        assert Settings().app_env == "dev"

    def test_default_pdf_engine(self) -> None:
        assert Settings().pdf_engine == "pdfplumber"

    def test_default_ocr_engine(self) -> None:
        s = Settings()
        assert s.ocr_engine == "tesseract"
        assert s.ocr_render_scale == 1.0

    def test_default_ocr_threshold(self) -> None:
        assert Settings().ocr_min_text_chars == 20

    def test_default_stage_delays(self) -> None:
        s = Settings()
        assert (s.analysis_stage_delay_min_ms, s.analysis_stage_delay_max_ms) == (600, 1000)

    def test_default_upload_limit(self) -> None:
        assert Settings().max_upload_bytes == 10 * 1024 * 1024


class TestSettingsFromEnv:
    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        assert Settings().log_level == "DEBUG"

    def test_loads_pdf_engine(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PDF_ENGINE", "pymupdf")
        assert Settings().pdf_engine == "pymupdf"

    def test_loads_ocr_threshold(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OCR_MIN_TEXT_CHARS", "50")
        assert Settings().ocr_min_text_chars == 50

    def test_loads_render_scale(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OCR_RENDER_SCALE", "2.5")
        assert Settings().ocr_render_scale == 2.5


class TestSettingsValidation:
    def test_invalid_timeout_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OCR_PAGE_TIMEOUT_SECONDS", "not_a_number")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_upload_limit_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAX_UPLOAD_BYTES", "abc")
        with pytest.raises(ValidationError):
            Settings()
