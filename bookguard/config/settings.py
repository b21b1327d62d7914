from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    pdf_engine: str = "pdfplumber"

    ocr_engine: str = "tesseract"
    ocr_language: str = "eng"
    ocr_render_scale: float = 1.0
    ocr_page_timeout_seconds: int = 30
    # Heuristic: a text layer whose trimmed length is at or below this is
    # treated as absent. Very short real documents get misrouted to OCR.
    ocr_min_text_chars: int = 20

    analysis_stage_delay_min_ms: int = 600
    analysis_stage_delay_max_ms: int = 1000

    max_upload_bytes: int = 10 * 1024 * 1024
    report_output_dir: str = "."
