import re
from collections.abc import Callable, Iterable
from datetime import datetime
from pathlib import Path

from reportlab.lib.pagesizes import A4
from reportlab.lib.utils import simpleSplit
from reportlab.pdfgen import canvas

from bookguard.analysis.models import AnalysisResult
from bookguard.logging.logger import Log
from bookguard.report.exceptions import ReportExportError

_UNSAFE_TITLE_CHARS = re.compile(r"[^A-Za-z0-9_\- ]")

_MARGIN = 36
_FONT = "Helvetica"
_BOLD_FONT = "Helvetica-Bold"

METRIC_LABELS: tuple[tuple[str, str], ...] = (
    ("ai_score", "AI authorship"),
    ("plagiarism", "Plagiarism"),
    ("reliability", "Factual reliability"),
    ("coherence", "Coherence"),
    ("grammar", "Grammar"),
    ("readability", "Readability"),
)


def report_filename(title: str = "") -> str:
    """Build ``BookGuard_<title>_Report.pdf`` from a sanitized title."""
    safe_title = _UNSAFE_TITLE_CHARS.sub("", title).strip()
    if safe_title:
        return f"BookGuard_{safe_title}_Report.pdf"
    return "BookGuard_Report.pdf"


class _PageWriter:
    """Top-down text cursor over a reportlab canvas with automatic page breaks."""

    def __init__(self, pdf: canvas.Canvas) -> None:
        self._pdf = pdf
        self._width, self._height = A4
        self._y = self._height - _MARGIN

    @property
    def content_width(self) -> float:
        return self._width - 2 * _MARGIN

    def line(self, text: str, size: int = 11, bold: bool = False, gap: int = 4) -> None:
        font = _BOLD_FONT if bold else _FONT
        for chunk in simpleSplit(text, font, size, self.content_width) or [""]:
            if self._y - size < _MARGIN:
                self.new_page()
            self._y -= size
            self._pdf.setFont(font, size)
            self._pdf.drawString(_MARGIN, self._y, chunk)
            self._y -= gap

    def space(self, amount: int = 12) -> None:
        self._y -= amount

    def new_page(self) -> None:
        self._pdf.showPage()
        self._y = self._height - _MARGIN


class PdfReportExporter:
    """Writes an analysis report as an A4 PDF."""

    EXCERPT_CHARS = 1200

    def __init__(self, clock: Callable[[], datetime] = datetime.now) -> None:
        self._clock = clock

    def export(
        self,
        result: AnalysisResult,
        output_dir: Path,
        title: str = "",
        author: str = "",
        extracted_text: str = "",
        insights: Iterable[str] = (),
    ) -> Path:
        """Render the report and return the written file path.

        Raises:
            ReportExportError: if the file cannot be written.
        """
        path = Path(output_dir) / report_filename(title)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            pdf = canvas.Canvas(str(path), pagesize=A4)
            pdf.setTitle(f"BookGuard AI Analysis Report {title}".strip())
            if author:
                pdf.setAuthor(author)
            writer = _PageWriter(pdf)
            self._write_summary(writer, result, title, author)
            writer.new_page()
            self._write_insights(writer, result, list(insights), extracted_text)
            pdf.save()
        except Exception as exc:
            raise ReportExportError(f"Failed to write report {path}: {exc}") from exc
        Log.info(f"Report written to {path}")
        return path

    def _write_summary(
        self,
        writer: _PageWriter,
        result: AnalysisResult,
        title: str,
        author: str,
    ) -> None:
        writer.line("BookGuard AI - Analysis Report", size=18, bold=True, gap=12)
        writer.line(f"Generated: {self._clock():%Y-%m-%d %H:%M}", size=10)
        if title:
            writer.line(f"Book: {title}", size=10)
        if author:
            writer.line(f"Author: {author}", size=10)
        writer.space(18)
        writer.line("Key Metrics", size=12, bold=True, gap=8)
        for field_name, label in METRIC_LABELS:
            writer.line(f"{label}: {getattr(result, field_name)}%")
        writer.space()
        writer.line("Generated by BookGuard AI - Demo report", size=9)

    def _write_insights(
        self,
        writer: _PageWriter,
        result: AnalysisResult,
        insights: list[str],
        extracted_text: str,
    ) -> None:
        writer.line("Insights & Recommendations", size=16, bold=True, gap=12)
        writer.line(result.summary, size=12, gap=8)
        for index, insight in enumerate(insights, start=1):
            writer.line(f"{index}. {insight}", gap=8)
        if extracted_text:
            writer.space(18)
            writer.line("Extracted text excerpt", size=12, bold=True, gap=8)
            for paragraph in extracted_text[: self.EXCERPT_CHARS].splitlines():
                writer.line(paragraph, size=9, gap=2)
