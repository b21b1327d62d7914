from pathlib import Path

from bookguard.analysis.factory import AnalyzerFactory
from bookguard.config.settings import Settings
from bookguard.extraction.optical import OpticalFallbackExtractor
from bookguard.extraction.orchestrator import ExtractionOrchestrator
from bookguard.extraction.text_layer import TextLayerExtractor
from bookguard.logging.logger import Log
from bookguard.ocr.base import BaseOcrEngine
from bookguard.ocr.factory import OcrEngineFactory
from bookguard.pdf.factory import PdfEngineFactory
from bookguard.processor.file_loader import FileLoader
from bookguard.processor.pipeline import PipelineContext, PipelineStep
from bookguard.processor.steps import (
    AnalyzeStep,
    ExportReportStep,
    ExtractTextStep,
    LoadDocumentStep,
    ProgressListener,
    StageListener,
)
from bookguard.report.pdf_report import PdfReportExporter


class Processor:
    """Runs the upload flow: load -> extract -> analyze -> export.

    Owns the recognition engine handed to it and releases it on ``close()``.
    """

    def __init__(
        self,
        steps: list[PipelineStep],
        ocr_engine: BaseOcrEngine | None = None,
    ) -> None:
        self._steps = steps
        self._ocr_engine = ocr_engine

    async def process(self, context: PipelineContext) -> PipelineContext:
        """Run every step in order. The first failure is recorded and re-raised."""
        Log.info(f"Processing {context.source_path}")
        try:
            for step in self._steps:
                context = await step.run(context)
        except Exception as exc:
            context.error_message = str(exc)
            Log.error(f"Processing {context.source_path} failed: {exc}")
            raise
        return context

    def close(self) -> None:
        if self._ocr_engine is not None:
            self._ocr_engine.close()


def build_processor(
    settings: Settings,
    on_progress: ProgressListener | None = None,
    on_stage: StageListener | None = None,
    ocr_engine: BaseOcrEngine | None = None,
) -> Processor:
    """Build a Processor with all required adapters."""
    engine = ocr_engine if ocr_engine is not None else OcrEngineFactory.create(settings)
    orchestrator = ExtractionOrchestrator(
        pdf_engine=PdfEngineFactory.create(settings),
        text_layer=TextLayerExtractor(),
        optical=OpticalFallbackExtractor(
            engine,
            render_scale=settings.ocr_render_scale,
            page_timeout_seconds=settings.ocr_page_timeout_seconds,
        ),
        min_text_chars=settings.ocr_min_text_chars,
    )
    steps: list[PipelineStep] = [
        LoadDocumentStep(FileLoader(max_bytes=settings.max_upload_bytes)),
        ExtractTextStep(orchestrator, on_progress=on_progress),
        AnalyzeStep(AnalyzerFactory.create(settings), on_stage=on_stage),
        ExportReportStep(PdfReportExporter(), Path(settings.report_output_dir)),
    ]
    return Processor(steps=steps, ocr_engine=engine)
