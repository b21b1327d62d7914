from collections.abc import Callable
from pathlib import Path

from bookguard.analysis.models import StageUpdate
from bookguard.analysis.simulator import AnalysisSimulator
from bookguard.extraction.orchestrator import ExtractionOrchestrator
from bookguard.logging.logger import Log
from bookguard.processor.file_loader import FileLoader
from bookguard.processor.pipeline import PipelineContext, PipelineStep
from bookguard.report.pdf_report import PdfReportExporter

ProgressListener = Callable[[int], object]
StageListener = Callable[[StageUpdate], object]


class LoadDocumentStep(PipelineStep):
    def __init__(self, file_loader: FileLoader) -> None:
        self._file_loader = file_loader

    async def run(self, context: PipelineContext) -> PipelineContext:
        document = self._file_loader.load(context.source_path, context.mime_type)
        context.document = document
        Log.info(
            f"Loaded {document.byte_length} bytes from {document.name} "
            f"({document.kind.value})"
        )
        return context


class ExtractTextStep(PipelineStep):
    def __init__(
        self,
        orchestrator: ExtractionOrchestrator,
        on_progress: ProgressListener | None = None,
    ) -> None:
        self._orchestrator = orchestrator
        self._on_progress = on_progress

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.document is None:
            raise ValueError("PipelineContext.document must be set before extraction")

        def track(percent: int) -> None:
            context.extraction_progress = percent
            if self._on_progress is not None:
                self._on_progress(percent)

        context.extracted_text = await self._orchestrator.extract(
            context.document,
            on_progress=track,
            cancel_token=context.cancel_token,
        )
        Log.info(
            f"Extracted {len(context.extracted_text)} chars from {context.document.name}"
        )
        return context


class AnalyzeStep(PipelineStep):
    def __init__(
        self,
        simulator: AnalysisSimulator,
        on_stage: StageListener | None = None,
    ) -> None:
        self._simulator = simulator
        self._on_stage = on_stage

    async def run(self, context: PipelineContext) -> PipelineContext:
        run = self._simulator.simulate(context.extracted_text, context.cancel_token)
        async for update in run.progress:
            context.stages.append(update)
            if self._on_stage is not None:
                self._on_stage(update)
        context.analysis_result = run.result
        context.insights = run.insights
        Log.info(f"Analysis finished: {run.result.summary}")
        return context


class ExportReportStep(PipelineStep):
    def __init__(self, exporter: PdfReportExporter, output_dir: Path) -> None:
        self._exporter = exporter
        self._output_dir = output_dir

    async def run(self, context: PipelineContext) -> PipelineContext:
        if not context.export_report:
            return context
        if context.analysis_result is None:
            raise ValueError("PipelineContext.analysis_result must be set before export")
        context.report_path = self._exporter.export(
            context.analysis_result,
            self._output_dir,
            title=context.title,
            author=context.author,
            extracted_text=context.extracted_text,
            insights=context.insights,
        )
        return context
