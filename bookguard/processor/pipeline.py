from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path

from bookguard.analysis.models import AnalysisResult, StageUpdate
from bookguard.cancellation import CancellationToken
from bookguard.extraction.models import SourceDocument


@dataclass(slots=True)
class PipelineContext:
    source_path: Path
    mime_type: str | None = None
    title: str = ""
    author: str = ""
    export_report: bool = False
    cancel_token: CancellationToken = field(default_factory=CancellationToken)
    document: SourceDocument | None = None
    extracted_text: str = ""
    extraction_progress: int = 0
    analysis_result: AnalysisResult | None = None
    insights: tuple[str, ...] = ()
    stages: list[StageUpdate] = field(default_factory=list)
    report_path: Path | None = None
    error_message: str = ""


class PipelineStep(ABC):
    @abstractmethod
    async def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
