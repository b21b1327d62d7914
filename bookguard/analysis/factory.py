from bookguard.analysis.simulator import AnalysisSimulator
from bookguard.config.settings import Settings


class AnalyzerFactory:
    """Creates the configured analysis engine."""

    @classmethod
    def create(cls, settings: Settings) -> AnalysisSimulator:
        return AnalysisSimulator(
            delay_min_ms=settings.analysis_stage_delay_min_ms,
            delay_max_ms=settings.analysis_stage_delay_max_ms,
        )
