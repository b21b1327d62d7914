from collections.abc import AsyncIterator
from dataclasses import dataclass, field

STAGES: tuple[str, ...] = (
    "Extracting text...",
    "Checking writing patterns...",
    "Running AI-authorship classifier...",
    "Analyzing coherence & structure...",
    "Evaluating grammar...",
    "Scanning for plagiarism...",
    "Checking factual reliability...",
    "Generating final report...",
)

SUMMARIES: tuple[str, ...] = (
    "Mostly human-written with natural variation in style.",
    "Shows moderate AI-like patterns but still human-influenced.",
)

DEFAULT_INSIGHTS: tuple[str, ...] = (
    "Possible AI influence detected, investigate repetitive phrasing.",
    "Moderate textual overlap with known sources.",
    "High factual reliability score.",
)

# Half-open [low, high) bounds for each score.
SCORE_RANGES: dict[str, tuple[int, int]] = {
    "ai_score": (20, 70),
    "plagiarism": (5, 20),
    "coherence": (70, 90),
    "grammar": (80, 95),
    "readability": (65, 85),
    "reliability": (60, 85),
}


@dataclass(frozen=True)
class StageUpdate:
    """One narrated analysis stage with its cumulative progress."""

    stage: str
    progress: int


@dataclass(frozen=True)
class AnalysisResult:
    """Scores and narrative summary for one analysed document."""

    ai_score: int
    plagiarism: int
    coherence: int
    grammar: int
    readability: int
    reliability: int
    summary: str

    def to_dict(self) -> dict[str, object]:
        """Return the JSON shape consumed by the presentation layer."""
        return {
            "aiScore": self.ai_score,
            "plagiarism": self.plagiarism,
            "coherence": self.coherence,
            "grammar": self.grammar,
            "readability": self.readability,
            "reliability": self.reliability,
            "summary": self.summary,
        }


@dataclass
class SimulationRun:
    """Output of one simulated analysis.

    ``result`` is final as soon as the run is created. ``progress`` is a
    one-shot async iterator: once drained, iterating it again yields nothing.
    """

    result: AnalysisResult
    progress: AsyncIterator[StageUpdate]
    insights: tuple[str, ...] = field(default=DEFAULT_INSIGHTS)
