"""Stand-in for the real scoring engine.

The simulator narrates a fixed sequence of analysis stages with randomized
pauses and draws scores from fixed ranges. The input text is never read.
A real engine must keep the same stage names, progress sequence and result
shape.
"""

import asyncio
import random
from collections.abc import AsyncIterator, Awaitable, Callable

from bookguard.analysis.models import (
    SCORE_RANGES,
    STAGES,
    SUMMARIES,
    AnalysisResult,
    SimulationRun,
    StageUpdate,
)
from bookguard.cancellation import CancellationToken
from bookguard.logging.logger import Log
from bookguard.progress import scaled_percent

Sleep = Callable[[float], Awaitable[object]]


class AnalysisSimulator:
    """Produces a believable staged progress narration and random scores."""

    def __init__(
        self,
        delay_min_ms: int = 600,
        delay_max_ms: int = 1000,
        rng: random.Random | None = None,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        if not 0 <= delay_min_ms <= delay_max_ms:
            raise ValueError(
                f"Invalid stage delay range [{delay_min_ms}, {delay_max_ms}) ms"
            )
        self._delay_min_ms = delay_min_ms
        self._delay_max_ms = delay_max_ms
        self._rng = rng or random.Random()
        self._sleep = sleep

    def simulate(
        self,
        text: str,
        cancel_token: CancellationToken | None = None,
    ) -> SimulationRun:
        _ = text
        result = self._draw_result()
        return SimulationRun(
            result=result,
            progress=self._narrate(cancel_token or CancellationToken()),
        )

    async def _narrate(self, token: CancellationToken) -> AsyncIterator[StageUpdate]:
        total = len(STAGES)
        for index, stage in enumerate(STAGES, start=1):
            token.raise_if_cancelled()
            update = StageUpdate(stage=stage, progress=scaled_percent(index, total))
            Log.debug(f"Analysis stage {index}/{total}: {stage} ({update.progress}%)")
            yield update
            await self._sleep(self._draw_delay_seconds())
        token.raise_if_cancelled()

    def _draw_delay_seconds(self) -> float:
        span = self._delay_max_ms - self._delay_min_ms
        return (self._delay_min_ms + self._rng.random() * span) / 1000

    def _draw_result(self) -> AnalysisResult:
        scores = {
            name: self._rng.randrange(low, high) for name, (low, high) in SCORE_RANGES.items()
        }
        return AnalysisResult(summary=self._rng.choice(SUMMARIES), **scores)
