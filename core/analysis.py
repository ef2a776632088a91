import logging
import threading
from typing import Callable, Optional

from core.types import PatientData, PredictionResult

log = logging.getLogger(__name__)


class AnalysisCancelled(RuntimeError):
    pass


class AnalysisJob:
    """Simulated processing delay in front of a scorer.

    The wait runs in `tick`-sized slices on an Event so that `cancel()`
    (or a page rerun interrupting `on_progress`) stops it before scoring.
    """

    def __init__(self, delay: float = 2.0, tick: float = 0.1):
        self.delay = max(0.0, float(delay))
        self.tick = tick
        self._cancel = threading.Event()

    @property
    def cancelled(self) -> bool:
        return self._cancel.is_set()

    def cancel(self) -> None:
        if not self._cancel.is_set():
            log.info("analysis cancelled")
        self._cancel.set()

    def run(
        self,
        data: PatientData,
        scorer: Callable[[PatientData], PredictionResult],
        on_progress: Optional[Callable[[float], None]] = None,
    ) -> PredictionResult:
        waited = 0.0
        while waited < self.delay:
            step = min(self.tick, self.delay - waited)
            if self._cancel.wait(step):
                raise AnalysisCancelled("analysis cancelled before scoring")
            waited += step
            if on_progress:
                on_progress(min(1.0, waited / self.delay))
        if self._cancel.is_set():
            raise AnalysisCancelled("analysis cancelled before scoring")
        return scorer(data)
