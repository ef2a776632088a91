import uuid
from dataclasses import dataclass, field
from typing import Any, Optional

import streamlit as st

from core.analysis import AnalysisJob
from core.types import PatientData, PredictionResult

STATE_KEY = "app_state"


@dataclass
class AppState:
    patient: PatientData = field(default_factory=PatientData)
    result: Optional[PredictionResult] = None
    analyzed: Optional[PatientData] = None  # snapshot the result was computed from
    analyzing: bool = False
    job: Optional[AnalysisJob] = None
    session_id: str = field(default_factory=lambda: str(uuid.uuid4())[:8])

    def edit(self, **changes: Any) -> PatientData:
        self.patient = self.patient.update(**changes)
        return self.patient

    def start_analysis(self, delay: float) -> AnalysisJob:
        if self.job is not None:
            self.job.cancel()
        self.job = AnalysisJob(delay=delay)
        self.result = None
        self.analyzed = None
        self.analyzing = True
        return self.job

    def finish_analysis(self, result: PredictionResult, snapshot: Optional[PatientData] = None) -> None:
        self.result = result
        self.analyzed = snapshot or self.patient
        self.analyzing = False
        self.job = None

    def abort_analysis(self) -> None:
        if self.job is not None:
            self.job.cancel()
        self.analyzing = False
        self.job = None


def get_state() -> AppState:
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = AppState()
    return st.session_state[STATE_KEY]
