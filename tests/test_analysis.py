import threading
import time

import pytest

from core.analysis import AnalysisCancelled, AnalysisJob
from core.state import AppState
from core.types import PatientData, RiskLevel
from modules.cirrhosis.scores import score


def test_zero_delay_scores_immediately():
    r = AnalysisJob(delay=0).run(PatientData(age=70), score)
    assert r.risk == RiskLevel.MODERATE


def test_progress_reaches_one():
    seen = []
    AnalysisJob(delay=0.05, tick=0.01).run(PatientData(), score, on_progress=seen.append)
    assert seen
    assert seen[-1] == pytest.approx(1.0)
    assert seen == sorted(seen)


def test_cancel_before_run():
    job = AnalysisJob(delay=0)
    job.cancel()
    assert job.cancelled
    with pytest.raises(AnalysisCancelled):
        job.run(PatientData(), score)


def test_cancel_during_wait():
    job = AnalysisJob(delay=5, tick=0.05)
    t = threading.Timer(0.1, job.cancel)
    t.start()
    started = time.monotonic()
    with pytest.raises(AnalysisCancelled):
        job.run(PatientData(), score)
    assert time.monotonic() - started < 2
    t.join()


def test_state_start_cancels_previous_job():
    s = AppState()
    first = s.start_analysis(delay=2)
    second = s.start_analysis(delay=2)
    assert first.cancelled
    assert not second.cancelled
    assert s.analyzing
    assert s.result is None


def test_state_finish_and_abort():
    s = AppState()
    job = s.start_analysis(delay=0)
    snapshot = s.patient
    s.finish_analysis(job.run(snapshot, score), snapshot)
    assert not s.analyzing
    assert s.job is None
    assert s.result.risk == RiskLevel.LOW
    assert s.analyzed is snapshot

    job = s.start_analysis(delay=2)
    s.abort_analysis()
    assert job.cancelled
    assert not s.analyzing
    assert s.result is None


def test_state_edit_replaces_snapshot():
    s = AppState()
    before = s.patient
    s.edit(albumin=3.0)
    assert before.albumin == 4.2
    assert s.patient.albumin == 3.0
