"""Tests for the job registry and lifecycle transitions."""

from __future__ import annotations

from pathlib import Path

import pytest

from dto.job import Job, JobStatus
from errors import InvalidTransitionError, NotFoundError
from jobs.store import JobStore


def _job(job_id="job-1"):
    return Job(
        id=job_id,
        original_file_name="a.xlsx",
        upload_path=Path("/tmp/uploads/job-1.xlsx"),
        result_path=Path("/tmp/results/job-1.json"),
        created_at="2024-01-01T00:00:00.000Z",
    )


def test_new_job_is_queued():
    store = JobStore()
    store.add(_job())
    assert store.require("job-1").status is JobStatus.QUEUED


def test_duplicate_id_rejected():
    store = JobStore()
    store.add(_job())
    with pytest.raises(ValueError):
        store.add(_job())


def test_happy_path_transitions():
    store = JobStore()
    store.add(_job())
    store.transition("job-1", JobStatus.PROCESSING, started_at="t1")
    job = store.transition("job-1", JobStatus.COMPLETED, finished_at="t2")
    assert (job.status, job.started_at, job.finished_at, job.error) == (
        JobStatus.COMPLETED, "t1", "t2", None,
    )


def test_failure_records_error():
    store = JobStore()
    store.add(_job())
    store.transition("job-1", JobStatus.PROCESSING, started_at="t1")
    job = store.transition("job-1", JobStatus.FAILED, finished_at="t2", error="boom")
    assert job.error == "boom"
    assert job.snapshot().error == "boom"


@pytest.mark.parametrize(
    "path",
    [
        [JobStatus.COMPLETED],
        [JobStatus.FAILED],
        [JobStatus.PROCESSING, JobStatus.PROCESSING],
        [JobStatus.PROCESSING, JobStatus.COMPLETED, JobStatus.FAILED],
        [JobStatus.PROCESSING, JobStatus.FAILED, JobStatus.COMPLETED],
        [JobStatus.PROCESSING, JobStatus.FAILED, JobStatus.PROCESSING],
    ],
)
def test_illegal_transitions(path):
    store = JobStore()
    store.add(_job())
    *legal, last = path
    for status in legal:
        store.transition("job-1", status)
    with pytest.raises(InvalidTransitionError):
        store.transition("job-1", last)


def test_readers_get_copies():
    store = JobStore()
    store.add(_job())
    copy = store.require("job-1")
    copy.status = JobStatus.FAILED
    assert store.require("job-1").status is JobStatus.QUEUED


def test_unknown_job():
    store = JobStore()
    assert store.get("nope") is None
    with pytest.raises(NotFoundError):
        store.require("nope")
    with pytest.raises(NotFoundError):
        store.transition("nope", JobStatus.PROCESSING)


def test_terminal_flags():
    assert JobStatus.COMPLETED.is_terminal
    assert JobStatus.FAILED.is_terminal
    assert not JobStatus.QUEUED.is_terminal
    assert not JobStatus.PROCESSING.is_terminal
