"""
Job registry — a lock-guarded map of job id → ``Job``.

The orchestrator creates an entry (``queued``) before it hands the id to
anyone, and afterwards only the worker that runs the job moves it along
the lifecycle.  Readers always receive copies, never the live entry.
"""

from __future__ import annotations

import threading
from typing import Dict, Optional

from dto.job import ALLOWED_TRANSITIONS, Job, JobStatus
from errors import InvalidTransitionError, NotFoundError


class JobStore:

    def __init__(self) -> None:
        self._jobs: Dict[str, Job] = {}
        self._lock = threading.Lock()

    def add(self, job: Job) -> None:
        with self._lock:
            if job.id in self._jobs:
                raise ValueError(f"Duplicate job id: {job.id}")
            self._jobs[job.id] = job.model_copy()

    def get(self, job_id: str) -> Optional[Job]:
        with self._lock:
            job = self._jobs.get(job_id)
            return job.model_copy() if job is not None else None

    def require(self, job_id: str) -> Job:
        job = self.get(job_id)
        if job is None:
            raise NotFoundError(job_id)
        return job

    def transition(
        self,
        job_id: str,
        target: JobStatus,
        *,
        started_at: Optional[str] = None,
        finished_at: Optional[str] = None,
        error: Optional[str] = None,
    ) -> Job:
        """Move *job_id* to *target*, stamping the given fields, and return a copy."""
        with self._lock:
            job = self._jobs.get(job_id)
            if job is None:
                raise NotFoundError(job_id)
            if target not in ALLOWED_TRANSITIONS[job.status]:
                raise InvalidTransitionError(job_id, job.status.value, target.value)

            updates: Dict[str, object] = {"status": target}
            if started_at is not None:
                updates["started_at"] = started_at
            if finished_at is not None:
                updates["finished_at"] = finished_at
            if error is not None:
                updates["error"] = error

            job = job.model_copy(update=updates)
            self._jobs[job_id] = job
            return job.model_copy()

    def count(self, status: Optional[JobStatus] = None) -> int:
        with self._lock:
            if status is None:
                return len(self._jobs)
            return sum(1 for j in self._jobs.values() if j.status is status)
