"""
Job DTOs for the asynchronous parsing orchestrator.

Lifecycle::

    queued ──► processing ──► completed
                         └──► failed

Each edge is taken at most once; ``completed`` and ``failed`` are final.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Dict, FrozenSet, Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class JobStatus(str, Enum):
    QUEUED = "queued"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (JobStatus.COMPLETED, JobStatus.FAILED)


ALLOWED_TRANSITIONS: Dict[JobStatus, FrozenSet[JobStatus]] = {
    JobStatus.QUEUED: frozenset({JobStatus.PROCESSING}),
    JobStatus.PROCESSING: frozenset({JobStatus.COMPLETED, JobStatus.FAILED}),
    JobStatus.COMPLETED: frozenset(),
    JobStatus.FAILED: frozenset(),
}


class Job(BaseModel):
    """Registry entry for one uploaded file.  Owned by ``JobStore``."""

    id: str
    status: JobStatus = JobStatus.QUEUED
    original_file_name: str
    upload_path: Path
    result_path: Path
    created_at: str
    started_at: Optional[str] = None
    finished_at: Optional[str] = None
    error: Optional[str] = None

    def snapshot(self) -> "JobSnapshot":
        return JobSnapshot(
            id=self.id,
            status=self.status,
            created_at=self.created_at,
            started_at=self.started_at,
            finished_at=self.finished_at,
            error=self.error,
        )


class JobSnapshot(BaseModel):
    """Read-only view returned by ``JobOrchestrator.status``."""

    id: str
    status: JobStatus
    created_at: str
    started_at: Optional[str] = None
    finished_at: Optional[str] = None
    error: Optional[str] = None

    model_config = {"alias_generator": to_camel, "populate_by_name": True, "frozen": True}


class SubmitReceipt(BaseModel):
    id: str
    status: JobStatus = JobStatus.QUEUED
    created_at: str

    model_config = {"alias_generator": to_camel, "populate_by_name": True, "frozen": True}
