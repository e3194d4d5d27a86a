"""Exception hierarchy for the schedule parser and its job orchestrator."""

from __future__ import annotations


class ScheduleParserError(Exception):
    """Base exception for all schedule parser errors."""


class ValidationError(ScheduleParserError):
    """Submitted input is missing or malformed; no job was created."""


class NotFoundError(ScheduleParserError):
    """No job is registered under the requested id."""

    def __init__(self, job_id: str) -> None:
        self.job_id = job_id
        super().__init__(f"Job not found: {job_id}")


class ConflictError(ScheduleParserError):
    """The job exists but has not completed yet."""

    def __init__(self, job_id: str, status: str) -> None:
        self.job_id = job_id
        self.status = status
        super().__init__(f"Job {job_id} is not completed yet (status: {status})")


class JobFailedError(ScheduleParserError):
    """The job reached the ``failed`` state; carries the captured error text."""

    def __init__(self, job_id: str, error: str | None) -> None:
        self.job_id = job_id
        self.error = error or "Unknown processing error"
        super().__init__(f"Job {job_id} failed: {self.error}")


class ProcessingError(ScheduleParserError):
    """Layout detection, parsing or aggregation failed."""


class PersistenceError(ProcessingError):
    """Reading or writing a job's input or output file failed."""


class InvalidTransitionError(ScheduleParserError):
    """A job status change that the lifecycle does not allow."""

    def __init__(self, job_id: str, current: str, target: str) -> None:
        self.job_id = job_id
        self.current = current
        self.target = target
        super().__init__(f"Job {job_id}: illegal transition {current} -> {target}")


class OrchestratorClosedError(ScheduleParserError):
    """``submit`` was called after the orchestrator was shut down."""
