"""
Job orchestrator — runs the workbook pipeline for uploaded files on a
bounded pool of worker threads and tracks each job's lifecycle.

    submit()  ──►  JobStore (queued)  ──►  executor queue (FIFO)
                                              │
                          worker: processing ─┴─► parse ─► persist ─► completed
                                                   └──────────────────► failed

At most ``max_parallel_jobs`` jobs are ``processing`` at any moment.  A
failing job never takes down a worker or touches another job's files.
There are no retries, no cancellation and no timeouts.
"""

from __future__ import annotations

import concurrent.futures
import logging
import threading
import uuid
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Dict, Optional

from config import AppConfig, resolve_config
from dto.document import ResultMemory, ScheduleDocument
from dto.job import Job, JobSnapshot, JobStatus, SubmitReceipt
from errors import ConflictError, JobFailedError, OrchestratorClosedError, ValidationError
from jobs.storage import LocalStorage
from jobs.store import JobStore
from parser import parse_workbook, utc_timestamp

logger = logging.getLogger(__name__)

ParseFn = Callable[[Path, str], ScheduleDocument]


class JobOrchestrator:
    """
    Usage::

        with JobOrchestrator(resolve_config()) as orchestrator:
            receipt = orchestrator.submit(data, "session.xlsx")
            orchestrator.wait(receipt.id)
            document = orchestrator.result(receipt.id)
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        *,
        store: Optional[JobStore] = None,
        storage: Optional[LocalStorage] = None,
        parse: ParseFn = parse_workbook,
    ) -> None:
        self._config = config or resolve_config()
        self._store = store or JobStore()
        self._storage = storage or LocalStorage(self._config)
        self._storage.ensure_directories()
        self._parse = parse

        self._executor = ThreadPoolExecutor(
            max_workers=self._config.max_parallel_jobs,
            thread_name_prefix="schedule-job",
        )
        # In-flight futures only; entries are dropped once the job finishes.
        self._futures: Dict[str, Future] = {}
        self._lock = threading.Lock()
        self._closed = False

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------

    def submit(self, file_bytes: bytes, original_name: str) -> SubmitReceipt:
        """Store the upload, register a queued job and enqueue it."""
        self._validate_upload(file_bytes, original_name)

        job_id = str(uuid.uuid4())
        with self._lock:
            if self._closed:
                raise OrchestratorClosedError("Orchestrator is shut down")

            upload_path = self._storage.upload_path(job_id, original_name)
            self._storage.write_upload(upload_path, file_bytes)

            job = Job(
                id=job_id,
                original_file_name=original_name,
                upload_path=upload_path,
                result_path=self._storage.result_path(job_id),
                created_at=utc_timestamp(),
            )
            self._store.add(job)

            future = self._executor.submit(self._run, job_id)
            self._futures[job_id] = future

        # Outside the lock: a future that is already done runs the callback here.
        future.add_done_callback(lambda _: self._forget(job_id))

        logger.info("Job %s queued for %s (%d bytes)", job_id, original_name, len(file_bytes))
        return SubmitReceipt(id=job.id, status=job.status, created_at=job.created_at)

    def status(self, job_id: str) -> JobSnapshot:
        return self._store.require(job_id).snapshot()

    def result(self, job_id: str) -> ScheduleDocument:
        """The persisted document of a completed job."""
        job = self._require_completed(job_id)
        return self._storage.read_document(job.result_path)

    def memory(self, job_id: str) -> ResultMemory:
        """Item count, groups and date range of a completed job's document."""
        summary = self.result(job_id).summary
        return ResultMemory(
            items=summary.items,
            groups=summary.groups,
            date_range=summary.date_range,
        )

    def wait(self, job_id: str, timeout: Optional[float] = None) -> JobSnapshot:
        """Block until *job_id* leaves the worker (or *timeout* passes)."""
        with self._lock:
            future = self._futures.get(job_id)
        if future is not None:
            concurrent.futures.wait([future], timeout=timeout)
        return self.status(job_id)

    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting jobs; queued jobs still run to completion."""
        with self._lock:
            self._closed = True
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> "JobOrchestrator":
        return self

    def __exit__(self, *exc_info) -> None:
        self.shutdown(wait=True)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _validate_upload(self, file_bytes: bytes, original_name: str) -> None:
        if not file_bytes:
            raise ValidationError("Excel file is required")
        if not original_name or not original_name.strip():
            raise ValidationError("Original file name is required")
        limit = self._config.max_upload_bytes
        if len(file_bytes) > limit:
            raise ValidationError(
                f"File is too large. Max upload size is {self._config.max_upload_mb} MB"
            )

    def _require_completed(self, job_id: str) -> Job:
        job = self._store.require(job_id)
        if not job.status.is_terminal:
            raise ConflictError(job_id, job.status.value)
        if job.status is JobStatus.FAILED:
            raise JobFailedError(job_id, job.error)
        return job

    def _forget(self, job_id: str) -> None:
        with self._lock:
            self._futures.pop(job_id, None)

    def _run(self, job_id: str) -> None:
        job = self._store.transition(job_id, JobStatus.PROCESSING, started_at=utc_timestamp())
        logger.info("Job %s processing %s", job_id, job.original_file_name)

        try:
            document = self._parse(job.upload_path, job.original_file_name)
            self._storage.write_document(job.result_path, document)
        except Exception as exc:
            logger.exception("Job %s failed", job_id)
            self._store.transition(
                job_id,
                JobStatus.FAILED,
                finished_at=utc_timestamp(),
                error=str(exc) or exc.__class__.__name__,
            )
            return

        self._store.transition(job_id, JobStatus.COMPLETED, finished_at=utc_timestamp())
        logger.info("Job %s completed: %d item(s)", job_id, document.summary.items)
