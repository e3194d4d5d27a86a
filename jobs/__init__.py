"""
Asynchronous parse jobs.

  - JobOrchestrator — bounded worker pool + lifecycle queries
  - JobStore        — lock-guarded job registry
  - LocalStorage    — per-job upload / result files
"""

from jobs.orchestrator import JobOrchestrator
from jobs.storage import LocalStorage
from jobs.store import JobStore

__all__ = [
    "JobOrchestrator",
    "JobStore",
    "LocalStorage",
]
