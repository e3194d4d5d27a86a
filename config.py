"""
Runtime configuration.

Values come from the environment (a ``.env`` file is loaded first), and
explicit keyword overrides passed to ``resolve_config`` win over both:

    STORAGE_DIR          root for uploads/ and results/   (default ./storage)
    MAX_PARALLEL_TASKS   worker pool size                 (default 1, min 1)
    MAX_UPLOAD_MB        upload size limit in MiB         (default 30, min 1)
    LOG_LEVEL            logging level for the CLI        (default INFO)
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

import dotenv
from pydantic import BaseModel

dotenv.load_dotenv()

_DEFAULT_MAX_PARALLEL_JOBS = 1
_DEFAULT_MAX_UPLOAD_MB = 30


class AppConfig(BaseModel):
    storage_dir: Path
    uploads_dir: Path
    results_dir: Path
    max_parallel_jobs: int = _DEFAULT_MAX_PARALLEL_JOBS
    max_upload_mb: int = _DEFAULT_MAX_UPLOAD_MB
    log_level: str = "INFO"

    model_config = {"frozen": True}

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024


def _normalize_number(value: Any, fallback: int) -> int:
    """Accept ints and numeric strings; anything else yields *fallback*."""
    if isinstance(value, bool):
        return fallback
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip(), 10)
        except ValueError:
            return fallback
    return fallback


def resolve_config(
    *,
    storage_dir: Optional[str | Path] = None,
    uploads_dir: Optional[str | Path] = None,
    results_dir: Optional[str | Path] = None,
    max_parallel_jobs: Optional[int | str] = None,
    max_upload_mb: Optional[int | str] = None,
    log_level: Optional[str] = None,
) -> AppConfig:
    """Build an ``AppConfig`` from overrides, then env vars, then defaults."""
    storage = Path(
        storage_dir
        if storage_dir is not None
        else os.getenv("STORAGE_DIR", str(Path.cwd() / "storage"))
    ).resolve()

    uploads = Path(uploads_dir).resolve() if uploads_dir is not None else storage / "uploads"
    results = Path(results_dir).resolve() if results_dir is not None else storage / "results"

    parallel_raw = (
        max_parallel_jobs
        if max_parallel_jobs is not None
        else os.getenv("MAX_PARALLEL_TASKS")
    )
    upload_raw = max_upload_mb if max_upload_mb is not None else os.getenv("MAX_UPLOAD_MB")

    return AppConfig(
        storage_dir=storage,
        uploads_dir=uploads,
        results_dir=results,
        max_parallel_jobs=max(1, _normalize_number(parallel_raw, _DEFAULT_MAX_PARALLEL_JOBS)),
        max_upload_mb=max(1, _normalize_number(upload_raw, _DEFAULT_MAX_UPLOAD_MB)),
        log_level=(log_level or os.getenv("LOG_LEVEL", "INFO")).upper(),
    )
