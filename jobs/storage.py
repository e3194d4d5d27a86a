"""
Job file storage — uploaded workbooks and result documents on local disk.

    <uploads_dir>/<job_id><ext>     uploaded bytes, ext from the original name
    <results_dir>/<job_id>.json     canonical schedule document

Every path belongs to exactly one job.  Documents are written to a
temporary sibling first and renamed into place, so a result file either
holds a complete document or does not exist.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from config import AppConfig
from dto.document import ScheduleDocument
from errors import PersistenceError

logger = logging.getLogger(__name__)

DEFAULT_UPLOAD_EXTENSION = ".xlsx"


class LocalStorage:

    def __init__(self, config: AppConfig) -> None:
        self._uploads_dir = config.uploads_dir
        self._results_dir = config.results_dir

    def ensure_directories(self) -> None:
        for directory in (self._uploads_dir, self._results_dir):
            directory.mkdir(parents=True, exist_ok=True)

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------

    def upload_path(self, job_id: str, original_name: str) -> Path:
        extension = Path(original_name).suffix or DEFAULT_UPLOAD_EXTENSION
        return self._uploads_dir / f"{job_id}{extension}"

    def result_path(self, job_id: str) -> Path:
        return self._results_dir / f"{job_id}.json"

    # ------------------------------------------------------------------
    # I/O
    # ------------------------------------------------------------------

    def write_upload(self, path: Path, data: bytes) -> None:
        try:
            path.write_bytes(data)
        except OSError as exc:
            raise PersistenceError(f"Failed to store upload {path.name}: {exc}") from exc
        logger.debug("Stored upload %s (%d bytes)", path, len(data))

    def write_document(self, path: Path, document: ScheduleDocument) -> None:
        tmp_path = path.with_name(f"{path.name}.tmp")
        try:
            tmp_path.write_text(document.to_json(), encoding="utf-8")
            os.replace(tmp_path, path)
        except OSError as exc:
            tmp_path.unlink(missing_ok=True)
            raise PersistenceError(f"Failed to write result {path.name}: {exc}") from exc

    def read_document(self, path: Path) -> ScheduleDocument:
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise PersistenceError(f"Failed to read result {path.name}: {exc}") from exc
        return ScheduleDocument.model_validate_json(raw)
