"""
JSON-based persistence adapter.

The whole collection lives in one document holding a top-level array of
project records. Every read loads the full document and every write replaces
it; the per-storage lock lets services serialise load -> mutate -> save.
"""

from __future__ import annotations

from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
import json
import logging
import os
import shutil
import tempfile
import threading

logger = logging.getLogger(__name__)


class ProjectStorage:
    """Whole-document access to the persisted project collection."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self.lock = threading.RLock()
        self._preserved: tuple[int, int] | None = None

    def ensure_directory(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def load(self) -> list[dict]:
        """
        Return the records of the document, in stored order.
        A missing document is an empty collection; an unreadable or corrupt one
        is logged, copied aside and also treated as empty.
        """
        if not self.path.exists():
            return []
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            logger.error("Failed to read projects from %s: %s", self.path, exc)
            self._preserve_corrupt()
            return []
        if not isinstance(data, list):
            logger.error("Projects document %s is not a JSON array; ignoring it", self.path)
            self._preserve_corrupt()
            return []
        return data

    def save(self, records: list[dict]) -> bool:
        """Atomically replace the document with records. Returns False on failure."""
        tmp_name = None
        try:
            payload = json.dumps(records, ensure_ascii=False, indent=2)
            self.ensure_directory()
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_name, self.path)
            tmp_name = None
            return True
        except (OSError, TypeError, ValueError) as exc:
            logger.error("Failed to save projects to %s: %s", self.path, exc)
            return False
        finally:
            if tmp_name:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    pass

    @contextmanager
    def transaction(self):
        """Hold the storage lock and yield the loaded collection."""
        with self.lock:
            yield self.load()

    def _preserve_corrupt(self) -> None:
        """Copy a corrupt document aside once per version of that document."""
        with self.lock:
            try:
                st = self.path.stat()
            except OSError:
                return
            signature = (st.st_mtime_ns, st.st_size)
            if signature == self._preserved or self._has_backup(signature):
                self._preserved = signature
                return
            stamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S%fZ")
            backup = self.path.with_name(f"{self.path.name}.corrupt-{stamp}")
            try:
                shutil.copy2(self.path, backup)
            except OSError as exc:
                logger.error("Could not back up corrupt document %s: %s", self.path, exc)
                return
            self._preserved = signature
        logger.warning("Corrupt projects document copied to %s", backup)

    def _has_backup(self, signature: tuple[int, int]) -> bool:
        # copy2 keeps the mtime, so an earlier backup of this version matches it
        for candidate in self.path.parent.glob(f"{self.path.name}.corrupt-*"):
            try:
                st = candidate.stat()
            except OSError:
                continue
            if (st.st_mtime_ns, st.st_size) == signature:
                return True
        return False
