"""Project CRUD use cases over the whole-document JSON storage."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from transport_api.core.utils import iso_timestamp
from transport_api.domain.projects import (
    ID_FIELD,
    build_project,
    find_index,
    merge_project,
    sample_projects,
)
from transport_api.repositories.json_storage import ProjectStorage

logger = logging.getLogger(__name__)


class ProjectError(Exception):
    """Base exception for project workflows."""


class ProjectNotFoundError(ProjectError):
    """Raised when no record carries the requested id."""

    def __init__(self, project_id: str):
        super().__init__(f"Project {project_id} not found")
        self.project_id = project_id


class PersistenceError(ProjectError):
    """Raised when the collection could not be written back."""


class ProjectService:
    """Load -> compute -> save cycles for the project collection."""

    def __init__(self, storage: ProjectStorage, clock: Callable[[], str] = iso_timestamp) -> None:
        self.storage = storage
        self.clock = clock

    def list_projects(self) -> list[dict]:
        return self.storage.load()

    def get_project(self, project_id: str) -> dict:
        records = self.storage.load()
        idx = find_index(records, project_id)
        if idx < 0:
            raise ProjectNotFoundError(project_id)
        return records[idx]

    def create_project(self, payload: Mapping[str, Any] | None) -> dict:
        with self.storage.transaction() as records:
            project = build_project(payload, now=self.clock())
            records.append(project)
            self._save(records)
        logger.info("Project %s created", project[ID_FIELD])
        return project

    def update_project(self, project_id: str, payload: Mapping[str, Any] | None) -> dict:
        with self.storage.transaction() as records:
            idx = find_index(records, project_id)
            if idx < 0:
                raise ProjectNotFoundError(project_id)
            records[idx] = merge_project(records[idx], payload, now=self.clock())
            self._save(records)
        logger.info("Project %s updated", project_id)
        return records[idx]

    def delete_project(self, project_id: str) -> None:
        with self.storage.transaction() as records:
            idx = find_index(records, project_id)
            if idx < 0:
                raise ProjectNotFoundError(project_id)
            del records[idx]
            self._save(records)
        logger.info("Project %s deleted", project_id)

    def seed_sample_data(self) -> int:
        """Persist the sample projects when the collection is empty. Returns how many were written."""
        with self.storage.transaction() as records:
            if records:
                return 0
            samples = sample_projects()
            if not self.storage.save(samples):
                logger.error("Sample projects could not be saved")
                return 0
        logger.info("Sample projects initialised (%d records)", len(samples))
        return len(samples)

    def reset(self) -> None:
        """Drop every record from the collection."""
        with self.storage.lock:
            self._save([])
        logger.info("Project collection cleared")

    def _save(self, records: list[dict]) -> None:
        if not self.storage.save(records):
            raise PersistenceError(f"Could not write {self.storage.path}")
