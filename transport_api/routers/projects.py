"""CRUD routes over the persisted project collection."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, HTTPException, Request

from transport_api.services.project_service import (
    PersistenceError,
    ProjectNotFoundError,
    ProjectService,
)

router = APIRouter(prefix="/api/projects", tags=["projects"])
logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Project not found"


def _get_project_service(request: Request) -> ProjectService:
    svc = getattr(getattr(request.app, "state", None), "project_service", None)
    if not svc:
        raise RuntimeError("ProjectService not configured")
    return svc


@router.get("")
def list_projects(request: Request):
    svc = _get_project_service(request)
    try:
        return svc.list_projects()
    except Exception:
        logger.exception("Failed to list projects")
        raise HTTPException(500, "Failed to load projects")


@router.get("/{project_id}")
def get_project(project_id: str, request: Request):
    svc = _get_project_service(request)
    try:
        return svc.get_project(project_id)
    except ProjectNotFoundError:
        raise HTTPException(404, NOT_FOUND_MESSAGE)
    except Exception:
        logger.exception("Failed to load project %s", project_id)
        raise HTTPException(500, "Failed to load project")


@router.post("", status_code=201)
def create_project(request: Request, payload: Optional[Dict[str, Any]] = Body(default=None)):
    svc = _get_project_service(request)
    try:
        return svc.create_project(payload or {})
    except PersistenceError:
        raise HTTPException(500, "Failed to save project")
    except Exception:
        logger.exception("Failed to create project")
        raise HTTPException(500, "Failed to create project")


@router.put("/{project_id}")
def update_project(project_id: str, request: Request, payload: Optional[Dict[str, Any]] = Body(default=None)):
    svc = _get_project_service(request)
    try:
        return svc.update_project(project_id, payload or {})
    except ProjectNotFoundError:
        raise HTTPException(404, NOT_FOUND_MESSAGE)
    except PersistenceError:
        raise HTTPException(500, "Failed to update project")
    except Exception:
        logger.exception("Failed to update project %s", project_id)
        raise HTTPException(500, "Failed to update project")


@router.delete("/{project_id}")
def delete_project(project_id: str, request: Request):
    svc = _get_project_service(request)
    try:
        svc.delete_project(project_id)
    except ProjectNotFoundError:
        raise HTTPException(404, NOT_FOUND_MESSAGE)
    except PersistenceError:
        raise HTTPException(500, "Failed to delete project")
    except Exception:
        logger.exception("Failed to delete project %s", project_id)
        raise HTTPException(500, "Failed to delete project")
    return {"message": "Project deleted successfully"}
