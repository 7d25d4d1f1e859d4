from fastapi import APIRouter

from transport_api.core.config import SERVICE_NAME, SERVICE_VERSION
from transport_api.core.utils import iso_timestamp

router = APIRouter(tags=["meta"])


@router.get("/api/health")
def health():
    return {
        "status": "OK",
        "service": SERVICE_NAME,
        "timestamp": iso_timestamp(),
        "version": SERVICE_VERSION,
    }


@router.get("/")
def index():
    return {
        "message": "Moscow transportation innovations - API server",
        "endpoints": {
            "health": "/api/health",
            "projects": "/api/projects",
            "projectById": "/api/projects/:id",
        },
        "version": SERVICE_VERSION,
    }
