"""Entry points for the transport projects FastAPI app."""
from transport_api.app import app, create_app

__all__ = ["app", "create_app"]
