"""
FastAPI routers grouped by domain (projects, service metadata).

Each module exposes an APIRouter included by the application factory in app.py.
"""
