"""
High-level use cases for the transport projects API.

Routers (FastAPI endpoints) call these services instead of manipulating the
JSON document directly.
"""
