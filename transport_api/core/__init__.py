"""
Core utilities shared across the transport projects API.

This package hosts configuration (env vars, data file path), logging setup and
small helpers (timestamps, identifiers). Routers and services depend on these
primitives instead of reading the environment themselves.
"""
