"""Test suite for the Taskboard authorization backend.

- unit/: Domain engine, adapters, config (no I/O)
- api/: FastAPI dependencies and routers through TestClient
- utils/: Expected permission facts shared by tests
"""
