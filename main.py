"""SHUNT FILE PURPOSE
Purpose: FastAPI entrypoint for the shunt registry service.
Hot path: no (process-level startup only).
Feature flags: SHUNT_FEATURE_ADMIN.
Failure mode: fail fast on import errors.
"""

from shunt.app import create_app

app = create_app()
