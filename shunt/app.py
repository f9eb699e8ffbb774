"""SHUNT FILE PURPOSE
Purpose: create FastAPI app holding the shunt runtime; mount admin routes when enabled.
Hot path: no (startup only).
Feature flags: SHUNT_FEATURE_ADMIN.
Failure mode: start with core routes even if the admin surface is disabled.
"""

from __future__ import annotations

from fastapi import FastAPI

from shunt.admin import router as admin_router
from shunt.config import admin_enabled, is_debug
from shunt.logging import logger
from shunt.runtime import ShuntRuntime, build_runtime


def create_app(runtime: ShuntRuntime | None = None) -> FastAPI:
    app = FastAPI()
    app.state.shunts = runtime if runtime is not None else build_runtime()

    @app.get("/")
    async def root() -> dict[str, bool]:
        return {"ok": True}

    if admin_enabled():
        app.include_router(admin_router)
        if is_debug():
            logger.info("SHUNT_ADMIN_MOUNTED prefix=%s", admin_router.prefix)
    return app
