"""
ASGI application factory for the todo service.

The store is created by the caller (or here, when omitted) and injected into
the router, so tests and the CLI can each run against their own instance.
"""

from __future__ import annotations

import logging
import time
from typing import Optional

from fastapi import FastAPI, Request, Response, status

from todo_service.api.handlers import create_todo_router
from todo_service.config import Settings, get_settings
from todo_service.store.abstract import TodoStore
from todo_service.store.memory import InMemoryTodoStore

log = logging.getLogger(__name__)


def create_app(
    store: Optional[TodoStore] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Build the todo service application.

    Parameters
    ----------
    store : TodoStore, optional
        Store backing the handlers. Defaults to a new, empty InMemoryTodoStore.
    settings : Settings, optional
        Effective configuration. Defaults to `get_settings()`.
    """
    settings = settings or get_settings()
    store = store if store is not None else InMemoryTodoStore()

    app = FastAPI(title="Todo Service")
    app.state.settings = settings
    app.state.store = store
    app.include_router(create_todo_router(store))

    @app.middleware("http")
    async def log_and_recover(request: Request, call_next) -> Response:
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:  # noqa: BLE001
            log.exception(
                "Unhandled error while serving request",
                extra={"method": request.method, "path": request.url.path},
            )
            response = Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
        duration_ms = (time.perf_counter() - start) * 1000
        log.info(
            "Request handled",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status": response.status_code,
                "duration_ms": round(duration_ms, 2),
            },
        )
        return response

    return app


__all__ = ["create_app"]
